"""Observable container holding the current calculator state."""
import threading
from typing import Callable, List

from keypad_calculator.calculator.machine import INITIAL_STATE, transition
from keypad_calculator.common.config import DEFAULT_CONFIG, CalculatorConfig
from keypad_calculator.common.logger import logger
from keypad_calculator.common.models import CalculatorAction, CalculatorState


# Listener called with the new state after each change
StateListener = Callable[[CalculatorState], None]


class CalculatorStore:
    """
    Owns the calculator state and lets a view observe it.

    The store is the single writer: ``dispatch`` runs the pure transition
    function and installs its result. Listeners are notified only when the
    state actually changed, outside of the internal lock so that they may
    read ``state`` or dispatch again.
    """

    def __init__(self, config: CalculatorConfig = DEFAULT_CONFIG, state: CalculatorState = INITIAL_STATE):
        self._config = config
        self._state = state
        self._listeners: List[StateListener] = []
        self._lock = threading.Lock()

    @property
    def config(self) -> CalculatorConfig:
        return self._config

    @property
    def state(self) -> CalculatorState:
        """Current state."""
        return self._state

    def dispatch(self, action: CalculatorAction) -> None:
        """
        Apply an action to the current state and notify listeners on change.

        :param CalculatorAction action: Key pressed by the user

        :return: None
        """
        with self._lock:
            previous = self._state
            self._state = transition(previous, action, self._config)
            current = self._state

        logger.debug(f"🧮 {action.kind}: {previous!r} -> {current!r}")
        if current == previous:
            return
        for listener in list(self._listeners):
            listener(current)

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a listener for state changes.

        :param StateListener listener: Callable receiving the new state

        :return: Function removing the listener again
        :rtype: Callable[[], None]
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
