"""Replay recorded key presses against a calculator store."""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from keypad_calculator.calculator.store import CalculatorStore
from keypad_calculator.common.logger import logger
from keypad_calculator.keypad.layout import action_for_label, render_display


class SessionLine(BaseModel):
    """Outcome of one replayed session line."""

    model_config = ConfigDict(frozen=True)

    keys: str = Field(..., description="Key labels of the line, space separated")
    upper: str = Field(default="", description="Upper display line after the keys were pressed")
    lower: str = Field(default="", description="Lower display line after the keys were pressed")
    error: Optional[str] = Field(default=None, description="Why the line could not be replayed")

    def to_text(self) -> str:
        """Format the line for the results file."""
        if self.error is not None:
            return f"{self.keys} -> ERROR: {self.error}"
        return f"{self.keys} -> {self.upper} | {self.lower}"


def replay_session(lines: List[str], store: CalculatorStore) -> List[SessionLine]:
    """
    Press the keys of each line in order and record the display after each line.

    The calculator state carries over from one line to the next. A line holding
    a label that is not on the keypad is recorded as an error and skipped as a
    whole; replay continues with the next line.

    :param List[str] lines: Session lines of whitespace-separated key labels
    :param CalculatorStore store: Store receiving the actions

    :return: One entry per line
    :rtype: List[SessionLine]
    """
    results: List[SessionLine] = []
    for line_number, line in enumerate(lines, start=1):
        labels = line.split()
        keys = " ".join(labels)
        try:
            # Resolve all labels first so an invalid line leaves the state untouched
            actions = [action_for_label(label) for label in labels]
        except ValueError as exc:
            logger.error(f"⌨️❌ Line {line_number} skipped: {exc}")
            results.append(SessionLine(keys=keys, error=str(exc)))
            continue

        for action in actions:
            store.dispatch(action)

        upper, lower = render_display(store.state)
        results.append(SessionLine(keys=keys, upper=upper, lower=lower))
        logger.info(f"⌨️ Line {line_number}: {keys} -> {upper!r} {lower!r}")
    return results
