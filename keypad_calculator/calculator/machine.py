"""Transition function of the calculator state machine."""
from keypad_calculator.common.config import DEFAULT_CONFIG, CalculatorConfig
from keypad_calculator.common.logger import logger
from keypad_calculator.common.models import (
    Calculate,
    CalculatorAction,
    CalculatorState,
    ChooseOperation,
    Clear,
    Decimal,
    Delete,
    Digit,
)
from keypad_calculator.common.operations import (
    OPERATORS,
    apply_operation,
    format_result,
    parse_operand,
)


INITIAL_STATE = CalculatorState()


def transition(
    state: CalculatorState,
    action: CalculatorAction,
    config: CalculatorConfig = DEFAULT_CONFIG,
) -> CalculatorState:
    """
    Compute the state that follows ``state`` once ``action`` is applied.

    The function is pure: ``state`` is never modified. Actions that do not
    apply (full operand, second decimal point, missing operand, unknown
    operator) return ``state`` itself.

    :param CalculatorState state: Current state
    :param CalculatorAction action: Key pressed by the user
    :param CalculatorConfig config: Calculator settings

    :return: The next state
    :rtype: CalculatorState
    """
    match action:
        case Digit(digit=digit):
            return _enter_digit(state, digit, config)
        case Clear():
            return INITIAL_STATE
        case ChooseOperation(operator=symbol):
            return _choose_operation(state, symbol, config)
        case Delete():
            return _delete(state)
        case Decimal():
            return _enter_decimal(state, config)
        case Calculate():
            return _calculate(state, config)
    raise TypeError(f"Unknown calculator action: {action!r}")


def _enter_digit(state: CalculatorState, digit: str, config: CalculatorConfig) -> CalculatorState:
    if state.operation is None:
        if len(state.first_number) < config.max_length:
            return state.model_copy(update={"first_number": state.first_number + digit})
    elif len(state.second_number) < config.max_length:
        return state.model_copy(update={"second_number": state.second_number + digit})
    logger.debug(f"🔢🚫 Operand full, digit {digit!r} ignored")
    return state


def _delete(state: CalculatorState) -> CalculatorState:
    # Undo order: second operand, then the operator, then the first operand
    if state.second_number:
        return state.model_copy(update={"second_number": state.second_number[:-1]})
    if state.operation is not None:
        return state.model_copy(update={"operation": None})
    if state.first_number:
        return state.model_copy(update={"first_number": state.first_number[:-1]})
    return state


def _enter_decimal(state: CalculatorState, config: CalculatorConfig) -> CalculatorState:
    if state.operation is None:
        if "." not in state.first_number and len(state.first_number) < config.max_length:
            return state.model_copy(update={"first_number": state.first_number + "."})
    elif "." not in state.second_number and len(state.second_number) < config.max_length:
        return state.model_copy(update={"second_number": state.second_number + "."})
    logger.debug("🔢🚫 Decimal point ignored")
    return state


def _choose_operation(state: CalculatorState, symbol: str, config: CalculatorConfig) -> CalculatorState:
    if not state.first_number:
        return state
    if config.reproduce_operator_bug:
        symbol = "+"
    if symbol not in OPERATORS:
        logger.debug(f"➗🚫 Operator {symbol!r} is not supported")
        return state
    return state.model_copy(update={"operation": symbol})


def _calculate(state: CalculatorState, config: CalculatorConfig) -> CalculatorState:
    first = parse_operand(state.first_number)
    second = parse_operand(state.second_number)
    if first is None or second is None or state.operation not in OPERATORS:
        logger.debug(f"🟰🚫 Nothing to calculate for {state!r}")
        return state

    result = apply_operation(state.operation, first, second)
    logger.debug(f"🟰✅ {state.first_number} {state.operation} {state.second_number} = {result}")
    return CalculatorState(first_number=format_result(result)[: config.max_length])
