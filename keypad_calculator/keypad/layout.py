"""Keypad buttons and the two-line display of the calculator."""
from enum import Enum
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field

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


class ButtonType(str, Enum):
    """Visual category of a key."""

    NUMBER = "number"
    OPERATOR = "operator"
    ACTION = "action"


class CalculatorButton(BaseModel):
    """A key of the keypad: its label and the action it emits."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., min_length=1, description="Label printed on the key")
    action: CalculatorAction = Field(..., description="Action dispatched when the key is pressed")
    type: ButtonType = Field(..., description="Visual category of the key")


def _digit(d: str) -> CalculatorButton:
    return CalculatorButton(text=d, action=Digit(digit=d), type=ButtonType.NUMBER)


def _operator(symbol: str) -> CalculatorButton:
    return CalculatorButton(text=symbol, action=ChooseOperation(operator=symbol), type=ButtonType.OPERATOR)


def get_calculator_buttons() -> List[CalculatorButton]:
    """
    Build the keypad in row order, four keys per row, three on the last.

    The "%" key emits a ChooseOperation like the other operator keys; its
    glyph is not a supported operation so the state machine ignores it.

    :return: The 19 keys of the keypad
    :rtype: List[CalculatorButton]
    """
    return [
        CalculatorButton(text="AC", action=Clear(), type=ButtonType.ACTION),
        CalculatorButton(text="Del", action=Delete(), type=ButtonType.ACTION),
        _operator("%"),
        _operator("/"),
        _digit("7"),
        _digit("8"),
        _digit("9"),
        _operator("*"),
        _digit("4"),
        _digit("5"),
        _digit("6"),
        _operator("-"),
        _digit("1"),
        _digit("2"),
        _digit("3"),
        _operator("+"),
        _digit("0"),
        CalculatorButton(text=".", action=Decimal(), type=ButtonType.NUMBER),
        CalculatorButton(text="=", action=Calculate(), type=ButtonType.OPERATOR),
    ]


def action_for_label(label: str) -> CalculatorAction:
    """
    Find the action emitted by the key with the given label.

    :param str label: Key label, e.g. "7", "+", "AC"

    :return: Action bound to that key
    :rtype: CalculatorAction
    :raises ValueError: If no key carries this label
    """
    for button in get_calculator_buttons():
        if button.text == label:
            return button.action
    raise ValueError(f"⌨️❌ Unknown key: {label!r}")


def render_display(state: CalculatorState) -> Tuple[str, str]:
    """
    Render the two display lines for a state.

    :param CalculatorState state: State to show

    :return: Upper line (first operand and operator) and lower line (second operand)
    :rtype: Tuple[str, str]
    """
    return state.first_number + (state.operation or ""), state.second_number
