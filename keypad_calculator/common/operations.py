"""Binary arithmetic operators available on the keypad."""
from collections.abc import Callable as ABCCallable
import math
import operator
from typing import Callable, Optional


# Type alias for operator functions (taking two floats, returning a float)
OperatorFn: ABCCallable[[float, float], float] = Callable[[float, float], float]


def ieee_truediv(a: float, b: float) -> float:
    """
    Divide two floats, returning inf or nan on a zero divisor instead of raising.

    :param float a: Dividend
    :param float b: Divisor

    :return: Quotient following IEEE-754 rules
    :rtype: float
    """
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    # The sign of a zero divisor matters: 1 / -0.0 is -inf
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


# Mapping of operator glyphs to their functions
OPERATORS: dict[str, OperatorFn] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": ieee_truediv,
}


def parse_operand(text: str) -> Optional[float]:
    """
    Convert an operand string to a float.

    :param str text: Operand as typed on the keypad

    :return: The parsed value, or None if the text is not a number
    :rtype: Optional[float]
    """
    try:
        return float(text)
    except ValueError:
        return None


def apply_operation(symbol: str, a: float, b: float) -> float:
    """
    Apply the operator identified by ``symbol`` to two operands.

    :param str symbol: One of the keys of OPERATORS
    :param float a: Left operand
    :param float b: Right operand

    :return: Result of the operation
    :rtype: float
    :raises ValueError: If the operator is unknown
    """
    if symbol not in OPERATORS:
        raise ValueError(f"Unsupported operator: {symbol!r}")
    return OPERATORS[symbol](a, b)


def format_result(value: float) -> str:
    """
    Render a computed value the way the display shows it.

    Whole numbers lose their trailing ".0" (8.0 -> "8"); everything else keeps
    Python's float representation ("2.5", "1e+16", "inf", "nan").

    :param float value: Computed value

    :return: Display text, not yet truncated
    :rtype: str
    """
    text = repr(value)
    if text.endswith(".0"):
        text = text[:-2]
    return text
