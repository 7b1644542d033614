"""Pydantic models for the calculator state and the keypad actions."""
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from keypad_calculator.common.config import MAX_OPERAND_LENGTH
from keypad_calculator.common.operations import OPERATORS


class CalculatorState(BaseModel):
    """
    Snapshot of what the calculator holds.

    Instances are frozen; every action produces a new state.

    Invariants:
        - Each operand is at most MAX_OPERAND_LENGTH characters long.
        - Each operand contains at most one decimal point.
        - The second operand is only filled once an operation is chosen.
    """

    model_config = ConfigDict(frozen=True)

    first_number: str = Field(default="", max_length=MAX_OPERAND_LENGTH, description="Left operand or last result")
    second_number: str = Field(default="", max_length=MAX_OPERAND_LENGTH, description="Right operand")
    operation: Optional[str] = Field(default=None, description="Pending operator glyph")

    @field_validator("first_number", "second_number")
    def single_decimal_point(cls, v: str) -> str:
        """Ensure an operand holds at most one decimal point."""
        if v.count(".") > 1:
            raise ValueError("Operand cannot contain more than one decimal point")
        return v

    @field_validator("operation")
    def known_operation(cls, v: Optional[str]) -> Optional[str]:
        """Ensure the operation is one of the supported glyphs."""
        if v is not None and v not in OPERATORS:
            raise ValueError(f"Unsupported operation: {v!r}")
        return v

    @model_validator(mode="after")
    def second_number_needs_operation(self) -> "CalculatorState":
        """Ensure a second operand is never present without an operation."""
        if self.second_number and self.operation is None:
            raise ValueError("Second operand requires an operation")
        return self


class Digit(BaseModel):
    """A digit key, 0 to 9."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["digit"] = "digit"
    digit: str = Field(..., description="Single decimal digit")

    @field_validator("digit")
    def must_be_single_digit(cls, v: str) -> str:
        """Ensure the payload is exactly one character between 0 and 9."""
        if len(v) != 1 or v not in "0123456789":
            raise ValueError(f"Digit must be a single character 0-9, got {v!r}")
        return v


class Clear(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["clear"] = "clear"


class ChooseOperation(BaseModel):
    """An operator key; carries the glyph printed on the key."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["operation"] = "operation"
    operator: str = Field(..., min_length=1, max_length=1, description="Operator glyph of the pressed key")


class Delete(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["delete"] = "delete"


class Decimal(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["decimal"] = "decimal"


class Calculate(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["calculate"] = "calculate"


# Closed set of actions the keypad can emit
CalculatorAction = Annotated[
    Union[Digit, Clear, ChooseOperation, Delete, Decimal, Calculate],
    Field(discriminator="kind"),
]
