"""Runtime configuration of the calculator."""
from pydantic import BaseModel, ConfigDict, Field


# Upper bound on the operand length the display can hold
MAX_OPERAND_LENGTH = 10


class CalculatorConfig(BaseModel):
    """Settings shared by the state machine and the keypad."""

    model_config = ConfigDict(frozen=True)

    max_length: int = Field(
        default=MAX_OPERAND_LENGTH,
        ge=1,
        le=MAX_OPERAND_LENGTH,
        description="Maximum number of characters per operand",
    )
    reproduce_operator_bug: bool = Field(
        default=False,
        description="Store '+' for every operator key, as the first release of the keypad did",
    )


DEFAULT_CONFIG = CalculatorConfig()
