from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Valid(BaseModel):
    """The name passed every rule."""

    model_config = ConfigDict(frozen=True)

    status: Literal["valid"] = "valid"

    @property
    def is_valid(self) -> bool:
        return True


class Invalid(BaseModel):
    """
    The first rule that rejected the name.

    `reason` is meant for the end user. `suggestion` is a best-effort fix
    produced by that same rule, or None when the rule has nothing to offer.
    """

    model_config = ConfigDict(frozen=True)

    status: Literal["invalid"] = "invalid"
    reason: str
    suggestion: str | None = None

    @property
    def is_valid(self) -> bool:
        return False


ValidationResult = Annotated[Union[Valid, Invalid], Field(discriminator="status")]
