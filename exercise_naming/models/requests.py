from typing import Annotated

from pydantic import BaseModel, Field, StringConstraints

from exercise_naming.models.validation import ValidationResult

# Names are passed through untouched; trimming is part of the rules under test.
RawNameStr = Annotated[str, StringConstraints(max_length=500)]


class NameRequest(BaseModel):
    name: RawNameStr


class UniqueNameRequest(BaseModel):
    name: RawNameStr
    existing_names: list[RawNameStr] = Field(default_factory=list)


class BatchNameRequest(BaseModel):
    names: list[RawNameStr] = Field(min_length=1)


class BatchValidationResponse(BaseModel):
    results: dict[str, ValidationResult]


class FormattedNameResponse(BaseModel):
    name: str
    formatted: str


class SuggestionResponse(BaseModel):
    name: str
    suggestion: str
