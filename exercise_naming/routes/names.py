from fastapi import APIRouter, HTTPException

from exercise_naming.models.components import ExerciseNameComponents
from exercise_naming.models.requests import (
    BatchNameRequest,
    BatchValidationResponse,
    FormattedNameResponse,
    NameRequest,
    SuggestionResponse,
    UniqueNameRequest,
)
from exercise_naming.models.validation import ValidationResult
from exercise_naming.naming import (
    extract_components,
    format_name,
    suggest_correction,
    validate,
    validate_many,
    validate_unique,
)
from exercise_naming.settings import settings
from exercise_naming.utils.log import logger

router = APIRouter(prefix="/names", tags=["names"])


# ---------------------- Validation ---------------------------


@router.post("/validate", response_model=ValidationResult)
def validate_name(body: NameRequest):
    """Run the naming rules against a single name"""
    result = validate(body.name)
    logger.info(f"Validated {body.name!r}: {result.status}")
    return result


@router.post("/validate-unique", response_model=ValidationResult)
def validate_unique_name(body: UniqueNameRequest):
    """Run the naming rules after checking the name is not already taken"""
    result = validate_unique(body.name, body.existing_names)
    logger.info(
        f"Validated {body.name!r} against {len(body.existing_names)} "
        f"existing names: {result.status}"
    )
    return result


@router.post("/validate-batch", response_model=BatchValidationResponse)
def validate_names(body: BatchNameRequest):
    """Validate many names in one call, keyed by the submitted name"""
    if len(body.names) > settings.MAX_BATCH_SIZE:
        logger.warning(f"Rejected batch of {len(body.names)} names")
        raise HTTPException(
            status_code=413,
            detail=f"At most {settings.MAX_BATCH_SIZE} names per request",
        )

    results = validate_many(body.names)
    logger.info(f"Validated batch of {len(results)} names")
    return BatchValidationResponse(results=results)


# ---------------------- Normalization ---------------------------


@router.post("/format", response_model=FormattedNameResponse)
def format_exercise_name(body: NameRequest):
    return FormattedNameResponse(name=body.name, formatted=format_name(body.name))


@router.post("/components", response_model=ExerciseNameComponents)
def get_components(body: NameRequest):
    return extract_components(body.name)


@router.post("/suggest", response_model=SuggestionResponse)
def suggest_name(body: NameRequest):
    return SuggestionResponse(name=body.name, suggestion=suggest_correction(body.name))
