"""
Rule chain for user- and AI-supplied exercise names.

Rules run in a fixed order against the trimmed name and the first rule that
rejects it decides the result, reason and suggestion included. Nothing here
raises: a rejected name is an `Invalid` value.
"""

from typing import Callable, Iterable

from exercise_naming.models.validation import Invalid, Valid, ValidationResult
from exercise_naming.naming.normalizer import format_name, tokenize
from exercise_naming.settings import settings
from exercise_naming.utils.log import logger
from exercise_naming.utils.taxonomy import MULTI_WORD_ABBREVIATIONS

Rule = Callable[[str], Invalid | None]

DUPLICATE_REASON = "An exercise with this name already exists"


def is_disallowed_char(char: str) -> bool:
    # Emoji and every other non-ASCII glyph
    return ord(char) > 127


def check_length(name: str) -> Invalid | None:
    if len(name) < settings.MIN_NAME_LENGTH:
        return Invalid(
            reason=f"Exercise name must be at least {settings.MIN_NAME_LENGTH} characters",
            suggestion=None,
        )
    if len(name) > settings.MAX_NAME_LENGTH:
        return Invalid(
            reason=f"Exercise name must be less than {settings.MAX_NAME_LENGTH} characters",
            suggestion=name[: settings.MAX_NAME_LENGTH],
        )
    return None


def check_characters(name: str) -> Invalid | None:
    if not any(is_disallowed_char(char) for char in name):
        return None
    # Only the offending glyphs go; spacing around them is kept as typed.
    stripped = "".join(char for char in name if not is_disallowed_char(char))
    return Invalid(reason="Exercise name cannot contain emojis", suggestion=stripped)


def check_separators(name: str) -> Invalid | None:
    if "-" not in name:
        return None
    return Invalid(
        reason="Use spaces instead of hyphens (e.g., 'Step Up' not 'Step-Up')",
        suggestion=name.replace("-", " "),
    )


def check_equipment_terms(name: str) -> Invalid | None:
    """
    Reject abbreviations that stand for a multi-word equipment term ("EZ").

    The suggestion is whatever `format_name` produces, so "EZ Bar Curl" is
    answered with "EZ Bar Bar Curl". Equipment position is not enforced:
    "Bench Press Barbell" passes.
    """
    tokens = [token.lower() for token in tokenize(name)]
    if not any(token in MULTI_WORD_ABBREVIATIONS for token in tokens):
        return None
    return Invalid(
        reason="Exercise name should be properly formatted",
        suggestion=format_name(name),
    )


RULES: tuple[Rule, ...] = (
    check_length,
    check_characters,
    check_separators,
    check_equipment_terms,
)


def validate(raw: str) -> ValidationResult:
    name = raw.strip()

    for rule in RULES:
        result = rule(name)
        if result is not None:
            logger.debug(f"{rule.__name__} rejected {name!r}: {result.reason}")
            return result

    return Valid()


def validate_unique(raw: str, existing_names: Iterable[str]) -> ValidationResult:
    """
    Reject a name that matches an existing exercise name or alias
    (case-insensitive, after trimming), then run the normal rules.

    The suggestion carries the existing name in its stored casing.
    """
    lower_name = raw.strip().lower()

    for existing in existing_names:
        if existing.lower() == lower_name:
            logger.debug(f"{raw!r} duplicates existing exercise {existing!r}")
            return Invalid(
                reason=DUPLICATE_REASON,
                suggestion=f"Exercise name '{existing}' is already taken. Please choose a different name.",
            )

    return validate(raw)


def validate_many(names: Iterable[str]) -> dict[str, ValidationResult]:
    return {name: validate(name) for name in names}
