from .naming import (
    extract_components,
    format_name,
    suggest_correction,
    validate,
    validate_many,
    validate_unique,
)

__version__ = "0.1.0"

__all__ = [
    "extract_components",
    "format_name",
    "suggest_correction",
    "validate",
    "validate_many",
    "validate_unique",
]
