from .extractor import extract_components
from .normalizer import format_name
from .suggestions import suggest_correction
from .validator import validate, validate_many, validate_unique

__all__ = [
    "extract_components",
    "format_name",
    "suggest_correction",
    "validate",
    "validate_many",
    "validate_unique",
]
