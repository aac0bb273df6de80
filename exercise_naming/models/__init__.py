from .components import ExerciseNameComponents
from .taxonomy import Equipment, ExerciseCategory, MovementPattern, MuscleGroup
from .validation import Invalid, Valid, ValidationResult

__all__ = [
    "Equipment",
    "ExerciseCategory",
    "ExerciseNameComponents",
    "Invalid",
    "MovementPattern",
    "MuscleGroup",
    "Valid",
    "ValidationResult",
]
