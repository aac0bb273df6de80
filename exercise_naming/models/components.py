from pydantic import BaseModel, ConfigDict

from exercise_naming.models.taxonomy import (
    Equipment,
    ExerciseCategory,
    MovementPattern,
    MuscleGroup,
)


class ExerciseNameComponents(BaseModel):
    model_config = ConfigDict(frozen=True)

    equipment: Equipment | None = None
    muscle_group: MuscleGroup | None = None
    movement: str | None = None  # lower case, e.g. "press"
    category: ExerciseCategory = ExerciseCategory.FULL_BODY
    movement_pattern: MovementPattern | None = None
