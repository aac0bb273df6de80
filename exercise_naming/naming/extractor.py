from typing import Iterable, NamedTuple, Sequence

from exercise_naming.models.components import ExerciseNameComponents
from exercise_naming.models.taxonomy import (
    Equipment,
    ExerciseCategory,
    MovementPattern,
    MuscleGroup,
)
from exercise_naming.naming.normalizer import normalize_tokens
from exercise_naming.utils.log import logger
from exercise_naming.utils.taxonomy import (
    CARRY_TERMS,
    EQUIPMENT_TERMS,
    FRONT_CUES,
    HINGE_TERMS,
    HORIZONTAL_PULL_TERMS,
    HORIZONTAL_PUSH_PHRASES,
    LUNGE_TERMS,
    MAX_EQUIPMENT_WORDS,
    MOVEMENT_TERMS,
    MUSCLE_CATEGORIES,
    MUSCLE_TERMS,
    OVERHEAD_CUES,
    PUSH_TERMS,
    SQUAT_TERMS,
    VERTICAL_PULL_PHRASES,
)


class EquipmentMatch(NamedTuple):
    start: int
    end: int  # exclusive
    equipment: Equipment


def find_equipment(tokens: Sequence[str]) -> EquipmentMatch | None:
    """
    Scan left to right for the first equipment phrase.

    At each position the longest phrase wins, so "Smith Machine" is read as
    one piece of equipment rather than "Smith" followed by "Machine".
    """
    lowered = [token.lower() for token in tokens]

    for start in range(len(lowered)):
        for size in range(MAX_EQUIPMENT_WORDS, 0, -1):
            words = lowered[start : start + size]
            if len(words) < size:
                continue
            equipment = EQUIPMENT_TERMS.get(" ".join(words))
            if equipment is not None:
                return EquipmentMatch(start, start + size, equipment)

    return None


def find_muscle_group(
    tokens: Sequence[str], skip: range = range(0)
) -> MuscleGroup | None:
    # skip holds the positions already claimed by the equipment phrase ("Trap Bar")
    for i, token in enumerate(tokens):
        if i in skip:
            continue
        muscle_group = MUSCLE_TERMS.get(token.lower())
        if muscle_group is not None:
            return muscle_group
    return None


def find_movement(tokens: Sequence[str]) -> str | None:
    for token in tokens:
        lower = token.lower()
        if lower in MOVEMENT_TERMS:
            return lower
    return None


def infer_category(muscle_group: MuscleGroup | None) -> ExerciseCategory:
    if muscle_group is None:
        return ExerciseCategory.FULL_BODY
    return MUSCLE_CATEGORIES.get(muscle_group, ExerciseCategory.FULL_BODY)


def _has_any(tokens: Sequence[str], terms: Iterable[str]) -> bool:
    return any(term in tokens for term in terms)


def _has_phrase(tokens: Sequence[str], phrases: Iterable[str]) -> bool:
    padded = f" {' '.join(tokens)} "
    return any(f" {phrase} " in padded for phrase in phrases)


def infer_movement_pattern(tokens: Sequence[str]) -> MovementPattern | None:
    """
    Classify lower-case tokens into a movement pattern. The first matching
    rule wins; None when nothing matches.
    """
    if _has_any(tokens, SQUAT_TERMS):
        return MovementPattern.SQUAT
    if _has_any(tokens, HINGE_TERMS):
        return MovementPattern.HINGE
    if _has_any(tokens, LUNGE_TERMS):
        return MovementPattern.LUNGE

    is_push = _has_any(tokens, PUSH_TERMS)
    if is_push and _has_any(tokens, OVERHEAD_CUES):
        return MovementPattern.VERTICAL_PUSH
    if _has_phrase(tokens, HORIZONTAL_PUSH_PHRASES) or (
        is_push and _has_any(tokens, FRONT_CUES)
    ):
        return MovementPattern.HORIZONTAL_PUSH

    if _has_any(tokens, HORIZONTAL_PULL_TERMS):
        return MovementPattern.HORIZONTAL_PULL
    if _has_phrase(tokens, VERTICAL_PULL_PHRASES):
        return MovementPattern.VERTICAL_PULL
    if _has_any(tokens, CARRY_TERMS):
        return MovementPattern.CARRY

    return None


def extract_components(raw: str) -> ExerciseNameComponents:
    """
    Break an exercise name into equipment, muscle group, movement,
    category and movement pattern.

    The name is normalized first, so abbreviations and a trailing plural are
    understood ("db curls" -> DUMBBELL, "curl"). Fields that cannot be
    recognised are left as None; category falls back to FULL_BODY.
    """
    # Only the final word has been singularized; "Rows Paused" keeps "rows".
    tokens = [token.lower() for token in normalize_tokens(raw)]

    match = find_equipment(tokens)
    claimed = range(match.start, match.end) if match else range(0)
    muscle_group = find_muscle_group(tokens, skip=claimed)

    components = ExerciseNameComponents(
        equipment=match.equipment if match else None,
        muscle_group=muscle_group,
        movement=find_movement(tokens),
        category=infer_category(muscle_group),
        movement_pattern=infer_movement_pattern(tokens),
    )

    logger.debug(f"Extracted components from {raw!r}: {components}")
    return components
