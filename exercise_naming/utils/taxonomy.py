# exercise_naming/utils/taxonomy.py
#
# Read-only vocabulary used by the naming engine. Every surface form is lower
# case; multi-word phrases use a single space between words.

from types import MappingProxyType
from typing import Mapping

from exercise_naming.models.taxonomy import Equipment, ExerciseCategory, MuscleGroup

# ───────────── Equipment ─────────────

EQUIPMENT_TERMS: Mapping[str, Equipment] = MappingProxyType(
    {
        "barbell": Equipment.BARBELL,
        "dumbbell": Equipment.DUMBBELL,
        "cable": Equipment.CABLE,
        "machine": Equipment.MACHINE,
        "kettlebell": Equipment.KETTLEBELL,
        "bodyweight": Equipment.BODYWEIGHT,
        "band": Equipment.BAND,
        "plate": Equipment.PLATE,
        "smith": Equipment.SMITH_MACHINE,
        "smith machine": Equipment.SMITH_MACHINE,
        "ez bar": Equipment.EZ_BAR,
        "trap bar": Equipment.TRAP_BAR,
    }
)

MAX_EQUIPMENT_WORDS: int = max(len(term.split()) for term in EQUIPMENT_TERMS)

# Expanded token by token. "ez" expands to two words even when "bar" follows.
ABBREVIATIONS: Mapping[str, str] = MappingProxyType(
    {
        "db": "Dumbbell",
        "bb": "Barbell",
        "kb": "Kettlebell",
        "ez": "EZ Bar",
    }
)

# Abbreviations standing for a multi-word equipment phrase
MULTI_WORD_ABBREVIATIONS: frozenset[str] = frozenset(
    abbr for abbr, expansion in ABBREVIATIONS.items() if " " in expansion
)

# Words kept upper case by title-casing
UPPERCASE_WORDS: frozenset[str] = frozenset({"ez"})

DEFAULT_EQUIPMENT_WORD = "Bodyweight"

# ───────────── Muscles ─────────────

MUSCLE_TERMS: Mapping[str, MuscleGroup] = MappingProxyType(
    {
        "chest": MuscleGroup.CHEST,
        "back": MuscleGroup.UPPER_BACK,
        "lat": MuscleGroup.LATS,
        "lats": MuscleGroup.LATS,
        "trap": MuscleGroup.TRAPS,
        "traps": MuscleGroup.TRAPS,
        "shoulder": MuscleGroup.SHOULDERS,
        "shoulders": MuscleGroup.SHOULDERS,
        "delt": MuscleGroup.SHOULDERS,
        "delts": MuscleGroup.SHOULDERS,
        "bicep": MuscleGroup.BICEPS,
        "biceps": MuscleGroup.BICEPS,
        "tricep": MuscleGroup.TRICEPS,
        "triceps": MuscleGroup.TRICEPS,
        "forearm": MuscleGroup.FOREARMS,
        "forearms": MuscleGroup.FOREARMS,
        "quad": MuscleGroup.QUADS,
        "quads": MuscleGroup.QUADS,
        "hamstring": MuscleGroup.HAMSTRINGS,
        "hamstrings": MuscleGroup.HAMSTRINGS,
        "glute": MuscleGroup.GLUTES,
        "glutes": MuscleGroup.GLUTES,
        "calf": MuscleGroup.CALVES,
        "calves": MuscleGroup.CALVES,
        "ab": MuscleGroup.CORE,
        "abs": MuscleGroup.CORE,
        "core": MuscleGroup.CORE,
        "leg": MuscleGroup.LEGS,
        "legs": MuscleGroup.LEGS,
    }
)

# MuscleGroup.LEGS is intentionally missing and falls back to FULL_BODY.
MUSCLE_CATEGORIES: Mapping[MuscleGroup, ExerciseCategory] = MappingProxyType(
    {
        MuscleGroup.CHEST: ExerciseCategory.CHEST,
        MuscleGroup.UPPER_BACK: ExerciseCategory.BACK,
        MuscleGroup.LATS: ExerciseCategory.BACK,
        MuscleGroup.TRAPS: ExerciseCategory.BACK,
        MuscleGroup.SHOULDERS: ExerciseCategory.SHOULDERS,
        MuscleGroup.BICEPS: ExerciseCategory.ARMS,
        MuscleGroup.TRICEPS: ExerciseCategory.ARMS,
        MuscleGroup.FOREARMS: ExerciseCategory.ARMS,
        MuscleGroup.QUADS: ExerciseCategory.LEGS,
        MuscleGroup.HAMSTRINGS: ExerciseCategory.LEGS,
        MuscleGroup.GLUTES: ExerciseCategory.LEGS,
        MuscleGroup.CALVES: ExerciseCategory.LEGS,
        MuscleGroup.CORE: ExerciseCategory.CORE,
    }
)

# ───────────── Movements ─────────────

MOVEMENT_TERMS: tuple[str, ...] = (
    "press",
    "curl",
    "extension",
    "fly",
    "row",
    "pulldown",
    "pushdown",
    "raise",
    "squat",
    "deadlift",
    "lunge",
    "crunch",
    "plank",
    "pull",
    "push",
    "dip",
    "shrug",
    "kickback",
    "swing",
    "carry",
    "rdl",
)

# Movement pattern cues, checked in the extractor's rule order
SQUAT_TERMS: tuple[str, ...] = ("squat",)
HINGE_TERMS: tuple[str, ...] = ("deadlift", "swing", "rdl")
LUNGE_TERMS: tuple[str, ...] = ("lunge",)
PUSH_TERMS: tuple[str, ...] = ("press", "push")
OVERHEAD_CUES: tuple[str, ...] = ("overhead", "shoulder", "military")
FRONT_CUES: tuple[str, ...] = ("bench", "chest", "floor", "incline", "decline")
HORIZONTAL_PUSH_PHRASES: tuple[str, ...] = ("push up", "pushup")
HORIZONTAL_PULL_TERMS: tuple[str, ...] = ("row",)
VERTICAL_PULL_PHRASES: tuple[str, ...] = (
    "pulldown",
    "pull up",
    "pullup",
    "chin up",
    "chinup",
)
CARRY_TERMS: tuple[str, ...] = ("carry",)

# ───────────── Plurals ─────────────

# Tried in order; a candidate is only accepted if it is a known word.
PLURAL_SUFFIXES: tuple[tuple[str, str], ...] = (
    ("ies", "y"),
    ("es", ""),
    ("s", ""),
)

IRREGULAR_PLURALS: Mapping[str, str] = MappingProxyType({"calves": "calf"})

KNOWN_SINGULARS: frozenset[str] = (
    frozenset(MOVEMENT_TERMS)
    | frozenset(MUSCLE_TERMS)
    | frozenset(term for term in EQUIPMENT_TERMS if " " not in term)
    | frozenset(
        {
            "up",
            "pullup",
            "pushup",
            "chinup",
            "step",
            "jump",
            "burpee",
            "bridge",
            "thrust",
            "twist",
            "walk",
        }
    )
)
