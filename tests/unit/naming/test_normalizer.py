import pytest

from exercise_naming.naming.normalizer import (
    clean,
    expand_abbreviations,
    format_name,
    singularize,
    title_case,
)

# ─────────────────────────────────────────
# format_name
# ─────────────────────────────────────────


def test_format_name_applies_proper_case():
    assert format_name("barbell back squat") == "Barbell Back Squat"


def test_format_name_collapses_spaces_and_singularizes():
    assert format_name("Dumbbell   Curls") == "Dumbbell Curl"


def test_format_name_removes_extra_spaces():
    assert format_name("Barbell   Back    Squat") == "Barbell Back Squat"


def test_format_name_replaces_hyphens_with_spaces():
    assert format_name("Step-Up-Exercise") == "Step Up Exercise"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Dumbbell Curls", "Dumbbell Curl"),
        ("Barbell Rows", "Barbell Row"),
        ("Cable Flies", "Cable Fly"),
        ("Cable Flyes", "Cable Fly"),
        ("Leg Raises", "Leg Raise"),
        ("Dumbbell Presses", "Dumbbell Press"),
        ("Cable Crunches", "Cable Crunch"),
        ("Walking Lunges", "Walking Lunge"),
        ("Standing Calves", "Standing Calf"),
    ],
)
def test_format_name_converts_plurals_to_singular(raw, expected):
    assert format_name(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("DB Curl", "Dumbbell Curl"),
        ("BB Press", "Barbell Press"),
        ("KB Swing", "Kettlebell Swing"),
        ("ez curl", "EZ Bar Curl"),
    ],
)
def test_format_name_expands_abbreviations(raw, expected):
    assert format_name(raw) == expected


def test_format_name_duplicates_bar_after_ez_expansion():
    # "EZ" expands to "EZ Bar" without looking at the word that follows
    assert format_name("EZ Bar Curl") == "EZ Bar Bar Curl"


def test_format_name_does_not_keep_mixed_case():
    assert format_name("dB CuRl") == "Dumbbell Curl"


def test_format_name_only_singularizes_final_word():
    assert format_name("Curls Dumbbell") == "Curls Dumbbell"


def test_format_name_leaves_words_that_only_look_plural():
    assert format_name("Barbell Press") == "Barbell Press"
    assert format_name("Hip Thrust Hips") == "Hip Thrust Hips"


def test_format_name_strips_emoji_and_punctuation():
    assert format_name("Barbell Squat 💪") == "Barbell Squat"
    assert format_name("Farmer's Walk") == "Farmers Walk"


def test_format_name_treats_tabs_as_spaces():
    assert format_name("Cable\tFly") == "Cable Fly"


@pytest.mark.parametrize("raw", ["", "   ", "💪", "-"])
def test_format_name_can_produce_empty_string(raw):
    assert format_name(raw) == ""


# ─────────────────────────────────────────
# Pipeline steps
# ─────────────────────────────────────────


def test_clean_trims_before_replacing_hyphens():
    assert clean("  Step-Up  ") == "Step Up"


def test_clean_keeps_digits():
    assert clean("21s Curl") == "21s Curl"


def test_expand_abbreviations_splits_multi_word_expansion():
    assert expand_abbreviations(["EZ", "Bar", "Curl"]) == ["EZ", "Bar", "Bar", "Curl"]


def test_expand_abbreviations_is_case_insensitive():
    assert expand_abbreviations(["db", "Kb", "BB"]) == [
        "Dumbbell",
        "Kettlebell",
        "Barbell",
    ]


@pytest.mark.parametrize(
    "word, expected",
    [
        ("Curls", "curl"),
        ("Flies", "fly"),
        ("Raises", "raise"),
        ("Pulldowns", "pulldown"),
        ("Dumbbells", "dumbbell"),
        ("Ups", "up"),
        ("Biceps", "bicep"),
        ("Abses", "ab"),
    ],
)
def test_singularize_known_plurals(word, expected):
    assert singularize(word) == expected


@pytest.mark.parametrize("word", ["Press", "Hips", "Curl", "s", "es", "ies"])
def test_singularize_leaves_other_words_untouched(word):
    assert singularize(word) == word


def test_singularize_twice_is_same_as_once():
    for word in ["Abses", "Presses", "Calves", "Glutes"]:
        assert singularize(singularize(word)) == singularize(word)


def test_title_case_keeps_acronyms_upper_case():
    assert title_case("ez") == "EZ"
    assert title_case("cURL") == "Curl"
    assert title_case("") == ""
