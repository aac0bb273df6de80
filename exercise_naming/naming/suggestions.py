from exercise_naming.naming.extractor import find_equipment
from exercise_naming.naming.normalizer import (
    normalize_tokens,
    singularize_last,
    title_case,
)
from exercise_naming.utils.log import logger
from exercise_naming.utils.taxonomy import DEFAULT_EQUIPMENT_WORD


def equipment_first(tokens: list[str]) -> list[str]:
    """
    Put the equipment phrase at the front, keeping every other token in
    order. Names without equipment are treated as bodyweight.
    """
    match = find_equipment(tokens)
    if match is None:
        return [DEFAULT_EQUIPMENT_WORD, *tokens]

    phrase = tokens[match.start : match.end]
    rest = tokens[: match.start] + tokens[match.end :]
    return [*phrase, *rest]


def collapse_repeats(tokens: list[str]) -> list[str]:
    """
    Drop a word that repeats the one before it.

    Abbreviation expansion leaves "EZ Bar Bar Curl" behind; without this a
    suggestion would grow by one "Bar" every time it was corrected again.
    """
    collapsed: list[str] = []
    for token in tokens:
        if collapsed and collapsed[-1].lower() == token.lower():
            continue
        collapsed.append(token)
    return collapsed


def suggest_correction(raw: str) -> str:
    """
    Best-effort corrected name: normalized, equipment first, singular.

        >>> suggest_correction("bicep-curls db")
        'Dumbbell Bicep Curl'
        >>> suggest_correction("Push Up")
        'Bodyweight Push Up'

    Running the result back through returns it unchanged.
    """
    tokens = equipment_first(normalize_tokens(raw))
    tokens = singularize_last(tokens)
    tokens = collapse_repeats(tokens)
    suggestion = " ".join(title_case(token) for token in tokens)

    logger.debug(f"Suggested {suggestion!r} for {raw!r}")
    return suggestion
