import re

from exercise_naming.utils.taxonomy import (
    ABBREVIATIONS,
    IRREGULAR_PLURALS,
    KNOWN_SINGULARS,
    PLURAL_SUFFIXES,
    UPPERCASE_WORDS,
)

DISALLOWED_CHARS = re.compile(r"[^A-Za-z0-9\s]", re.ASCII)
WHITESPACE_RUN = re.compile(r"\s+", re.ASCII)


def clean(raw: str) -> str:
    """
    Trim, turn hyphens into spaces, strip anything that is not an ASCII
    letter, digit or whitespace, then collapse whitespace runs.
    """
    text = raw.strip()
    text = text.replace("-", " ")
    text = DISALLOWED_CHARS.sub("", text)
    return WHITESPACE_RUN.sub(" ", text)


def tokenize(text: str) -> list[str]:
    return text.split()


def expand_abbreviations(tokens: list[str]) -> list[str]:
    """
    Replace abbreviation tokens with their expansion, splitting multi-word
    expansions into separate tokens.

    Neighbouring tokens are left alone, so "EZ Bar" becomes "EZ Bar Bar".
    """
    expanded: list[str] = []
    for token in tokens:
        replacement = ABBREVIATIONS.get(token.lower())
        if replacement is None:
            expanded.append(token)
        else:
            expanded.extend(replacement.split(" "))
    return expanded


def _singular_form(lower: str) -> str | None:
    if lower in IRREGULAR_PLURALS:
        return IRREGULAR_PLURALS[lower]

    for suffix, replacement in PLURAL_SUFFIXES:
        if not lower.endswith(suffix):
            continue
        candidate = lower[: -len(suffix)] + replacement
        if candidate in KNOWN_SINGULARS:
            return candidate

    return None


def singularize(word: str) -> str:
    """
    Return the singular form of a known plural, otherwise the word unchanged.

    Reduced until no rule applies ("abs" -> "ab"), so singularizing twice
    changes nothing. Case is not preserved for a word that gets singularized.
    """
    singular = _singular_form(word.lower())
    if singular is None:
        return word

    while True:
        reduced = _singular_form(singular)
        if reduced is None:
            return singular
        singular = reduced


def singularize_last(tokens: list[str]) -> list[str]:
    if not tokens:
        return tokens
    return [*tokens[:-1], singularize(tokens[-1])]


def title_case(word: str) -> str:
    lower = word.lower()
    if lower in UPPERCASE_WORDS:
        return word.upper()
    return lower[:1].upper() + lower[1:]


def normalize_tokens(raw: str) -> list[str]:
    tokens = tokenize(clean(raw))
    tokens = expand_abbreviations(tokens)
    tokens = singularize_last(tokens)
    return [title_case(token) for token in tokens]


def format_name(raw: str) -> str:
    """
    Normalize an exercise name: "dumbbell   curls" -> "Dumbbell Curl",
    "DB Curl" -> "Dumbbell Curl".
    """
    return " ".join(normalize_tokens(raw))
