"""Letter casing modes and the transform that applies them."""

from __future__ import annotations

from enum import Enum

from humanizer.culture import Culture, get_current_culture


class UnsupportedCasingError(ValueError):
    """Raised for a casing value that is not a :class:`LetterCasing` member."""

    def __init__(self, casing: object) -> None:
        super().__init__(f"Unsupported casing: {casing!r}")
        self.casing = casing


class LetterCasing(Enum):
    TITLE = "title"  # Each Word Capitalized
    LOWER_CASE = "lower"  # every letter lowercase
    ALL_CAPS = "caps"  # EVERY LETTER UPPERCASE
    SENTENCE = "sentence"  # First letter capitalized, rest untouched

    @classmethod
    def parse(cls, name: str) -> LetterCasing:
        """Look up a casing by value (``"caps"``) or member name (``"ALL_CAPS"``)."""
        key = name.strip().lower()
        for casing in cls:
            if key in (casing.value, casing.name.lower()):
                return casing
        raise UnsupportedCasingError(name)

    @classmethod
    def names(cls) -> list[str]:
        return [c.value for c in cls]


def apply_case(input: str, casing: LetterCasing, culture: Culture | None = None) -> str:
    """Change the casing of *input*.

    Case mappings follow *culture*, defaulting to the process-wide culture.
    Raises :class:`UnsupportedCasingError` when *casing* is not a
    :class:`LetterCasing` member.
    """
    if not isinstance(casing, LetterCasing):
        raise UnsupportedCasingError(casing)
    if culture is None:
        culture = get_current_culture()

    if casing is LetterCasing.TITLE:
        return culture.title(input)
    if casing is LetterCasing.LOWER_CASE:
        return culture.lower(input)
    if casing is LetterCasing.ALL_CAPS:
        return culture.upper(input)
    if casing is LetterCasing.SENTENCE:
        if input:
            return culture.upper(input[0]) + input[1:]
        return input
    raise UnsupportedCasingError(casing)
