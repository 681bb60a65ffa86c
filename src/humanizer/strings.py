"""Turn identifier-shaped strings into human-readable phrases.

``humanize("Underscored_input_String_is_turned_INTO_sentence")`` gives
``"Underscored input String is turned INTO sentence"`` and
``humanize("PascalCaseInputString")`` gives ``"Pascal case input string"``.
"""

from __future__ import annotations

import re

from humanizer.casing import LetterCasing, apply_case
from humanizer.culture import Culture, get_current_culture
from humanizer.logging import get_logger

_log = get_logger("strings")

_RE_DELIMITER = re.compile(r"[_-]")


def from_underscore_dash_separated_words(input: str) -> str:
    """Split on ``_`` and ``-`` and join with spaces.

    Consecutive delimiters are not collapsed: ``"a__b"`` becomes ``"a  b"``.
    """
    return " ".join(_RE_DELIMITER.split(input))


def _append_word(result: list[str], word: list[str]) -> None:
    if result and result[-1] != " ":
        result.append(" ")
    result.extend(word)


def from_pascal_case(input: str, culture: Culture | None = None) -> str:
    """Break a PascalCase string into words and sentence-case the result.

    A word ends before an uppercase letter or digit that follows a lowercase
    letter.  An uppercase run followed by a lowercase letter gives up its last
    letter to the next word, so ``"HTMLPage"`` splits as ``HTML`` + ``Page``.
    """
    if culture is None:
        culture = get_current_culture()

    result: list[str] = []
    word: list[str] = []
    for ch in input:
        last = word[-1] if word else ""
        if last.islower() and (ch.isupper() or ch.isdecimal()):
            _append_word(result, word)
            word = []
        elif last.isupper() and ch.islower():
            first = word.pop()
            _append_word(result, word)
            word = [first]
        word.append(ch)
    _append_word(result, word)

    text = "".join(result)
    text = culture.upper(text[:1]) + culture.lower(text[1:])
    return text.replace(" i ", " I ")  # English pronoun


def _split_words(input: str, culture: Culture | None) -> str:
    if not any(ch.islower() for ch in input):
        _log.debug("no lowercase letters, keeping %r as an acronym", input)
        return input
    if "_" in input or "-" in input:
        _log.debug("splitting %r on delimiters", input)
        return from_underscore_dash_separated_words(input)
    _log.debug("splitting %r on case changes", input)
    return from_pascal_case(input, culture)


def humanize(
    input: str,
    casing: LetterCasing | None = None,
    culture: Culture | None = None,
) -> str:
    """Humanize *input*, then apply *casing* when given.

    Strings without any lowercase letter are treated as acronyms and returned
    as they are (before casing).  Empty input returns an empty string.
    """
    if input:
        result = _split_words(input, culture)
    else:
        _log.debug("empty input")
        result = ""
    if casing is not None:
        result = apply_case(result, casing, culture)
    return result
