"""Culture-aware case mappings.

Every case transform in humanizer goes through a :class:`Culture` so the
locale can be injected instead of read from ambient process state.  The
process-wide default is resolved once, lazily, and can be replaced at startup
with :func:`set_current_culture`.
"""

from __future__ import annotations

import locale
import os
import re
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from humanizer.logging import get_logger

_log = get_logger("culture")

# Languages whose dotted/dotless i pairs differ from the Unicode default
_TURKIC_LANGUAGES = frozenset({"tr", "az"})

# A word is a run of letters/digits, optionally joined by apostrophes ("don't")
_RE_WORD = re.compile(r"[^\W_]+(?:['’][^\W_]+)*")


@dataclass(frozen=True)
class Culture:
    """A named locale and the case mappings it implies.

    The empty name is the invariant culture, which uses Python's default
    Unicode mappings.  Subclass and override :meth:`upper`, :meth:`lower` or
    :meth:`title` to plug in other rules.
    """

    name: str = ""

    @classmethod
    def invariant(cls) -> Culture:
        return cls("")

    @classmethod
    def from_locale(cls, name: str | None) -> Culture:
        """Build a culture from a POSIX (``tr_TR.UTF-8``) or BCP-47 (``tr-TR``) name."""
        if not name:
            return cls.invariant()
        base = name.split(".", 1)[0].split("@", 1)[0]
        if base in ("C", "POSIX"):
            return cls.invariant()
        base = base.replace("_", "-")
        parts = [p for p in base.split("-") if p]
        if not parts:
            return cls.invariant()
        lang = parts[0].lower()
        if len(parts) == 1:
            return cls(lang)
        return cls(f"{lang}-{parts[1].upper()}")

    @property
    def language(self) -> str:
        return self.name.split("-", 1)[0].lower()

    @property
    def is_turkic(self) -> bool:
        return self.language in _TURKIC_LANGUAGES

    def upper(self, text: str) -> str:
        if self.is_turkic:
            text = text.replace("i", "İ")
        return text.upper()

    def lower(self, text: str) -> str:
        if self.is_turkic:
            # str.lower() turns U+0130 into "i" plus a combining dot
            text = text.replace("I", "ı").replace("İ", "i")
        return text.lower()

    def title(self, text: str) -> str:
        """Uppercase the first letter of each word and lowercase the rest.

        Words that are entirely uppercase are left alone as acronyms.
        """

        def _word(match: re.Match[str]) -> str:
            word = match.group(0)
            if word.isupper():
                return word
            return self.upper(word[0]) + self.lower(word[1:])

        return _RE_WORD.sub(_word, text)


_current: Culture | None = None


def _resolve_default() -> Culture:
    if val := os.environ.get("HUMANIZER_CULTURE"):
        _log.debug("culture from HUMANIZER_CULTURE: %s", val)
        return Culture.from_locale(val)
    try:
        name = locale.getlocale()[0]
    except ValueError:
        name = None
    _log.debug("culture from process locale: %s", name)
    return Culture.from_locale(name)


def get_current_culture() -> Culture:
    """Return the process-wide culture, resolving it on first use."""
    global _current
    if _current is None:
        _current = _resolve_default()
    return _current


def set_current_culture(culture: Culture | str | None) -> None:
    """Replace the process-wide culture.  ``None`` re-resolves it on next use."""
    global _current
    if isinstance(culture, str):
        culture = Culture.from_locale(culture)
    _current = culture


@contextmanager
def use_culture(culture: Culture | str) -> Iterator[Culture]:
    """Temporarily switch the process-wide culture."""
    previous = _current
    set_current_culture(culture)
    try:
        yield get_current_culture()
    finally:
        set_current_culture(previous)
