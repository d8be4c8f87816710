"""Spelling oracle contract and the pyspellchecker-backed implementation."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Final, Protocol

from spellchecker import SpellChecker

from typolint.text import TextRange, slice_text_range

_WORD_RE: Final[re.Pattern[str]] = re.compile(r"[^\W\d_]+(?:'[^\W\d_]+)*")

# Vocabulary that shows up in almost every Python file but is absent from prose dictionaries.
DEFAULT_KNOWN_WORDS: Final[tuple[str, ...]] = (
    "args",
    "async",
    "bool",
    "config",
    "dict",
    "enum",
    "init",
    "kwargs",
    "len",
    "param",
    "params",
    "repr",
    "stderr",
    "stdin",
    "stdout",
    "str",
    "tuple",
    "utf",
)


class SpellingOracle(Protocol):
    """Service that finds misspelled words and proposes corrections.

    Implementations may cache internally; callers treat them as side-effect free.
    """

    def first_misspelling(self, text: str, start: int = 0) -> TextRange | None:
        """Range of the first misspelled word at or after `start`, or None."""
        ...

    def suggest(self, text: str, misspelled: TextRange) -> str | None: ...


class PySpellCheckerOracle:
    """Oracle backed by `pyspellchecker` word-frequency dictionaries."""

    def __init__(
        self,
        language: str = "en",
        *,
        known_words: Iterable[str] = (),
        min_word_length: int = 2,
        distance: int = 2,
    ) -> None:
        self._checker = SpellChecker(language=language, distance=distance)
        self._checker.word_frequency.load_words([*DEFAULT_KNOWN_WORDS, *known_words])
        self._min_word_length = min_word_length

    def first_misspelling(self, text: str, start: int = 0) -> TextRange | None:
        for match in _WORD_RE.finditer(text, start):
            word = match.group()
            if len(word) < self._min_word_length:
                continue
            if not self._is_known(word):
                return TextRange(match.start(), match.end())
        return None

    def suggest(self, text: str, misspelled: TextRange) -> str | None:
        word = slice_text_range(text, misspelled)
        correction = self._checker.correction(word.lower())
        if correction is None or correction == word.lower():
            return None
        return correction

    def _is_known(self, word: str) -> bool:
        if self._checker.known([word]):
            return True
        # contractions missing from the frequency list: check the stem ("parser's" -> "parser")
        stem, apostrophe, _ = word.partition("'")
        return bool(apostrophe) and bool(self._checker.known([stem]))
