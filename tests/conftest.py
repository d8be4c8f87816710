"""Shared test fixtures: a deterministic in-memory spelling oracle."""

from __future__ import annotations

import re
from collections.abc import Callable

import pytest

from typolint.text import TextRange

_WORD_RE = re.compile(r"[^\W\d_]+")


class SetOracle:
    """Flags exactly the words in `misspelled`; suggestions come from the same mapping."""

    def __init__(self, misspelled: dict[str, str | None]) -> None:
        self._misspelled = {word.lower(): suggestion for word, suggestion in misspelled.items()}
        self.queries: list[str] = []

    def first_misspelling(self, text: str, start: int = 0) -> TextRange | None:
        self.queries.append(text)
        for match in _WORD_RE.finditer(text, start):
            if match.group().lower() in self._misspelled:
                return TextRange(match.start(), match.end())
        return None

    def suggest(self, text: str, misspelled: TextRange) -> str | None:
        start, end = misspelled.as_tuple()
        return self._misspelled.get(text[start:end].lower())


@pytest.fixture
def make_oracle() -> Callable[..., SetOracle]:
    def _make(**misspelled: str | None) -> SetOracle:
        return SetOracle(misspelled)

    return _make


@pytest.fixture
def oracle(make_oracle: Callable[..., SetOracle]) -> SetOracle:
    return make_oracle(recieve="receive", fien="fine", wrod="word", typo=None)
