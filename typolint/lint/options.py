"""Spell-check configuration options."""

from dataclasses import dataclass

from typolint.spelling import DEFAULT_SUPPRESSION_MARKER


@dataclass(frozen=True, slots=True)
class SpellcheckOptions:
    """Feature flags controlling what gets checked and how the oracle is built."""

    suppression_marker: str = DEFAULT_SUPPRESSION_MARKER
    language: str = "en"
    known_words: tuple[str, ...] = ()
    min_word_length: int = 2
    check_comments: bool = True
    check_tokens: bool = True
    include: tuple[str, ...] = ("*.py",)
    exclude: tuple[str, ...] = ()
