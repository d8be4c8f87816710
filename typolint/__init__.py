"""Spell checker for comments, string literals and identifiers in Python source."""

from typolint.lint import SpellcheckOptions, SpellcheckRunResult, check_file, run_spellcheck
from typolint.parser import ParseResult, parse
from typolint.spelling import PySpellCheckerOracle, SpellingOracle, normalize

__all__ = [
    "ParseResult",
    "PySpellCheckerOracle",
    "SpellcheckOptions",
    "SpellcheckRunResult",
    "SpellingOracle",
    "check_file",
    "normalize",
    "parse",
    "run_spellcheck",
]
