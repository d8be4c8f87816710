"""Spell-check visitor, options and runner."""

from typolint.lint.options import SpellcheckOptions
from typolint.lint.runner import SpellcheckRunResult, check_file, run_spellcheck
from typolint.lint.visitor import SpellVisitor

__all__ = [
    "SpellVisitor",
    "SpellcheckOptions",
    "SpellcheckRunResult",
    "check_file",
    "run_spellcheck",
]
