"""Parse carrier shared by the spell-check runner and tooling."""

from __future__ import annotations

from dataclasses import dataclass

from typolint.cst import SyntaxTree
from typolint.diagnostics import Diagnostic, has_errors
from typolint.text import LineIndex


@dataclass(slots=True)
class ParseResult:
    """Token tree plus the diagnostics raised while producing it."""

    source_text: str
    tree: SyntaxTree
    diagnostics: list[Diagnostic]
    file_path: str
    line_index: LineIndex

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)
