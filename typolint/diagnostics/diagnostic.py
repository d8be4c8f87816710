"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

from typolint.text import TextRange

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the parser front-end and the spell checker.

    `line` and `column` are 1-based; `(0, 0)` means the position could not be resolved.
    """

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None
    file_path: str = "<string>"
    line: int = 0
    column: int = 0
