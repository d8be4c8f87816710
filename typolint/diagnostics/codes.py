"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


SPELLING_MISSPELLED_WORD: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SPELLING_MISSPELLED_WORD",
    message="CheckSpelling",
    hint="Fix the spelling, add the word to `known-words`, or mark the line with the suppression comment.",
    severity="warning",
    category="spelling",
)

PARSER_TOKENIZE_ERROR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_TOKENIZE_ERROR",
    message="Source could not be fully tokenized; only the text before the error was checked.",
    severity="error",
    category="parser",
)

IO_READ_ERROR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="IO_READ_ERROR",
    message="File could not be read.",
    severity="error",
    category="io",
)
