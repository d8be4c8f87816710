"""Diagnostics."""

from typolint.diagnostics.codes import (
    IO_READ_ERROR,
    PARSER_TOKENIZE_ERROR,
    SPELLING_MISSPELLED_WORD,
    DiagnosticSpec,
)
from typolint.diagnostics.diagnostic import Diagnostic, Severity
from typolint.diagnostics.report import (
    DiagnosticReporter,
    has_errors,
    misspelling_message,
)
from typolint.diagnostics.sink import CollectingSink, DiagnosticSink, StreamSink, format_diagnostic

__all__ = [
    "IO_READ_ERROR",
    "PARSER_TOKENIZE_ERROR",
    "SPELLING_MISSPELLED_WORD",
    "CollectingSink",
    "Diagnostic",
    "DiagnosticReporter",
    "DiagnosticSink",
    "DiagnosticSpec",
    "Severity",
    "StreamSink",
    "format_diagnostic",
    "has_errors",
    "misspelling_message",
]
