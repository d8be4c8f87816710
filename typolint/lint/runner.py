"""Spell-check runner over a single parse result."""

from __future__ import annotations

import logging
import tokenize
from dataclasses import dataclass
from pathlib import Path

from typolint.cst import walk
from typolint.diagnostics import (
    IO_READ_ERROR,
    CollectingSink,
    Diagnostic,
    DiagnosticReporter,
    DiagnosticSink,
)
from typolint.lint.options import SpellcheckOptions
from typolint.lint.visitor import SpellVisitor
from typolint.parser import ParseResult
from typolint.parser import parse as _parse_source
from typolint.spelling import SpellingOracle
from typolint.text import TextRange, TextSize

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SpellcheckRunResult:
    """Diagnostics of one file in emission order (spelling first, then parser problems)."""

    file_path: str
    parse: ParseResult | None
    diagnostics: list[Diagnostic]


def run_spellcheck(
    text: str,
    *,
    oracle: SpellingOracle,
    file_path: str = "<string>",
    options: SpellcheckOptions | None = None,
    parse: ParseResult | None = None,
    sink: DiagnosticSink | None = None,
) -> SpellcheckRunResult:
    """Parse `text` (unless a parse is supplied) and walk it once with a `SpellVisitor`.

    Every diagnostic goes to `sink` the moment it is produced.
    """
    resolved_parse = _resolve_parse(text, file_path=file_path, parse=parse)
    collector = CollectingSink(forward=sink)
    reporter = DiagnosticReporter(
        resolved_parse.file_path,
        resolved_parse.line_index,
        oracle,
        collector,
    )
    walk(resolved_parse.tree, SpellVisitor(oracle, reporter, options))
    for diagnostic in resolved_parse.diagnostics:
        collector.emit(diagnostic)
    return SpellcheckRunResult(
        file_path=resolved_parse.file_path,
        parse=resolved_parse,
        diagnostics=collector.diagnostics,
    )


def check_file(
    path: Path,
    *,
    oracle: SpellingOracle,
    options: SpellcheckOptions | None = None,
    sink: DiagnosticSink | None = None,
) -> SpellcheckRunResult:
    """Read a Python file (honoring its coding cookie) and spell check it."""
    file_path = str(path)
    try:
        with tokenize.open(path) as handle:
            text = handle.read()
    except (OSError, UnicodeDecodeError, SyntaxError) as exc:
        logger.info("skipping %s: %s", file_path, exc)
        diagnostic = Diagnostic(
            code=IO_READ_ERROR.code,
            message=f"{IO_READ_ERROR.message} ({exc})",
            range=TextRange.empty(TextSize(0)),
            severity=IO_READ_ERROR.severity,
            category=IO_READ_ERROR.category,
            file_path=file_path,
        )
        if sink is not None:
            sink.emit(diagnostic)
        return SpellcheckRunResult(file_path=file_path, parse=None, diagnostics=[diagnostic])

    return run_spellcheck(text, oracle=oracle, file_path=file_path, options=options, sink=sink)


def _resolve_parse(text: str, *, file_path: str, parse: ParseResult | None) -> ParseResult:
    if parse is not None:
        if parse.source_text != text:
            raise ValueError("Provided parse result must come from the same text")
        return parse
    return _parse_source(text, file_path=file_path)
