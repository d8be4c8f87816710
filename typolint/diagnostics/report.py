"""Diagnostics helpers and the misspelling reporter."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from typolint.diagnostics.codes import SPELLING_MISSPELLED_WORD
from typolint.diagnostics.diagnostic import Diagnostic
from typolint.diagnostics.sink import DiagnosticSink
from typolint.spelling.oracle import SpellingOracle
from typolint.text import LineIndex, TextRange, TextSize, slice_text_range

logger = logging.getLogger(__name__)


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def misspelling_message(word: str, suggestion: str | None) -> str:
    label = SPELLING_MISSPELLED_WORD.message
    if suggestion is not None:
        return f'"{word}": did you mean "{suggestion}"? ({label})'
    return f'"{word}" ({label})'


class DiagnosticReporter:
    """Builds one diagnostic per misspelling and hands it to the sink right away."""

    def __init__(
        self,
        file_path: str,
        line_index: LineIndex,
        oracle: SpellingOracle,
        sink: DiagnosticSink,
    ) -> None:
        self.file_path = file_path
        self._line_index = line_index
        self._oracle = oracle
        self._sink = sink

    def report(self, offset: int, text: str, misspelled: TextRange) -> Diagnostic:
        """Report the word at `misspelled` inside `text`, positioned at source `offset`."""
        word = slice_text_range(text, misspelled)
        message = misspelling_message(word, self._oracle.suggest(text, misspelled))

        position = self._line_index.line_col(offset)
        if position is None:
            logger.warning("Can't resolve position %d in %s; reporting at 0:0", offset, self.file_path)
            line, column = 0, 0
        else:
            line, column = position.line, position.column

        diagnostic = Diagnostic(
            code=SPELLING_MISSPELLED_WORD.code,
            message=message,
            range=TextRange.empty(TextSize(max(offset, 0))),
            severity=SPELLING_MISSPELLED_WORD.severity,
            hint=SPELLING_MISSPELLED_WORD.hint,
            category=SPELLING_MISSPELLED_WORD.category,
            file_path=self.file_path,
            line=line,
            column=column,
        )
        self._sink.emit(diagnostic)
        return diagnostic
