"""Offset to line/column mapping."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LineColumn:
    """1-based line and column of a source offset."""

    line: int
    column: int


class LineIndex:
    """Maps character offsets in a source text to 1-based line/column pairs.

    Lines are split on ``\\n`` only, matching how ``tokenize`` counts rows when it reads
    lines from an ``io.StringIO``. A ``\\r\\n`` pair therefore ends a line at the ``\\n``.
    """

    __slots__ = ("_line_starts", "_length")

    def __init__(self, source: str) -> None:
        starts = [0]
        for index, char in enumerate(source):
            if char == "\n":
                starts.append(index + 1)
        self._line_starts = tuple(starts)
        self._length = len(source)

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def offset_of(self, line: int, column: int) -> int:
        """Inverse of `line_col` for a 1-based line and a 0-based column.

        Positions past the end of the source clamp to its length.
        """
        if line > len(self._line_starts):
            return self._length
        return min(self._line_starts[line - 1] + column, self._length)

    def line_col(self, offset: int) -> LineColumn | None:
        """Resolve `offset`, or return None when it falls outside the source."""
        if offset < 0 or offset > self._length:
            return None
        line = bisect_right(self._line_starts, offset)
        return LineColumn(line=line, column=offset - self._line_starts[line - 1] + 1)
