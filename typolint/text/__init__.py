"""Text offsets, ranges and line/column mapping."""

from typolint.text.line_index import LineColumn, LineIndex
from typolint.text.text import TextRange, TextSize, slice_text_range

__all__ = [
    "LineColumn",
    "LineIndex",
    "TextRange",
    "TextSize",
    "slice_text_range",
]
