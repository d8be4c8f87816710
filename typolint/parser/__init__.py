"""Parser front-end (tokenizer adapter + parse result)."""

from typolint.parser.python import parse
from typolint.parser.result import ParseResult

__all__ = [
    "ParseResult",
    "parse",
]
