"""Python source front-end built on the standard-library tokenizer."""

from __future__ import annotations

import io
import keyword
import logging
import re
import tokenize
from typing import Final

from typolint.cst import SyntaxTree, TreeBuilder
from typolint.diagnostics import PARSER_TOKENIZE_ERROR, Diagnostic
from typolint.parser.result import ParseResult
from typolint.syntax import SyntaxKind, TriviaKind
from typolint.text import LineIndex, TextRange, TextSize

logger = logging.getLogger(__name__)

_STRING_PREFIX_RE: Final[re.Pattern[str]] = re.compile(r"[A-Za-z]+")

# f-strings are split into start/middle/end tokens from 3.12, t-strings from 3.14.
_STRING_DELIMITER_TYPES: Final[frozenset[int]] = frozenset(
    token_type
    for name in ("FSTRING_START", "FSTRING_END", "TSTRING_START", "TSTRING_END")
    if (token_type := getattr(tokenize, name, None)) is not None
)
_STRING_SEGMENT_TYPES: Final[frozenset[int]] = frozenset(
    token_type
    for name in ("FSTRING_MIDDLE", "TSTRING_MIDDLE")
    if (token_type := getattr(tokenize, name, None)) is not None
)


def parse(text: str, *, file_path: str = "<string>") -> ParseResult:
    """Tokenize Python source into a token tree.

    A tokenizer failure does not raise: the tree keeps every token read before the failure
    and the result carries a `PARSER_TOKENIZE_ERROR` diagnostic.
    """
    line_index = LineIndex(text)
    converter = _TokenConverter(text, line_index)
    diagnostics: list[Diagnostic] = []

    try:
        for token_info in tokenize.generate_tokens(io.StringIO(text).readline):
            if token_info.type == tokenize.ENDMARKER:
                break
            converter.feed(token_info)
    except tokenize.TokenError as exc:
        message, (line, column) = exc.args
        logger.debug("tokenize failed in %s: %s", file_path, message)
        diagnostics.append(
            _tokenize_error(file_path, line_index, line_index.offset_of(line, column), str(message))
        )
    except SyntaxError as exc:
        logger.debug("tokenize failed in %s: %s", file_path, exc.msg)
        offset = line_index.offset_of(exc.lineno or 1, max((exc.offset or 1) - 1, 0))
        diagnostics.append(_tokenize_error(file_path, line_index, offset, exc.msg))

    return ParseResult(
        source_text=text,
        tree=converter.finish(),
        diagnostics=diagnostics,
        file_path=file_path,
        line_index=line_index,
    )


class _TokenConverter:
    """Maps `tokenize` output onto tree-builder calls, recovering whitespace trivia."""

    def __init__(self, source: str, line_index: LineIndex) -> None:
        self._source = source
        self._line_index = line_index
        self._builder = TreeBuilder()
        self._cursor = 0
        self._pending_dollar: int | None = None

    def feed(self, token_info: tokenize.TokenInfo) -> None:
        token_type = token_info.type
        if token_type == tokenize.INDENT:
            self._builder.start_block()
            return
        if token_type == tokenize.DEDENT:
            self._builder.finish_block()
            return

        start = self._line_index.offset_of(*token_info.start)
        end = self._line_index.offset_of(*token_info.end)
        text = token_info.string

        if token_type == tokenize.NAME and self._pending_dollar is not None:
            if start == self._pending_dollar + 1:
                self._builder.token(SyntaxKind.DOLLAR_IDENTIFIER, "$" + text, self._pending_dollar)
                self._pending_dollar = None
                self._cursor = max(self._cursor, end)
                return
        self._flush_dollar()

        if token_type == tokenize.ERRORTOKEN and (not text or text.isspace()):
            return

        self._gap(start)

        match token_type:
            case tokenize.COMMENT:
                self._builder.trivia(TriviaKind.COMMENT, text, start)
            case tokenize.NL:
                self._builder.trivia(TriviaKind.NEWLINE, text, start)
            case tokenize.NEWLINE:
                self._builder.trivia(TriviaKind.NEWLINE, text, start)
                self._builder.end_logical_line()
            case tokenize.NAME:
                kind = SyntaxKind.KEYWORD if keyword.iskeyword(text) else SyntaxKind.IDENTIFIER
                self._builder.token(kind, text, start)
            case tokenize.NUMBER:
                self._builder.token(SyntaxKind.NUMBER, text, start)
            case tokenize.OP:
                self._builder.token(SyntaxKind.OPERATOR, text, start)
            case tokenize.STRING:
                self._string(text, start)
            case tokenize.ERRORTOKEN if text == "$":
                self._pending_dollar = start
            case _ if token_type in _STRING_DELIMITER_TYPES:
                self._builder.token(SyntaxKind.STRING_DELIMITER, text, start)
            case _ if token_type in _STRING_SEGMENT_TYPES:
                if text:
                    self._builder.token(SyntaxKind.STRING_SEGMENT, text, start)
            case _:
                self._builder.token(SyntaxKind.UNKNOWN, text, start)

        self._cursor = max(self._cursor, end)

    def finish(self) -> SyntaxTree:
        self._flush_dollar()
        self._gap(len(self._source))
        return self._builder.finish(self._source, len(self._source))

    def _string(self, text: str, start: int) -> None:
        # `rb"..."` -> delimiter `rb` + literal `"..."`, so the prefix never reads as a word
        prefix = _STRING_PREFIX_RE.match(text)
        if prefix is None:
            self._builder.token(SyntaxKind.STRING_LITERAL, text, start)
            return
        self._builder.token(SyntaxKind.STRING_DELIMITER, prefix.group(), start)
        self._builder.token(SyntaxKind.STRING_LITERAL, text[prefix.end() :], start + prefix.end())

    def _flush_dollar(self) -> None:
        if self._pending_dollar is not None:
            self._builder.token(SyntaxKind.UNKNOWN, "$", self._pending_dollar)
            self._cursor = max(self._cursor, self._pending_dollar + 1)
            self._pending_dollar = None

    def _gap(self, start: int) -> None:
        if start > self._cursor:
            self._builder.trivia(TriviaKind.WHITESPACE, self._source[self._cursor : start], self._cursor)
            self._cursor = start


def _tokenize_error(file_path: str, line_index: LineIndex, offset: int, detail: str) -> Diagnostic:
    position = line_index.line_col(offset)
    return Diagnostic(
        code=PARSER_TOKENIZE_ERROR.code,
        message=f"{PARSER_TOKENIZE_ERROR.message} ({detail})",
        range=TextRange.empty(TextSize(offset)),
        severity=PARSER_TOKENIZE_ERROR.severity,
        category=PARSER_TOKENIZE_ERROR.category,
        file_path=file_path,
        line=position.line if position is not None else 0,
        column=position.column if position is not None else 0,
    )
