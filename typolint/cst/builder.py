"""Incremental tree builder used by parser front-ends."""

from __future__ import annotations

from dataclasses import dataclass, field

from typolint.cst.tree import SyntaxToken, SyntaxTree, SyntaxTriviaPiece, eof_token
from typolint.syntax import SyntaxKind, TriviaKind

_OPENING_BRACKETS = frozenset("([{")
_CLOSING_BRACKETS = frozenset(")]}")


@dataclass(slots=True)
class _PendingToken:
    kind: SyntaxKind
    text: str
    offset: int
    leading_trivia: tuple[SyntaxTriviaPiece, ...]
    trailing_trivia: list[SyntaxTriviaPiece] = field(default_factory=list)
    children: list[_PendingToken] = field(default_factory=list)

    def freeze(self) -> SyntaxToken:
        return SyntaxToken(
            kind=self.kind,
            text=self.text,
            offset=self.offset,
            leading_trivia=self.leading_trivia,
            trailing_trivia=tuple(self.trailing_trivia),
            children=tuple(child.freeze() for child in self.children),
        )


class TreeBuilder:
    """Shapes a flat token stream into a token tree.

    Nesting rules:
    - the first token of a logical line owns the rest of that line;
    - an opening bracket owns everything up to and including its closing bracket;
    - an indented block belongs to the first token of the line that introduced it.

    Trivia is buffered and attached as leading trivia of the next token, except a comment that
    follows code on the same physical line: it becomes trailing trivia of the logical line's
    head, so a marker there annotates the line it is written on.
    """

    def __init__(self) -> None:
        self._roots: list[_PendingToken] = []
        self._blocks: list[list[_PendingToken]] = [self._roots]
        self._brackets: list[_PendingToken] = []
        self._line_head: _PendingToken | None = None
        self._last_line_head: _PendingToken | None = None
        self._trivia: list[SyntaxTriviaPiece] = []
        self._code_on_line = False

    def trivia(self, kind: TriviaKind, text: str, offset: int) -> None:
        if not text:
            return
        piece = SyntaxTriviaPiece(kind=kind, text=text, offset=offset)
        if kind == TriviaKind.COMMENT and self._code_on_line and self._line_head is not None:
            # whitespace buffered since the last token is on this line too
            self._line_head.trailing_trivia.extend(self._trivia)
            self._line_head.trailing_trivia.append(piece)
            self._trivia.clear()
            return
        if kind == TriviaKind.NEWLINE:
            self._code_on_line = False
        self._trivia.append(piece)

    def token(self, kind: SyntaxKind, text: str, offset: int) -> None:
        token = _PendingToken(
            kind=kind,
            text=text,
            offset=offset,
            leading_trivia=tuple(self._trivia),
        )
        self._trivia.clear()
        self._code_on_line = True

        if self._brackets:
            self._brackets[-1].children.append(token)
        elif self._line_head is None:
            self._blocks[-1].append(token)
            self._line_head = token
        else:
            self._line_head.children.append(token)

        if kind == SyntaxKind.OPERATOR:
            if text in _OPENING_BRACKETS:
                self._brackets.append(token)
            elif text in _CLOSING_BRACKETS and self._brackets:
                self._brackets.pop()

    def end_logical_line(self) -> None:
        if self._line_head is not None:
            self._last_line_head = self._line_head
        self._line_head = None
        self._brackets.clear()

    def start_block(self) -> None:
        owner = self._last_line_head
        self._blocks.append(owner.children if owner is not None else self._blocks[-1])

    def finish_block(self) -> None:
        if len(self._blocks) > 1:
            self._blocks.pop()

    def finish(self, source: str, eof_offset: int) -> SyntaxTree:
        eof = eof_token(eof_offset, tuple(self._trivia))
        self._trivia.clear()
        return SyntaxTree(
            source=source,
            tokens=tuple(token.freeze() for token in self._roots),
            eof=eof,
        )
