"""Immutable token tree with leading and trailing trivia."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from typolint.syntax import SyntaxKind, TriviaKind
from typolint.text import TextRange, TextSize


@dataclass(frozen=True, slots=True)
class SyntaxTriviaPiece:
    kind: TriviaKind
    text: str
    offset: int

    @property
    def range(self) -> TextRange:
        return TextRange.at(TextSize(self.offset), TextSize.of(self.text))


@dataclass(frozen=True, slots=True)
class SyntaxToken:
    """A token node.

    `offset` is where the token text starts, after its leading trivia. `children` are the
    tokens nested under this one (bracket contents, the rest of a logical line, an indented
    block) in document order. `trailing_trivia` holds comments written after code on the
    same physical line; they annotate the logical line, so they hang off its head.
    """

    kind: SyntaxKind
    text: str
    offset: int
    leading_trivia: tuple[SyntaxTriviaPiece, ...] = ()
    trailing_trivia: tuple[SyntaxTriviaPiece, ...] = ()
    children: tuple[SyntaxToken, ...] = ()

    @property
    def start(self) -> int:
        """Offset of the token including its leading trivia."""
        if self.leading_trivia:
            return self.leading_trivia[0].offset
        return self.offset

    @property
    def end(self) -> int:
        return self.offset + len(self.text)

    @property
    def range(self) -> TextRange:
        return TextRange(self.offset, self.end)

    @property
    def leading_trivia_text(self) -> str:
        return "".join(piece.text for piece in self.leading_trivia)

    def comments(self) -> tuple[str, ...]:
        """Leading comments in order, then same-line trailing comments."""
        return tuple(
            piece.text
            for piece in (*self.leading_trivia, *self.trailing_trivia)
            if piece.kind == TriviaKind.COMMENT
        )

    def descendants(self) -> Iterator[SyntaxToken]:
        """Yield this token and every nested token in document order."""
        stack: list[SyntaxToken] = [self]
        while stack:
            token = stack.pop()
            yield token
            stack.extend(reversed(token.children))


@dataclass(frozen=True, slots=True)
class SyntaxTree:
    """Root of a parsed file.

    The `eof` token owns any comments that trail the last real token.
    """

    source: str
    tokens: tuple[SyntaxToken, ...]
    eof: SyntaxToken

    @property
    def roots(self) -> tuple[SyntaxToken, ...]:
        return (*self.tokens, self.eof)

    def descendants(self) -> Iterator[SyntaxToken]:
        for root in self.roots:
            yield from root.descendants()

    @property
    def text_with_trivia(self) -> str:
        """Rebuild the source from tokens and trivia (useful for losslessness checks)."""
        # trailing trivia sits after later tokens of its line, so order pieces by offset
        pieces: list[tuple[int, str]] = []
        for token in self.descendants():
            pieces.extend((piece.offset, piece.text) for piece in token.leading_trivia)
            pieces.append((token.offset, token.text))
            pieces.extend((piece.offset, piece.text) for piece in token.trailing_trivia)
        return "".join(text for _, text in sorted(pieces, key=lambda piece: piece[0]))


def eof_token(offset: int, leading_trivia: tuple[SyntaxTriviaPiece, ...] = ()) -> SyntaxToken:
    return SyntaxToken(kind=SyntaxKind.EOF, text="", offset=offset, leading_trivia=leading_trivia)
