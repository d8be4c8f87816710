"""Syntax kinds."""

from typolint.syntax.kind import SyntaxKind, TriviaKind

__all__ = [
    "SyntaxKind",
    "TriviaKind",
]
