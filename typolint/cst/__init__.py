"""Token tree structures."""

from typolint.cst.builder import TreeBuilder
from typolint.cst.tree import SyntaxToken, SyntaxTree, SyntaxTriviaPiece, eof_token
from typolint.cst.walk import TokenVisitor, VisitDirective, walk

__all__ = [
    "SyntaxToken",
    "SyntaxTree",
    "SyntaxTriviaPiece",
    "TokenVisitor",
    "TreeBuilder",
    "VisitDirective",
    "eof_token",
    "walk",
]
