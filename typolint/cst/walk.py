"""Pre-order traversal with per-token pruning."""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from typolint.cst.tree import SyntaxToken, SyntaxTree


class VisitDirective(Enum):
    VISIT_CHILDREN = "visit_children"
    SKIP_CHILDREN = "skip_children"


class TokenVisitor(Protocol):
    def visit(self, token: SyntaxToken) -> VisitDirective: ...


def walk(tree: SyntaxTree, visitor: TokenVisitor) -> None:
    """Visit tokens in document order, descending only where the visitor allows it."""
    stack: list[SyntaxToken] = list(reversed(tree.roots))
    while stack:
        token = stack.pop()
        if visitor.visit(token) is VisitDirective.VISIT_CHILDREN:
            stack.extend(reversed(token.children))
