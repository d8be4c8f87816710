from typolint.cst import SyntaxToken, SyntaxTree, VisitDirective, eof_token, walk
from typolint.syntax import SyntaxKind


def _token(text: str, offset: int, *children: SyntaxToken) -> SyntaxToken:
    return SyntaxToken(kind=SyntaxKind.IDENTIFIER, text=text, offset=offset, children=children)


def _tree() -> SyntaxTree:
    inner = _token("inner", 10, _token("leaf", 20))
    outer = _token("outer", 0, inner, _token("sibling", 30))
    return SyntaxTree(source="", tokens=(outer, _token("after", 40)), eof=eof_token(50))


class _Recorder:
    def __init__(self, prune: frozenset[str] = frozenset()) -> None:
        self.visited: list[str] = []
        self._prune = prune

    def visit(self, token: SyntaxToken) -> VisitDirective:
        self.visited.append(token.text)
        if token.text in self._prune:
            return VisitDirective.SKIP_CHILDREN
        return VisitDirective.VISIT_CHILDREN


def test_walk_visits_every_token_once_in_document_order() -> None:
    recorder = _Recorder()
    walk(_tree(), recorder)

    assert recorder.visited == ["outer", "inner", "leaf", "sibling", "after", ""]


def test_skip_children_prunes_only_that_subtree() -> None:
    recorder = _Recorder(prune=frozenset({"inner"}))
    walk(_tree(), recorder)

    assert recorder.visited == ["outer", "inner", "sibling", "after", ""]


def test_skip_at_root_token_prunes_everything_below_it() -> None:
    recorder = _Recorder(prune=frozenset({"outer"}))
    walk(_tree(), recorder)

    assert recorder.visited == ["outer", "after", ""]


def test_descendants_ignore_pruning() -> None:
    assert [token.text for token in _tree().descendants()] == [
        "outer",
        "inner",
        "leaf",
        "sibling",
        "after",
        "",
    ]
