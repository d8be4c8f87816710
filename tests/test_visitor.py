from typolint.cst import SyntaxToken, SyntaxTree, SyntaxTriviaPiece, eof_token, walk
from typolint.diagnostics import CollectingSink, Diagnostic, DiagnosticReporter
from typolint.lint import SpellcheckOptions, SpellVisitor
from typolint.syntax import SyntaxKind, TriviaKind
from typolint.text import LineIndex


def _comment(text: str, offset: int) -> SyntaxTriviaPiece:
    return SyntaxTriviaPiece(kind=TriviaKind.COMMENT, text=text, offset=offset)


def _newline(offset: int) -> SyntaxTriviaPiece:
    return SyntaxTriviaPiece(kind=TriviaKind.NEWLINE, text="\n", offset=offset)


def _check(
    oracle,
    source: str,
    tokens: tuple[SyntaxToken, ...],
    options: SpellcheckOptions | None = None,
) -> list[Diagnostic]:
    sink = CollectingSink()
    reporter = DiagnosticReporter("sample.py", LineIndex(source), oracle, sink)
    tree = SyntaxTree(source=source, tokens=tokens, eof=eof_token(len(source)))
    walk(tree, SpellVisitor(oracle, reporter, options))
    return sink.diagnostics


def test_only_text_bearing_kinds_are_checked(oracle) -> None:
    checked = [
        SyntaxKind.STRING_LITERAL,
        SyntaxKind.UNKNOWN,
        SyntaxKind.IDENTIFIER,
        SyntaxKind.DOLLAR_IDENTIFIER,
        SyntaxKind.STRING_SEGMENT,
    ]
    unchecked = [
        SyntaxKind.KEYWORD,
        SyntaxKind.NUMBER,
        SyntaxKind.OPERATOR,
        SyntaxKind.STRING_DELIMITER,
    ]
    tokens = tuple(
        SyntaxToken(kind=kind, text="recieve", offset=0) for kind in (*checked, *unchecked)
    )

    diagnostics = _check(oracle, "recieve", tokens)

    assert len(diagnostics) == len(checked)
    assert oracle.queries == ["recieve"] * len(checked)


def test_dollar_identifier_text_is_segmented(oracle) -> None:
    token = SyntaxToken(kind=SyntaxKind.DOLLAR_IDENTIFIER, text="$recieveData", offset=0)

    (diagnostic,) = _check(oracle, "$recieveData", (token,))

    assert oracle.queries == ["$recieve Data"]
    assert diagnostic.message == '"recieve": did you mean "receive"? (CheckSpelling)'


def test_comment_findings_use_position_after_trivia_and_token_findings_before(oracle) -> None:
    source = "# fien\nrecieve"
    token = SyntaxToken(
        kind=SyntaxKind.IDENTIFIER,
        text="recieve",
        offset=7,
        leading_trivia=(_comment("# fien", 0), _newline(6)),
    )

    comment_finding, token_finding = _check(oracle, source, (token,))

    assert comment_finding.message == '"fien": did you mean "fine"? (CheckSpelling)'
    assert (comment_finding.line, comment_finding.column) == (2, 1)
    assert token_finding.message == '"recieve": did you mean "receive"? (CheckSpelling)'
    assert (token_finding.line, token_finding.column) == (1, 1)


def test_each_comment_reports_its_own_first_misspelling(oracle) -> None:
    source = "# fien\n# wrod\nx"
    token = SyntaxToken(
        kind=SyntaxKind.OPERATOR,
        text="x",
        offset=14,
        leading_trivia=(_comment("# fien", 0), _newline(6), _comment("# wrod", 7), _newline(13)),
    )

    diagnostics = _check(oracle, source, (token,))

    assert [d.message for d in diagnostics] == [
        '"fien": did you mean "fine"? (CheckSpelling)',
        '"wrod": did you mean "word"? (CheckSpelling)',
    ]


def test_only_first_misspelling_of_a_fragment_is_reported(oracle) -> None:
    token = SyntaxToken(kind=SyntaxKind.STRING_LITERAL, text="'fien and wrod'", offset=0)

    diagnostics = _check(oracle, "'fien and wrod'", (token,))

    assert [d.message for d in diagnostics] == ['"fien": did you mean "fine"? (CheckSpelling)']
    assert oracle.queries == ["'fien and wrod'"]


def test_missing_suggestion_omits_the_clause(oracle) -> None:
    token = SyntaxToken(kind=SyntaxKind.IDENTIFIER, text="typo", offset=0)

    (diagnostic,) = _check(oracle, "typo", (token,))

    assert diagnostic.message == '"typo" (CheckSpelling)'


def test_suppression_prunes_subtree_and_remaining_checks(oracle) -> None:
    source = "# fien\n# spellcheck:disable:this\n# wrod\nrecieve recieve"
    child = SyntaxToken(kind=SyntaxKind.IDENTIFIER, text="recieve", offset=48)
    head = SyntaxToken(
        kind=SyntaxKind.IDENTIFIER,
        text="recieve",
        offset=40,
        leading_trivia=(
            _comment("# fien", 0),
            _newline(6),
            _comment("# spellcheck:disable:this", 7),
            _newline(32),
            _comment("# wrod", 33),
            _newline(39),
        ),
        children=(child,),
    )

    diagnostics = _check(oracle, source, (head,))

    # comments before the marker were already checked
    assert [d.message for d in diagnostics] == ['"fien": did you mean "fine"? (CheckSpelling)']


def test_reporting_a_finding_still_descends_into_children(oracle) -> None:
    child = SyntaxToken(kind=SyntaxKind.IDENTIFIER, text="wrod", offset=8)
    head = SyntaxToken(kind=SyntaxKind.IDENTIFIER, text="recieve", offset=0, children=(child,))

    diagnostics = _check(oracle, "recieve wrod", (head,))

    assert [(d.line, d.column) for d in diagnostics] == [(1, 1), (1, 9)]


def test_disabled_comment_checks_still_honor_suppression(oracle) -> None:
    options = SpellcheckOptions(check_comments=False)
    suppressed = SyntaxToken(
        kind=SyntaxKind.IDENTIFIER,
        text="recieve",
        offset=26,
        leading_trivia=(_comment("# spellcheck:disable:this", 0), _newline(25)),
    )
    commented = SyntaxToken(
        kind=SyntaxKind.IDENTIFIER,
        text="wrod",
        offset=41,
        leading_trivia=(_newline(33), _comment("# fien", 34), _newline(40)),
    )
    source = "# spellcheck:disable:this\nrecieve\n# fien\nwrod"

    diagnostics = _check(oracle, source, (suppressed, commented), options)

    assert [d.message for d in diagnostics] == ['"wrod": did you mean "word"? (CheckSpelling)']


def test_disabled_token_checks_keep_comment_checks(oracle) -> None:
    options = SpellcheckOptions(check_tokens=False)
    token = SyntaxToken(
        kind=SyntaxKind.IDENTIFIER,
        text="recieve",
        offset=7,
        leading_trivia=(_comment("# fien", 0), _newline(6)),
    )

    diagnostics = _check(oracle, "# fien\nrecieve", (token,), options)

    assert [d.message for d in diagnostics] == ['"fien": did you mean "fine"? (CheckSpelling)']


def test_custom_suppression_marker(oracle) -> None:
    options = SpellcheckOptions(suppression_marker="typolint: ignore")
    token = SyntaxToken(
        kind=SyntaxKind.IDENTIFIER,
        text="recieve",
        offset=19,
        leading_trivia=(_comment("# typolint: ignore", 0), _newline(18)),
    )

    assert _check(oracle, "# typolint: ignore\nrecieve", (token,), options) == []
