"""Token visitor that spell checks comments and token text."""

from __future__ import annotations

from typolint.cst import SyntaxToken, VisitDirective
from typolint.diagnostics import DiagnosticReporter
from typolint.lint.options import SpellcheckOptions
from typolint.spelling import SpellingOracle, is_suppressed, normalize


class SpellVisitor:
    """Checks one file; holds no state between tokens beyond its collaborators.

    Per token:
    - each comment (leading, then same-line trailing) is checked on its own; a suppression
      marker stops work on the token and prunes its subtree;
    - text-bearing tokens (literals, identifiers, unknown text) have their own text checked.

    Only the first misspelling of each text fragment is reported. Comment findings are placed
    at the token after its trivia, token-text findings at the token start including trivia.
    """

    def __init__(
        self,
        oracle: SpellingOracle,
        reporter: DiagnosticReporter,
        options: SpellcheckOptions | None = None,
    ) -> None:
        self._oracle = oracle
        self._reporter = reporter
        self._options = options if options is not None else SpellcheckOptions()

    def visit(self, token: SyntaxToken) -> VisitDirective:
        for comment in token.comments():
            if is_suppressed(comment, self._options.suppression_marker):
                return VisitDirective.SKIP_CHILDREN
            if self._options.check_comments:
                self._check(comment, token.offset)

        if self._options.check_tokens and token.kind.is_checkable:
            self._check(token.text, token.start)

        return VisitDirective.VISIT_CHILDREN

    def _check(self, raw: str, offset: int) -> None:
        text = normalize(raw)
        misspelled = self._oracle.first_misspelling(text, 0)
        if misspelled is not None and misspelled.start.value < len(text):
            self._reporter.report(offset, text, misspelled)
        # TODO: resume from misspelled.end to report every misspelling in the fragment
