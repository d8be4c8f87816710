"""Token and trivia vocabulary for the syntax tree."""

from enum import IntEnum


class SyntaxKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1

    # -------------------------
    # Text-bearing tokens (spell checked)
    # -------------------------
    STRING_LITERAL = 20
    UNKNOWN = 21
    IDENTIFIER = 22
    DOLLAR_IDENTIFIER = 23  # `$name`
    STRING_SEGMENT = 24  # literal part of an f-string / t-string

    # -------------------------
    # Everything else
    # -------------------------
    KEYWORD = 30
    NUMBER = 31
    OPERATOR = 32
    STRING_DELIMITER = 33  # f-string / t-string start and end

    @property
    def is_checkable(self) -> bool:
        match self:
            case (
                SyntaxKind.STRING_LITERAL
                | SyntaxKind.UNKNOWN
                | SyntaxKind.IDENTIFIER
                | SyntaxKind.DOLLAR_IDENTIFIER
                | SyntaxKind.STRING_SEGMENT
            ):
                return True
            case _:
                return False


class TriviaKind(IntEnum):
    """The trivia vocabulary (separate from SyntaxKind for type-safety)."""

    WHITESPACE = 1
    NEWLINE = 2
    COMMENT = 3
