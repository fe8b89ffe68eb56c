from enum import Enum

__all__ = ["TokenKind"]


class TokenKind(Enum):
    """The different kinds of tokens that the lexer emits"""

    EMPTY = "<EMPTY>"
    NUMERIC = "Numeric"
    TEXT = "Text"
