from typing import Iterator, List, Optional, Tuple

from ..error import TokenPositionError
from .character_classes import is_decimal_point, is_digit, is_sign
from .token_kind import TokenKind
from .tokens import Token

__all__ = ["Lexer", "next_token", "tokenize"]


def read_numeric_prefix(value: str, position: int) -> Tuple[int, bool]:
    """Check whether a number starts at the given position.

    A number may start with a digit, a decimal point followed by a digit, a minus
    sign followed by a digit, or a minus sign and a decimal point followed by a
    digit. Returns the length of that prefix (zero if no number starts here) and
    whether the prefix already used up the decimal point.
    """
    char = value[position : position + 1]
    if is_digit(char):
        return 1, False
    if is_sign(char):
        position += 1
        char = value[position : position + 1]
        if is_digit(char):
            return 2, False
        if is_decimal_point(char) and is_digit(value[position + 1 : position + 2]):
            return 3, True
    elif is_decimal_point(char) and is_digit(value[position + 1 : position + 2]):
        return 2, True
    return 0, False


def read_number(value: str, start: int, prefix_length: int, dot_used: bool) -> int:
    """Find the end of the number starting at the given position.

    Digits are consumed greedily, as well as at most one decimal point in the whole
    number. A second decimal point ends the number.
    """
    body_length = len(value)
    position = start + prefix_length
    while position < body_length:
        char = value[position]
        if is_decimal_point(char):
            if dot_used:
                break
            dot_used = True
        elif not is_digit(char):
            break
        position += 1
    return position


def next_token(value: str, pos: int) -> Token:
    """Get the next token from the string starting at the given position.

    Returns a NUMERIC token if a number starts right at the position, otherwise a
    TEXT token reaching up to the start of the next number or the end of the string.
    At the end of the string, an EMPTY token is returned.
    """
    body_length = len(value)
    if not 0 <= pos <= body_length:
        raise TokenPositionError(value, pos)
    if pos == body_length:
        return Token(TokenKind.EMPTY, value, pos, pos)

    prefix_length, dot_used = read_numeric_prefix(value, pos)
    if prefix_length:
        end = read_number(value, pos, prefix_length, dot_used)
        return Token(TokenKind.NUMERIC, value, pos, end)

    position = pos + 1
    while position < body_length:
        if read_numeric_prefix(value, position)[0]:
            break
        position += 1
    return Token(TokenKind.TEXT, value, pos, position)


class Lexer:
    """Smart Sort Lexer

    A Lexer is a stateful stream generator in that every time it is advanced, it
    returns the next token in the scanned string. The final token emitted by the
    lexer is of kind EMPTY, after which the lexer will repeatedly return the same
    EMPTY token whenever called.
    """

    def __init__(self, value: str, position: int = 0):
        """Given a string and a start position, initialize a Lexer for that string."""
        if not isinstance(value, str):
            raise TypeError("Only strings can be tokenized.")
        if not 0 <= position <= len(value):
            raise TokenPositionError(value, position)
        self.value = value
        self.position = position
        self.token: Optional[Token] = None

    def advance(self) -> Token:
        """Advance the token stream to the next token."""
        token = self.token = self.lookahead()
        self.position = token.end
        return token

    def lookahead(self) -> Token:
        """Look ahead and return the next token, but do not change state."""
        return next_token(self.value, self.position)

    def __iter__(self) -> Iterator[Token]:
        """Iterate over the remaining tokens, ending with the EMPTY token."""
        while True:
            token = self.advance()
            yield token
            if token.kind == TokenKind.EMPTY:
                break


def tokenize(value: str, position: int = 0) -> List[Token]:
    """Cut the given string into all of its tokens.

    The returned list always ends with exactly one token of kind EMPTY.
    """
    return list(Lexer(value, position))
