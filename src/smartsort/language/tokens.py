from typing import NamedTuple

from .token_kind import TokenKind

__all__ = ["Token"]


class Token(NamedTuple):
    """Lexical token

    Represents a range of characters within the scanned string. Only the offsets are
    stored, the characters themselves are sliced from the source on demand.
    """

    kind: TokenKind  # the kind of token
    source: str  # the string the token was cut from
    begin: int  # the character offset at which this token begins
    end: int  # the character offset at which this token ends (exclusive)

    @property
    def value(self) -> str:
        """The characters covered by the token."""
        return self.source[self.begin : self.end]

    @property
    def remainder(self) -> str:
        """The rest of the source, starting at the beginning of the token."""
        return self.source[self.begin :]

    @property
    def desc(self) -> str:
        """A helper property to describe a token as a string for debugging"""
        kind = self.kind
        return f"{kind.value} {self.value!r}" if kind != TokenKind.EMPTY else kind.value

    def __str__(self) -> str:
        return self.desc

    def __repr__(self) -> str:
        """Print a simplified form when appearing in repr()."""
        return f"<Token {self.desc} {self.begin}:{self.end}>"
