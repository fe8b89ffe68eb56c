"""Smart Sort Language

The :mod:`smartsort.language` package is responsible for cutting strings into
numeric and textual tokens.
"""

from .token_kind import TokenKind

from .tokens import Token

from .lexer import Lexer, next_token, tokenize

__all__ = ["Lexer", "Token", "TokenKind", "next_token", "tokenize"]
