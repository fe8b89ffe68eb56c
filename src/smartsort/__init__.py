"""Smart Sort

Compare and sort strings in natural order: numbers within the strings are compared
by their magnitude, so that "item2" sorts before "item10", and all other text is
compared in a locale-aware manner.

The smartsort package is organized into the following sub-packages:

  - `smartsort.language`: Cut strings into numeric and textual tokens.
  - `smartsort.collation`: Locale-aware ordering of the textual tokens.
  - `smartsort.comparison`: The natural order comparator and sort helpers.
  - `smartsort.error`: Errors raised by smartsort.

The most important names are also exported at the top level.
"""

# The smartsort version
from .version import version, version_info

# The comparator and sort helpers
from .comparison import SmartComparator, compare_numeric, smart_sorted

# Collators
from .collation import (
    Collator,
    LocaleCollator,
    RootCollator,
    collate,
    compare_ignore_case_consistent_with_equals,
    compare_locale_ids,
    get_collator,
)

# The tokenizer
from .language import Lexer, Token, TokenKind, next_token, tokenize

# Errors
from .error import LocaleError, SmartSortError, TokenPositionError

__version__ = version
__version_info__ = version_info

__all__ = [
    "version",
    "version_info",
    "SmartComparator",
    "compare_numeric",
    "smart_sorted",
    "Collator",
    "LocaleCollator",
    "RootCollator",
    "collate",
    "compare_ignore_case_consistent_with_equals",
    "compare_locale_ids",
    "get_collator",
    "Lexer",
    "Token",
    "TokenKind",
    "next_token",
    "tokenize",
    "LocaleError",
    "SmartSortError",
    "TokenPositionError",
]
