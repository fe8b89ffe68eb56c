"""Smart Sort Errors

The :mod:`smartsort.error` package contains the exceptions raised by the tokenizer
and by the resolution of collators.
"""

from .smartsort_error import SmartSortError

from .token_position_error import TokenPositionError

from .locale_error import LocaleError

__all__ = ["LocaleError", "SmartSortError", "TokenPositionError"]
