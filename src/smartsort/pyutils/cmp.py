from typing import Any

__all__ = ["cmp"]


def cmp(a: Any, b: Any) -> int:
    """Compare two values and return -1, 0 or 1.

    Strings are compared by code point, like the built-in comparison operators do.
    """
    return (a > b) - (a < b)
