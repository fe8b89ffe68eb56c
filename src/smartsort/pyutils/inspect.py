from typing import Any

__all__ = ["inspect"]

max_str_size = 240


def inspect(value: Any) -> str:
    """Inspect value and a return string representation for error messages.

    Used to print the scanned strings and locale identifiers in error messages.
    Overly large strings are truncated so that they do not flood the message.
    """
    return trunc_str(repr(value))


def trunc_str(s: str) -> str:
    """Truncate strings to maximum length."""
    if len(s) > max_str_size:
        i = max(0, (max_str_size - 3) // 2)
        j = max(0, max_str_size - 3 - i)
        s = s[:i] + "..." + s[-j:]
    return s
