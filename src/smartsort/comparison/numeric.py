from decimal import Decimal

from ..pyutils import cmp

__all__ = ["compare_numeric", "numeric_value"]


def numeric_value(literal: str) -> Decimal:
    """Get the exact value of a number as cut by the lexer.

    The literal has an optional minus sign, digits and at most one decimal point,
    e.g. ``-12``, ``.5``, ``-.5`` or ``3.``. There is no limit on the number of
    digits and no rounding.
    """
    return Decimal(literal)


def compare_numeric(a: str, b: str) -> int:
    """Compare two number literals by magnitude, then literally.

    Different spellings of the same magnitude like ``0.0`` and ``-0`` are ordered
    by their plain code point order.
    """
    return cmp(numeric_value(a), numeric_value(b)) or cmp(a, b)
