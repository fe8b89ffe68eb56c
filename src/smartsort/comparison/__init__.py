"""Smart Sort Comparison

The :mod:`smartsort.comparison` package compares strings in natural order.
"""

from .numeric import compare_numeric, numeric_value

from .smart_comparator import SmartComparator

from .smart_sorted import smart_sorted

__all__ = ["SmartComparator", "compare_numeric", "numeric_value", "smart_sorted"]
