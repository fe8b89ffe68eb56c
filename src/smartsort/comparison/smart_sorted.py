from typing import Any, Callable, Iterable, List, Optional, TypeVar, Union

from ..collation import Collator
from .smart_comparator import SmartComparator

__all__ = ["smart_sorted"]


T = TypeVar("T")


def smart_sorted(
    values: Iterable[T],
    collator: Union[Collator, str, None] = None,
    key: Optional[Callable[[T], Any]] = None,
    reverse: bool = False,
) -> List[T]:
    """Return a new list with the values sorted in natural order.

    The collator can also be given as a locale identifier. Values that are not
    strings are compared by their string form, None sorts last.
    """
    return SmartComparator(collator).sorted(values, key=key, reverse=reverse)
