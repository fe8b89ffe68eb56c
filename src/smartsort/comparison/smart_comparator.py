from functools import cmp_to_key
from typing import Any, Callable, Iterable, List, Optional, TypeVar, Union

from ..collation import Collator, collate, get_collator
from ..language import TokenKind, next_token
from .numeric import compare_numeric

__all__ = ["SmartComparator"]


T = TypeVar("T")


class SmartComparator:
    """Compare strings in natural order.

    Numbers within the strings are compared by their magnitude, all other text is
    compared in a locale-aware manner using a collator. Thus these strings would be
    sorted in the following order with the root collation::

        1A, 2A, 10A, 11a, 11A, 12, B

    None is sorted after all strings. Strings only compare as equal when they are
    identical, even if numbers are spelled differently, like "1.0" and "1.00".

    Once the token kinds of the two strings differ at some point, the rest of both
    strings is compared by the collator as a whole.

    A comparator holds no state besides its collator and can be shared by threads
    as long as the collator can.
    """

    __slots__ = "collator", "key"

    collator: Collator
    key: Callable[[Any], Any]  # sort key for use with sorted() or list.sort()

    def __init__(self, collator: Union[Collator, str, None] = None) -> None:
        """Initialize the comparator with a collator.

        Instead of a collator, a locale identifier can be passed. Without a
        collator, the collation of the locale set in the environment is used.
        """
        if collator is None or isinstance(collator, str):
            collator = get_collator(collator)
        self.collator = collator
        self.key = cmp_to_key(self.compare_objects)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.collator!r}>"

    def __call__(self, a: Optional[str], b: Optional[str]) -> int:
        return self.compare(a, b)

    def compare(self, a: Optional[str], b: Optional[str]) -> int:
        """Compare two strings in natural order.

        Returns a negative number, zero or a positive number as the first string
        sorts before, together with or after the second string.
        """
        # put all Nones after the strings
        if a is None:
            return 0 if b is None else 1
        if b is None:
            return -1

        collator = self.collator
        len_a, len_b = len(a), len(b)
        pos_a = pos_b = 0
        while pos_a < len_a or pos_b < len_b:
            token_a = next_token(a, pos_a)
            token_b = next_token(b, pos_b)
            kind = token_a.kind
            if kind != token_b.kind:
                # the rest of the strings decides once the kinds differ
                return collate(collator, token_a.remainder, token_b.remainder)
            if kind == TokenKind.EMPTY:
                return 0
            value_a, value_b = token_a.value, token_b.value
            if kind == TokenKind.NUMERIC:
                diff = compare_numeric(value_a, value_b)
            else:
                diff = collate(collator, value_a, value_b)
            if diff:
                return diff
            pos_a, pos_b = token_a.end, token_b.end
        return 0

    def compare_objects(self, a: Any, b: Any) -> int:
        """Compare arbitrary objects in natural order of their string form."""
        return self.compare(
            None if a is None else str(a), None if b is None else str(b)
        )

    def sort(
        self,
        values: List[T],
        key: Optional[Callable[[T], Any]] = None,
        reverse: bool = False,
    ) -> None:
        """Sort a list in place in natural order.

        If a key function is given, the values it returns are compared instead.
        """
        sort_key = self.key
        if key:
            sort_key = _chain_keys(key, sort_key)
        values.sort(key=sort_key, reverse=reverse)

    def sorted(
        self,
        values: Iterable[T],
        key: Optional[Callable[[T], Any]] = None,
        reverse: bool = False,
    ) -> List[T]:
        """Return a new list with the values sorted in natural order."""
        sorted_values = list(values)
        self.sort(sorted_values, key=key, reverse=reverse)
        return sorted_values


def _chain_keys(
    key: Callable[[Any], Any], sort_key: Callable[[Any], Any]
) -> Callable[[Any], Any]:
    def chained_key(value: Any) -> Any:
        return sort_key(key(value))

    return chained_key
