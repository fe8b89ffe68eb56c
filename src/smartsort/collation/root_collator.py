from typing import Tuple
from unicodedata import combining, normalize

from ..pyutils import cmp
from .collator import collate

__all__ = [
    "RootCollator",
    "collation_key",
    "compare_ignore_case_consistent_with_equals",
]


CollationKey = Tuple[str, Tuple[str, ...], Tuple[bool, ...]]


def collation_key(text: str) -> CollationKey:
    """Get the sort key of a string for the locale independent root collation.

    The key has three levels that are compared one after another: the case-folded
    base characters, the accents attached to each base character, and the case of
    each base character (lowercase sorts before uppercase).
    """
    base_chars = []
    accents = []
    cases = []
    for char in normalize("NFD", text):
        if accents and combining(char):
            accents[-1] += char
        else:
            base_chars.append(char.casefold())
            accents.append("")
            cases.append(char != char.lower())
    return "".join(base_chars), tuple(accents), tuple(cases)


class RootCollator:
    """Collator that does not depend on any locale settings of the platform.

    Ignores case and accents at first, then puts unaccented before accented and
    lowercase before uppercase characters. Gives the same order everywhere.
    """

    __slots__ = ()

    def compare(self, a: str, b: str) -> int:
        if a == b:
            return 0
        return cmp(collation_key(a), collation_key(b))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


_root_collator = RootCollator()


def compare_ignore_case_consistent_with_equals(a: str, b: str) -> int:
    """Compare two strings in a root locale, case-insensitive manner.

    Different strings never compare as equal, the plain code point order decides
    when the root collation sees no difference.
    """
    return collate(_root_collator, a, b)
