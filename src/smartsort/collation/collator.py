from typing import Protocol

from ..pyutils import cmp

__all__ = ["Collator", "collate"]


class Collator(Protocol):
    """Locale-aware ordering of text

    A collator must be safe to call from several threads at the same time.
    """

    def compare(self, a: str, b: str) -> int:
        """Return a negative, zero or positive number as a sorts before, with or
        after b."""
        ...  # pragma: no cover


def collate(collator: Collator, a: str, b: str) -> int:
    """Compare two strings with the collator, but consistent with equality.

    The plain code point order of the strings is used only when the collator
    considers them equal, so that different strings never compare as equal.
    """
    if a is b:
        return 0
    return collator.compare(a, b) or cmp(a, b)
