from ..pyutils import inspect
from .smartsort_error import SmartSortError

__all__ = ["TokenPositionError"]


class TokenPositionError(SmartSortError, ValueError):
    """A scan position outside of the scanned string.

    This is a programming error: positions handed to the tokenizer must always be
    the end of a previously produced token.
    """

    value: str
    position: int

    def __init__(self, value: str, position: int) -> None:
        super().__init__(
            f"Scan position {position} is out of range"
            f" for {inspect(value)} of length {len(value)}."
        )
        self.value = value
        self.position = position
