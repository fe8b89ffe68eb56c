__all__ = ["SmartSortError"]


class SmartSortError(Exception):
    """Base class for all errors raised by smartsort."""

    message: str

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"
