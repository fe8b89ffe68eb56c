from ..pyutils import inspect
from .smartsort_error import SmartSortError

__all__ = ["LocaleError"]


class LocaleError(SmartSortError, ValueError):
    """A locale identifier that cannot be resolved to a collator."""

    locale_id: str

    def __init__(self, locale_id: str) -> None:
        super().__init__(f"Locale {inspect(locale_id)} is not available.")
        self.locale_id = locale_id
