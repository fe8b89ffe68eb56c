import locale
from threading import RLock
from typing import List, Optional
from warnings import warn

from ..error import LocaleError
from .collator import Collator
from .locale_id import parse_locale_id
from .root_collator import RootCollator

__all__ = ["LocaleCollator", "get_collator", "resolve_locale_name"]


# the collation locale of the C library is shared by the whole process
_collate_lock = RLock()


def _switch_collation(name: str) -> str:
    """Activate the given collation locale and return the one that was active.

    Must be called with the lock held. Raises locale.Error if not available.
    """
    previous = locale.setlocale(locale.LC_COLLATE)
    if name != previous:
        locale.setlocale(locale.LC_COLLATE, name)
    return previous


def _probe_locale_name(name: str) -> str:
    """Get the canonical name of an installed collation locale.

    Raises locale.Error if the locale is not installed.
    """
    with _collate_lock:
        previous = locale.setlocale(locale.LC_COLLATE)
        try:
            return locale.setlocale(locale.LC_COLLATE, name)
        finally:
            locale.setlocale(locale.LC_COLLATE, previous)


def _candidate_names(locale_id: str) -> List[str]:
    parsed = parse_locale_id(locale_id)
    name = str(parsed) if parsed else locale_id
    candidates = [name]
    if parsed and parsed.territory and not parsed.encoding:
        candidates.append(f"{name}.UTF-8")
    normalized = locale.normalize(name)
    if normalized not in candidates:
        candidates.append(normalized)
    return candidates


def resolve_locale_name(locale_id: str) -> str:
    """Find the installed C library locale for the given locale identifier.

    Raises a LocaleError if no matching locale is installed.
    """
    error: Optional[Exception] = None
    for name in _candidate_names(locale_id):
        try:
            return _probe_locale_name(name)
        # setlocale() raises a ValueError for embedded null characters
        except (locale.Error, ValueError) as probe_error:
            error = probe_error
    raise LocaleError(locale_id) from error


class LocaleCollator:
    """Collator using the collation rules of an installed C library locale.

    Since the C library keeps the collation locale per process, every comparison
    activates the locale of this collator under a lock and restores the previous
    locale afterwards. The lock is only held by smartsort. Other code calling
    strcoll(), strxfrm() or setlocale() in another thread while a comparison is
    running may see the collation locale of this collator.
    """

    __slots__ = ("locale_name",)

    locale_name: str

    def __init__(self, locale_id: str) -> None:
        self.locale_name = resolve_locale_name(locale_id)

    def compare(self, a: str, b: str) -> int:
        if a == b:
            return 0
        # strcoll() rejects embedded null characters
        if "\0" in a:
            a = a.replace("\0", "")
        if "\0" in b:
            b = b.replace("\0", "")
        name = self.locale_name
        with _collate_lock:
            previous = _switch_collation(name)
            try:
                return locale.strcoll(a, b)
            finally:
                if previous != name:
                    locale.setlocale(locale.LC_COLLATE, previous)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.locale_name!r})"


def _default_collator() -> Collator:
    """Get a collator for the locale configured in the environment.

    The environment variables LC_ALL, LC_COLLATE and LANG are consulted.
    """
    try:
        resolved = _probe_locale_name("")
    except locale.Error:
        warn(
            "The locale configured in the environment is not available."
            " Falling back to the root collation.",
            RuntimeWarning,
            stacklevel=3,
        )
        return RootCollator()
    parsed = parse_locale_id(resolved)
    if parsed and parsed.is_root:
        return RootCollator()
    return LocaleCollator(resolved)


def get_collator(locale_id: Optional[str] = None) -> Collator:
    """Get a collator for the given locale identifier.

    Without an identifier, the locale configured in the environment is used. The
    identifiers "root", "und" and the empty string give the locale independent
    root collation. Other identifiers must denote an installed locale, otherwise a
    LocaleError is raised.
    """
    if locale_id is None:
        return _default_collator()
    parsed = parse_locale_id(locale_id)
    if parsed and parsed.is_root:
        return RootCollator()
    return LocaleCollator(locale_id)
