"""Locale identifiers"""

import re
from typing import NamedTuple, Optional, Union

from ..pyutils import cmp

__all__ = ["LocaleId", "ROOT_LOCALE_IDS", "compare_locale_ids", "parse_locale_id"]


# identifiers that denote the locale independent root collation
ROOT_LOCALE_IDS = frozenset(["", "root", "und"])

_re_locale_id = re.compile(
    r"^(?P<language>[A-Za-z]*)"
    r"(?:[_-](?P<territory>[A-Za-z0-9]+))?"
    r"(?:\.(?P<encoding>[^@]*))?"
    r"(?:@(?P<modifier>.*))?$"
)


class LocaleId(NamedTuple):
    """The parts of a locale identifier like ``de_DE.UTF-8@euro``."""

    language: str
    territory: str = ""
    encoding: str = ""
    modifier: str = ""

    @property
    def is_root(self) -> bool:
        return self.language.lower() in ROOT_LOCALE_IDS and not self.territory

    def __str__(self) -> str:
        s = self.language
        if self.territory:
            s = f"{s}_{self.territory}"
        if self.encoding:
            s = f"{s}.{self.encoding}"
        if self.modifier:
            s = f"{s}@{self.modifier}"
        return s


def parse_locale_id(locale_id: str) -> Optional[LocaleId]:
    """Parse a POSIX or BCP 47 style locale identifier.

    Both ``pt_BR.UTF-8`` and ``pt-BR`` are understood. Returns None if the string
    does not look like a locale identifier at all.
    """
    match = _re_locale_id.match(locale_id.strip())
    if not match:
        return None
    language, territory, encoding, modifier = match.group(
        "language", "territory", "encoding", "modifier"
    )
    return LocaleId(language, territory or "", encoding or "", modifier or "")


def compare_locale_ids(a: Union[str, LocaleId], b: Union[str, LocaleId]) -> int:
    """Compare two locales by language, territory and modifier, ignoring case.

    The encoding does not take part in the comparison. Strings that cannot be
    parsed are compared as a language without further parts.
    """
    id_a = _to_locale_id(a)
    id_b = _to_locale_id(b)
    return (
        cmp(id_a.language.lower(), id_b.language.lower())
        or cmp(id_a.territory.lower(), id_b.territory.lower())
        or cmp(id_a.modifier.lower(), id_b.modifier.lower())
    )


def _to_locale_id(value: Union[str, LocaleId]) -> LocaleId:
    if isinstance(value, LocaleId):
        return value
    return parse_locale_id(value) or LocaleId(value)
