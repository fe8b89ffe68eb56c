"""Smart Sort Collation

The :mod:`smartsort.collation` package provides the locale-aware ordering of text
that is used to compare the non-numeric parts of strings.
"""

from .collator import Collator, collate

from .root_collator import (
    RootCollator,
    collation_key,
    compare_ignore_case_consistent_with_equals,
)

from .locale_collator import LocaleCollator, get_collator, resolve_locale_name

from .locale_id import LocaleId, ROOT_LOCALE_IDS, compare_locale_ids, parse_locale_id

__all__ = [
    "Collator",
    "LocaleCollator",
    "LocaleId",
    "ROOT_LOCALE_IDS",
    "RootCollator",
    "collate",
    "collation_key",
    "compare_ignore_case_consistent_with_equals",
    "compare_locale_ids",
    "get_collator",
    "parse_locale_id",
    "resolve_locale_name",
]
