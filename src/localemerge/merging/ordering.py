"""Canonical ordering of translation keys and locale tags.

Key order is plain code-point order over the raw key string. Locale
collation is never used, so output does not depend on host locale settings.

Locale order is driven by a static rank table:
    1. PRIMARY_LOCALE is always first
    2. Tags listed in LOCALE_PRIORITY follow, by rank
    3. Unlisted tags come last, by plain string comparison

The sort key is a tuple, which makes the order strict and reproducible for
any set of distinct tags.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, Mapping
from types import MappingProxyType

from localemerge.constants import LOCALE_PRIORITY, PRIMARY_LOCALE
from localemerge.model import OrderedResult, TranslationRow
from localemerge.types import LocaleTag, MergedTable, TranslationKey

__all__ = [
    "LOCALE_RANKS",
    "locale_sort_key",
    "order_table",
    "sort_keys",
    "sort_locales",
]

LOCALE_RANKS: Mapping[LocaleTag, int] = MappingProxyType(
    {tag: rank for rank, tag in enumerate(LOCALE_PRIORITY) if tag != PRIMARY_LOCALE}
)

_PRIMARY, _LISTED, _UNLISTED = 0, 1, 2


def locale_sort_key(tag: LocaleTag) -> tuple[int, int, str]:
    """Sort key implementing the canonical locale order.

    Example:
        >>> sorted(["zz-ZZ", "fr-FR", "en-US", "de-DE", "aa"], key=locale_sort_key)
        ['en-US', 'de-DE', 'fr-FR', 'aa', 'zz-ZZ']
    """
    if tag == PRIMARY_LOCALE:
        return (_PRIMARY, 0, tag)
    rank = LOCALE_RANKS.get(tag)
    if rank is not None:
        return (_LISTED, rank, tag)
    return (_UNLISTED, 0, tag)


def sort_locales(tags: Iterable[LocaleTag]) -> tuple[LocaleTag, ...]:
    """Return distinct tags in canonical locale order."""
    return tuple(sorted(set(tags), key=locale_sort_key))


def sort_keys(keys: Iterable[TranslationKey]) -> list[TranslationKey]:
    """Return keys in ascending code-point order."""
    return sorted(keys)


def order_table(
    table: MergedTable,
    locales: Collection[LocaleTag] | None = None,
) -> OrderedResult:
    """Build the ordered result from a merged table.

    Args:
        table: key -> (locale -> value)
        locales: Locales to consider; defaults to every locale in the table.
            Order of this argument is irrelevant.

    Returns:
        Rows sorted by key, each with only the locales present for that key
        in canonical order.
    """
    if locales is None:
        locales = {locale for values in table.values() for locale in values}
    ordered_locales = sort_locales(locales)
    rows = []
    for key in sort_keys(table):
        values = table[key]
        rows.append(
            TranslationRow(
                key=key,
                values=tuple(
                    (locale, values[locale]) for locale in ordered_locales if locale in values
                ),
            )
        )
    return tuple(rows)
