"""Merging and canonical ordering of translation records.

Submodules:
    table    - merge_entries (stable, last-record-wins merge)
    ordering - key order, locale order, OrderedResult construction

Python 3.13+. Zero external dependencies.
"""

from localemerge.merging.ordering import (
    LOCALE_RANKS,
    locale_sort_key,
    order_table,
    sort_keys,
    sort_locales,
)
from localemerge.merging.table import merge_entries, stable_order

__all__ = [
    "LOCALE_RANKS",
    "locale_sort_key",
    "merge_entries",
    "order_table",
    "sort_keys",
    "sort_locales",
    "stable_order",
]
