"""Merging of parsed entries into a single translation table.

Entries arrive from concurrent parse units in completion order, which is
scheduler-dependent. They are merged in a stable order instead: archive
submission index, then entry path, then record position. When the same
(key, locale) pair is produced more than once, the record merged last wins,
so the winner is reproducible across runs.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from operator import attrgetter

from localemerge.diagnostics import NoDataFoundError
from localemerge.model import ParsedEntry
from localemerge.types import MergedTable

__all__ = ["merge_entries", "stable_order"]

logger = logging.getLogger(__name__)


def stable_order(entries: Iterable[ParsedEntry]) -> list[ParsedEntry]:
    """Return entries sorted into deterministic merge order."""
    return sorted(entries, key=attrgetter("merge_order"))


def merge_entries(entries: Iterable[ParsedEntry]) -> MergedTable:
    """Accumulate parsed entries into ``table[key][locale] = value``.

    Args:
        entries: Every parsed entry of the batch, in any order

    Returns:
        Merged table; every key has at least one locale value

    Raises:
        NoDataFoundError: If ``entries`` is empty (no archive contained a
            recognizable locale file)
    """
    ordered = stable_order(entries)
    if not ordered:
        raise NoDataFoundError

    table: MergedTable = {}
    for entry in ordered:
        for record in entry.records:
            locales = table.setdefault(record.key, {})
            if entry.locale in locales:
                logger.debug(
                    "Key %r for %s overridden by %r in %r",
                    record.key,
                    entry.locale,
                    entry.path,
                    entry.archive_name,
                )
            locales[entry.locale] = record.value

    logger.debug("Merged %d entries into %d keys", len(ordered), len(table))
    return table
