"""CSV rendering of a single locale.

Output layout:
    - UTF-8 byte-order mark first, so spreadsheet tools detect the encoding
    - Header row "Key","Value"
    - Every field quoted, embedded quotes doubled
    - LF line terminator on every row
    - Missing values render as an empty field

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable

from localemerge.model import OrderedResult
from localemerge.types import LocaleTag

__all__ = [
    "CSV_HEADER",
    "UTF8_BOM",
    "locale_pairs",
    "render_csv",
    "render_locale_csv",
]

UTF8_BOM = "\ufeff"
CSV_HEADER: tuple[str, str] = ("Key", "Value")


def locale_pairs(rows: OrderedResult, locale: LocaleTag) -> list[tuple[str, str]]:
    """Return (key, value) pairs present for ``locale``, in key order."""
    pairs = []
    for row in rows:
        value = row.get(locale)
        if value is not None:
            pairs.append((row.key, value))
    return pairs


def render_csv(pairs: Iterable[tuple[str | None, str | None]]) -> str:
    """Render a BOM-prefixed, fully quoted two-column table.

    Args:
        pairs: (key, value) rows; None fields become empty strings

    Returns:
        CSV text including the BOM and header row
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    writer.writerows(
        ("" if key is None else key, "" if value is None else value)
        for key, value in pairs
    )
    return UTF8_BOM + buffer.getvalue()


def render_locale_csv(rows: OrderedResult, locale: LocaleTag) -> str:
    """Render the keys present for ``locale`` as CSV text."""
    return render_csv(locale_pairs(rows, locale))
