"""JSON rendering of merged results.

All documents use 2-space indentation and keep non-ASCII characters as-is,
so identical input always yields identical text.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
from collections.abc import Iterable

from localemerge.constants import PREVIEW_LENGTH, TRUNCATION_MARKER
from localemerge.model import OrderedResult, TranslationRow
from localemerge.types import LocaleTag, TranslationKey

__all__ = [
    "dump_json",
    "locale_mapping",
    "make_preview",
    "render_combined",
    "render_locale_json",
    "render_selection",
    "select_columns",
]


def dump_json(document: object) -> str:
    """Serialize with the package-wide JSON layout."""
    return json.dumps(document, indent=2, ensure_ascii=False)


def render_combined(rows: OrderedResult) -> str:
    """Serialize the full ordered result as a JSON array of row objects."""
    return dump_json([row.as_dict() for row in rows])


def make_preview(text: str, limit: int = PREVIEW_LENGTH) -> str:
    """Return the first ``limit`` characters, marked when truncated."""
    if len(text) <= limit:
        return text
    return text[:limit] + TRUNCATION_MARKER


def locale_mapping(rows: OrderedResult, locale: LocaleTag) -> dict[TranslationKey, str]:
    """Return ``{key: value}`` for the keys present for ``locale``, in key order."""
    mapping: dict[TranslationKey, str] = {}
    for row in rows:
        value = row.get(locale)
        if value is not None:
            mapping[row.key] = value
    return mapping


def render_locale_json(rows: OrderedResult, locale: LocaleTag) -> str:
    """Serialize one locale as a flat key -> value object."""
    return dump_json(locale_mapping(rows, locale))


def select_columns(rows: OrderedResult, locales: Iterable[LocaleTag]) -> OrderedResult:
    """Keep every row but only the selected locale columns.

    Rows whose key has none of the selected locales are kept with no values.
    """
    selected = frozenset(locales)
    return tuple(
        TranslationRow(
            key=row.key,
            values=tuple(pair for pair in row.values if pair[0] in selected),
        )
        for row in rows
    )


def render_selection(rows: OrderedResult, locales: Iterable[LocaleTag]) -> str:
    """Serialize the combined document restricted to the selected locales."""
    return render_combined(select_columns(rows, locales))
