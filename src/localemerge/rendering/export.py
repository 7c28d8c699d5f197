"""Per-locale export: one file per selected locale and format.

A selection producing a single file returns that file directly; anything
larger is packaged into one ZIP bundle. Files are generated in canonical
locale order, then format order, so bundle layout is reproducible.

Filename conventions:
    per-locale file: <tag with '-' replaced by '_'>_locale.<ext>
    bundle:          locales_<ext>_bundle.zip (one format)
                     locales_bundle.zip (several formats)

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from localemerge.constants import (
    BUNDLE_FILENAME_TEMPLATE,
    LOCALE_FILENAME_TEMPLATE,
    MEDIA_TYPE_CSV,
    MEDIA_TYPE_JSON,
    MIXED_BUNDLE_FILENAME,
    SELECTION_FILENAME,
)
from localemerge.enums import ExportFormat
from localemerge.locale_utils import locale_file_stem
from localemerge.merging.ordering import sort_locales
from localemerge.model import ExportArtifact, OrderedResult
from localemerge.rendering.bundle import ProgressReporter, build_bundle
from localemerge.rendering.csv_output import render_locale_csv
from localemerge.rendering.json_output import render_locale_json, render_selection
from localemerge.types import LocaleTag, ProgressCallback

__all__ = [
    "export_locales",
    "export_selection",
    "locale_filename",
    "render_locale_file",
]

logger = logging.getLogger(__name__)


def locale_filename(locale: LocaleTag, fmt: ExportFormat) -> str:
    """Return the export filename for one locale (e.g., 'en_US_locale.csv')."""
    return LOCALE_FILENAME_TEMPLATE.format(stem=locale_file_stem(locale), ext=fmt.value)


def render_locale_file(
    rows: OrderedResult, locale: LocaleTag, fmt: ExportFormat
) -> ExportArtifact:
    """Render one locale in one format as a downloadable file."""
    match fmt:
        case ExportFormat.JSON:
            text, media_type = render_locale_json(rows, locale), MEDIA_TYPE_JSON
        case ExportFormat.CSV:
            text, media_type = render_locale_csv(rows, locale), MEDIA_TYPE_CSV
    return ExportArtifact(
        filename=locale_filename(locale, fmt),
        payload=text.encode("utf-8"),
        media_type=media_type,
    )


def _selected_locales(locales: Iterable[LocaleTag]) -> tuple[LocaleTag, ...]:
    if isinstance(locales, str):
        locales = (locales,)
    selected = sort_locales(locales)
    if not selected:
        msg = "At least one locale is required"
        raise ValueError(msg)
    return selected


def _bundle_filename(formats: tuple[ExportFormat, ...]) -> str:
    if len(formats) == 1:
        return BUNDLE_FILENAME_TEMPLATE.format(ext=formats[0].value)
    return MIXED_BUNDLE_FILENAME


def export_locales(
    rows: OrderedResult,
    locales: Iterable[LocaleTag],
    fmt: ExportFormat | str = ExportFormat.JSON,
    *,
    formats: Iterable[ExportFormat | str] | None = None,
    on_progress: ProgressCallback | None = None,
) -> ExportArtifact:
    """Export the selected locales as individual files.

    Locales absent from ``rows`` still produce a file (an empty object, or a
    CSV holding only the header row).

    Args:
        rows: Ordered result from merge()
        locales: Selected locale tags (duplicates ignored)
        fmt: Export format, used when ``formats`` is not given
        formats: Several export formats at once; each locale is rendered in
            every listed format
        on_progress: Optional callback receiving 0..100 while bundling

    Returns:
        The single generated file, or a ZIP bundle of all generated files

    Raises:
        ValueError: If no locale or no format is selected, or a format name
            is unknown

    Example:
        >>> artifact = export_locales(result.rows, {"fr-FR", "en-US"}, "csv")
        >>> artifact.filename
        'locales_csv_bundle.zip'
    """
    selected = _selected_locales(locales)
    requested = (fmt,) if formats is None else tuple(formats)
    chosen = tuple(dict.fromkeys(ExportFormat(value) for value in requested))
    if not chosen:
        msg = "At least one export format is required"
        raise ValueError(msg)

    files = [
        render_locale_file(rows, locale, export_format)
        for locale in selected
        for export_format in chosen
    ]
    logger.debug("Rendered %d export files for %s", len(files), ", ".join(selected))

    if len(files) == 1:
        ProgressReporter(on_progress).report(100)
        return files[0]
    return build_bundle(files, _bundle_filename(chosen), on_progress)


def export_selection(rows: OrderedResult, locales: Iterable[LocaleTag]) -> ExportArtifact:
    """Export the combined document restricted to the selected locales.

    Every key is kept; only the selected locale columns are emitted.

    Raises:
        ValueError: If no locale is selected
    """
    selected = _selected_locales(locales)
    return ExportArtifact(
        filename=SELECTION_FILENAME,
        payload=render_selection(rows, selected).encode("utf-8"),
        media_type=MEDIA_TYPE_JSON,
    )
