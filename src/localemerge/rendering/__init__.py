"""Rendering of merged results: combined JSON, per-locale JSON/CSV, bundles.

Submodules:
    json_output - combined document, preview, per-locale and selection JSON
    csv_output  - per-locale CSV with BOM and full quoting
    bundle      - ZIP packaging with progress reporting
    export      - per-locale export entry point (single file or bundle)

Python 3.13+. Zero external dependencies.
"""

from localemerge.rendering.bundle import ProgressReporter, build_bundle
from localemerge.rendering.csv_output import (
    CSV_HEADER,
    UTF8_BOM,
    locale_pairs,
    render_csv,
    render_locale_csv,
)
from localemerge.rendering.export import (
    export_locales,
    export_selection,
    locale_filename,
    render_locale_file,
)
from localemerge.rendering.json_output import (
    dump_json,
    locale_mapping,
    make_preview,
    render_combined,
    render_locale_json,
    render_selection,
    select_columns,
)

__all__ = [
    "CSV_HEADER",
    "UTF8_BOM",
    "ProgressReporter",
    "build_bundle",
    "dump_json",
    "export_locales",
    "export_selection",
    "locale_filename",
    "locale_mapping",
    "locale_pairs",
    "make_preview",
    "render_combined",
    "render_csv",
    "render_locale_csv",
    "render_locale_file",
    "render_locale_json",
    "render_selection",
    "select_columns",
]
