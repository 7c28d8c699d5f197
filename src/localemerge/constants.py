"""Shared constants for localemerge.

This module provides centralized configuration constants used across the
archive, parsing, merging and rendering packages. Placing constants here
avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Locale ordering: primary tag and fixed priority table
- Input limits: DoS prevention via size constraints
- Preview: bounded text preview of the combined document
- Filenames: per-locale export and bundle naming
- Media types: payload content types handed to the host

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale ordering
    "PRIMARY_LOCALE",
    "LOCALE_PRIORITY",
    "KNOWN_LOCALES",
    # Input limits
    "MAX_ENTRY_SIZE",
    # Preview
    "PREVIEW_LENGTH",
    "TRUNCATION_MARKER",
    # Filenames
    "LOCALE_FILENAME_TEMPLATE",
    "BUNDLE_FILENAME_TEMPLATE",
    "MIXED_BUNDLE_FILENAME",
    "COMBINED_FILENAME",
    "SELECTION_FILENAME",
    # Media types
    "MEDIA_TYPE_JSON",
    "MEDIA_TYPE_CSV",
    "MEDIA_TYPE_ZIP",
]

# ============================================================================
# LOCALE ORDERING
# ============================================================================

# Always the first locale column, whatever its position in LOCALE_PRIORITY.
PRIMARY_LOCALE: str = "en-US"

# Relative order among known locales (primary tag excluded).
# Tags absent from this table sort after every listed tag.
LOCALE_PRIORITY: tuple[str, ...] = (
    "de-DE", "en-AU", "en-GB", "es-419", "es-ES", "fi-FI", "fr-CA",
    "fr-FR", "it-IT", "ja-JP", "ko-KR", "nl-NL", "pt-BR", "pt-PT",
    "zh-CN", "zh-HK", "zh-TW",
)

# "Select all" set offered to hosts: primary tag followed by the priority table.
KNOWN_LOCALES: tuple[str, ...] = (PRIMARY_LOCALE, *LOCALE_PRIORITY)

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum uncompressed size of one classified entry (64 MB).
# Declared sizes above this are rejected before decompression.
MAX_ENTRY_SIZE: int = 64 * 1024 * 1024

# ============================================================================
# PREVIEW
# ============================================================================

# Characters of the combined JSON kept in the preview text.
PREVIEW_LENGTH: int = 20_000

TRUNCATION_MARKER: str = (
    "\n\n[...]\n\n--- CONTENT TRUNCATED ---\n\n\n"
    "The full file is available for download."
)

# ============================================================================
# FILENAMES
# ============================================================================

# Format strings - use .format(stem=..., ext=...)
LOCALE_FILENAME_TEMPLATE: str = "{stem}_locale.{ext}"  # e.g., en_US_locale.json
BUNDLE_FILENAME_TEMPLATE: str = "locales_{ext}_bundle.zip"  # e.g., locales_csv_bundle.zip
MIXED_BUNDLE_FILENAME: str = "locales_bundle.zip"
COMBINED_FILENAME: str = "merged.json"
SELECTION_FILENAME: str = "merged_selection.json"

# ============================================================================
# MEDIA TYPES
# ============================================================================

MEDIA_TYPE_JSON: str = "application/json"
MEDIA_TYPE_CSV: str = "text/csv;charset=utf-8"
MEDIA_TYPE_ZIP: str = "application/zip"
