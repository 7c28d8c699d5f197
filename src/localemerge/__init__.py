"""localemerge - Merge per-locale translation files from ZIP archives.

Scans a batch of ZIP archives for locale data files, merges every
(key, locale, value) record into one table and renders it deterministically:
a combined JSON document, plus optional per-locale JSON or CSV exports,
bundled into a ZIP when more than one file is produced.

Public API:
    merge - Merge a batch of archives into a MergeResult
    export_locales - Per-locale export (single file or bundle)
    export_selection - Combined document restricted to selected locales
    MergeEngine - Reusable engine owning the worker pool
    MergeConfig - Tunable limits (workers, preview length, entry size)

Exceptions:
    LocaleMergeError - Base exception class
    InvalidArchiveError - Archive is not a readable ZIP
    EntryParseError - Locale entry is not valid UTF-8 JSON
    UnsupportedEntryFormatError - Locale entry has an unsupported shape
    NoDataFoundError - No locale entry found in the batch

Submodules:
    localemerge.archive - Archive scanning and path classification
    localemerge.parsing - Entry parsing
    localemerge.merging - Merging and canonical ordering
    localemerge.rendering - JSON/CSV rendering and bundling
    localemerge.locale_utils - Filename stems and optional display names
"""

from .archive import ArchiveSource
from .config import MergeConfig
from .constants import KNOWN_LOCALES, PRIMARY_LOCALE
from .diagnostics import (
    EntryParseError,
    InvalidArchiveError,
    LocaleMergeError,
    NoDataFoundError,
    UnsupportedEntryFormatError,
)
from .engine import MergeEngine, merge
from .enums import ExportFormat, LayoutKind
from .model import ExportArtifact, MergeResult, MergeSummary, TranslationRow
from .rendering import export_locales, export_selection

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("localemerge")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "KNOWN_LOCALES",
    "PRIMARY_LOCALE",
    "ArchiveSource",
    "EntryParseError",
    "ExportArtifact",
    "ExportFormat",
    "InvalidArchiveError",
    "LayoutKind",
    "LocaleMergeError",
    "MergeConfig",
    "MergeEngine",
    "MergeResult",
    "MergeSummary",
    "NoDataFoundError",
    "TranslationRow",
    "UnsupportedEntryFormatError",
    "__version__",
    "export_locales",
    "export_selection",
    "merge",
]
