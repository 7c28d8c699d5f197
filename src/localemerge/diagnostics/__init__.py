"""Diagnostic system for merge errors.

Provides the error hierarchy with diagnostic codes, categories and
archive/path/locale context.

Python 3.13+. Zero external dependencies.
"""

from .codes import DiagnosticCode, ErrorCategory, ErrorContext
from .errors import (
    EntryParseError,
    InvalidArchiveError,
    LocaleMergeError,
    NoDataFoundError,
    UnsupportedEntryFormatError,
)

__all__ = [
    "DiagnosticCode",
    "EntryParseError",
    "ErrorCategory",
    "ErrorContext",
    "InvalidArchiveError",
    "LocaleMergeError",
    "NoDataFoundError",
    "UnsupportedEntryFormatError",
]
