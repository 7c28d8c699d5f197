"""Entry parsing: JSON locale files -> translation records.

Python 3.13+. Zero external dependencies.
"""

from localemerge.parsing.entries import (
    RECORD_FIELD_NAMINGS,
    extract_records,
    load_entry,
    parse_entry,
)

__all__ = [
    "RECORD_FIELD_NAMINGS",
    "extract_records",
    "load_entry",
    "parse_entry",
]
