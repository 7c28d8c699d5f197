"""Enumerations for localemerge type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class LayoutKind(StrEnum):
    """Archive path convention that identified a locale data file.

    StrEnum provides automatic string conversion: str(LayoutKind.FLAT) == "flat"
    """

    STRUCTURED = "structured"
    """Nested project layout: en-US/trunk/opus_jsons/source.json"""

    FLAT = "flat"
    """Locale-named file at any depth: en-US.json"""


class ExportFormat(StrEnum):
    """Per-locale export format.

    The value doubles as the file extension of generated files.
    """

    JSON = "json"
    """Pretty-printed key -> value object"""

    CSV = "csv"
    """Quoted two-column Key,Value table with UTF-8 BOM"""


__all__ = [
    "ExportFormat",
    "LayoutKind",
]
