"""Diagnostic codes and error context.

Defines error codes, error categories and the immutable context record
attached to every merge error.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum

__all__ = [
    "DiagnosticCode",
    "ErrorCategory",
    "ErrorContext",
]


class ErrorCategory(StrEnum):
    """Error categorization for LocaleMergeError.

    Inherits from ``StrEnum`` so that log aggregation and host code receive
    plain strings (``"archive"``, ``"entry"``, ``"batch"``).

    Categories:
        ARCHIVE: The container itself could not be decoded
        ENTRY: A classified locale entry could not be turned into records
        BATCH: The batch as a whole produced nothing usable
    """

    ARCHIVE = "archive"
    ENTRY = "entry"
    BATCH = "batch"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Archive errors (container decoding)
        2000-2099: Entry decode errors (bytes -> JSON)
        2100-2199: Entry shape errors (JSON -> records)
        3000-3999: Batch errors
    """

    # Archive errors (1000-1999)
    ARCHIVE_INVALID = 1001

    # Entry decode errors (2000-2099)
    ENTRY_INVALID_JSON = 2001
    ENTRY_INVALID_ENCODING = 2002
    ENTRY_NESTING_TOO_DEEP = 2003
    ENTRY_TOO_LARGE = 2004

    # Entry shape errors (2100-2199)
    ENTRY_UNSUPPORTED_FORMAT = 2101

    # Batch errors (3000-3999)
    NO_DATA_FOUND = 3001

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the code range."""
        if self.value < 2000:
            return ErrorCategory.ARCHIVE
        if self.value < 3000:
            return ErrorCategory.ENTRY
        return ErrorCategory.BATCH


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Immutable location of a merge error.

    Attributes:
        archive_name: Originating archive file name (empty for batch errors)
        path: Entry path inside the archive (empty if not applicable)
        locale: Locale tag inferred from the path (empty if not applicable)
    """

    archive_name: str = ""
    path: str = ""
    locale: str = ""
