"""localemerge exception hierarchy.

Every error raised by the engine aborts the whole invocation. Each exception
carries a DiagnosticCode and an ErrorContext so hosts can branch on the
failure without parsing the message, while ``str(error)`` stays suitable for
showing to end users verbatim.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from .codes import DiagnosticCode, ErrorCategory, ErrorContext

__all__ = [
    "EntryParseError",
    "InvalidArchiveError",
    "LocaleMergeError",
    "NoDataFoundError",
    "UnsupportedEntryFormatError",
]


class LocaleMergeError(Exception):
    """Base exception for all merge errors.

    Attributes:
        code: Diagnostic code identifying the failure
        context: Archive/path/locale the failure refers to
    """

    def __init__(
        self,
        message: str,
        code: DiagnosticCode,
        context: ErrorContext | None = None,
    ) -> None:
        """Initialize LocaleMergeError.

        Args:
            message: Human-readable message, shown to end users as-is
            code: Diagnostic code
            context: Error location (defaults to an empty context)
        """
        super().__init__(message)
        self.code = code
        self.context = context if context is not None else ErrorContext()

    @property
    def category(self) -> ErrorCategory:
        """Error category derived from the diagnostic code."""
        return self.code.category


class InvalidArchiveError(LocaleMergeError):
    """Archive bytes are not a decodable ZIP container.

    Fatal for the whole batch.
    """

    def __init__(self, archive_name: str) -> None:
        message = (
            f"Invalid ZIP file: {archive_name}. "
            "The file may be corrupt or not a valid ZIP archive."
        )
        super().__init__(
            message,
            DiagnosticCode.ARCHIVE_INVALID,
            ErrorContext(archive_name=archive_name),
        )
        self.archive_name = archive_name


class _EntryError(LocaleMergeError):
    """Shared message layout for errors tied to one classified entry."""

    def __init__(
        self,
        path: str,
        archive_name: str,
        locale: str,
        detail: str,
        code: DiagnosticCode,
    ) -> None:
        message = (
            f"Error processing file for language '{locale}' ({path}) "
            f"in zip '{archive_name}': {detail}"
        )
        super().__init__(
            message,
            code,
            ErrorContext(archive_name=archive_name, path=path, locale=locale),
        )
        self.path = path
        self.archive_name = archive_name
        self.locale = locale


class EntryParseError(_EntryError):
    """Classified entry could not be decoded into JSON.

    ``cause`` holds the human-readable reason. Syntax errors carry
    DiagnosticCode.ENTRY_INVALID_JSON; every other decode failure (bad
    UTF-8, excessive nesting, oversized entry) has its own code.

    Attributes:
        cause: Human-readable failure reason
    """

    def __init__(
        self,
        path: str,
        archive_name: str,
        locale: str,
        cause: str,
        code: DiagnosticCode = DiagnosticCode.ENTRY_INVALID_JSON,
    ) -> None:
        super().__init__(path, archive_name, locale, cause, code)
        self.cause = cause

    @property
    def is_syntax_error(self) -> bool:
        """True when the entry text is not well-formed JSON."""
        return self.code is DiagnosticCode.ENTRY_INVALID_JSON


class UnsupportedEntryFormatError(_EntryError):
    """Entry is valid JSON but neither an array nor an object."""

    def __init__(self, path: str, archive_name: str, locale: str) -> None:
        detail = (
            "is not in a supported format. It must be a JSON array "
            "(key/value or opusID/stringValue) or a simple JSON object."
        )
        super().__init__(
            path, archive_name, locale, detail, DiagnosticCode.ENTRY_UNSUPPORTED_FORMAT
        )


class NoDataFoundError(LocaleMergeError):
    """No archive in the batch contained a recognizable locale file.

    The message names both accepted path conventions so the caller can fix
    their input.
    """

    def __init__(self) -> None:
        message = (
            "No valid translation files found in the provided ZIPs. "
            "Ensure the ZIP files contain either language-named JSON files "
            "(e.g., 'en-US.json') or follow a structure like "
            "'en-US/trunk/opus_jsons/source.json'."
        )
        super().__init__(message, DiagnosticCode.NO_DATA_FOUND)
