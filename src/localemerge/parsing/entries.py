"""Locale entry parsing: entry bytes -> TranslationRecord tuples.

Three JSON shapes are accepted:

    Array of objects, key/value naming:
        [{"key": "greeting", "value": "Hello"}]
    Array of objects, opusID/stringValue naming (extra fields ignored):
        [{"opusID": "greeting", "stringValue": "Hello", "pseudoHash": "..."}]
    Flat object:
        {"greeting": "Hello"}

Array elements matching neither naming, and object properties whose value
is not a string, are skipped. Any other top-level shape is rejected.

Decoding is strict JSON: the non-standard constants NaN/Infinity that
Python's json module would otherwise accept are treated as syntax errors.
Records holding unpaired surrogate escapes are encoding errors, since they
cannot be written back out as UTF-8.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, NoReturn

from localemerge.constants import MAX_ENTRY_SIZE
from localemerge.diagnostics import (
    DiagnosticCode,
    EntryParseError,
    UnsupportedEntryFormatError,
)
from localemerge.enums import LayoutKind
from localemerge.model import ParsedEntry, TranslationRecord

if TYPE_CHECKING:
    from localemerge.archive import ArchiveEntry, LocaleMatch
    from localemerge.types import EntryPath, LocaleTag

__all__ = [
    "RECORD_FIELD_NAMINGS",
    "extract_records",
    "load_entry",
    "parse_entry",
]

logger = logging.getLogger(__name__)

# (key field, value field) pairs tried in order for array elements.
RECORD_FIELD_NAMINGS: tuple[tuple[str, str], ...] = (
    ("key", "value"),
    ("opusID", "stringValue"),
)

_INVALID_JSON = "The file contains invalid JSON."
_INVALID_ENCODING = "The file is not valid UTF-8 text."
_NESTING_TOO_DEEP = "The file is nested too deeply to decode."
_LONE_SURROGATE = "The file contains an unpaired UTF-16 surrogate escape."


def _reject_constant(name: str) -> NoReturn:
    msg = f"Non-standard JSON constant: {name}"
    raise ValueError(msg)


def _is_unicode_text(text: str) -> bool:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _record_from_element(element: object) -> TranslationRecord | None:
    if not isinstance(element, dict):
        return None
    for key_field, value_field in RECORD_FIELD_NAMINGS:
        key = element.get(key_field)
        value = element.get(value_field)
        if isinstance(key, str) and isinstance(value, str):
            return TranslationRecord(key=key, value=value)
    return None


def extract_records(document: object) -> tuple[TranslationRecord, ...] | None:
    """Turn a decoded JSON document into records.

    Args:
        document: Result of ``json.loads``

    Returns:
        Records in document order, or None if the top-level shape is
        neither an array nor an object.
    """
    match document:
        case list():
            records = (_record_from_element(element) for element in document)
            return tuple(record for record in records if record is not None)
        case dict():
            return tuple(
                TranslationRecord(key=key, value=value)
                for key, value in document.items()
                if isinstance(value, str)
            )
        case _:
            return None


def parse_entry(
    content: bytes | str,
    *,
    locale: LocaleTag,
    path: EntryPath,
    archive_name: str,
    archive_index: int = 0,
    layout: LayoutKind = LayoutKind.FLAT,
) -> ParsedEntry:
    """Decode one classified entry into a ParsedEntry.

    Args:
        content: Raw entry bytes (decoded as UTF-8, BOM tolerated) or text
        locale: Locale tag inferred from the path
        path: Entry path inside the archive
        archive_name: Originating archive file name
        archive_index: Position of the archive in the batch
        layout: Path convention that classified the entry

    Returns:
        ParsedEntry with the extracted records

    Raises:
        EntryParseError: If the content is not valid UTF-8, not valid JSON,
            or a record holds an unpaired surrogate escape
        UnsupportedEntryFormatError: If the JSON is neither array nor object
    """
    if isinstance(content, bytes):
        try:
            text = content.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise EntryParseError(
                path, archive_name, locale, _INVALID_ENCODING,
                DiagnosticCode.ENTRY_INVALID_ENCODING,
            ) from e
    else:
        text = content.removeprefix("\ufeff")

    try:
        document = json.loads(text, parse_constant=_reject_constant)
    except RecursionError as e:
        raise EntryParseError(
            path, archive_name, locale, _NESTING_TOO_DEEP,
            DiagnosticCode.ENTRY_NESTING_TOO_DEEP,
        ) from e
    except ValueError as e:
        logger.debug("Invalid JSON in %r (%s): %s", path, archive_name, e)
        raise EntryParseError(path, archive_name, locale, _INVALID_JSON) from e

    records = extract_records(document)
    if records is None:
        raise UnsupportedEntryFormatError(path, archive_name, locale)

    # Unpaired escapes such as "\ud800" decode to code points UTF-8 cannot carry.
    if not all(_is_unicode_text(r.key) and _is_unicode_text(r.value) for r in records):
        raise EntryParseError(
            path, archive_name, locale, _LONE_SURROGATE,
            DiagnosticCode.ENTRY_INVALID_ENCODING,
        )

    logger.debug("Parsed %r as %s: %d records", path, locale, len(records))
    return ParsedEntry(
        archive_index=archive_index,
        archive_name=archive_name,
        path=path,
        locale=locale,
        layout=layout,
        records=records,
    )


def load_entry(
    entry: ArchiveEntry,
    match: LocaleMatch,
    *,
    max_entry_size: int = MAX_ENTRY_SIZE,
) -> ParsedEntry:
    """Read and parse one classified archive entry.

    This is the unit of work the engine dispatches per entry.

    Raises:
        EntryParseError: If the declared size exceeds ``max_entry_size`` or
            the content cannot be decoded
        UnsupportedEntryFormatError: If the JSON shape is not supported
        InvalidArchiveError: If the member data cannot be decompressed
    """
    if entry.size > max_entry_size:
        cause = (
            f"The file is {entry.size} bytes, above the "
            f"{max_entry_size} byte limit per entry."
        )
        raise EntryParseError(
            entry.path, entry.archive_name, match.locale, cause,
            DiagnosticCode.ENTRY_TOO_LARGE,
        )
    return parse_entry(
        entry.read(),
        locale=match.locale,
        path=entry.path,
        archive_name=entry.archive_name,
        archive_index=entry.archive_index,
        layout=match.layout,
    )
