"""Immutable records passed between pipeline stages.

Components:
    TranslationRecord - One (key, value) pair extracted from one entry
    ParsedEntry - All records of one classified entry plus provenance
    TranslationRow - One ordered row of the merged result
    MergeSummary - Aggregate scan/parse statistics of one invocation
    MergeResult - Everything a host receives from merge()
    ExportArtifact - One downloadable file produced by per-locale export

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from localemerge.enums import LayoutKind
from localemerge.types import EntryPath, LocaleTag, TranslationKey

# ruff: noqa: RUF022 - __all__ organized by pipeline stage for readability
__all__ = [
    "TranslationRecord",
    "ParsedEntry",
    "TranslationRow",
    "OrderedResult",
    "MergeSummary",
    "MergeResult",
    "ExportArtifact",
]


@dataclass(frozen=True, slots=True)
class TranslationRecord:
    """One unit extracted from one source entry for one locale."""

    key: TranslationKey
    value: str


@dataclass(frozen=True, slots=True)
class ParsedEntry:
    """Records decoded from one classified archive entry.

    The provenance fields define the stable merge order: entries are merged
    by ``archive_index`` (submission order), then ``path``.

    Attributes:
        archive_index: Position of the originating archive in the batch
        archive_name: Originating archive file name
        path: Entry path inside the archive
        locale: Locale tag inferred from the path
        layout: Path convention that matched
        records: Records in document order
    """

    archive_index: int
    archive_name: str
    path: EntryPath
    locale: LocaleTag
    layout: LayoutKind
    records: tuple[TranslationRecord, ...]

    @property
    def merge_order(self) -> tuple[int, str]:
        """Sort key placing entries in deterministic merge order."""
        return (self.archive_index, self.path)


@dataclass(frozen=True, slots=True)
class TranslationRow:
    """One row of the ordered result.

    Attributes:
        key: Translation key
        values: (locale, value) pairs for the locales present for this key,
            in canonical locale order
    """

    key: TranslationKey
    values: tuple[tuple[LocaleTag, str], ...]

    @property
    def locales(self) -> tuple[LocaleTag, ...]:
        """Locales present for this key, in canonical order."""
        return tuple(locale for locale, _ in self.values)

    def get(self, locale: LocaleTag) -> str | None:
        """Return the value for ``locale`` or None when absent."""
        for tag, value in self.values:
            if tag == locale:
                return value
        return None

    def as_dict(self) -> dict[str, str]:
        """Return ``{"key": key, <locale>: <value>, ...}`` in row order."""
        row: dict[str, str] = {"key": self.key}
        row.update(self.values)
        return row


type OrderedResult = tuple[TranslationRow, ...]
"""Rows sorted by key; each row carries only the locales present for it."""


@dataclass(frozen=True, slots=True)
class MergeSummary:
    """Immutable aggregate of one merge invocation.

    Attributes:
        archives: Number of archives submitted
        entries_scanned: Non-directory entries seen across all archives
        entries_parsed: Entries classified as locale data and parsed
        records: Records read across all parsed entries (before dedup)
        by_layout: (layout, parsed entry count) pairs, structured first
    """

    archives: int
    entries_scanned: int
    entries_parsed: int
    records: int
    by_layout: tuple[tuple[LayoutKind, int], ...] = ()

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"MergeSummary(archives={self.archives}, "
            f"scanned={self.entries_scanned}, "
            f"parsed={self.entries_parsed}, "
            f"records={self.records})"
        )

    @property
    def entries_skipped(self) -> int:
        """Entries that matched neither path convention."""
        return self.entries_scanned - self.entries_parsed


@dataclass(frozen=True, slots=True)
class MergeResult:
    """Rendered output of one merge invocation.

    Created once per invocation and never mutated; the host decides whether
    to download, preview or discard it.

    Attributes:
        json_text: Full combined JSON document
        payload: ``json_text`` encoded as UTF-8 (download/copy payload)
        preview: Bounded preview of ``json_text``
        rows: Structured ordered result, input to per-locale export
        locales: Every locale found, in canonical order
        summary: Scan and parse statistics
    """

    json_text: str
    payload: bytes
    preview: str
    rows: OrderedResult
    locales: tuple[LocaleTag, ...]
    summary: MergeSummary

    @property
    def byte_size(self) -> int:
        """Size of the download payload in bytes."""
        return len(self.payload)

    @property
    def is_truncated(self) -> bool:
        """True when the preview does not contain the whole document."""
        return self.preview != self.json_text


@dataclass(frozen=True, slots=True)
class ExportArtifact:
    """One file produced by per-locale export (a single file or a bundle)."""

    filename: str
    payload: bytes
    media_type: str

    @property
    def byte_size(self) -> int:
        """Size of the payload in bytes."""
        return len(self.payload)
