"""Archive scanning: ZIP container decoding and entry enumeration.

Opens each submitted archive from an in-memory buffer and lists its
non-directory entries. Entry content is read lazily through ``read()`` so
that only classified entries are ever decompressed.

Components:
    ArchiveSource - Named archive bytes submitted by the host
    ArchiveEntry - One non-directory entry with a content accessor
    ScannedArchive - Immutable listing of one archive
    scan_archive - Decode one archive into a ScannedArchive

Thread Safety:
    ``ArchiveEntry.read()`` may be called from any thread. Reads against the
    same archive are serialized by a per-archive lock because all entries
    share one underlying buffer.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import io
import logging
import threading
import zipfile
import zlib
from collections.abc import Callable
from dataclasses import dataclass, field

from localemerge.diagnostics import InvalidArchiveError
from localemerge.types import EntryPath

__all__ = [
    "ArchiveEntry",
    "ArchiveSource",
    "ScannedArchive",
    "scan_archive",
]

logger = logging.getLogger(__name__)

# Failures zipfile raises for undecodable containers or member data.
# RuntimeError covers encrypted members ("password required").
_ZIP_ERRORS: tuple[type[Exception], ...] = (
    zipfile.BadZipFile,
    zipfile.LargeZipFile,
    zlib.error,
    EOFError,
    OSError,
    ValueError,
    NotImplementedError,
    RuntimeError,
)


@dataclass(frozen=True, slots=True)
class ArchiveSource:
    """Archive bytes tagged with the originating file name.

    Attributes:
        name: File name used in error messages (e.g., 'strings.zip')
        data: Raw archive bytes
    """

    name: str
    data: bytes

    @classmethod
    def coerce(cls, item: ArchiveSource | tuple[str, bytes]) -> ArchiveSource:
        """Accept either an ArchiveSource or a ``(name, bytes)`` pair."""
        if isinstance(item, ArchiveSource):
            return item
        name, data = item
        return cls(name=name, data=bytes(data))


@dataclass(frozen=True, slots=True)
class ArchiveEntry:
    """Non-directory entry of a scanned archive.

    Attributes:
        archive_index: Position of the archive in the submitted batch
        archive_name: Originating archive file name
        path: Relative path inside the archive
        size: Declared uncompressed size in bytes
    """

    archive_index: int
    archive_name: str
    path: EntryPath
    size: int
    _reader: Callable[[], bytes] = field(repr=False, compare=False)

    def read(self) -> bytes:
        """Decompress and return the entry content.

        Raises:
            InvalidArchiveError: If the member data is corrupt, encrypted or
                uses an unsupported compression method
        """
        return self._reader()


@dataclass(frozen=True, slots=True)
class ScannedArchive:
    """Entries of one archive, in central-directory order."""

    index: int
    name: str
    entries: tuple[ArchiveEntry, ...]

    def __len__(self) -> int:
        return len(self.entries)


def scan_archive(source: ArchiveSource, index: int = 0) -> ScannedArchive:
    """Decode one archive and enumerate its non-directory entries.

    Args:
        source: Archive bytes and file name
        index: Position of the archive in the batch (drives merge order)

    Returns:
        ScannedArchive listing every non-directory entry

    Raises:
        InvalidArchiveError: If the bytes are not a readable ZIP container
    """
    # Left open: the entry readers below share it, so it lives as long as
    # the ScannedArchive. It wraps an in-memory buffer and holds no OS handle.
    try:
        container = zipfile.ZipFile(io.BytesIO(source.data))
        infos = container.infolist()
    except _ZIP_ERRORS as e:
        logger.debug("Archive %r rejected: %s", source.name, e)
        raise InvalidArchiveError(source.name) from e

    lock = threading.Lock()

    def reader_for(info: zipfile.ZipInfo) -> Callable[[], bytes]:
        def read() -> bytes:
            try:
                with lock:
                    return container.read(info)
            except _ZIP_ERRORS as e:
                logger.debug(
                    "Entry %r of archive %r unreadable: %s", info.filename, source.name, e
                )
                raise InvalidArchiveError(source.name) from e

        return read

    entries = tuple(
        ArchiveEntry(
            archive_index=index,
            archive_name=source.name,
            path=info.filename,
            size=info.file_size,
            _reader=reader_for(info),
        )
        for info in infos
        if not info.is_dir()
    )
    logger.debug(
        "Scanned archive %r: %d entries (%d directories skipped)",
        source.name,
        len(entries),
        len(infos) - len(entries),
    )
    return ScannedArchive(index=index, name=source.name, entries=entries)
