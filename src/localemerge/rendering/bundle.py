"""Packaging of generated export files into one ZIP archive.

Bundling many per-locale files is the one slow rendering step, so it
reports progress as monotonic integer percentages. Progress reporting is
best effort: a failing callback is logged and never affects the archive.

Entries are written with a fixed timestamp and permissions, so bundling the
same files twice yields identical bytes.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import io
import logging
import zipfile
from collections.abc import Sequence

from localemerge.constants import MEDIA_TYPE_ZIP
from localemerge.model import ExportArtifact
from localemerge.types import ProgressCallback

__all__ = ["ProgressReporter", "build_bundle"]

logger = logging.getLogger(__name__)

# Earliest timestamp the ZIP format can store.
_FIXED_DATE_TIME = (1980, 1, 1, 0, 0, 0)
_FILE_MODE = 0o644 << 16


class ProgressReporter:
    """Forward percentages to a host callback, never going backwards."""

    __slots__ = ("_callback", "_last")

    def __init__(self, callback: ProgressCallback | None) -> None:
        self._callback = callback
        self._last = -1

    def report(self, percent: int) -> None:
        """Report ``percent`` (clamped to 0..100) if it advances progress."""
        percent = max(0, min(100, percent))
        if self._callback is None or percent <= self._last:
            return
        self._last = percent
        try:
            self._callback(percent)
        except Exception:  # pylint: disable=broad-exception-caught
            # Progress is advisory; the export continues.
            logger.warning("Progress callback failed at %d%%", percent, exc_info=True)


def build_bundle(
    files: Sequence[ExportArtifact],
    filename: str,
    on_progress: ProgressCallback | None = None,
) -> ExportArtifact:
    """Package ``files`` into a deflated ZIP archive.

    Args:
        files: Files to include, in archive order (names must be unique)
        filename: Name of the produced archive
        on_progress: Optional callback receiving 0..100

    Returns:
        ExportArtifact holding the archive bytes

    Raises:
        ValueError: If two files share a name
    """
    names = [artifact.filename for artifact in files]
    if len(set(names)) != len(names):
        msg = f"Duplicate file names in bundle: {sorted(names)}"
        raise ValueError(msg)

    progress = ProgressReporter(on_progress)
    progress.report(0)
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as archive:
        for done, artifact in enumerate(files, start=1):
            info = zipfile.ZipInfo(artifact.filename, date_time=_FIXED_DATE_TIME)
            info.compress_type = zipfile.ZIP_DEFLATED
            info.external_attr = _FILE_MODE
            archive.writestr(info, artifact.payload)
            progress.report(done * 100 // max(len(files), 1))
    progress.report(100)

    payload = buffer.getvalue()
    logger.info("Bundled %d files into %s (%d bytes)", len(files), filename, len(payload))
    return ExportArtifact(filename=filename, payload=payload, media_type=MEDIA_TYPE_ZIP)
