"""Merge orchestration: fan-out over a worker pool, fail-fast join, render.

One invocation runs in two parallel phases followed by a sequential tail:

    1. scan      - one unit per archive (decode container, list entries)
    2. parse     - one unit per classified entry (read, decode, extract)
    3. merge     - stable-order merge, ordering, rendering (calling thread)

Each phase is joined with a barrier. The first failing unit cancels every
unit that has not started yet and its exception is re-raised unchanged, so
a failed invocation never yields a partial result. Completion order never
reaches the output: parsed entries are merged in archive/path order.

Thread Safety:
    A MergeEngine may be shared between threads. It holds no state across
    invocations apart from its executors.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Callable, Iterable, Sequence
from concurrent.futures import Future, ThreadPoolExecutor, as_completed

from localemerge.archive import (
    ArchiveEntry,
    ArchiveSource,
    LocaleMatch,
    ScannedArchive,
    classify_path,
    scan_archive,
)
from localemerge.config import MergeConfig
from localemerge.enums import ExportFormat, LayoutKind
from localemerge.merging import merge_entries, order_table, sort_locales
from localemerge.model import ExportArtifact, MergeResult, MergeSummary, OrderedResult
from localemerge.parsing import load_entry
from localemerge.rendering import export_locales, make_preview, render_combined
from localemerge.types import LocaleTag, ProgressCallback

__all__ = ["ArchiveInput", "MergeEngine", "merge"]

logger = logging.getLogger(__name__)

type ArchiveInput = ArchiveSource | tuple[str, bytes]
"""An archive as accepted by the engine: ArchiveSource or (name, bytes)."""


class MergeEngine:
    """Concurrent merge engine.

    Example:
        >>> with MergeEngine(MergeConfig(max_workers=4)) as engine:
        ...     result = engine.merge([("app.zip", app_bytes), ("web.zip", web_bytes)])
        ...     artifact = engine.export_locales(result.rows, result.locales, "csv")
        >>> result.locales
        ('en-US', 'fr-FR')
    """

    __slots__ = ("_config", "_host", "_workers")

    def __init__(self, config: MergeConfig | None = None) -> None:
        self._config = config if config is not None else MergeConfig()
        self._workers = ThreadPoolExecutor(
            max_workers=self._config.max_workers,
            thread_name_prefix="localemerge-worker",
        )
        self._host = ThreadPoolExecutor(max_workers=1, thread_name_prefix="localemerge-host")

    @property
    def config(self) -> MergeConfig:
        """Configuration this engine was created with (read-only)."""
        return self._config

    def __repr__(self) -> str:
        return f"MergeEngine(config={self._config!r})"

    def _run_all[T, R](self, unit: Callable[[T], R], items: Sequence[T]) -> list[R]:
        """Run ``unit`` over ``items`` on the worker pool; fail fast.

        Returns results in the order of ``items``.
        """
        futures = [self._workers.submit(unit, item) for item in items]
        try:
            for future in as_completed(futures):
                future.result()
        except BaseException:
            for future in futures:
                future.cancel()
            raise
        return [future.result() for future in futures]

    def merge(self, archives: Iterable[ArchiveInput]) -> MergeResult:
        """Merge a batch of archives into one rendered result.

        Args:
            archives: Archives in submission order; the order only breaks
                ties between duplicate (key, locale) pairs

        Returns:
            MergeResult with the combined document, preview and rows

        Raises:
            InvalidArchiveError: If any archive is not a readable ZIP
            EntryParseError: If any locale entry is not valid UTF-8 JSON or
                exceeds the configured size limit
            UnsupportedEntryFormatError: If any locale entry has an
                unsupported top-level shape
            NoDataFoundError: If no archive contains a locale entry
        """
        sources = [ArchiveSource.coerce(item) for item in archives]
        logger.debug("Merging %d archives", len(sources))

        scanned: list[ScannedArchive] = self._run_all(
            lambda indexed: scan_archive(indexed[1], indexed[0]),
            list(enumerate(sources)),
        )

        units: list[tuple[ArchiveEntry, LocaleMatch]] = []
        scanned_count = 0
        for archive in scanned:
            scanned_count += len(archive)
            for entry in archive.entries:
                match = classify_path(entry.path)
                if match is None:
                    logger.debug("Skipped %r in %r", entry.path, archive.name)
                    continue
                logger.debug(
                    "Classified %r in %r as %s (%s)",
                    entry.path,
                    archive.name,
                    match.locale,
                    match.layout,
                )
                units.append((entry, match))

        max_entry_size = self._config.max_entry_size
        parsed = self._run_all(
            lambda unit: load_entry(unit[0], unit[1], max_entry_size=max_entry_size),
            units,
        )

        table = merge_entries(parsed)
        locales = sort_locales(entry.locale for entry in parsed)
        rows = order_table(table, locales)
        json_text = render_combined(rows)

        layouts = Counter(entry.layout for entry in parsed)
        summary = MergeSummary(
            archives=len(sources),
            entries_scanned=scanned_count,
            entries_parsed=len(parsed),
            records=sum(len(entry.records) for entry in parsed),
            by_layout=tuple((layout, layouts[layout]) for layout in LayoutKind if layouts[layout]),
        )
        logger.info(
            "Merged %d keys across %d locales from %d archives (%d of %d entries parsed)",
            len(rows),
            len(locales),
            summary.archives,
            summary.entries_parsed,
            summary.entries_scanned,
        )

        return MergeResult(
            json_text=json_text,
            payload=json_text.encode("utf-8"),
            preview=make_preview(json_text, self._config.preview_length),
            rows=rows,
            locales=locales,
            summary=summary,
        )

    def submit(self, archives: Iterable[ArchiveInput]) -> Future[MergeResult]:
        """Run merge() on the host executor and return its future.

        The archive iterable is materialized before returning, so the caller
        may reuse or discard its buffers afterwards.
        """
        batch = list(archives)
        return self._host.submit(self.merge, batch)

    def export_locales(
        self,
        rows: OrderedResult,
        locales: Iterable[LocaleTag],
        fmt: ExportFormat | str = ExportFormat.JSON,
        *,
        formats: Iterable[ExportFormat | str] | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> ExportArtifact:
        """Export selected locales; see localemerge.rendering.export_locales."""
        return export_locales(rows, locales, fmt, formats=formats, on_progress=on_progress)

    def submit_export(
        self,
        rows: OrderedResult,
        locales: Iterable[LocaleTag],
        fmt: ExportFormat | str = ExportFormat.JSON,
        *,
        formats: Iterable[ExportFormat | str] | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> Future[ExportArtifact]:
        """Run export_locales() on the host executor and return its future.

        ``on_progress`` is invoked from the host thread.
        """
        selected = (locales,) if isinstance(locales, str) else tuple(locales)
        chosen = None if formats is None else tuple(formats)
        return self._host.submit(
            export_locales, rows, selected, fmt, formats=chosen, on_progress=on_progress
        )

    def shutdown(self, *, cancel_pending: bool = True, wait: bool = True) -> None:
        """Release both executors.

        Args:
            cancel_pending: Cancel submitted invocations that have not
                started yet
            wait: Block until running invocations finish
        """
        self._host.shutdown(wait=wait, cancel_futures=cancel_pending)
        self._workers.shutdown(wait=wait, cancel_futures=cancel_pending)
        logger.debug("MergeEngine shut down (cancel_pending=%s)", cancel_pending)

    def __enter__(self) -> MergeEngine:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        """Shut down, letting running invocations finish. Does not suppress exceptions."""
        self.shutdown(cancel_pending=exc_type is not None)


def merge(archives: Iterable[ArchiveInput], *, config: MergeConfig | None = None) -> MergeResult:
    """Merge a batch of archives with a short-lived engine.

    Example:
        >>> result = merge([("strings.zip", data)])
        >>> print(result.preview)
    """
    with MergeEngine(config) as engine:
        return engine.merge(archives)
