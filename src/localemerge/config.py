"""Engine configuration for localemerge.

Provides a single frozen dataclass that encapsulates the tunable limits of a
merge invocation, so hosts pass one typed object instead of loose keyword
arguments to every entry point.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from localemerge.constants import MAX_ENTRY_SIZE, PREVIEW_LENGTH

__all__ = ["MergeConfig"]


@dataclass(frozen=True, slots=True)
class MergeConfig:
    """Immutable configuration for MergeEngine.

    All fields have sensible defaults; constructing ``MergeConfig()`` with
    no arguments produces a usable configuration.

    Attributes:
        max_workers: Worker threads for scan/parse units. ``None`` lets
            ThreadPoolExecutor pick its default (min(32, cpu_count + 4)).
        preview_length: Characters of the combined JSON kept in the preview
            (default: 20000).
        max_entry_size: Largest declared uncompressed size accepted for one
            classified entry, in bytes (default: 64 MB). Larger entries fail
            with EntryParseError instead of being decompressed.

    Example:
        >>> from localemerge import MergeEngine
        >>> from localemerge.config import MergeConfig
        >>> engine = MergeEngine(MergeConfig(max_workers=4, preview_length=500))
    """

    max_workers: int | None = None
    preview_length: int = PREVIEW_LENGTH
    max_entry_size: int = MAX_ENTRY_SIZE

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If max_workers, preview_length or max_entry_size
                is not positive.
        """
        if self.max_workers is not None and self.max_workers <= 0:
            msg = "max_workers must be positive"
            raise ValueError(msg)
        if self.preview_length <= 0:
            msg = "preview_length must be positive"
            raise ValueError(msg)
        if self.max_entry_size <= 0:
            msg = "max_entry_size must be positive"
            raise ValueError(msg)
