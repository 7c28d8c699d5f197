"""Type aliases for the merge domain.

Provides semantic type aliases used throughout the package and by host code
when annotating call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable

__all__ = [
    "EntryPath",
    "LocaleTag",
    "MergedTable",
    "ProgressCallback",
    "TranslationKey",
]

type LocaleTag = str
"""Locale identifier taken literally from an archive path (e.g., 'en-US', 'es-419')."""

type TranslationKey = str
"""Identifier of one localizable string across all locales."""

type EntryPath = str
"""Relative path of an entry inside an archive (e.g., 'fr-FR/trunk/opus_jsons/source.json')."""

type MergedTable = dict[TranslationKey, dict[LocaleTag, str]]
"""Merge result before ordering: key -> (locale -> value)."""

type ProgressCallback = Callable[[int], None]
"""Receives monotonic integer percentages in the range 0..100."""
