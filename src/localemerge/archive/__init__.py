"""Archive access: container scanning and locale path classification.

Submodules:
    scanner    - ArchiveSource, ArchiveEntry, ScannedArchive, scan_archive
    classifier - ClassificationRule table, LocaleMatch, classify_path

Python 3.13+. Zero external dependencies.
"""

from localemerge.archive.classifier import (
    CLASSIFICATION_RULES,
    ClassificationRule,
    LocaleMatch,
    classify_path,
)
from localemerge.archive.scanner import (
    ArchiveEntry,
    ArchiveSource,
    ScannedArchive,
    scan_archive,
)

__all__ = [
    "CLASSIFICATION_RULES",
    "ArchiveEntry",
    "ArchiveSource",
    "ClassificationRule",
    "LocaleMatch",
    "ScannedArchive",
    "classify_path",
    "scan_archive",
]
