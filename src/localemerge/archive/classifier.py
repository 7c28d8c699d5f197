"""Locale path classification.

Decides whether an archive entry path denotes a locale data file and
extracts the locale tag. Classification is a small ordered rule table
(layout -> extraction function); the first rule that yields a tag wins.

Accepted conventions:
    structured: <locale>/trunk/opus_jsons/(<any>/)?source.json
                (the locale may follow any non-letter, e.g. "app_en-US/...")
    flat:       <locale>.json at any depth outside hidden/metadata folders

Locale grammar (purely pattern-based, never a lookup):
    [A-Za-z]{2,3}(-[A-Za-z0-9]{2,4})?

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from localemerge.enums import LayoutKind
from localemerge.types import EntryPath, LocaleTag

__all__ = [
    "CLASSIFICATION_RULES",
    "LOCALE_PATTERN",
    "METADATA_PREFIXES",
    "ClassificationRule",
    "LocaleMatch",
    "classify_path",
    "flat_locale",
    "structured_locale",
]

LOCALE_PATTERN: str = r"[A-Za-z]{2,3}(?:-[A-Za-z0-9]{2,4})?"

# Segments starting with these are hidden files or macOS resource-fork folders.
METADATA_PREFIXES: tuple[str, ...] = (".", "__MACOSX")

# The locale must not continue a run of letters: "app_en-US/..." is en-US,
# "xen-US/..." is xen-US and never en-US.
_STRUCTURED_RE = re.compile(
    rf"(?<![A-Za-z])(?P<locale>{LOCALE_PATTERN})/trunk/opus_jsons/(?:.+/)?source\.json\Z"
)
_FLAT_RE = re.compile(rf"(?P<locale>{LOCALE_PATTERN})\.json")

# "." segments ("./en-US.json") name the current folder, not a hidden one.
_CURRENT_DIR = "."


def structured_locale(path: EntryPath) -> LocaleTag | None:
    """Extract the locale of a structured-layout path, or None."""
    match = _STRUCTURED_RE.search(path)
    return match.group("locale") if match else None


def flat_locale(path: EntryPath) -> LocaleTag | None:
    """Extract the locale of a flat-layout path, or None.

    Hidden files and anything below a hidden or metadata folder are never
    locale files, whatever their name. Plain "." segments are ignored.
    """
    segments = [segment for segment in path.split("/") if segment != _CURRENT_DIR]
    if not segments or any(segment.startswith(METADATA_PREFIXES) for segment in segments):
        return None
    match = _FLAT_RE.fullmatch(segments[-1])
    return match.group("locale") if match else None


@dataclass(frozen=True, slots=True)
class ClassificationRule:
    """One accepted path convention."""

    layout: LayoutKind
    extract: Callable[[EntryPath], LocaleTag | None]


@dataclass(frozen=True, slots=True)
class LocaleMatch:
    """Successful classification of an entry path."""

    locale: LocaleTag
    layout: LayoutKind


# Order matters: structured paths also end in a *.json filename.
CLASSIFICATION_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule(LayoutKind.STRUCTURED, structured_locale),
    ClassificationRule(LayoutKind.FLAT, flat_locale),
)


def classify_path(
    path: EntryPath,
    rules: Sequence[ClassificationRule] = CLASSIFICATION_RULES,
) -> LocaleMatch | None:
    """Classify an archive entry path.

    Args:
        path: Entry path relative to the archive root ('/'-separated)
        rules: Ordered rule table (defaults to the two accepted conventions)

    Returns:
        LocaleMatch for the first matching rule, or None when the path is
        not a locale data file. A miss is not an error.

    Example:
        >>> classify_path("fr-FR/trunk/opus_jsons/source.json")
        LocaleMatch(locale='fr-FR', layout=<LayoutKind.STRUCTURED: 'structured'>)
        >>> classify_path("strings/es-419.json").locale
        'es-419'
        >>> classify_path("__MACOSX/._en-US.json") is None
        True
    """
    for rule in rules:
        locale = rule.extract(path)
        if locale is not None:
            return LocaleMatch(locale=locale, layout=rule.layout)
    return None
