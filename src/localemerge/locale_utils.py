"""Locale tag utilities.

Tags are matched literally everywhere in the merge pipeline; nothing here
normalizes a tag for lookup. This module only derives presentation data:
export filename stems and, when Babel is installed, human-readable display
names from CLDR.

Babel is optional:
    - Core install: `pip install localemerge` (no external dependencies)
    - Display names: `pip install localemerge[babel]`

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from localemerge.types import LocaleTag

__all__ = [
    "BabelImportError",
    "is_babel_available",
    "locale_display_name",
    "locale_file_stem",
    "require_babel",
]


def locale_file_stem(tag: LocaleTag) -> str:
    """Return the filename stem for a tag ('-' replaced by '_').

    Example:
        >>> locale_file_stem("es-419")
        'es_419'
    """
    return tag.replace("-", "_")


@functools.lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class BabelImportError(ImportError):
    """Raised when Babel is required but not installed."""

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring Babel
        """
        message = (
            f"{feature} requires Babel for CLDR locale data. "
            "Install with: pip install localemerge[babel]"
        )
        super().__init__(message)
        self.feature = feature


def is_babel_available() -> bool:
    """Check if Babel is installed."""
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Raise BabelImportError if Babel is not installed.

    Args:
        feature: Name of the feature requiring Babel (for error message)
    """
    if not _check_babel_available():
        raise BabelImportError(feature)


@functools.lru_cache(maxsize=128)
def locale_display_name(tag: LocaleTag, display_locale: str = "en") -> str | None:
    """Return the CLDR display name of a tag, or None when CLDR has none.

    Args:
        tag: Locale tag as found in the archive (e.g., 'pt-BR', 'es-419')
        display_locale: Language of the returned name

    Returns:
        Display name such as 'Portuguese (Brazil)', or None for tags CLDR
        does not recognize

    Raises:
        BabelImportError: If Babel is not installed

    Example:
        >>> locale_display_name("fr-CA")
        'French (Canada)'
        >>> locale_display_name("xx-QQ") is None
        True
    """
    require_babel("locale_display_name")
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale, UnknownLocaleError  # noqa: PLC0415

    try:
        locale = Locale.parse(tag, sep="-")
    except (UnknownLocaleError, ValueError):
        return None
    return locale.get_display_name(display_locale)
