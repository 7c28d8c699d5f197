"""Hypothesis strategies for localemerge property-based testing.

Usage:
    from tests.strategies import locale_tags, merged_tables
"""

from .localization import (
    locale_tags,
    merged_tables,
    translation_keys,
    translation_values,
)

__all__ = [
    "locale_tags",
    "merged_tables",
    "translation_keys",
    "translation_values",
]
