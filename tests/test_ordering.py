"""Tests for merging/ordering.py: canonical key and locale order.

Python 3.13+.
"""

from __future__ import annotations

from hypothesis import event, given
from hypothesis import strategies as st

from localemerge.constants import KNOWN_LOCALES, LOCALE_PRIORITY, PRIMARY_LOCALE
from localemerge.merging import locale_sort_key, order_table, sort_keys, sort_locales
from localemerge.model import TranslationRow
from tests.strategies import locale_tags, merged_tables


class TestLocaleOrder:
    """Test the canonical locale order."""

    def test_primary_then_ranked_then_unlisted(self) -> None:
        """Primary first, ranked by table, unlisted by string comparison."""
        tags = ["zz-ZZ", "zh-TW", "aa", "en-US", "de-DE", "fr-FR", "en-GB"]
        assert sort_locales(tags) == ("en-US", "de-DE", "en-GB", "fr-FR", "zh-TW", "aa", "zz-ZZ")

    def test_known_locales_are_in_canonical_order(self) -> None:
        """The known locale list is already canonically ordered."""
        assert sort_locales(KNOWN_LOCALES) == KNOWN_LOCALES
        assert KNOWN_LOCALES[0] == PRIMARY_LOCALE

    def test_duplicates_collapse(self) -> None:
        """sort_locales returns distinct tags."""
        assert sort_locales(["fr-FR", "fr-FR", "en-US"]) == ("en-US", "fr-FR")

    def test_tags_are_case_sensitive(self) -> None:
        """Tags are compared literally, never normalized."""
        assert sort_locales(["en-us", "en-US"]) == ("en-US", "en-us")
        assert locale_sort_key("EN-US")[0] == 2

    @given(tags=st.lists(locale_tags(), min_size=1, max_size=12))
    def test_primary_always_first(self, tags: list[str]) -> None:
        """When present, the primary locale leads the order."""
        ordered = sort_locales(tags)
        if PRIMARY_LOCALE in tags:
            event("outcome=primary_present")
            assert ordered[0] == PRIMARY_LOCALE
        else:
            event("outcome=primary_absent")
            assert PRIMARY_LOCALE not in ordered

    @given(tags=st.lists(locale_tags(), max_size=12))
    def test_order_is_input_order_independent(self, tags: list[str]) -> None:
        """Reversing the input never changes the result."""
        assert sort_locales(tags) == sort_locales(reversed(tags))

    @given(tags=st.lists(locale_tags(), max_size=12))
    def test_ranked_before_unlisted(self, tags: list[str]) -> None:
        """Ranked tags precede every unlisted tag."""
        ordered = sort_locales(tags)
        kinds = [locale_sort_key(tag)[0] for tag in ordered]
        assert kinds == sorted(kinds)
        ranked = [tag for tag in ordered if tag in LOCALE_PRIORITY]
        assert ranked == [tag for tag in LOCALE_PRIORITY if tag in ranked]


class TestKeyOrder:
    """Test the key order."""

    def test_code_point_order(self) -> None:
        """Keys sort by code point, so uppercase precedes lowercase."""
        assert sort_keys(["b", "a", "B", "_x", "ä", "10", "9"]) == [
            "10", "9", "B", "_x", "a", "b", "ä",
        ]


class TestOrderTable:
    """Test ordered result construction."""

    def test_rows_sorted_with_present_locales_only(self) -> None:
        """Each row lists only the locales it has, in canonical order."""
        table = {
            "greeting": {"fr-FR": "Bonjour", "en-US": "Hello"},
            "bye": {"fr-FR": "Au revoir"},
        }
        assert order_table(table) == (
            TranslationRow("bye", (("fr-FR", "Au revoir"),)),
            TranslationRow("greeting", (("en-US", "Hello"), ("fr-FR", "Bonjour"))),
        )

    def test_locale_filter(self) -> None:
        """Only the given locales are considered."""
        table = {"k": {"fr-FR": "F", "en-US": "E", "de-DE": "D"}}
        rows = order_table(table, {"fr-FR", "en-US"})
        assert rows[0].values == (("en-US", "E"), ("fr-FR", "F"))

    @given(table=merged_tables())
    def test_every_value_is_kept_in_order(self, table: dict[str, dict[str, str]]) -> None:
        """Rows are key-sorted and carry exactly the table's values."""
        rows = order_table(table)
        assert [row.key for row in rows] == sorted(table)
        for row in rows:
            assert dict(row.values) == table[row.key]
            assert row.locales == sort_locales(row.locales)
