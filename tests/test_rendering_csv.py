"""Tests for rendering/csv_output.py: per-locale CSV.

Python 3.13+.
"""

from __future__ import annotations

import csv
import io

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from localemerge.merging import order_table
from localemerge.rendering import CSV_HEADER, UTF8_BOM, render_csv, render_locale_csv
from tests.strategies import translation_keys, translation_values


def _read_back(text: str) -> list[list[str]]:
    assert text.startswith(UTF8_BOM)
    return list(csv.reader(io.StringIO(text.removeprefix(UTF8_BOM), newline="")))


class TestCsvLayout:
    """Test the exact CSV layout."""

    def test_bom_header_and_full_quoting(self) -> None:
        """Every field is quoted and rows end with LF."""
        text = render_csv([("greeting", "Hello")])
        assert text == '\ufeff"Key","Value"\n"greeting","Hello"\n'

    def test_embedded_quotes_are_doubled(self) -> None:
        """Double quotes inside a field are escaped by doubling."""
        assert render_csv([("q", 'say "hi"')]).endswith('"q","say ""hi"""\n')

    def test_missing_values_render_empty(self) -> None:
        """None fields become empty quoted fields."""
        assert render_csv([("k", None)]).endswith('"k",""\n')

    def test_empty_table_is_header_only(self) -> None:
        """No pairs still yields the header row."""
        assert render_csv([]) == '\ufeff"Key","Value"\n'


class TestLocaleCsv:
    """Test render_locale_csv over ordered rows."""

    def test_only_keys_present_for_locale(self) -> None:
        """Keys missing for the locale are left out, key order kept."""
        rows = order_table({
            "b": {"fr-FR": "B"},
            "a": {"fr-FR": "A, with comma"},
            "c": {"en-US": "C"},
        })
        assert _read_back(render_locale_csv(rows, "fr-FR")) == [
            list(CSV_HEADER),
            ["a", "A, with comma"],
            ["b", "B"],
        ]

    def test_round_trip_with_special_characters(self) -> None:
        """Commas, quotes and newlines survive a standard CSV reader."""
        value = 'line one,\n"quoted" line two\r\nend'
        rows = order_table({"k": {"de-DE": value}})
        assert _read_back(render_locale_csv(rows, "de-DE"))[1] == ["k", value]

    @given(
        pairs=st.dictionaries(translation_keys, translation_values(), max_size=10),
    )
    def test_round_trip_property(self, pairs: dict[str, str]) -> None:
        """Any key/value set reads back exactly through csv.reader."""
        rows = order_table({key: {"en-US": value} for key, value in pairs.items()})
        parsed = _read_back(render_locale_csv(rows, "en-US"))
        assert parsed[0] == list(CSV_HEADER)
        assert parsed[1:] == [[key, pairs[key]] for key in sorted(pairs)]


@pytest.mark.fuzz
class TestCsvRoundTripIntensive:
    """Large generated tables through render_csv and csv.reader."""

    @given(
        pairs=st.dictionaries(translation_keys, translation_values(), min_size=1, max_size=200),
    )
    @settings(max_examples=1000, deadline=None)
    def test_every_row_reads_back(self, pairs: dict[str, str]) -> None:
        """No key or value can break row boundaries."""
        parsed = _read_back(render_csv(sorted(pairs.items())))
        assert len(parsed) == len(pairs) + 1
        assert dict(parsed[1:]) == pairs
