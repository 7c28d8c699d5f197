"""Tests for cli.py: merge/export/locales commands and exit codes.

Python 3.13+.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from localemerge.cli import main
from tests.helpers.archives import build_zip, read_zip


@pytest.fixture
def archives(tmp_path: Path) -> list[str]:
    """Two archives on disk: en-US (flat) and fr-FR (structured)."""
    first = tmp_path / "app.zip"
    first.write_bytes(build_zip({"en-US.json": {"greeting": "Hi", "bye": "Bye"}}))
    second = tmp_path / "web.zip"
    second.write_bytes(build_zip({
        "fr-FR/trunk/opus_jsons/source.json": [{"key": "greeting", "value": "Bonjour"}],
    }))
    return [str(first), str(second)]


class TestMergeCommand:
    """Test `localemerge merge`."""

    def test_prints_document(
        self, archives: list[str], capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Without -o the document goes to stdout."""
        assert main(["merge", *archives]) == 0
        document = json.loads(capsys.readouterr().out)
        assert document == [
            {"key": "bye", "en-US": "Bye"},
            {"key": "greeting", "en-US": "Hi", "fr-FR": "Bonjour"},
        ]

    def test_writes_output_file(self, archives: list[str], tmp_path: Path) -> None:
        """-o writes the UTF-8 payload to a file."""
        target = tmp_path / "merged.json"
        assert main(["merge", *archives, "-o", str(target)]) == 0
        assert json.loads(target.read_text(encoding="utf-8"))[1]["fr-FR"] == "Bonjour"

    def test_output_directory(self, archives: list[str], tmp_path: Path) -> None:
        """-o pointing at a directory writes merged.json inside it."""
        assert main(["merge", *archives, "-o", str(tmp_path)]) == 0
        assert (tmp_path / "merged.json").is_file()

    def test_preview(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """--preview prints the bounded preview."""
        big = tmp_path / "big.zip"
        big.write_bytes(build_zip({"en-US.json": {f"k{i:05d}": "v" * 50 for i in range(1000)}}))
        assert main(["merge", str(big), "--preview"]) == 0
        assert "--- CONTENT TRUNCATED ---" in capsys.readouterr().out


class TestExportCommand:
    """Test `localemerge export`."""

    def test_single_locale_file(self, archives: list[str], tmp_path: Path) -> None:
        """One locale in one format writes that file."""
        out = tmp_path / "out"
        assert main(["export", *archives, "-l", "fr-FR", "-d", str(out)]) == 0
        assert json.loads((out / "fr_FR_locale.json").read_text(encoding="utf-8")) == {
            "greeting": "Bonjour"
        }

    def test_bundle_with_progress(
        self, archives: list[str], tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Several locales write a bundle and report progress on stderr."""
        argv = ["export", *archives, "-l", "en-US", "fr-FR", "-f", "csv", "-d", str(tmp_path)]
        assert main(argv) == 0
        members = read_zip((tmp_path / "locales_csv_bundle.zip").read_bytes())
        assert list(members) == ["en_US_locale.csv", "fr_FR_locale.csv"]
        assert "100%" in capsys.readouterr().err

    def test_all_known_locales(self, archives: list[str], tmp_path: Path) -> None:
        """--all exports every known locale, present or not, in both formats."""
        argv = ["export", *archives, "--all", "-f", "json", "-f", "csv", "-d", str(tmp_path)]
        assert main(argv) == 0
        members = read_zip((tmp_path / "locales_bundle.zip").read_bytes())
        assert "zh_TW_locale.csv" in members
        assert members["de_DE_locale.json"] == b"{}"

    def test_locale_selection_required(self, archives: list[str]) -> None:
        """Either -l or --all must be given."""
        with pytest.raises(SystemExit) as exc_info:
            main(["export", *archives])
        assert exc_info.value.code == 2


class TestLocalesCommand:
    """Test `localemerge locales`."""

    def test_lists_in_canonical_order(
        self, archives: list[str], capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Found locales are printed one per line."""
        assert main(["locales", *reversed(archives)]) == 0
        assert capsys.readouterr().out.splitlines() == ["en-US", "fr-FR"]

    def test_display_names(self, archives: list[str], capsys: pytest.CaptureFixture[str]) -> None:
        """--names adds CLDR display names."""
        pytest.importorskip("babel")
        assert main(["locales", *archives, "--names"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "en-US\tEnglish (United States)",
            "fr-FR\tFrench (France)",
        ]


class TestExitCodes:
    """Test failure reporting."""

    def test_merge_error_printed_verbatim(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Merge errors exit with 1 and the message on stderr."""
        bad = tmp_path / "bad.zip"
        bad.write_bytes(b"definitely not a zip")
        assert main(["merge", str(bad)]) == 1
        assert capsys.readouterr().err.strip() == (
            "Invalid ZIP file: bad.zip. The file may be corrupt or not a valid ZIP archive."
        )

    def test_unpaired_surrogate(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Unencodable entries exit with 1 instead of a traceback."""
        lone = tmp_path / "lone.zip"
        lone.write_bytes(build_zip({"en-US.json": r'{"k": "\ud800"}'}))
        assert main(["merge", str(lone)]) == 1
        assert capsys.readouterr().err.strip().endswith("unpaired UTF-16 surrogate escape.")

    def test_no_data(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """An archive without locale files exits with 1."""
        empty = tmp_path / "empty.zip"
        empty.write_bytes(build_zip({"docs/": None, "readme.txt": "hi"}))
        assert main(["locales", str(empty)]) == 1
        assert capsys.readouterr().err.startswith("No valid translation files found")

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Unreadable input files exit with 1."""
        assert main(["merge", str(tmp_path / "missing.zip")]) == 1
        assert "Cannot read archive" in capsys.readouterr().err

    def test_usage_error(self) -> None:
        """Unknown commands exit with 2."""
        with pytest.raises(SystemExit) as exc_info:
            main(["frobnicate"])
        assert exc_info.value.code == 2

    def test_invalid_worker_count(self, archives: list[str]) -> None:
        """A non-positive worker count is a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--workers", "0", "merge", *archives])
        assert exc_info.value.code == 2
