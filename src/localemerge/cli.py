"""Command-line front end for localemerge.

Reads archive files from disk, runs one merge and writes the rendered
outputs.

Commands:
    merge    Write the combined JSON document (file or stdout)
    export   Write per-locale JSON/CSV files (one file, or a ZIP bundle)
    locales  List the locales found in the archives

Exit codes:
    0: Success.
    1: Merge error (message printed verbatim) or unreadable input file.
    2: Usage error.

Usage:
    localemerge merge app.zip web.zip -o merged.json
    localemerge export app.zip -l en-US -l fr-FR -f csv -d out/
    localemerge locales app.zip --names

Python 3.13+. Babel optional (locales --names).
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from localemerge.archive import ArchiveSource
from localemerge.config import MergeConfig
from localemerge.constants import COMBINED_FILENAME, KNOWN_LOCALES, PREVIEW_LENGTH
from localemerge.diagnostics import LocaleMergeError
from localemerge.engine import MergeEngine
from localemerge.enums import ExportFormat
from localemerge.locale_utils import BabelImportError, locale_display_name
from localemerge.model import MergeResult

__all__ = ["build_parser", "main"]

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all commands."""
    parser = argparse.ArgumentParser(
        prog="localemerge",
        description="Merge per-locale translation files from ZIP archives.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="count",
        default=0,
        help="Log progress to stderr (-v info, -vv debug).",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Worker threads for scanning and parsing (default: executor default).",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    merge_cmd = commands.add_parser("merge", help="Write the combined JSON document.")
    merge_cmd.add_argument("archives", nargs="+", type=Path, metavar="ARCHIVE")
    merge_cmd.add_argument(
        "--output", "-o",
        type=Path,
        help=f"Output file, or directory to write {COMBINED_FILENAME} into (default: stdout).",
    )
    merge_cmd.add_argument(
        "--preview",
        action="store_true",
        help=f"Print the first {PREVIEW_LENGTH} characters instead of the full document.",
    )

    export_cmd = commands.add_parser("export", help="Write per-locale files.")
    export_cmd.add_argument("archives", nargs="+", type=Path, metavar="ARCHIVE")
    selection = export_cmd.add_mutually_exclusive_group(required=True)
    selection.add_argument(
        "--locale", "-l",
        dest="locales",
        action="extend",
        nargs="+",
        metavar="TAG",
        help="Locale to export (repeatable).",
    )
    selection.add_argument(
        "--all",
        action="store_true",
        help="Export every known locale.",
    )
    export_cmd.add_argument(
        "--format", "-f",
        dest="formats",
        action="append",
        choices=[fmt.value for fmt in ExportFormat],
        help="Export format (repeatable, default: json).",
    )
    export_cmd.add_argument(
        "--directory", "-d",
        type=Path,
        default=Path(),
        help="Output directory (default: current directory).",
    )

    locales_cmd = commands.add_parser("locales", help="List locales found in the archives.")
    locales_cmd.add_argument("archives", nargs="+", type=Path, metavar="ARCHIVE")
    locales_cmd.add_argument(
        "--names",
        action="store_true",
        help="Show English display names (requires Babel).",
    )
    return parser


def _read_archives(paths: Sequence[Path]) -> list[ArchiveSource]:
    return [ArchiveSource(name=path.name, data=path.read_bytes()) for path in paths]


def _print_progress(percent: int) -> None:
    print(f"\rBundling... {percent}%", end="\n" if percent == 100 else "", file=sys.stderr)


def _write_merge(args: argparse.Namespace, result: MergeResult) -> None:
    if args.preview:
        print(result.preview)
    elif args.output is None:
        print(result.json_text)
    else:
        target = args.output / COMBINED_FILENAME if args.output.is_dir() else args.output
        target.write_bytes(result.payload)
        print(f"Wrote {target} ({result.byte_size} bytes)", file=sys.stderr)


def _write_export(args: argparse.Namespace, engine: MergeEngine, result: MergeResult) -> None:
    locales = KNOWN_LOCALES if args.all else args.locales
    artifact = engine.export_locales(
        result.rows,
        locales,
        formats=args.formats or [ExportFormat.JSON],
        on_progress=_print_progress,
    )
    args.directory.mkdir(parents=True, exist_ok=True)
    target = args.directory / artifact.filename
    target.write_bytes(artifact.payload)
    print(f"Wrote {target} ({artifact.byte_size} bytes)", file=sys.stderr)


def _write_locales(args: argparse.Namespace, result: MergeResult) -> None:
    for tag in result.locales:
        if not args.names:
            print(tag)
            continue
        name = locale_display_name(tag)
        print(f"{tag}\t{name}" if name is not None else tag)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command-line interface."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = MergeConfig(max_workers=args.workers)
    except ValueError as e:
        parser.error(str(e))

    try:
        sources = _read_archives(args.archives)
    except OSError as e:
        print(f"Cannot read archive: {e}", file=sys.stderr)
        return 1

    with MergeEngine(config) as engine:
        try:
            result = engine.merge(sources)
            match args.command:
                case "merge":
                    _write_merge(args, result)
                case "export":
                    _write_export(args, engine, result)
                case "locales":
                    _write_locales(args, result)
        except LocaleMergeError as e:
            logger.debug("Merge failed with %s", e.code.name)
            print(str(e), file=sys.stderr)
            return 1
        except BabelImportError as e:
            print(str(e), file=sys.stderr)
            return 1
        except OSError as e:
            print(f"Cannot write output: {e}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
