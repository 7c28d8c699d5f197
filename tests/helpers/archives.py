"""In-memory ZIP builders for archive-level tests.

Builds archives from a path -> content mapping so tests read like the
archive listing they describe:

    data = build_zip({
        "en-US.json": {"greeting": "Hello"},
        "fr-FR/trunk/opus_jsons/source.json": [{"key": "greeting", "value": "Bonjour"}],
        "docs/": None,
    })

Values:
    bytes       - written verbatim
    str         - written as UTF-8
    list / dict - serialized with json.dumps
    None        - directory entry (path should end with '/')
"""

from __future__ import annotations

import io
import json
import zipfile
from collections.abc import Mapping

type EntryContent = bytes | str | list[object] | dict[str, object] | None


def build_zip(entries: Mapping[str, EntryContent]) -> bytes:
    """Return ZIP bytes containing ``entries`` in mapping order."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as archive:
        for path, content in entries.items():
            match content:
                case None:
                    archive.writestr(zipfile.ZipInfo(path), b"")
                case bytes():
                    archive.writestr(path, content)
                case str():
                    archive.writestr(path, content.encode("utf-8"))
                case _:
                    archive.writestr(path, json.dumps(content).encode("utf-8"))
    return buffer.getvalue()


def read_zip(data: bytes) -> dict[str, bytes]:
    """Return ``{name: content}`` for every member of a ZIP payload."""
    with zipfile.ZipFile(io.BytesIO(data)) as archive:
        return {info.filename: archive.read(info) for info in archive.infolist()}
