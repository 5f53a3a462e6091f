"""JSON encoding helpers shared by the stores and the exporter."""

import json
import logging
import os
import tempfile
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from logcake.tracking.models import TimeEntry

logger = logging.getLogger(__name__)


def write_json(path: Path, payload: Any) -> None:
    """Write ``payload`` as pretty-printed JSON, replacing ``path`` atomically.

    Raises:
        OSError: If the directory or file cannot be written
        TypeError: If the payload is not JSON serializable
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)
            f.write("\n")
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def read_json(path: Path) -> Any:
    """Read a JSON document.

    Raises:
        OSError: If the file cannot be read
        json.JSONDecodeError: If the content is not valid JSON
    """
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def encode_entries(entries: Iterable[TimeEntry]) -> list[dict[str, Any]]:
    return [entry.to_dict() for entry in entries]


def decode_entries(data: Any) -> list[TimeEntry]:
    """Decode a JSON array of entries, skipping malformed records."""
    if not isinstance(data, list):
        logger.error(f"Expected a JSON array of entries, got {type(data).__name__}")
        return []

    entries = []
    for item in data:
        try:
            entries.append(TimeEntry.from_dict(item))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Skipping invalid entry {item!r}: {e}")
    return entries


def write_entries(path: Path, entries: Iterable[TimeEntry]) -> None:
    """Overwrite ``path`` with the JSON array of ``entries``."""
    write_json(path, encode_entries(entries))


__all__ = [
    "decode_entries",
    "encode_entries",
    "read_json",
    "write_entries",
    "write_json",
]
