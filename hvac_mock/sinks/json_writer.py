# hvac_mock/sinks/json_writer.py
"""
JSON serialisation and local persistence of sensor records.

Two layouts are supported:
- JSON array, indented (dashboards load the whole file)
- JSON lines, one object per line (streaming/bulk loaders)
"""

import json
import logging
from collections.abc import Sequence
from datetime import datetime, timezone
from pathlib import Path

from hvac_mock.telemetry.sensor_record import SensorRecord

logger = logging.getLogger(__name__)

__all__ = [
    "to_json",
    "to_jsonl",
    "save_locally",
    "write_jsonl",
    "default_object_name",
]


def to_json(records: Sequence[SensorRecord]) -> bytes:
    """Serialise records as an indented JSON array (UTF-8)."""
    try:
        payload = json.dumps(
            [record.to_dict() for record in records], indent=2, ensure_ascii=False
        )
    except (TypeError, ValueError) as e:
        raise RuntimeError(f"Failed to serialise HVAC data to JSON: {e}") from e
    return payload.encode("utf-8")


def to_jsonl(records: Sequence[SensorRecord]) -> bytes:
    """Serialise records as JSON lines (UTF-8, trailing newline)."""
    try:
        lines = [json.dumps(record.to_dict(), ensure_ascii=False) for record in records]
    except (TypeError, ValueError) as e:
        raise RuntimeError(f"Failed to serialise HVAC data to JSON lines: {e}") from e
    return "".join(f"{line}\n" for line in lines).encode("utf-8")


def save_locally(data: bytes, path: Path | str) -> Path:
    """Write serialised data to disk, creating the parent directory.

    Raises:
        RuntimeError: If the file cannot be written
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except OSError as e:
        raise RuntimeError(f"Failed to save JSON file locally '{path}': {e}") from e

    logger.info(f"Saved {len(data)} bytes to {path}")
    return path


def write_jsonl(path: Path | str, records: Sequence[SensorRecord]) -> Path:
    """Write records to a JSON-lines file."""
    return save_locally(to_jsonl(records), path)


def default_object_name(now: datetime | None = None, extension: str = "json") -> str:
    """File/object name stamped with the run time, e.g.
    ``hvac_mock_data_20250101T120000Z.json``."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    stamp = now.astimezone(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    return f"hvac_mock_data_{stamp}.{extension}"
