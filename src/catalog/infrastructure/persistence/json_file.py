"""Shared file handling for the JSON-backed repositories.

Each repository keeps one JSON array in its own file. Every write
rewrites the whole file, so each ``add``/``update``/``delete`` is its
own commit.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path


class JsonFile:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    def load(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def persist(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def upsert(self, record: dict) -> None:
        """Replace the record with the same ``id``, otherwise append."""
        records = self.load()
        for i, raw in enumerate(records):
            if raw["id"] == record["id"]:
                records[i] = record
                break
        else:
            records.append(record)
        self.persist(records)

    def remove(self, record_id: str) -> None:
        self.persist([raw for raw in self.load() if raw["id"] != record_id])

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")


def timestamp_fields(raw: dict, *names: str) -> dict[str, datetime]:
    """Keyword arguments for the timestamps present in *raw*."""
    return {name: datetime.fromisoformat(raw[name]) for name in names if raw.get(name)}
