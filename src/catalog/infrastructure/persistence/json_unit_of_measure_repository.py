"""JSON-file-backed implementation of UnitOfMeasureRepository."""

from __future__ import annotations

from pathlib import Path

from catalog.domain.model.unit_of_measure import UnitOfMeasure
from catalog.domain.model.value_objects import UnitType
from catalog.domain.repository.unit_of_measure_repository import (
    UnitOfMeasureRepository,
)
from catalog.infrastructure.persistence.json_file import JsonFile, timestamp_fields


class JsonUnitOfMeasureRepository(UnitOfMeasureRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def get_by_id(self, unit_id: str) -> UnitOfMeasure | None:
        for raw in self._file.load():
            if raw["id"] == unit_id:
                return self._to_domain(raw)
        return None

    def get_by_name(self, name: str) -> UnitOfMeasure | None:
        wanted = name.strip().lower()
        for raw in self._file.load():
            if raw["name"].lower() == wanted:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[UnitOfMeasure]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def add(self, unit: UnitOfMeasure) -> None:
        self._file.upsert(self._to_raw(unit))

    def update(self, unit: UnitOfMeasure) -> None:
        self._file.upsert(self._to_raw(unit))

    def delete(self, unit: UnitOfMeasure) -> None:
        self._file.remove(unit.id)

    @staticmethod
    def _to_raw(unit: UnitOfMeasure) -> dict:
        return {
            "id": unit.id,
            "name": unit.name,
            "symbol": unit.symbol,
            "type": unit.type.value,
            "created_at": unit.created_at.isoformat(),
            "updated_at": unit.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> UnitOfMeasure:
        return UnitOfMeasure(
            id=raw["id"],
            name=raw["name"],
            symbol=raw["symbol"],
            type=UnitType(raw["type"]),
            **timestamp_fields(raw, "created_at", "updated_at"),
        )
