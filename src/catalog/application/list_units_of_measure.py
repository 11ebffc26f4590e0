"""Application service: List Units of Measure use case (query)."""

from __future__ import annotations

from catalog.application.dto import UnitOfMeasureDTO
from catalog.application.projection import unit_to_dto
from catalog.domain.model.value_objects import UnitType
from catalog.domain.repository.unit_of_measure_repository import (
    UnitOfMeasureRepository,
)


class ListUnitsOfMeasureHandler:

    def __init__(self, unit_repo: UnitOfMeasureRepository) -> None:
        self._unit_repo = unit_repo

    def handle(self, unit_type: str | None = None) -> list[UnitOfMeasureDTO]:
        units = self._unit_repo.list_all()
        if unit_type:
            wanted = UnitType.parse(unit_type)
            units = [u for u in units if u.type is wanted]
        return [unit_to_dto(u) for u in sorted(units, key=lambda u: u.name.lower())]
