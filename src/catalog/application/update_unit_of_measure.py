"""Application service: Update Unit of Measure use case."""

from __future__ import annotations

import logging

from catalog.application.dto import UnitOfMeasureDTO
from catalog.application.projection import unit_to_dto
from catalog.domain.event_publisher import EventPublisher
from catalog.domain.events import UnitOfMeasureUpdated
from catalog.domain.exceptions import AlreadyExistsError, EntityNotFoundError
from catalog.domain.model.value_objects import UnitType
from catalog.domain.repository.unit_of_measure_repository import (
    UnitOfMeasureRepository,
)

logger = logging.getLogger(__name__)


class UpdateUnitOfMeasureHandler:

    def __init__(
        self,
        unit_repo: UnitOfMeasureRepository,
        publisher: EventPublisher,
    ) -> None:
        self._unit_repo = unit_repo
        self._publisher = publisher

    def handle(
        self,
        unit_id: str,
        user_id: str,
        name: str | None = None,
        symbol: str | None = None,
        unit_type: str | None = None,
    ) -> UnitOfMeasureDTO:
        unit = self._unit_repo.get_by_id(unit_id)
        if unit is None:
            raise EntityNotFoundError(f"Unit of measure with ID '{unit_id}' not found")

        if name is not None and name.strip() and name.strip() != unit.name:
            existing = self._unit_repo.get_by_name(name.strip())
            if existing is not None and existing.id != unit.id:
                raise AlreadyExistsError(f"Unit of measure '{name.strip()}' already exists")

        unit.update_details(
            name=name if name is not None else unit.name,
            symbol=symbol if symbol is not None else unit.symbol,
            type=UnitType.parse(unit_type) if unit_type is not None else unit.type,
        )
        self._unit_repo.update(unit)
        logger.info("Unit of measure %s updated by user %s", unit.id, user_id)

        self._publisher.publish(
            UnitOfMeasureUpdated(aggregate_id=unit.id, user_id=user_id, symbol=unit.symbol)
        )
        return unit_to_dto(unit)
