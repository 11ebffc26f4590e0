"""Application service: Add Unit of Measure use case."""

from __future__ import annotations

import logging

from catalog.application.dto import UnitOfMeasureDTO
from catalog.application.projection import unit_to_dto
from catalog.domain.event_publisher import EventPublisher
from catalog.domain.events import UnitOfMeasureCreated
from catalog.domain.exceptions import AlreadyExistsError
from catalog.domain.model.unit_of_measure import UnitOfMeasure
from catalog.domain.model.value_objects import UnitType
from catalog.domain.repository.unit_of_measure_repository import (
    UnitOfMeasureRepository,
)

logger = logging.getLogger(__name__)


class AddUnitOfMeasureHandler:

    def __init__(
        self,
        unit_repo: UnitOfMeasureRepository,
        publisher: EventPublisher,
    ) -> None:
        self._unit_repo = unit_repo
        self._publisher = publisher

    def handle(self, name: str, symbol: str, unit_type: str, user_id: str) -> UnitOfMeasureDTO:
        """Add a unit. Unit names are unique across the catalog."""
        unit = UnitOfMeasure.create(name, symbol, UnitType.parse(unit_type))

        if self._unit_repo.get_by_name(unit.name) is not None:
            logger.warning("Unit of measure name '%s' already taken", unit.name)
            raise AlreadyExistsError(f"Unit of measure '{unit.name}' already exists")

        self._unit_repo.add(unit)
        logger.info("Unit of measure %s (%s) created by user %s", unit.id, unit.symbol, user_id)

        self._publisher.publish(
            UnitOfMeasureCreated(aggregate_id=unit.id, user_id=user_id, symbol=unit.symbol)
        )
        return unit_to_dto(unit)
