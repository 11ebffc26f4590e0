"""Application service: Delete Unit of Measure use case.

Variants reference units without owning them, so a unit that is still
referenced is kept (restrict, not cascade).
"""

from __future__ import annotations

import logging

from catalog.domain.event_publisher import EventPublisher
from catalog.domain.events import UnitOfMeasureDeleted
from catalog.domain.exceptions import EntityNotFoundError, InvalidOperationError
from catalog.domain.repository.product_variant_repository import (
    ProductVariantRepository,
)
from catalog.domain.repository.unit_of_measure_repository import (
    UnitOfMeasureRepository,
)

logger = logging.getLogger(__name__)


class DeleteUnitOfMeasureHandler:

    def __init__(
        self,
        unit_repo: UnitOfMeasureRepository,
        variant_repo: ProductVariantRepository,
        publisher: EventPublisher,
    ) -> None:
        self._unit_repo = unit_repo
        self._variant_repo = variant_repo
        self._publisher = publisher

    def handle(self, unit_id: str, user_id: str) -> None:
        unit = self._unit_repo.get_by_id(unit_id)
        if unit is None:
            logger.warning("Unit of measure %s not found", unit_id)
            raise EntityNotFoundError(f"Unit of measure with ID '{unit_id}' not found")

        in_use = sum(
            1 for v in self._variant_repo.list_all() if v.unit_of_measure_id == unit.id
        )
        if in_use:
            logger.warning("Unit of measure %s is used by %d variants", unit.id, in_use)
            raise InvalidOperationError(
                f"Unit of measure '{unit.name}' is used by {in_use} product variant(s)"
            )

        self._unit_repo.delete(unit)
        logger.info("Unit of measure %s deleted by user %s", unit.id, user_id)

        self._publisher.publish(UnitOfMeasureDeleted(aggregate_id=unit.id, user_id=user_id))
