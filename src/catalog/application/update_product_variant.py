"""Application service: Update Product Variant use case.

Partial update: every field left as ``None`` keeps its current value.
Cross-aggregate rules checked before anything is mutated:

1. the variant exists,
2. a changed unit of measure exists,
3. a changed name is not used by a sibling under the same base product.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Union

from catalog.application.dto import BulkUpdateError, ProductVariantDTO, VariantUpdate
from catalog.application.projection import VariantProjector
from catalog.domain.event_publisher import EventPublisher
from catalog.domain.events import ProductVariantUpdated, VariantSnapshot
from catalog.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    ErrorKind,
    ValidationError,
)
from catalog.domain.model.unit_of_measure import UnitOfMeasure
from catalog.domain.repository.product_variant_repository import (
    ProductVariantRepository,
)
from catalog.domain.repository.unit_of_measure_repository import (
    UnitOfMeasureRepository,
)
from catalog.domain.service.variant_naming_service import VariantNamingService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VariantUpdated:
    variant: ProductVariantDTO


@dataclass(frozen=True)
class VariantUpdateFailed:
    error: BulkUpdateError


UpdateOutcome = Union[VariantUpdated, VariantUpdateFailed]


class UpdateProductVariantHandler:

    def __init__(
        self,
        variant_repo: ProductVariantRepository,
        unit_repo: UnitOfMeasureRepository,
        publisher: EventPublisher,
        projector: VariantProjector,
    ) -> None:
        self._variant_repo = variant_repo
        self._unit_repo = unit_repo
        self._publisher = publisher
        self._projector = projector

    def handle(
        self,
        update: VariantUpdate,
        user_id: str,
        cancel: threading.Event | None = None,
    ) -> ProductVariantDTO:
        """Apply a partial update. Every failure propagates to the caller."""
        logger.info("Updating product variant %s by user %s", update.variant_id, user_id)

        variant = self._variant_repo.get_by_id(update.variant_id)
        if variant is None:
            logger.warning("Product variant %s not found", update.variant_id)
            raise EntityNotFoundError(
                f"Product variant with ID '{update.variant_id}' not found"
            )

        if update.unit_of_measure_id is not None and not isinstance(
            update.unit_of_measure_id, str
        ):
            raise ValidationError("Unit of measure ID must be text")

        unit: UnitOfMeasure | None = None
        if (
            update.unit_of_measure_id is not None
            and update.unit_of_measure_id != variant.unit_of_measure_id
        ):
            unit = self._unit_repo.get_by_id(update.unit_of_measure_id)
            if unit is None:
                logger.warning("Unit of measure %s not found", update.unit_of_measure_id)
                raise EntityNotFoundError(
                    f"Unit of measure with ID '{update.unit_of_measure_id}' not found"
                )

        if update.name is not None and update.name != variant.name:
            VariantNamingService(self._variant_repo).ensure_name_available(
                update.name, variant.base_product_id, variant_id=variant.id
            )

        variant.apply_update(
            name=update.name,
            unit_of_measure_id=update.unit_of_measure_id,
            unit_value=update.unit_value,
            usage_notes=update.usage_notes,
            stock_quantity=update.stock_quantity,
            dynamic_properties=update.dynamic_properties,
        )
        self._variant_repo.update(variant)
        logger.info("Product variant %s updated", variant.id)

        self._publisher.publish(
            ProductVariantUpdated(
                aggregate_id=variant.id,
                user_id=user_id,
                variant=VariantSnapshot.of(variant),
            ),
            cancel,
        )
        return self._projector.to_dto(variant, unit=unit)

    def try_handle(
        self,
        update: VariantUpdate,
        user_id: str,
        cancel: threading.Event | None = None,
    ) -> UpdateOutcome:
        """Same as ``handle`` but reports failure as a value instead of raising.

        Domain errors keep their own kind; anything else (a repository
        or publisher fault) is classified as UNEXPECTED.
        """
        try:
            return VariantUpdated(self.handle(update, user_id, cancel))
        except DomainException as exc:
            return VariantUpdateFailed(
                BulkUpdateError(update.variant_id, str(exc), exc.kind)
            )
        except Exception as exc:
            logger.exception("Unexpected failure updating variant %s", update.variant_id)
            message = str(exc) or type(exc).__name__
            return VariantUpdateFailed(
                BulkUpdateError(update.variant_id, message, ErrorKind.of(exc))
            )
