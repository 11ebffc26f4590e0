"""Application service: Create Product Variant use case.

Coordinates three aggregates: the owning BaseProduct and the referenced
UnitOfMeasure must exist, and the new name must be free among the base
product's variants.
"""

from __future__ import annotations

import logging
import threading

from catalog.application.dto import NewVariant, ProductVariantDTO
from catalog.application.projection import VariantProjector
from catalog.domain.event_publisher import EventPublisher
from catalog.domain.events import ProductVariantCreated, VariantSnapshot
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.product_variant import ProductVariant
from catalog.domain.repository.base_product_repository import BaseProductRepository
from catalog.domain.repository.product_variant_repository import (
    ProductVariantRepository,
)
from catalog.domain.repository.unit_of_measure_repository import (
    UnitOfMeasureRepository,
)
from catalog.domain.service.variant_naming_service import VariantNamingService

logger = logging.getLogger(__name__)


class CreateProductVariantHandler:

    def __init__(
        self,
        variant_repo: ProductVariantRepository,
        base_product_repo: BaseProductRepository,
        unit_repo: UnitOfMeasureRepository,
        publisher: EventPublisher,
        projector: VariantProjector,
    ) -> None:
        self._variant_repo = variant_repo
        self._base_product_repo = base_product_repo
        self._unit_repo = unit_repo
        self._publisher = publisher
        self._projector = projector

    def handle(
        self,
        new_variant: NewVariant,
        user_id: str,
        cancel: threading.Event | None = None,
    ) -> ProductVariantDTO:
        """Create a variant under an existing base product.

        Steps:
        1. Resolve the base product (fail if not found).
        2. Resolve the unit of measure (fail if not found).
        3. Check the name is unique within the base product.
        4. Build the aggregate, persist, publish, return a DTO.
        """
        logger.info(
            "Creating product variant '%s' for base product %s by user %s",
            new_variant.name, new_variant.base_product_id, user_id,
        )

        base_product = self._base_product_repo.get_by_id(new_variant.base_product_id)
        if base_product is None:
            logger.warning("Base product %s not found", new_variant.base_product_id)
            raise EntityNotFoundError(
                f"Base product with ID '{new_variant.base_product_id}' not found"
            )

        unit = self._unit_repo.get_by_id(new_variant.unit_of_measure_id)
        if unit is None:
            logger.warning("Unit of measure %s not found", new_variant.unit_of_measure_id)
            raise EntityNotFoundError(
                f"Unit of measure with ID '{new_variant.unit_of_measure_id}' not found"
            )

        VariantNamingService(self._variant_repo).ensure_name_available(
            new_variant.name, base_product.id
        )

        variant = ProductVariant.create(
            base_product_id=base_product.id,
            name=new_variant.name,
            unit_of_measure_id=unit.id,
            unit_value=new_variant.unit_value,
            stock_quantity=new_variant.stock_quantity,
            usage_notes=new_variant.usage_notes,
        )
        if new_variant.photos:
            variant.update_photos(new_variant.photos)
        if new_variant.dynamic_properties is not None:
            variant.update_dynamic_properties(new_variant.dynamic_properties)

        self._variant_repo.add(variant)
        logger.info("Product variant %s created", variant.id)

        self._publisher.publish(
            ProductVariantCreated(
                aggregate_id=variant.id,
                user_id=user_id,
                variant=VariantSnapshot.of(variant),
            ),
            cancel,
        )
        return self._projector.to_dto(variant, base_product=base_product, unit=unit)
