"""Application service: Delete Product Variant use case.

Only a variant with no stock may be removed. A variant that still holds
stock is a rule violation (InvalidOperationError), distinct from a
missing variant (EntityNotFoundError).
"""

from __future__ import annotations

import logging
import threading

from catalog.domain.event_publisher import EventPublisher
from catalog.domain.events import ProductVariantDeleted, VariantSnapshot
from catalog.domain.exceptions import EntityNotFoundError, InvalidOperationError
from catalog.domain.repository.product_variant_repository import (
    ProductVariantRepository,
)

logger = logging.getLogger(__name__)


class DeleteProductVariantHandler:

    def __init__(
        self,
        variant_repo: ProductVariantRepository,
        publisher: EventPublisher,
    ) -> None:
        self._variant_repo = variant_repo
        self._publisher = publisher

    def handle(
        self,
        variant_id: str,
        user_id: str,
        cancel: threading.Event | None = None,
    ) -> None:
        logger.info("Deleting product variant %s by user %s", variant_id, user_id)

        variant = self._variant_repo.get_by_id(variant_id)
        if variant is None:
            logger.warning("Product variant %s not found", variant_id)
            raise EntityNotFoundError(f"Product variant with ID '{variant_id}' not found")

        try:
            variant.ensure_can_be_deleted()
        except InvalidOperationError:
            logger.warning(
                "Refusing to delete product variant %s with stock %s",
                variant_id, variant.stock_quantity,
            )
            raise

        self._variant_repo.delete(variant)
        logger.info("Product variant %s deleted", variant_id)

        self._publisher.publish(
            ProductVariantDeleted(
                aggregate_id=variant.id,
                user_id=user_id,
                variant=VariantSnapshot.of(variant),
            ),
            cancel,
        )
