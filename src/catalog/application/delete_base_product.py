"""Application service: Delete Base Product use case.

A base product owns its variants. Without ``cascade`` a product that
still has variants is kept; with ``cascade`` its variants are removed
first, regardless of their stock.
"""

from __future__ import annotations

import logging

from catalog.domain.event_publisher import EventPublisher
from catalog.domain.events import BaseProductDeleted
from catalog.domain.exceptions import EntityNotFoundError, InvalidOperationError
from catalog.domain.repository.base_product_repository import BaseProductRepository
from catalog.domain.repository.product_variant_repository import (
    ProductVariantRepository,
)

logger = logging.getLogger(__name__)


class DeleteBaseProductHandler:

    def __init__(
        self,
        base_product_repo: BaseProductRepository,
        variant_repo: ProductVariantRepository,
        publisher: EventPublisher,
    ) -> None:
        self._base_product_repo = base_product_repo
        self._variant_repo = variant_repo
        self._publisher = publisher

    def handle(self, base_product_id: str, user_id: str, cascade: bool = False) -> None:
        logger.info(
            "Deleting base product %s by user %s (cascade=%s)",
            base_product_id, user_id, cascade,
        )

        product = self._base_product_repo.get_by_id(base_product_id)
        if product is None:
            raise EntityNotFoundError(f"Base product with ID '{base_product_id}' not found")

        variants = self._variant_repo.list_by_base_product_id(product.id)
        if variants and not cascade:
            logger.warning(
                "Base product %s still has %d variants", product.id, len(variants)
            )
            raise InvalidOperationError(
                f"Base product '{product.name}' has {len(variants)} variant(s); "
                f"delete them first or use cascade"
            )

        for variant in variants:
            self._variant_repo.delete(variant)
        self._base_product_repo.delete(product)
        logger.info("Base product %s deleted with %d variants", product.id, len(variants))

        self._publisher.publish(
            BaseProductDeleted(
                aggregate_id=product.id,
                user_id=user_id,
                deleted_variant_ids=tuple(v.id for v in variants),
            )
        )
