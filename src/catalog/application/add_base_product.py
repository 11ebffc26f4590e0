"""Application service: Add Base Product use case."""

from __future__ import annotations

import logging

from catalog.application.dto import BaseProductDTO
from catalog.application.projection import VariantProjector
from catalog.domain.event_publisher import EventPublisher
from catalog.domain.events import BaseProductCreated
from catalog.domain.exceptions import AlreadyExistsError, EntityNotFoundError
from catalog.domain.model.base_product import BaseProduct
from catalog.domain.repository.base_product_repository import BaseProductRepository
from catalog.domain.repository.category_repository import CategoryRepository

logger = logging.getLogger(__name__)


class AddBaseProductHandler:

    def __init__(
        self,
        base_product_repo: BaseProductRepository,
        category_repo: CategoryRepository,
        publisher: EventPublisher,
        projector: VariantProjector,
    ) -> None:
        self._base_product_repo = base_product_repo
        self._category_repo = category_repo
        self._publisher = publisher
        self._projector = projector

    def handle(
        self,
        name: str,
        user_id: str,
        description: str | None = None,
        category_id: str | None = None,
    ) -> BaseProductDTO:
        """Add a base product. Names are unique across the whole catalog."""
        logger.info("Creating base product '%s' by user %s", name, user_id)

        product = BaseProduct.create(name, description, category_id)

        if self._base_product_repo.get_by_name(product.name) is not None:
            logger.warning("Base product name '%s' already taken", product.name)
            raise AlreadyExistsError(f"Base product '{product.name}' already exists")

        if category_id and self._category_repo.get_by_id(category_id) is None:
            raise EntityNotFoundError(f"Category with ID '{category_id}' not found")

        self._base_product_repo.add(product)
        logger.info("Base product %s created", product.id)

        self._publisher.publish(
            BaseProductCreated(aggregate_id=product.id, user_id=user_id, name=product.name)
        )
        return self._projector.base_product_to_dto(product)
