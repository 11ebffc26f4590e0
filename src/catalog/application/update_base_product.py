"""Application service: Update Base Product use case.

Partial update: arguments left as ``None`` keep their current values.
"""

from __future__ import annotations

import logging

from catalog.application.dto import BaseProductDTO
from catalog.application.projection import VariantProjector
from catalog.domain.event_publisher import EventPublisher
from catalog.domain.events import BaseProductUpdated
from catalog.domain.exceptions import AlreadyExistsError, EntityNotFoundError
from catalog.domain.repository.base_product_repository import BaseProductRepository
from catalog.domain.repository.category_repository import CategoryRepository

logger = logging.getLogger(__name__)


class UpdateBaseProductHandler:

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
        base_product_id: str,
        user_id: str,
        name: str | None = None,
        description: str | None = None,
        category_id: str | None = None,
    ) -> BaseProductDTO:
        logger.info("Updating base product %s by user %s", base_product_id, user_id)

        product = self._base_product_repo.get_by_id(base_product_id)
        if product is None:
            raise EntityNotFoundError(f"Base product with ID '{base_product_id}' not found")

        if name is not None and name.strip() and name.strip() != product.name:
            existing = self._base_product_repo.get_by_name(name.strip())
            if existing is not None and existing.id != product.id:
                logger.warning("Base product name '%s' already taken", name)
                raise AlreadyExistsError(f"Base product '{name.strip()}' already exists")

        if category_id and self._category_repo.get_by_id(category_id) is None:
            raise EntityNotFoundError(f"Category with ID '{category_id}' not found")

        product.update_details(
            name=name if name is not None else product.name,
            description=description if description is not None else product.description,
            category_id=category_id if category_id is not None else product.category_id,
        )
        self._base_product_repo.update(product)

        self._publisher.publish(
            BaseProductUpdated(aggregate_id=product.id, user_id=user_id, name=product.name)
        )
        return self._projector.base_product_to_dto(product)
