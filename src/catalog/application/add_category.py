"""Application service: Add Category use case."""

from __future__ import annotations

import logging

from catalog.domain.exceptions import AlreadyExistsError
from catalog.domain.model.category import Category
from catalog.domain.repository.category_repository import CategoryRepository

logger = logging.getLogger(__name__)


class AddCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, name: str, description: str | None = None) -> Category:
        category = Category.create(name, description)
        if self._category_repo.get_by_name(category.name) is not None:
            raise AlreadyExistsError(f"Category '{category.name}' already exists")

        self._category_repo.save(category)
        logger.info("Category %s '%s' created", category.id, category.name)
        return category
