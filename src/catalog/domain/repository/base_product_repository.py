"""Abstract repository for the BaseProduct aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.base_product import BaseProduct


class BaseProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, base_product_id: str) -> BaseProduct | None:
        """Return a base product by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> BaseProduct | None:
        """Return a base product by its exact name, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[BaseProduct]:
        """Return every base product."""

    @abstractmethod
    def add(self, base_product: BaseProduct) -> None:
        """Persist a new base product."""

    @abstractmethod
    def update(self, base_product: BaseProduct) -> None:
        """Persist changes to an existing base product."""

    @abstractmethod
    def delete(self, base_product: BaseProduct) -> None:
        """Remove a base product. Variants are removed by the caller."""
