"""Abstract repository for the ProductVariant aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product_variant import ProductVariant


class ProductVariantRepository(ABC):

    @abstractmethod
    def get_by_id(self, variant_id: str) -> ProductVariant | None:
        """Return a variant by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> ProductVariant | None:
        """Return the first variant with this name (any base product), or None."""

    @abstractmethod
    def list_by_base_product_id(self, base_product_id: str) -> list[ProductVariant]:
        """Return every variant owned by a base product."""

    @abstractmethod
    def list_all(self) -> list[ProductVariant]:
        """Return every variant in the catalog."""

    @abstractmethod
    def add(self, variant: ProductVariant) -> None:
        """Persist a new variant."""

    @abstractmethod
    def update(self, variant: ProductVariant) -> None:
        """Persist changes to an existing variant."""

    @abstractmethod
    def delete(self, variant: ProductVariant) -> None:
        """Remove a variant."""
