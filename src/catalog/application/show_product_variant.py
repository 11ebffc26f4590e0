"""Application service: Show Product Variant use case (query)."""

from __future__ import annotations

from catalog.application.dto import ProductVariantDTO
from catalog.application.projection import VariantProjector
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.repository.product_variant_repository import (
    ProductVariantRepository,
)


class ShowProductVariantHandler:

    def __init__(
        self,
        variant_repo: ProductVariantRepository,
        projector: VariantProjector,
    ) -> None:
        self._variant_repo = variant_repo
        self._projector = projector

    def handle(self, variant_id: str) -> ProductVariantDTO:
        variant = self._variant_repo.get_by_id(variant_id)
        if variant is None:
            raise EntityNotFoundError(f"Product variant with ID '{variant_id}' not found")
        return self._projector.to_dto(variant)
