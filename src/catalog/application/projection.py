"""Mapping from aggregates to output DTOs.

Variant DTOs carry display fields from the owning base product, its
category and the referenced unit. Those are looked up here so every
handler returns the same shape.
"""

from __future__ import annotations

from catalog.application.dto import BaseProductDTO, ProductVariantDTO, UnitOfMeasureDTO
from catalog.domain.model.base_product import BaseProduct
from catalog.domain.model.product_variant import ProductVariant
from catalog.domain.model.unit_of_measure import UnitOfMeasure
from catalog.domain.repository.base_product_repository import BaseProductRepository
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.unit_of_measure_repository import (
    UnitOfMeasureRepository,
)


class VariantProjector:

    def __init__(
        self,
        base_product_repo: BaseProductRepository,
        unit_repo: UnitOfMeasureRepository,
        category_repo: CategoryRepository | None = None,
    ) -> None:
        self._base_product_repo = base_product_repo
        self._unit_repo = unit_repo
        self._category_repo = category_repo

    def to_dto(
        self,
        variant: ProductVariant,
        base_product: BaseProduct | None = None,
        unit: UnitOfMeasure | None = None,
    ) -> ProductVariantDTO:
        """Project a variant; pass already-loaded relatives to skip lookups."""
        if base_product is None or base_product.id != variant.base_product_id:
            base_product = self._base_product_repo.get_by_id(variant.base_product_id)
        if unit is None or unit.id != variant.unit_of_measure_id:
            unit = self._unit_repo.get_by_id(variant.unit_of_measure_id)

        return ProductVariantDTO(
            id=variant.id,
            base_product_id=variant.base_product_id,
            base_product_name=base_product.name if base_product else None,
            base_product_description=base_product.description if base_product else None,
            base_product_category_id=base_product.category_id if base_product else None,
            base_product_category_name=self._category_name(base_product),
            name=variant.name,
            stock_quantity=str(variant.stock_quantity),
            unit_of_measure_id=variant.unit_of_measure_id,
            unit_of_measure_name=unit.name if unit else None,
            unit_symbol=unit.symbol if unit else None,
            unit_value=str(variant.unit_value),
            usage_notes=variant.usage_notes,
            photos=list(variant.photos),
            dynamic_properties=dict(variant.dynamic_properties),
            created_at=variant.created_at.isoformat(),
            updated_at=variant.updated_at.isoformat(),
        )

    def base_product_to_dto(self, base_product: BaseProduct) -> BaseProductDTO:
        return BaseProductDTO(
            id=base_product.id,
            name=base_product.name,
            description=base_product.description,
            category_id=base_product.category_id,
            category_name=self._category_name(base_product),
            created_at=base_product.created_at.isoformat(),
            updated_at=base_product.updated_at.isoformat(),
        )

    def _category_name(self, base_product: BaseProduct | None) -> str | None:
        if base_product is None or base_product.category_id is None:
            return None
        if self._category_repo is None:
            return None
        category = self._category_repo.get_by_id(base_product.category_id)
        return category.name if category else None


def unit_to_dto(unit: UnitOfMeasure) -> UnitOfMeasureDTO:
    return UnitOfMeasureDTO(
        id=unit.id,
        name=unit.name,
        symbol=unit.symbol,
        type=unit.type.value,
        created_at=unit.created_at.isoformat(),
        updated_at=unit.updated_at.isoformat(),
    )
