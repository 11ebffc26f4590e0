"""JSON-file-backed implementation of ProductVariantRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from catalog.domain.model.product_variant import ProductVariant
from catalog.domain.repository.product_variant_repository import (
    ProductVariantRepository,
)
from catalog.infrastructure.persistence.json_file import JsonFile, timestamp_fields


class JsonProductVariantRepository(ProductVariantRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- ProductVariantRepository interface -----------------------------------

    def get_by_id(self, variant_id: str) -> ProductVariant | None:
        for raw in self._file.load():
            if raw["id"] == variant_id:
                return self._to_domain(raw)
        return None

    def get_by_name(self, name: str) -> ProductVariant | None:
        wanted = name.strip().lower()
        for raw in self._file.load():
            if raw["name"].lower() == wanted:
                return self._to_domain(raw)
        return None

    def list_by_base_product_id(self, base_product_id: str) -> list[ProductVariant]:
        return [
            self._to_domain(raw)
            for raw in self._file.load()
            if raw["base_product_id"] == base_product_id
        ]

    def list_all(self) -> list[ProductVariant]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def add(self, variant: ProductVariant) -> None:
        self._file.upsert(self._to_raw(variant))

    def update(self, variant: ProductVariant) -> None:
        self._file.upsert(self._to_raw(variant))

    def delete(self, variant: ProductVariant) -> None:
        self._file.remove(variant.id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(variant: ProductVariant) -> dict:
        return {
            "id": variant.id,
            "base_product_id": variant.base_product_id,
            "name": variant.name,
            "stock_quantity": str(variant.stock_quantity),
            "unit_of_measure_id": variant.unit_of_measure_id,
            "unit_value": str(variant.unit_value),
            "usage_notes": variant.usage_notes,
            "photos": list(variant.photos),
            "dynamic_properties": dict(variant.dynamic_properties),
            "created_at": variant.created_at.isoformat(),
            "updated_at": variant.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> ProductVariant:
        return ProductVariant(
            id=raw["id"],
            base_product_id=raw["base_product_id"],
            name=raw["name"],
            stock_quantity=Decimal(raw["stock_quantity"]),
            unit_of_measure_id=raw["unit_of_measure_id"],
            unit_value=Decimal(raw["unit_value"]),
            usage_notes=raw.get("usage_notes"),
            photos=list(raw.get("photos", [])),
            dynamic_properties=dict(raw.get("dynamic_properties", {})),
            **timestamp_fields(raw, "created_at", "updated_at"),
        )
