"""JSON-file-backed implementation of BaseProductRepository."""

from __future__ import annotations

from pathlib import Path

from catalog.domain.model.base_product import BaseProduct
from catalog.domain.repository.base_product_repository import BaseProductRepository
from catalog.infrastructure.persistence.json_file import JsonFile, timestamp_fields


class JsonBaseProductRepository(BaseProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def get_by_id(self, base_product_id: str) -> BaseProduct | None:
        for raw in self._file.load():
            if raw["id"] == base_product_id:
                return self._to_domain(raw)
        return None

    def get_by_name(self, name: str) -> BaseProduct | None:
        wanted = name.strip().lower()
        for raw in self._file.load():
            if raw["name"].lower() == wanted:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[BaseProduct]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def add(self, base_product: BaseProduct) -> None:
        self._file.upsert(self._to_raw(base_product))

    def update(self, base_product: BaseProduct) -> None:
        self._file.upsert(self._to_raw(base_product))

    def delete(self, base_product: BaseProduct) -> None:
        self._file.remove(base_product.id)

    @staticmethod
    def _to_raw(product: BaseProduct) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "description": product.description,
            "category_id": product.category_id,
            "created_at": product.created_at.isoformat(),
            "updated_at": product.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> BaseProduct:
        return BaseProduct(
            id=raw["id"],
            name=raw["name"],
            description=raw.get("description"),
            category_id=raw.get("category_id"),
            **timestamp_fields(raw, "created_at", "updated_at"),
        )
