"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Generic, Mapping, TypeVar

from catalog.domain.exceptions import ErrorKind
from catalog.domain.model.value_objects import PropertyValue

T = TypeVar("T")

MAX_PAGE_SIZE = 100


# --- Inputs -------------------------------------------------------------------


@dataclass(frozen=True)
class NewVariant:
    """Input: a variant to be created under an existing base product."""

    base_product_id: str
    name: str
    unit_of_measure_id: str
    unit_value: Decimal | str | int | float
    stock_quantity: Decimal | str | int | float | None = None
    usage_notes: str | None = None
    photos: list[str] | None = None
    dynamic_properties: Mapping[str, PropertyValue] | None = None


@dataclass(frozen=True)
class VariantUpdate:
    """Input: a partial update of one variant.

    ``None`` means "not supplied" and leaves the current value untouched.
    A supplied ``dynamic_properties`` map replaces the whole map.
    """

    variant_id: str
    name: str | None = None
    stock_quantity: Decimal | str | int | float | None = None
    unit_of_measure_id: str | None = None
    unit_value: Decimal | str | int | float | None = None
    usage_notes: str | None = None
    dynamic_properties: Mapping[str, PropertyValue] | None = None

    @staticmethod
    def from_dict(raw: Mapping[str, Any]) -> VariantUpdate:
        """Build from a camelCase or snake_case JSON object."""

        def pick(*keys: str) -> Any:
            for key in keys:
                if key in raw:
                    return raw[key]
            return None

        return VariantUpdate(
            variant_id=str(pick("id", "variantId", "variant_id") or ""),
            name=pick("name"),
            stock_quantity=pick("stockQuantity", "stock_quantity"),
            unit_of_measure_id=pick("unitOfMeasureId", "unit_of_measure_id"),
            unit_value=pick("unitValue", "unit_value"),
            usage_notes=pick("usageNotes", "usage_notes"),
            dynamic_properties=pick("dynamicProperties", "dynamic_properties"),
        )


# --- Outputs ------------------------------------------------------------------


@dataclass(frozen=True)
class ProductVariantDTO:
    """Output: a variant with denormalized display fields."""

    id: str
    base_product_id: str
    base_product_name: str | None
    base_product_description: str | None
    base_product_category_id: str | None
    base_product_category_name: str | None
    name: str
    stock_quantity: str
    unit_of_measure_id: str
    unit_of_measure_name: str | None
    unit_symbol: str | None
    unit_value: str
    usage_notes: str | None
    photos: list[str]
    dynamic_properties: dict[str, PropertyValue]
    created_at: str
    updated_at: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "baseProductId": self.base_product_id,
            "baseProductName": self.base_product_name,
            "baseProductDescription": self.base_product_description,
            "baseProductCategoryId": self.base_product_category_id,
            "baseProductCategoryName": self.base_product_category_name,
            "name": self.name,
            "stockQuantity": self.stock_quantity,
            "unitOfMeasureId": self.unit_of_measure_id,
            "unitOfMeasureName": self.unit_of_measure_name,
            "unitSymbol": self.unit_symbol,
            "unitValue": self.unit_value,
            "usageNotes": self.usage_notes,
            "photos": list(self.photos),
            "dynamicProperties": dict(self.dynamic_properties),
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }


@dataclass(frozen=True)
class BaseProductDTO:
    id: str
    name: str
    description: str | None
    category_id: str | None
    category_name: str | None
    created_at: str
    updated_at: str


@dataclass(frozen=True)
class UnitOfMeasureDTO:
    id: str
    name: str
    symbol: str
    type: str
    created_at: str
    updated_at: str


@dataclass(frozen=True)
class PagedResult(Generic[T]):
    """Output: one page of a filtered listing.

    ``total_count`` counts the filtered set, not the returned page.
    """

    items: list[T]
    page_number: int
    page_size: int
    total_count: int

    @property
    def total_pages(self) -> int:
        return -(-self.total_count // self.page_size)

    @property
    def has_previous_page(self) -> bool:
        return self.page_number > 1

    @property
    def has_next_page(self) -> bool:
        return self.page_number < self.total_pages


# --- Bulk update --------------------------------------------------------------


@dataclass(frozen=True)
class BulkUpdateError:
    """Output: why a single item of a bulk update failed."""

    variant_id: str
    error_message: str
    error_kind: ErrorKind

    def to_dict(self) -> dict[str, str]:
        return {
            "variantId": self.variant_id,
            "errorMessage": self.error_message,
            "errorKind": self.error_kind.value,
        }


@dataclass(frozen=True)
class BulkUpdateResultDTO:
    """Output: aggregated outcome of a bulk update.

    Counts are derived from the two lists, so every input item is
    counted exactly once: ``successful_updates + failed_updates ==
    total_updates``.
    """

    total_updates: int
    updated_variants: list[ProductVariantDTO] = field(default_factory=list)
    errors: list[BulkUpdateError] = field(default_factory=list)

    @property
    def successful_updates(self) -> int:
        return len(self.updated_variants)

    @property
    def failed_updates(self) -> int:
        return len(self.errors)

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalUpdates": self.total_updates,
            "successfulUpdates": self.successful_updates,
            "failedUpdates": self.failed_updates,
            "updatedVariants": [v.to_dict() for v in self.updated_variants],
            "errors": [e.to_dict() for e in self.errors],
        }
