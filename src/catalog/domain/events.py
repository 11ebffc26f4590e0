"""Domain events: notifications describing a completed mutation.

Events are published only after the repository write succeeded. They are
plain immutable records; how they travel (log, file, broker) is decided
by the EventPublisher implementation.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any

from catalog.domain.model.product_variant import ProductVariant


@dataclass(frozen=True)
class VariantSnapshot:
    """The state of a variant at the moment the event was raised."""

    id: str
    base_product_id: str
    name: str
    stock_quantity: str
    unit_of_measure_id: str
    unit_value: str
    usage_notes: str | None
    photos: tuple[str, ...]
    dynamic_properties: tuple[tuple[str, Any], ...]

    @staticmethod
    def of(variant: ProductVariant) -> VariantSnapshot:
        return VariantSnapshot(
            id=variant.id,
            base_product_id=variant.base_product_id,
            name=variant.name,
            stock_quantity=str(variant.stock_quantity),
            unit_of_measure_id=variant.unit_of_measure_id,
            unit_value=str(variant.unit_value),
            usage_notes=variant.usage_notes,
            photos=tuple(variant.photos),
            dynamic_properties=tuple(sorted(variant.dynamic_properties.items())),
        )


@dataclass(frozen=True)
class DomainEvent:
    aggregate_id: str
    user_id: str
    occurred_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc), kw_only=True
    )

    @property
    def event_type(self) -> str:
        return type(self).__name__

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["occurred_at"] = self.occurred_at.isoformat()
        data["event"] = self.event_type
        return data


# --- Product variants ---------------------------------------------------------


@dataclass(frozen=True)
class ProductVariantCreated(DomainEvent):
    variant: VariantSnapshot


@dataclass(frozen=True)
class ProductVariantUpdated(DomainEvent):
    variant: VariantSnapshot


@dataclass(frozen=True)
class ProductVariantDeleted(DomainEvent):
    variant: VariantSnapshot


# --- Base products ------------------------------------------------------------


@dataclass(frozen=True)
class BaseProductCreated(DomainEvent):
    name: str


@dataclass(frozen=True)
class BaseProductUpdated(DomainEvent):
    name: str


@dataclass(frozen=True)
class BaseProductDeleted(DomainEvent):
    deleted_variant_ids: tuple[str, ...] = ()


# --- Units of measure ---------------------------------------------------------


@dataclass(frozen=True)
class UnitOfMeasureCreated(DomainEvent):
    symbol: str


@dataclass(frozen=True)
class UnitOfMeasureUpdated(DomainEvent):
    symbol: str


@dataclass(frozen=True)
class UnitOfMeasureDeleted(DomainEvent):
    pass
