"""ProductVariant aggregate.

A variant is a concrete, stockable form of a base product ("Red - Small",
"500 ml bottle"). Variant names are unique only within their owning base
product; the same name may appear under another base product.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Mapping

from catalog.domain.exceptions import InvalidOperationError, ValidationError
from catalog.domain.model.value_objects import (
    MAX_USAGE_NOTES_LENGTH,
    PropertyValue,
    optional_text,
    require_name,
    to_decimal,
    validate_dynamic_properties,
)


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ProductVariant:
    """Aggregate root for a product variant.

    Use ``ProductVariant.create()`` for new variants. The ``__init__`` is
    kept simple so the repository can reconstitute persisted
    variants without re-validating.

    Invariants:
    - ``stock_quantity`` is never negative
    - ``unit_value`` is always greater than zero
    - ``base_product_id`` never changes after creation
    """

    id: str
    base_product_id: str
    name: str
    stock_quantity: Decimal
    unit_of_measure_id: str
    unit_value: Decimal
    usage_notes: str | None = None
    photos: list[str] = field(default_factory=list)
    dynamic_properties: dict[str, PropertyValue] = field(default_factory=dict)
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    # --- Factory (used for NEW variants only) ---------------------------------

    @staticmethod
    def create(
        base_product_id: str,
        name: str,
        unit_of_measure_id: str,
        unit_value: Decimal | str | int | float,
        stock_quantity: Decimal | str | int | float | None = None,
        usage_notes: str | None = None,
    ) -> ProductVariant:
        """Create a new variant with a fresh identity, enforcing all invariants."""
        if not base_product_id:
            raise ValidationError("Base product ID is required")
        if not unit_of_measure_id:
            raise ValidationError("Unit of measure ID is required")

        if stock_quantity is None:
            stock_quantity = 0
        stock = _check_stock(to_decimal(stock_quantity, "stock quantity"))

        return ProductVariant(
            id=str(uuid.uuid4()),
            base_product_id=base_product_id,
            name=require_name(name),
            stock_quantity=stock,
            unit_of_measure_id=unit_of_measure_id,
            unit_value=_check_unit_value(to_decimal(unit_value, "unit value")),
            usage_notes=optional_text(usage_notes, MAX_USAGE_NOTES_LENGTH, "Usage notes"),
        )

    # --- Mutations ------------------------------------------------------------

    def update_details(
        self,
        name: str,
        unit_of_measure_id: str,
        unit_value: Decimal | str | int | float,
        usage_notes: str | None,
    ) -> None:
        """Replace the descriptive fields.

        Every argument is validated before anything is assigned, so a
        rejected update leaves the variant untouched.
        """
        if not unit_of_measure_id:
            raise ValidationError("Unit of measure ID is required")
        new_name = require_name(name)
        new_value = _check_unit_value(to_decimal(unit_value, "unit value"))
        new_notes = optional_text(usage_notes, MAX_USAGE_NOTES_LENGTH, "Usage notes")

        self.name = new_name
        self.unit_of_measure_id = unit_of_measure_id
        self.unit_value = new_value
        self.usage_notes = new_notes
        self._touch()

    def apply_update(
        self,
        name: str | None = None,
        unit_of_measure_id: str | None = None,
        unit_value: Decimal | str | int | float | None = None,
        usage_notes: str | None = None,
        stock_quantity: Decimal | str | int | float | None = None,
        dynamic_properties: Mapping[str, object] | None = None,
    ) -> None:
        """Partial update: ``None`` keeps the current value.

        Stock and properties are validated before ``update_details`` runs,
        and ``update_details`` validates its own fields before assigning,
        so nothing changes unless every supplied value is acceptable. A
        supplied property map replaces the current one wholesale.
        """
        new_stock = (
            _check_stock(to_decimal(stock_quantity, "stock quantity"))
            if stock_quantity is not None
            else self.stock_quantity
        )
        new_properties = (
            validate_dynamic_properties(dynamic_properties)
            if dynamic_properties is not None
            else self.dynamic_properties
        )

        self.update_details(
            name=name if name is not None else self.name,
            unit_of_measure_id=unit_of_measure_id or self.unit_of_measure_id,
            unit_value=unit_value if unit_value is not None else self.unit_value,
            usage_notes=usage_notes if usage_notes is not None else self.usage_notes,
        )
        self.stock_quantity = new_stock
        self.dynamic_properties = new_properties

    def update_photos(self, photos: list[str] | None) -> None:
        """Replace the ordered list of photo references."""
        self.photos = [p for p in (photos or []) if p]
        self._touch()

    def update_dynamic_properties(self, properties: Mapping[str, object] | None) -> None:
        """Replace the whole property map. Keys not present are dropped."""
        self.dynamic_properties = validate_dynamic_properties(properties)
        self._touch()

    # --- Rules ----------------------------------------------------------------

    def ensure_can_be_deleted(self) -> None:
        if self.stock_quantity != 0:
            raise InvalidOperationError(
                f"Cannot delete product variant '{self.name}' that has stock "
                f"({self.stock_quantity})"
            )

    def _touch(self) -> None:
        self.updated_at = _now()


def _check_stock(quantity: Decimal) -> Decimal:
    if quantity < 0:
        raise ValidationError("Stock quantity cannot be negative")
    return quantity


def _check_unit_value(value: Decimal) -> Decimal:
    if value <= 0:
        raise ValidationError("Unit value must be greater than zero")
    return value
