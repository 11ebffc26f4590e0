"""UnitOfMeasure aggregate.

Units are shared reference data: variants point at a unit but never own
it, so a unit still in use cannot be removed.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.value_objects import UnitType, require_name

MAX_SYMBOL_LENGTH = 10


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class UnitOfMeasure:
    """A unit such as "Millimeter" (mm, Length) or "Piece" (pc, Count)."""

    id: str
    name: str
    symbol: str
    type: UnitType
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    @staticmethod
    def create(name: str, symbol: str, type: UnitType) -> UnitOfMeasure:
        return UnitOfMeasure(
            id=str(uuid.uuid4()),
            name=require_name(name, "Unit name"),
            symbol=_check_symbol(symbol),
            type=type,
        )

    def update_details(self, name: str, symbol: str, type: UnitType) -> None:
        new_name = require_name(name, "Unit name")
        new_symbol = _check_symbol(symbol)

        self.name = new_name
        self.symbol = new_symbol
        self.type = type
        self.updated_at = _now()


def _check_symbol(symbol: str) -> str:
    if not symbol or not symbol.strip():
        raise ValidationError("Unit symbol is required")
    symbol = symbol.strip()
    if len(symbol) > MAX_SYMBOL_LENGTH:
        raise ValidationError(f"Unit symbol cannot exceed {MAX_SYMBOL_LENGTH} characters")
    return symbol
