"""BaseProduct aggregate.

A base product is the catalog entry ("Acrylic Paint") that owns its
variants. Deleting a base product takes its variants with it; that
cascade is coordinated by the application handler.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from catalog.domain.model.value_objects import (
    MAX_DESCRIPTION_LENGTH,
    optional_text,
    require_name,
)


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class BaseProduct:

    id: str
    name: str
    description: str | None = None
    category_id: str | None = None
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    @staticmethod
    def create(
        name: str,
        description: str | None = None,
        category_id: str | None = None,
    ) -> BaseProduct:
        return BaseProduct(
            id=str(uuid.uuid4()),
            name=require_name(name, "Base product name"),
            description=optional_text(description, MAX_DESCRIPTION_LENGTH, "Description"),
            category_id=category_id or None,
        )

    def update_details(
        self,
        name: str,
        description: str | None,
        category_id: str | None,
    ) -> None:
        new_name = require_name(name, "Base product name")
        new_description = optional_text(description, MAX_DESCRIPTION_LENGTH, "Description")

        self.name = new_name
        self.description = new_description
        self.category_id = category_id or None
        self.updated_at = _now()
