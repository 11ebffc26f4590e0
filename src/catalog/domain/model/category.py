"""Category: groups base products for browsing."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from catalog.domain.model.value_objects import (
    MAX_DESCRIPTION_LENGTH,
    optional_text,
    require_name,
)


@dataclass
class Category:

    id: str
    name: str
    description: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(name: str, description: str | None = None) -> Category:
        return Category(
            id=str(uuid.uuid4()),
            name=require_name(name, "Category name"),
            description=optional_text(description, MAX_DESCRIPTION_LENGTH, "Description"),
        )
