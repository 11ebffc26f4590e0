"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from catalog.application.projection import VariantProjector
from catalog.infrastructure.events.jsonl_event_publisher import JsonlEventPublisher
from catalog.infrastructure.persistence.json_base_product_repository import (
    JsonBaseProductRepository,
)
from catalog.infrastructure.persistence.json_category_repository import (
    JsonCategoryRepository,
)
from catalog.infrastructure.persistence.json_product_variant_repository import (
    JsonProductVariantRepository,
)
from catalog.infrastructure.persistence.json_unit_of_measure_repository import (
    JsonUnitOfMeasureRepository,
)

# Default data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

DATA_DIR_ENV = "CATALOG_DATA_DIR"


def data_dir() -> Path:
    """Where the JSON files live; ``CATALOG_DATA_DIR`` overrides the default."""
    configured = os.environ.get(DATA_DIR_ENV)
    return Path(configured) if configured else _DEFAULT_DATA_DIR


def variant_repository() -> JsonProductVariantRepository:
    return JsonProductVariantRepository(data_dir() / "variants.json")


def base_product_repository() -> JsonBaseProductRepository:
    return JsonBaseProductRepository(data_dir() / "base_products.json")


def unit_repository() -> JsonUnitOfMeasureRepository:
    return JsonUnitOfMeasureRepository(data_dir() / "units.json")


def category_repository() -> JsonCategoryRepository:
    return JsonCategoryRepository(data_dir() / "categories.json")


def event_publisher() -> JsonlEventPublisher:
    return JsonlEventPublisher(data_dir() / "events.jsonl")


def variant_projector() -> VariantProjector:
    return VariantProjector(
        base_product_repo=base_product_repository(),
        unit_repo=unit_repository(),
        category_repo=category_repository(),
    )
