"""Tests for the JSON-file repositories and the JSONL event publisher."""

import json
from decimal import Decimal

from catalog.domain.events import ProductVariantCreated, VariantSnapshot
from catalog.domain.model.base_product import BaseProduct
from catalog.domain.model.category import Category
from catalog.domain.model.product_variant import ProductVariant
from catalog.domain.model.unit_of_measure import UnitOfMeasure
from catalog.domain.model.value_objects import UnitType
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


class TestJsonProductVariantRepository:

    def test_creates_empty_file(self, tmp_path):
        path = tmp_path / "nested" / "variants.json"
        repo = JsonProductVariantRepository(path)
        assert path.exists()
        assert repo.list_all() == []

    def test_round_trips_all_fields(self, tmp_path):
        repo = JsonProductVariantRepository(tmp_path / "variants.json")
        variant = ProductVariant.create("bp-1", "Red", "u-1", "2.5", stock_quantity="10.25")
        variant.update_photos(["a.jpg"])
        variant.update_dynamic_properties({"glossy": True, "coats": 2})
        repo.add(variant)

        loaded = JsonProductVariantRepository(tmp_path / "variants.json").get_by_id(variant.id)
        assert loaded == variant
        assert loaded.stock_quantity == Decimal("10.25")

    def test_update_replaces_in_place(self, tmp_path):
        repo = JsonProductVariantRepository(tmp_path / "variants.json")
        variant = ProductVariant.create("bp-1", "Red", "u-1", 1)
        repo.add(variant)
        variant.apply_update(stock_quantity=4)
        repo.update(variant)
        assert len(repo.list_all()) == 1
        assert repo.get_by_id(variant.id).stock_quantity == Decimal("4")

    def test_lookups(self, tmp_path):
        repo = JsonProductVariantRepository(tmp_path / "variants.json")
        red = ProductVariant.create("bp-1", "Red", "u-1", 1)
        blue = ProductVariant.create("bp-2", "Blue", "u-1", 1)
        repo.add(red)
        repo.add(blue)
        assert repo.get_by_name("RED").id == red.id
        assert [v.id for v in repo.list_by_base_product_id("bp-2")] == [blue.id]
        repo.delete(red)
        assert repo.get_by_id(red.id) is None


class TestOtherJsonRepositories:

    def test_base_product(self, tmp_path):
        repo = JsonBaseProductRepository(tmp_path / "base_products.json")
        product = BaseProduct.create("Paint", "Acrylic", "cat-1")
        repo.add(product)
        assert repo.get_by_name("paint") == product
        repo.delete(product)
        assert repo.list_all() == []

    def test_unit(self, tmp_path):
        repo = JsonUnitOfMeasureRepository(tmp_path / "units.json")
        unit = UnitOfMeasure.create("Gram", "g", UnitType.WEIGHT)
        repo.add(unit)
        loaded = repo.get_by_id(unit.id)
        assert loaded.type is UnitType.WEIGHT
        assert loaded == unit

    def test_category(self, tmp_path):
        repo = JsonCategoryRepository(tmp_path / "categories.json")
        category = Category.create("Paints")
        repo.save(category)
        assert repo.get_by_name("PAINTS") == category


class TestJsonlEventPublisher:

    def test_appends_one_line_per_event(self, tmp_path):
        path = tmp_path / "events.jsonl"
        publisher = JsonlEventPublisher(path)
        variant = ProductVariant.create("bp-1", "Red", "u-1", 1)
        event = ProductVariantCreated(
            aggregate_id=variant.id, user_id="alice", variant=VariantSnapshot.of(variant)
        )
        publisher.publish(event)
        publisher.publish(event)

        lines = path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 2
        record = json.loads(lines[0])
        assert record["event"] == "ProductVariantCreated"
        assert record["user_id"] == "alice"
        assert record["variant"]["name"] == "Red"

    def test_write_failure_does_not_raise(self, tmp_path):
        # a directory where the file should be makes open() fail
        path = tmp_path / "events.jsonl"
        path.mkdir()
        publisher = JsonlEventPublisher(path)
        variant = ProductVariant.create("bp-1", "Red", "u-1", 1)
        publisher.publish(
            ProductVariantCreated(
                aggregate_id=variant.id, user_id="alice", variant=VariantSnapshot.of(variant)
            )
        )
