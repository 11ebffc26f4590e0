"""Integration tests for the DeleteProductVariant use case."""

import pytest

from catalog.application.delete_product_variant import DeleteProductVariantHandler
from catalog.domain.exceptions import EntityNotFoundError, InvalidOperationError
from catalog.domain.model.product_variant import ProductVariant
from tests.fakes import FakeProductVariantRepository, RecordingEventPublisher


def _setup(stock: int = 0):
    variant = ProductVariant.create("bp-1", "Red", "u-1", 1, stock_quantity=stock)
    repo = FakeProductVariantRepository([variant])
    publisher = RecordingEventPublisher()
    return DeleteProductVariantHandler(repo, publisher), repo, publisher, variant


class TestDeleteVariant:

    def test_deletes_variant_without_stock(self):
        handler, repo, publisher, variant = _setup()
        handler.handle(variant.id, user_id="alice")
        assert repo.get_by_id(variant.id) is None
        assert publisher.types() == ["ProductVariantDeleted"]
        assert publisher.events[0].variant.name == "Red"

    def test_refuses_variant_with_stock(self):
        handler, repo, publisher, variant = _setup(stock=3)
        with pytest.raises(InvalidOperationError):
            handler.handle(variant.id, user_id="alice")
        assert repo.get_by_id(variant.id) is not None
        assert publisher.events == []

    def test_missing_variant(self):
        handler, _, _, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            handler.handle("nope", user_id="alice")
