"""Integration tests for the BulkUpdateProductVariants use case.

Each item commits on its own; a failing item must never stop the batch
or undo earlier items.
"""

import threading
from decimal import Decimal

import pytest

from catalog.application.bulk_update_product_variants import (
    BulkUpdateProductVariantsHandler,
)
from catalog.application.dto import VariantUpdate
from catalog.application.projection import VariantProjector
from catalog.application.update_product_variant import UpdateProductVariantHandler
from catalog.domain.exceptions import ErrorKind
from catalog.domain.model.base_product import BaseProduct
from catalog.domain.model.product_variant import ProductVariant
from catalog.domain.model.unit_of_measure import UnitOfMeasure
from catalog.domain.model.value_objects import UnitType
from tests.fakes import (
    CancellingEventPublisher,
    FailingUpdateVariantRepository,
    FakeBaseProductRepository,
    FakeProductVariantRepository,
    FakeUnitOfMeasureRepository,
    RecordingEventPublisher,
)

PIECE = UnitOfMeasure(id="u-pc", name="Piece", symbol="pc", type=UnitType.COUNT)


def _variants() -> list[ProductVariant]:
    return [
        ProductVariant.create("bp-1", "A", "u-pc", 1),
        ProductVariant.create("bp-1", "Taken", "u-pc", 1),
        ProductVariant.create("bp-1", "C", "u-pc", 1),
    ]


def _setup(variant_repo=None, publisher=None):
    variant_repo = variant_repo or FakeProductVariantRepository(_variants())
    publisher = publisher or RecordingEventPublisher()
    base_repo = FakeBaseProductRepository([BaseProduct(id="bp-1", name="Bolts")])
    unit_repo = FakeUnitOfMeasureRepository([PIECE])
    update_handler = UpdateProductVariantHandler(
        variant_repo, unit_repo, publisher, VariantProjector(base_repo, unit_repo)
    )
    return BulkUpdateProductVariantsHandler(update_handler), variant_repo, publisher


def _by_name(repo, name: str) -> ProductVariant:
    return next(v for v in repo.list_all() if v.name == name)


def _assert_counts_consistent(result):
    assert result.successful_updates + result.failed_updates == result.total_updates
    reported = [v.id for v in result.updated_variants] + [e.variant_id for e in result.errors]
    assert len(reported) == result.total_updates


class TestBulkUpdatePartialFailure:

    def test_mixed_batch(self):
        handler, repo, publisher = _setup()
        a, c = _by_name(repo, "A"), _by_name(repo, "C")

        result = handler.handle(
            [
                VariantUpdate(a.id, stock_quantity=15),
                VariantUpdate("missing-b"),
                VariantUpdate(c.id, name="Taken"),
            ],
            user_id="alice",
        )

        assert result.total_updates == 3
        assert result.successful_updates == 1
        assert result.failed_updates == 2
        assert [(e.variant_id, e.error_kind) for e in result.errors] == [
            ("missing-b", ErrorKind.NOT_FOUND),
            (c.id, ErrorKind.ALREADY_EXISTS),
        ]
        assert repo.get_by_id(a.id).stock_quantity == Decimal("15")
        assert repo.get_by_id(c.id).name == "C"
        assert publisher.types() == ["ProductVariantUpdated"]
        _assert_counts_consistent(result)

    @pytest.mark.parametrize("bad_position", [0, 1, 2])
    def test_bad_unit_fails_only_its_own_item(self, bad_position):
        handler, repo, _ = _setup()
        ids = [v.id for v in repo.list_all()]
        updates = [VariantUpdate(vid, stock_quantity=9) for vid in ids]
        updates[bad_position] = VariantUpdate(
            ids[bad_position], unit_of_measure_id="u-unknown", stock_quantity=9
        )

        result = handler.handle(updates, user_id="alice")

        assert result.successful_updates == 2
        assert [e.variant_id for e in result.errors] == [ids[bad_position]]
        assert result.errors[0].error_kind is ErrorKind.NOT_FOUND
        for i, vid in enumerate(ids):
            expected = Decimal("0") if i == bad_position else Decimal("9")
            assert repo.get_by_id(vid).stock_quantity == expected

    def test_validation_failure_is_classified(self):
        handler, repo, _ = _setup()
        a = _by_name(repo, "A")
        result = handler.handle([VariantUpdate(a.id, stock_quantity=-1)], user_id="alice")
        assert result.errors[0].error_kind is ErrorKind.VALIDATION

    def test_wrongly_typed_fields_are_validation_errors(self):
        handler, repo, publisher = _setup()
        a = _by_name(repo, "A")

        result = handler.handle(
            [
                VariantUpdate.from_dict({"id": a.id, "name": 42}),
                VariantUpdate.from_dict({"id": a.id, "usageNotes": 7}),
                VariantUpdate.from_dict({"id": a.id, "stockQuantity": 6}),
            ],
            user_id="alice",
        )

        assert [e.error_kind for e in result.errors] == [
            ErrorKind.VALIDATION,
            ErrorKind.VALIDATION,
        ]
        assert [e.error_message for e in result.errors] == [
            "Name must be text",
            "Usage notes must be text",
        ]
        assert result.successful_updates == 1
        assert repo.get_by_id(a.id).name == "A"
        assert repo.get_by_id(a.id).stock_quantity == Decimal("6")
        assert publisher.types() == ["ProductVariantUpdated"]

    def test_empty_batch(self):
        handler, _, _ = _setup()
        result = handler.handle([], user_id="alice")
        assert result.total_updates == 0
        assert result.successful_updates == 0
        assert result.failed_updates == 0

    def test_unexpected_repository_error_is_isolated(self):
        variants = _variants()
        repo = FailingUpdateVariantRepository(variants, failing_id=variants[1].id)
        handler, _, _ = _setup(variant_repo=repo)

        result = handler.handle(
            [VariantUpdate(v.id, stock_quantity=4) for v in variants], user_id="alice"
        )

        assert result.successful_updates == 2
        assert result.errors[0].variant_id == variants[1].id
        assert result.errors[0].error_kind is ErrorKind.UNEXPECTED
        assert result.errors[0].error_message == "disk full"
        _assert_counts_consistent(result)


class TestBulkUpdateCancellation:

    def test_cancel_before_start_marks_everything_cancelled(self):
        handler, repo, publisher = _setup()
        cancel = threading.Event()
        cancel.set()

        result = handler.handle(
            [VariantUpdate(v.id, stock_quantity=1) for v in repo.list_all()],
            user_id="alice",
            cancel=cancel,
        )

        assert result.successful_updates == 0
        assert {e.error_kind for e in result.errors} == {ErrorKind.CANCELLED}
        assert publisher.events == []
        _assert_counts_consistent(result)

    def test_cancel_midway_keeps_committed_items(self):
        cancel = threading.Event()
        handler, repo, publisher = _setup(publisher=CancellingEventPublisher(cancel))
        ids = [v.id for v in repo.list_all()]

        result = handler.handle(
            [VariantUpdate(vid, stock_quantity=2) for vid in ids],
            user_id="alice",
            cancel=cancel,
        )

        assert [v.id for v in result.updated_variants] == [ids[0]]
        assert [e.variant_id for e in result.errors] == ids[1:]
        assert all(e.error_kind is ErrorKind.CANCELLED for e in result.errors)
        assert repo.get_by_id(ids[0]).stock_quantity == Decimal("2")
        assert repo.get_by_id(ids[1]).stock_quantity == Decimal("0")
        assert len(publisher.events) == 1


class TestBulkUpdateResultSerialization:

    def test_to_dict_shape(self):
        handler, repo, _ = _setup()
        a = _by_name(repo, "A")
        result = handler.handle(
            [VariantUpdate(a.id, stock_quantity=3), VariantUpdate("nope")], user_id="alice"
        )

        data = result.to_dict()
        assert data["totalUpdates"] == 2
        assert data["successfulUpdates"] == 1
        assert data["failedUpdates"] == 1
        assert data["updatedVariants"][0]["stockQuantity"] == "3"
        assert data["errors"] == [
            {
                "variantId": "nope",
                "errorMessage": "Product variant with ID 'nope' not found",
                "errorKind": "NotFound",
            }
        ]
