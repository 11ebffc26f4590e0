"""Unit tests for the VariantNamingService domain service."""

import pytest

from catalog.domain.exceptions import AlreadyExistsError
from catalog.domain.model.product_variant import ProductVariant
from catalog.domain.service.variant_naming_service import VariantNamingService
from tests.fakes import FakeProductVariantRepository


def _variant(base_product_id: str, name: str) -> ProductVariant:
    return ProductVariant.create(base_product_id, name, "u-1", 1)


class TestEnsureNameAvailable:

    def test_free_name_passes(self):
        service = VariantNamingService(FakeProductVariantRepository())
        service.ensure_name_available("Red", "bp-1")

    def test_sibling_with_same_name_clashes(self):
        repo = FakeProductVariantRepository([_variant("bp-1", "Red")])
        with pytest.raises(AlreadyExistsError, match="already exists"):
            VariantNamingService(repo).ensure_name_available("Red", "bp-1")

    def test_comparison_ignores_case(self):
        repo = FakeProductVariantRepository([_variant("bp-1", "Red")])
        with pytest.raises(AlreadyExistsError):
            VariantNamingService(repo).ensure_name_available("RED", "bp-1")

    def test_same_name_under_other_base_product_is_allowed(self):
        repo = FakeProductVariantRepository([_variant("bp-2", "Red")])
        VariantNamingService(repo).ensure_name_available("Red", "bp-1")

    def test_global_match_elsewhere_does_not_hide_sibling(self):
        # get_by_name returns the bp-2 variant first; the sibling must still be found
        other = _variant("bp-2", "Red")
        sibling = _variant("bp-1", "Red")
        repo = FakeProductVariantRepository([other, sibling])
        with pytest.raises(AlreadyExistsError):
            VariantNamingService(repo).ensure_name_available("Red", "bp-1")

    def test_variant_does_not_clash_with_itself(self):
        v = _variant("bp-1", "Red")
        repo = FakeProductVariantRepository([v])
        VariantNamingService(repo).ensure_name_available("red", "bp-1", variant_id=v.id)
