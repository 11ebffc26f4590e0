"""Domain service: scoped variant name uniqueness.

A variant name must be unique within its base product, but the same name
may be reused under a different base product. The rule needs repository
access, so it lives here rather than on the ProductVariant aggregate.
"""

from __future__ import annotations

from catalog.domain.exceptions import AlreadyExistsError
from catalog.domain.model.product_variant import ProductVariant
from catalog.domain.model.value_objects import require_name
from catalog.domain.repository.product_variant_repository import (
    ProductVariantRepository,
)


class VariantNamingService:

    def __init__(self, variant_repo: ProductVariantRepository) -> None:
        self._variant_repo = variant_repo

    def ensure_name_available(
        self,
        name: str,
        base_product_id: str,
        variant_id: str | None = None,
    ) -> None:
        """Raise AlreadyExistsError if a sibling variant already uses *name*.

        ``variant_id`` identifies the variant being renamed, so that a
        variant never collides with itself.
        """
        clash = self.find_sibling_named(name, base_product_id, exclude_id=variant_id)
        if clash is not None:
            raise AlreadyExistsError(
                f"Product variant with name '{name}' already exists "
                f"for base product '{base_product_id}'"
            )

    def find_sibling_named(
        self,
        name: str,
        base_product_id: str,
        exclude_id: str | None = None,
    ) -> ProductVariant | None:
        wanted = require_name(name).lower()

        # The global lookup only returns one match, which may belong to a
        # different base product, so siblings are checked as well.
        candidates: list[ProductVariant | None] = [self._variant_repo.get_by_name(name)]
        candidates.extend(self._variant_repo.list_by_base_product_id(base_product_id))

        for other in candidates:
            if (
                other is not None
                and other.id != exclude_id
                and other.base_product_id == base_product_id
                and other.name.lower() == wanted
            ):
                return other
        return None
