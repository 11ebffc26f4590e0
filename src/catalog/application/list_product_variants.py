"""Application service: List Product Variants use case (query).

Filters are applied first, then the filtered set is counted, then the
requested page is cut out. ``total_count`` therefore describes the
filtered set, not the page.
"""

from __future__ import annotations

import logging

from catalog.application.dto import MAX_PAGE_SIZE, PagedResult, ProductVariantDTO
from catalog.application.projection import VariantProjector
from catalog.domain.exceptions import ValidationError
from catalog.domain.repository.base_product_repository import BaseProductRepository
from catalog.domain.repository.product_variant_repository import (
    ProductVariantRepository,
)

logger = logging.getLogger(__name__)

MAX_SEARCH_TERM_LENGTH = 100


def check_paging(page_number: int, page_size: int) -> None:
    if page_number < 1:
        raise ValidationError("Page number must be greater than 0")
    if page_size < 1:
        raise ValidationError("Page size must be greater than 0")
    if page_size > MAX_PAGE_SIZE:
        raise ValidationError(f"Page size cannot exceed {MAX_PAGE_SIZE}")


class ListProductVariantsHandler:

    def __init__(
        self,
        variant_repo: ProductVariantRepository,
        base_product_repo: BaseProductRepository,
        projector: VariantProjector,
    ) -> None:
        self._variant_repo = variant_repo
        self._base_product_repo = base_product_repo
        self._projector = projector

    def handle(
        self,
        base_product_id: str | None = None,
        search_term: str | None = None,
        unit_of_measure_id: str | None = None,
        page_number: int = 1,
        page_size: int = 10,
    ) -> PagedResult[ProductVariantDTO]:
        check_paging(page_number, page_size)
        if search_term and len(search_term) > MAX_SEARCH_TERM_LENGTH:
            raise ValidationError(
                f"Search term cannot exceed {MAX_SEARCH_TERM_LENGTH} characters"
            )

        logger.info(
            "Listing product variants (base_product=%s, search=%r, unit=%s, page=%d/%d)",
            base_product_id, search_term, unit_of_measure_id, page_number, page_size,
        )

        base_products = {bp.id: bp for bp in self._base_product_repo.list_all()}
        variants = self._variant_repo.list_all()

        if base_product_id:
            variants = [v for v in variants if v.base_product_id == base_product_id]

        if search_term and search_term.strip():
            term = search_term.strip().lower()

            def matches(variant) -> bool:
                owner = base_products.get(variant.base_product_id)
                return term in variant.name.lower() or (
                    owner is not None and term in owner.name.lower()
                )

            variants = [v for v in variants if matches(v)]

        if unit_of_measure_id:
            variants = [v for v in variants if v.unit_of_measure_id == unit_of_measure_id]

        total_count = len(variants)
        start = (page_number - 1) * page_size
        page = variants[start:start + page_size]

        logger.info("Retrieved %d of %d matching product variants", len(page), total_count)

        return PagedResult(
            items=[
                self._projector.to_dto(v, base_product=base_products.get(v.base_product_id))
                for v in page
            ],
            page_number=page_number,
            page_size=page_size,
            total_count=total_count,
        )
