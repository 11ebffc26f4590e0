"""Application service: List Base Products use case (query)."""

from __future__ import annotations

from catalog.application.dto import BaseProductDTO, PagedResult
from catalog.application.list_product_variants import check_paging
from catalog.application.projection import VariantProjector
from catalog.domain.repository.base_product_repository import BaseProductRepository


class ListBaseProductsHandler:

    def __init__(
        self,
        base_product_repo: BaseProductRepository,
        projector: VariantProjector,
    ) -> None:
        self._base_product_repo = base_product_repo
        self._projector = projector

    def handle(
        self,
        search_term: str | None = None,
        category_id: str | None = None,
        page_number: int = 1,
        page_size: int = 10,
    ) -> PagedResult[BaseProductDTO]:
        check_paging(page_number, page_size)

        products = self._base_product_repo.list_all()
        if search_term and search_term.strip():
            term = search_term.strip().lower()
            products = [
                p for p in products
                if term in p.name.lower() or term in (p.description or "").lower()
            ]
        if category_id:
            products = [p for p in products if p.category_id == category_id]

        start = (page_number - 1) * page_size
        return PagedResult(
            items=[
                self._projector.base_product_to_dto(p)
                for p in products[start:start + page_size]
            ],
            page_number=page_number,
            page_size=page_size,
            total_count=len(products),
        )
