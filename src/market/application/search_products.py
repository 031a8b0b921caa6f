"""Application service: Search Products use case (query)."""

from __future__ import annotations

from market.application.dto import ProductDTO, product_to_dto
from market.domain.model.catalog import search_products
from market.domain.repository.catalog_repository import CatalogRepository


class SearchProductsHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def handle(
        self,
        title: str | None = None,
        category: str | None = None,
        subcategory: str | None = None,
    ) -> list[ProductDTO]:
        """Exact, case-insensitive match on every criterion given."""
        found = search_products(self._catalog_repo.load(), title, category, subcategory)
        return [product_to_dto(p) for p in found]
