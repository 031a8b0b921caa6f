"""Application service: Catalog Statistics use case (query)."""

from __future__ import annotations

from market.application.dto import CatalogStatsDTO, product_to_dto
from market.domain.model.catalog import ProductCatalog
from market.domain.repository.catalog_repository import CatalogRepository


class ProductStatsHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def handle(self) -> CatalogStatsDTO:
        catalog = ProductCatalog(self._catalog_repo.load())
        return CatalogStatsDTO(
            total_products=len(catalog),
            unavailable=[product_to_dto(p) for p in catalog.unavailable()],
        )
