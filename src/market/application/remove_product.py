"""Application service: Remove Product use case."""

from __future__ import annotations

import logging

from market.domain.exceptions import ProductNotFound
from market.domain.model.catalog import ProductCatalog
from market.domain.repository.catalog_repository import CatalogRepository

log = logging.getLogger(__name__)


class RemoveProductHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def handle(self, title: str) -> None:
        catalog = ProductCatalog(self._catalog_repo.load())

        product = catalog.find_by_title(title)
        if product is None:
            raise ProductNotFound(f"Product not found: '{title}'")

        catalog.remove(product)
        self._catalog_repo.save(catalog.products)
        log.info("Removed product %s '%s'", product.id, product.title)
