"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the file-backed
repositories but keep everything in memory. No file I/O, no side effects.
"""

from __future__ import annotations

from market.domain.model.order import Order
from market.domain.model.product import Product
from market.domain.model.taxonomy import CategoryTaxonomy
from market.domain.repository.catalog_repository import CatalogRepository
from market.domain.repository.order_repository import OrderRepository
from market.domain.repository.taxonomy_repository import TaxonomyRepository


class FakeCatalogRepository(CatalogRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._products: list[Product] = list(products or [])
        self.save_count = 0

    def load(self) -> list[Product]:
        return list(self._products)

    def save(self, products: list[Product]) -> None:
        self._products = list(products)
        self.save_count += 1


class FakeTaxonomyRepository(TaxonomyRepository):

    def __init__(self, taxonomy: CategoryTaxonomy | None = None) -> None:
        self._taxonomy = taxonomy or CategoryTaxonomy()

    def load(self) -> CategoryTaxonomy:
        return self._taxonomy

    def save(self, taxonomy: CategoryTaxonomy) -> None:
        self._taxonomy = taxonomy


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[str, list[Order]] = {}

    def list_for_customer(self, username: str) -> list[Order]:
        return list(self._store.get(username, []))

    def add(self, username: str, order: Order) -> None:
        self._store.setdefault(username, []).append(order)
