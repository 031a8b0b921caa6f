"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from market.application.dto import ProductDTO, product_to_dto
from market.domain.exceptions import DuplicateProduct
from market.domain.model.catalog import ProductCatalog
from market.domain.model.product import PieceProduct, Product, WeightProduct
from market.domain.model.value_objects import Money, UnitKind
from market.domain.repository.catalog_repository import CatalogRepository
from market.domain.repository.taxonomy_repository import TaxonomyRepository

log = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(
        self,
        catalog_repo: CatalogRepository,
        taxonomy_repo: TaxonomyRepository,
    ) -> None:
        self._catalog_repo = catalog_repo
        self._taxonomy_repo = taxonomy_repo

    def handle(
        self,
        title: str,
        description: str,
        category: str,
        subcategory: str,
        price: str,
        quantity: str,
        unit: UnitKind,
    ) -> ProductDTO:
        """Register a new product, validated against the category taxonomy.

        Titles are how the command line finds products, so a second product
        with the same title is refused here even though the catalog itself
        only rejects the same object twice.
        """
        catalog = ProductCatalog(
            self._catalog_repo.load(), taxonomy=self._taxonomy_repo.load()
        )

        if title and catalog.find_by_title(title) is not None:
            raise DuplicateProduct(f"Product '{title.strip()}' already exists")

        product = self._build(title, description, category, subcategory, price, quantity, unit)
        catalog.register(product)
        self._catalog_repo.save(catalog.products)

        log.info("Registered product %s '%s'", product.id, product.title)
        return product_to_dto(product)

    @staticmethod
    def _build(
        title: str,
        description: str,
        category: str,
        subcategory: str,
        price: str,
        quantity: str,
        unit: UnitKind,
    ) -> Product:
        stock = unit.stock_level(quantity)
        if unit is UnitKind.PIECE:
            return PieceProduct(
                title, description, category, subcategory, Money.of(price),
                available_pieces=int(stock),
            )
        return WeightProduct(
            title, description, category, subcategory, Money.of(price),
            available_weight=stock,
        )
