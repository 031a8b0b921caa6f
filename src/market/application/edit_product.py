"""Application service: Edit Product use case."""

from __future__ import annotations

import logging

from market.application.dto import ProductDTO, product_to_dto
from market.domain.exceptions import DuplicateProduct, ProductNotFound
from market.domain.model.catalog import ProductCatalog
from market.domain.model.value_objects import Money
from market.domain.repository.catalog_repository import CatalogRepository

log = logging.getLogger(__name__)


class EditProductHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def handle(
        self,
        title: str,
        new_title: str | None = None,
        description: str | None = None,
        price: str | None = None,
        quantity: str | None = None,
    ) -> ProductDTO:
        """Edit title, description, price and stock of an existing product.

        Omitted values keep their current setting.  The product validates
        all four together, so a bad value leaves it untouched.  This does
        NOT affect existing orders, which captured a price snapshot.
        """
        catalog = ProductCatalog(self._catalog_repo.load())

        product = catalog.find_by_title(title)
        if product is None:
            raise ProductNotFound(f"Product not found: '{title}'")

        if new_title is not None:
            clash = catalog.find_by_title(new_title)
            if clash is not None and clash is not product:
                raise DuplicateProduct(f"Product '{new_title.strip()}' already exists")

        catalog.edit(
            product,
            title=new_title if new_title is not None else product.title,
            description=description if description is not None else product.description,
            price=Money.of(price) if price is not None else product.price,
            quantity=quantity if quantity is not None else product.available,
        )
        self._catalog_repo.save(catalog.products)

        log.info("Edited product %s '%s'", product.id, product.title)
        return product_to_dto(product)
