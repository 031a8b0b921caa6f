"""ProductCatalog: the collection of sellable products, plus search.

Membership is by object identity: registering the very same Product twice
is rejected, while two separate products that happen to share a title are
both allowed.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from decimal import Decimal

from market.domain.exceptions import DuplicateProduct, InvalidArgument, ProductNotFound
from market.domain.model.product import Product
from market.domain.model.taxonomy import CategoryTaxonomy
from market.domain.model.value_objects import ZERO, Money


def _matches(criterion: str | None, value: str) -> bool:
    if criterion is None or not criterion.strip():
        return True
    return value.strip().lower() == criterion.strip().lower()


def search_products(
    products: Iterable[Product] | None,
    title: str | None = None,
    category: str | None = None,
    subcategory: str | None = None,
) -> list[Product]:
    """Filter *products* by exact, case-insensitive field matches.

    A blank or missing criterion matches everything.  The input is never
    modified and the result keeps the input order.
    """
    if products is None:
        raise InvalidArgument("Product list is required")
    return [
        p
        for p in products
        if _matches(title, p.title)
        and _matches(category, p.category)
        and _matches(subcategory, p.subcategory)
    ]


class ProductCatalog:

    def __init__(
        self,
        products: Iterable[Product] = (),
        taxonomy: CategoryTaxonomy | None = None,
    ) -> None:
        self._products: list[Product] = list(products)
        self._taxonomy = taxonomy

    @property
    def products(self) -> list[Product]:
        return list(self._products)

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(list(self._products))

    def __contains__(self, product: object) -> bool:
        return any(p is product for p in self._products)

    # --- Mutations ------------------------------------------------------------

    def register(self, product: Product) -> None:
        """Append a new product.

        Raises DuplicateProduct if this exact object is already listed, and
        InvalidArgument if the taxonomy does not know its category or
        subcategory.
        """
        if product is None:
            raise InvalidArgument("Product is required")
        if product in self:
            raise DuplicateProduct(f"Product '{product.title}' is already in the catalog")
        if self._taxonomy is not None:
            if not self._taxonomy.category_exists(product.category):
                raise InvalidArgument(f"Unknown category '{product.category}'")
            if not self._taxonomy.subcategory_exists(product.category, product.subcategory):
                raise InvalidArgument(
                    f"Unknown subcategory '{product.subcategory}' "
                    f"for category '{product.category}'"
                )
        self._products.append(product)

    def remove(self, product: Product) -> None:
        self._products.pop(self._index_of(product))

    def edit(
        self,
        product: Product,
        title: str,
        description: str,
        price: Money,
        quantity: str | float | int | Decimal,
    ) -> None:
        self._index_of(product)
        product.edit(title, description, price, quantity)

    # --- Queries --------------------------------------------------------------

    def search(
        self,
        title: str | None = None,
        category: str | None = None,
        subcategory: str | None = None,
    ) -> list[Product]:
        return search_products(self._products, title, category, subcategory)

    def find_by_title(self, title: str) -> Product | None:
        """First product whose title matches case-insensitively, or None."""
        if title is None or not title.strip():
            return None
        found = self.search(title=title)
        return found[0] if found else None

    def unavailable(self) -> list[Product]:
        """Products with no stock left, whatever their unit."""
        return [p for p in self._products if p.available == ZERO]

    # --- Internal helpers -----------------------------------------------------

    def _index_of(self, product: Product) -> int:
        for i, p in enumerate(self._products):
            if p is product:
                return i
        title = getattr(product, "title", product)
        raise ProductNotFound(f"Product '{title}' is not in the catalog")
