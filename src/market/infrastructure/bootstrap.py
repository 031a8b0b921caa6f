"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

The data directory defaults to ``<repo root>/data`` and can be moved with
the ``MARKET_DATA_DIR`` environment variable.  Missing catalog and
category files are created with the shop's starter data the first time any
repository is opened.
"""

from __future__ import annotations

import logging
import os
from decimal import Decimal
from pathlib import Path

from market.domain.model.product import PieceProduct, Product, WeightProduct
from market.domain.model.taxonomy import CategoryTaxonomy
from market.domain.model.value_objects import Money
from market.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from market.infrastructure.persistence.text_catalog_repository import (
    TextCatalogRepository,
)
from market.infrastructure.persistence.text_taxonomy_repository import (
    TextTaxonomyRepository,
)

log = logging.getLogger(__name__)

DATA_DIR_ENV = "MARKET_DATA_DIR"
PRODUCTS_FILE = "products.txt"
CATEGORIES_FILE = "categories.txt"
ORDERS_FILE = "orders.json"

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

DEFAULT_CATEGORIES: dict[str, tuple[str, ...]] = {
    "Φρέσκα τρόφιμα": ("Φρούτα", "Λαχανικά", "Ψάρια", "Κρέατα"),
    "Κατεψυγμένα τρόφιμα": ("Λαχανικά", "Κρέατα", "Γεύματα"),
    "Προϊόντα ψυγείου": ("Γαλακτοκομικά", "Τυριά", "Αλλαντικά"),
    "Ποτά": ("Αναψυκτικά", "Νερά", "Χυμοί"),
}


def default_products() -> list[Product]:
    fresh = "Φρέσκα τρόφιμα"
    return [
        WeightProduct(
            "Πορτοκάλια 1kg", "Φρέσκα πορτοκάλια, ιδανικά για χυμό ή κατανάλωση.",
            fresh, "Φρούτα", Money.of("1.20"), available_weight=Decimal("200"),
        ),
        WeightProduct(
            "Καρότα 1kg", "Τραγανά καρότα, κατάλληλα για σαλάτες και μαγείρεμα.",
            fresh, "Λαχανικά", Money.of("1.00"), available_weight=Decimal("150"),
        ),
        PieceProduct(
            "Φιλέτο Σολομού 300g", "Φρέσκος σολομός φιλέτο έτοιμος για μαγείρεμα.",
            fresh, "Ψάρια", Money.of("12.00"), available_pieces=50,
        ),
        PieceProduct(
            "Κιμάς Μοσχαρίσιος 500g", "Φρέσκος κιμάς μοσχαρίσιος από τοπικό κρεοπωλείο.",
            fresh, "Κρέατα", Money.of("6.50"), available_pieces=100,
        ),
    ]


def data_dir() -> Path:
    configured = os.environ.get(DATA_DIR_ENV)
    return Path(configured).expanduser() if configured else _DEFAULT_DATA_DIR


def ensure_seeded(directory: Path) -> None:
    """Write the starter catalog and categories for whichever file is missing."""
    products_path = directory / PRODUCTS_FILE
    if not products_path.exists():
        log.info("Catalog file %s not found, writing default products", products_path)
        TextCatalogRepository(products_path).save(default_products())

    categories_path = directory / CATEGORIES_FILE
    if not categories_path.exists():
        log.info("Categories file %s not found, writing default categories", categories_path)
        TextTaxonomyRepository(categories_path).save(CategoryTaxonomy(DEFAULT_CATEGORIES))


def catalog_repository() -> TextCatalogRepository:
    directory = data_dir()
    ensure_seeded(directory)
    return TextCatalogRepository(directory / PRODUCTS_FILE)


def taxonomy_repository() -> TextTaxonomyRepository:
    directory = data_dir()
    ensure_seeded(directory)
    return TextTaxonomyRepository(directory / CATEGORIES_FILE)


def order_repository() -> JsonOrderRepository:
    directory = data_dir()
    ensure_seeded(directory)
    return JsonOrderRepository(directory / ORDERS_FILE)
