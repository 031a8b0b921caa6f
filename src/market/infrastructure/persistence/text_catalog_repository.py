"""Flat-text implementation of CatalogRepository.

The file holds one record per product, separated by a blank line::

    Title: Φιλέτο Σολομού 300g
    Description: Φρέσκος σολομός φιλέτο έτοιμος για μαγείρεμα.
    Category: Φρέσκα τρόφιμα
    Subcategory: Ψάρια
    Price: €12.00
    Quantity: 50 τεμάχια

Weight products use ``κιλά`` (``kg`` is accepted when reading).  A record
that cannot be parsed is logged and skipped; the rest still load.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from decimal import Decimal
from pathlib import Path

from market.domain.exceptions import DomainException
from market.domain.model.product import PieceProduct, Product, WeightProduct
from market.domain.model.value_objects import Money, UnitKind
from market.domain.repository.catalog_repository import CatalogRepository

log = logging.getLogger(__name__)

PIECES_SUFFIX = "τεμάχια"
KILOS_SUFFIX = "κιλά"
KG_SUFFIX = "kg"
_FIELDS = ("Title", "Description", "Category", "Subcategory", "Price", "Quantity")


class TextCatalogRepository(CatalogRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- CatalogRepository interface ------------------------------------------

    def load(self) -> list[Product]:
        """Parse the catalog file.

        An unreadable file raises OSError; bad records are skipped.
        """
        with self._file_path.open(encoding="utf-8") as fh:
            lines = iter(fh.read().splitlines())

        products: list[Product] = []
        for line in lines:
            if not line.startswith("Title:"):
                continue
            try:
                products.append(self._parse_record(line, lines))
            except (DomainException, ValueError, IndexError, StopIteration) as exc:
                log.warning("Skipping product record %r: %s", line, exc)
        return products

    def save(self, products: list[Product]) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text(
            "".join(self._format_record(p) for p in products), encoding="utf-8"
        )

    # --- Parsing --------------------------------------------------------------

    def _parse_record(self, title_line: str, lines: Iterator[str]) -> Product:
        values = [_value_of(title_line, _FIELDS[0])]
        for name in _FIELDS[1:]:
            values.append(_value_of(next(lines), name))
        title, description, category, subcategory, price_text, quantity_text = values

        price = parse_price(price_text)
        unit, stock = parse_quantity(quantity_text)
        if unit is UnitKind.PIECE:
            return PieceProduct(
                title, description, category, subcategory, price,
                available_pieces=int(stock),
            )
        return WeightProduct(
            title, description, category, subcategory, price,
            available_weight=stock,
        )

    # --- Formatting -----------------------------------------------------------

    @staticmethod
    def _format_record(product: Product) -> str:
        if product.unit is UnitKind.PIECE:
            quantity = f"{product.available:f} {PIECES_SUFFIX}"
        else:
            quantity = f"{format_weight(product.available)} {KILOS_SUFFIX}"
        return (
            f"Title: {product.title}\n"
            f"Description: {product.description}\n"
            f"Category: {product.category}\n"
            f"Subcategory: {product.subcategory}\n"
            f"Price: €{product.price.amount:.2f}\n"
            f"Quantity: {quantity}\n"
            "\n"
        )


# --- Field helpers ----------------------------------------------------------


def _value_of(line: str, name: str) -> str:
    label, sep, value = line.partition(": ")
    if not sep or label.strip() != name:
        raise ValueError(f"expected '{name}:' line, got {line!r}")
    return value.strip()


def parse_price(text: str) -> Money:
    """'€12,50' -> Money('12.50')."""
    cleaned = text.strip().lstrip("€").strip().replace(",", ".")
    return Money.of(cleaned)


def parse_quantity(text: str) -> tuple[UnitKind, Decimal]:
    """Tell piece from weight stock by the unit suffix."""
    text = text.strip()
    if text.endswith(PIECES_SUFFIX):
        return UnitKind.PIECE, UnitKind.PIECE.stock_level(text[: -len(PIECES_SUFFIX)])
    for suffix in (KILOS_SUFFIX, KG_SUFFIX):
        if text.endswith(suffix):
            number = text[: -len(suffix)].strip().replace(",", ".")
            return UnitKind.WEIGHT, UnitKind.WEIGHT.stock_level(number)
    raise ValueError(f"Invalid quantity format: {text!r}")


def format_weight(weight: Decimal) -> str:
    """Render kilograms the way the catalog file always has: 200.0, 1.5."""
    if weight == weight.to_integral_value():
        return f"{weight.to_integral_value():f}.0"
    return f"{weight.normalize():f}"
