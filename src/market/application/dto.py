"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from market.domain.model.order import Order
from market.domain.model.product import Product


@dataclass(frozen=True)
class CartItemSpec:
    """Input: what the customer asked for (product title + quantity)."""

    product_title: str
    quantity: str | Decimal


@dataclass(frozen=True)
class ProductDTO:
    """Output: a catalog entry as displayed to the user."""

    id: str
    title: str
    description: str
    category: str
    subcategory: str
    price: str  # formatted, e.g. "€12.00"
    unit: str  # "pieces" or "kg"
    available: str  # formatted with unit, e.g. "50 pieces"


@dataclass(frozen=True)
class CatalogStatsDTO:
    """Output: administrator overview of the catalog."""

    total_products: int
    unavailable: list[ProductDTO]

    @property
    def unavailable_count(self) -> int:
        return len(self.unavailable)


@dataclass(frozen=True)
class OrderLineDTO:
    """Output: a single order line as displayed to the user."""

    product_title: str
    quantity: str
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: str
    customer_name: str
    lines: list[OrderLineDTO]
    total: str
    created_at: str


# --- Mapping ------------------------------------------------------------------


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        title=product.title,
        description=product.description,
        category=product.category,
        subcategory=product.subcategory,
        price=str(product.price),
        unit=product.unit.label,
        available=product.unit.format(product.available),
    )


def order_to_dto(customer_name: str, order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.order_id,
        customer_name=customer_name,
        lines=[
            OrderLineDTO(
                product_title=line.product.title,
                quantity=str(line.quantity),
                unit_price=str(line.unit_price),
                line_total=str(line.line_total),
            )
            for line in order.lines
        ],
        total=str(order.total_cost),
        created_at=order.order_date.strftime("%Y-%m-%d %H:%M UTC"),
    )
