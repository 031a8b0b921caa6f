"""Order aggregate: the immutable record of a completed cart.

An Order owns its own frozen copy of what was bought and at what price.
Later changes to the cart or to product prices never reach it.
"""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from types import MappingProxyType

from market.domain.exceptions import EmptyOrder, InvalidQuantity
from market.domain.model.product import Product
from market.domain.model.value_objects import ZERO, Money, Quantity, to_decimal


@dataclass(frozen=True)
class OrderLine:
    """Captures the price snapshot of a product at order-creation time."""

    product: Product
    quantity: Quantity
    unit_price: Money  # locked at order-creation time

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass(frozen=True)
class Order:
    """Aggregate root for completed purchases.

    Use the ``Order.create()`` factory for new orders: it enforces all
    business rules and stamps id and date.  The ``__init__`` is
    intentionally simple so the repository can reconstitute persisted
    orders without re-validating.
    """

    order_id: str
    lines: tuple[OrderLine, ...]
    order_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(ordered_products: Mapping[Product, Decimal] | None) -> Order:
        """Create a new order from a Product -> quantity mapping.

        Raises EmptyOrder for a missing or empty mapping and InvalidQuantity
        if any quantity is not positive.
        """
        if not ordered_products:
            raise EmptyOrder("Order must contain at least one product")

        lines: list[OrderLine] = []
        for product, amount in dict(ordered_products).items():
            if to_decimal(amount) <= ZERO:
                raise InvalidQuantity(
                    f"Quantity for {product.title} must be greater than zero"
                )
            lines.append(
                OrderLine(
                    product=product,
                    quantity=Quantity(amount, product.unit),
                    unit_price=product.price,  # <-- price snapshot
                )
            )

        return Order(order_id=str(uuid.uuid4()), lines=tuple(lines))

    # --- Computed properties --------------------------------------------------

    @property
    def ordered_products(self) -> Mapping[Product, Decimal]:
        """Read-only Product -> quantity view of the order."""
        return MappingProxyType({line.product: line.quantity.value for line in self.lines})

    @property
    def total_cost(self) -> Money:
        result = Money.zero()
        for line in self.lines:
            result = result + line.line_total
        return result
