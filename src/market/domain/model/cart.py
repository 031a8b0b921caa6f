"""Cart: a customer's pending reservation of catalog items.

The cart is the single place where stock is taken for a purchase: adding
or raising a quantity reserves it on the product, lowering or removing
gives it back.  Checkout (see ``Customer.complete_order``) then clears the
cart without returning anything, because the stock has been sold.
"""

from __future__ import annotations

from decimal import Decimal

from market.domain.exceptions import InvalidArgument
from market.domain.model.product import Product
from market.domain.model.value_objects import ZERO, Money, to_decimal


class Cart:

    def __init__(self) -> None:
        self._items: dict[Product, Decimal] = {}

    @property
    def products(self) -> dict[Product, Decimal]:
        """A copy of the Product -> quantity mapping."""
        return dict(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def quantity_of(self, product: Product) -> Decimal:
        return self._items.get(product, ZERO)

    # --- Mutations ------------------------------------------------------------

    def add_product(self, product: Product, quantity: str | float | int | Decimal) -> None:
        """Reserve *quantity* of *product* and add it to the cart.

        Adding a product that is already present increments its quantity.
        Raises InvalidArgument for a non-positive quantity, InvalidQuantity
        for a fractional piece amount and InsufficientStock when the live
        stock is too low.
        """
        if product is None:
            raise InvalidArgument("Product is required")
        amount = to_decimal(quantity)
        if amount <= ZERO:
            raise InvalidArgument("Quantity must be greater than zero")

        reserved = product.reserve(amount)
        self._items[product] = self._items.get(product, ZERO) + reserved

    def update_product_quantity(
        self, product: Product, quantity: str | float | int | Decimal
    ) -> None:
        """Overwrite the quantity held for *product*.

        Zero removes the entry.  Only the difference to what the cart
        already holds is reserved or released, so the new quantity is
        checked against live stock plus the cart's own share.
        """
        if product is None:
            raise InvalidArgument("Product is required")
        amount = to_decimal(quantity)
        if amount < ZERO:
            raise InvalidArgument("Quantity cannot be negative")
        if amount == ZERO:
            self.remove_product(product)
            return

        amount = product.unit.purchase_amount(amount)
        held = self._items.get(product, ZERO)
        if amount > held:
            product.reserve(amount - held)
        elif amount < held:
            product.release(held - amount)
        self._items[product] = amount

    def remove_product(self, product: Product) -> None:
        """Drop *product* and return its stock; absent products are ignored."""
        held = self._items.pop(product, None)
        if held is not None:
            product.release(held)

    def clear_cart(self) -> None:
        """Empty the cart after checkout; reserved stock stays sold."""
        self._items.clear()

    def discard(self) -> None:
        """Abandon the cart, giving every reservation back to stock."""
        for product in list(self._items):
            self.remove_product(product)

    # --- Computed properties --------------------------------------------------

    @property
    def total_cost(self) -> Money:
        result = Money.zero()
        for product, quantity in self._items.items():
            result = result + product.price * quantity
        return result
