"""Customer aggregate: one cart plus an append-only order history.

The only way to add to the history is ``complete_order()``, which moves
the cart's contents into a new Order and empties the cart as one step.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from market.domain.exceptions import EmptyCart, InvalidArgument
from market.domain.model.cart import Cart
from market.domain.model.order import Order
from market.domain.model.product import Product


class Customer:

    def __init__(self, username: str, order_history: Iterable[Order] = ()) -> None:
        if not username or not username.strip():
            raise InvalidArgument("Customer name is required")
        self._username = username.strip()
        self._cart = Cart()
        self._orders: list[Order] = list(order_history)

    @property
    def username(self) -> str:
        return self._username

    @property
    def cart(self) -> Cart:
        return self._cart

    @property
    def order_history(self) -> tuple[Order, ...]:
        """Completed orders, oldest first."""
        return tuple(self._orders)

    # --- Cart delegates -------------------------------------------------------

    def add_to_cart(self, product: Product, quantity: str | float | int | Decimal) -> None:
        self._cart.add_product(product, quantity)

    def update_cart(self, product: Product, quantity: str | float | int | Decimal) -> None:
        self._cart.update_product_quantity(product, quantity)

    def remove_from_cart(self, product: Product) -> None:
        self._cart.remove_product(product)

    def abandon_cart(self) -> None:
        self._cart.discard()

    # --- State transitions ----------------------------------------------------

    def complete_order(self) -> Order:
        """Transition Open -> Completed.

        The order is built before anything is touched; appending and
        clearing cannot fail, so either both happen or neither does.
        """
        if self._cart.is_empty:
            raise EmptyCart("Cannot complete order: the cart is empty")

        order = Order.create(self._cart.products)
        self._orders.append(order)
        self._cart.clear_cart()
        return order
