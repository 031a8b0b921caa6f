"""Application service: Place Order use case.

Orchestrates the flow between the repositories and the domain model:
resolve titles to catalog products, fill the customer's cart (which
reserves stock), run the checkout transition, then persist both the
reduced stock and the new order.
"""

from __future__ import annotations

import logging

from market.application.dto import CartItemSpec, OrderDTO, order_to_dto
from market.domain.exceptions import DomainException, ProductNotFound
from market.domain.model.catalog import ProductCatalog
from market.domain.model.customer import Customer
from market.domain.repository.catalog_repository import CatalogRepository
from market.domain.repository.order_repository import OrderRepository

log = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(
        self,
        catalog_repo: CatalogRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._catalog_repo = catalog_repo
        self._order_repo = order_repo

    def handle(self, customer_name: str, item_specs: list[CartItemSpec]) -> OrderDTO:
        """Place an order for *customer_name*.

        Steps:
        1. Load the catalog and the customer's existing history.
        2. Resolve each title and add it to the cart (stock is reserved).
        3. Complete the order (cart -> Order, cart cleared).
        4. Persist the catalog and the order, and return a DTO.

        If any step before persisting fails, the cart is abandoned so every
        reservation goes back to stock, and nothing is written.
        """
        catalog = ProductCatalog(self._catalog_repo.load())
        history = self._order_repo.list_for_customer(customer_name.strip()) if customer_name else []
        customer = Customer(customer_name, history)

        try:
            for spec in item_specs:
                product = catalog.find_by_title(spec.product_title)
                if product is None:
                    raise ProductNotFound(f"Product not found: '{spec.product_title}'")
                customer.add_to_cart(product, spec.quantity)
            order = customer.complete_order()
        except DomainException:
            customer.abandon_cart()
            raise

        self._catalog_repo.save(catalog.products)
        self._order_repo.add(customer.username, order)

        log.info(
            "Order %s placed for %s (%d lines, total %s)",
            order.order_id, customer.username, len(order.lines), order.total_cost,
        )
        return order_to_dto(customer.username, order)
