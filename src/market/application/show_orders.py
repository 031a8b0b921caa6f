"""Application service: Show Order History use case (query)."""

from __future__ import annotations

from market.application.dto import OrderDTO, order_to_dto
from market.domain.model.customer import Customer
from market.domain.repository.order_repository import OrderRepository


class ShowOrderHistoryHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, customer_name: str) -> list[OrderDTO]:
        """Return the customer's orders, oldest first."""
        history = self._order_repo.list_for_customer(customer_name.strip()) if customer_name else []
        customer = Customer(customer_name, history)
        return [order_to_dto(customer.username, order) for order in customer.order_history]
