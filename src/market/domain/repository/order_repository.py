"""Abstract repository for Order aggregates.

Orders are immutable, so the store is append-only: there is no update.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from market.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def list_for_customer(self, username: str) -> list[Order]:
        """Return a customer's orders, oldest first."""

    @abstractmethod
    def add(self, username: str, order: Order) -> None:
        """Append a newly completed order to a customer's history."""
