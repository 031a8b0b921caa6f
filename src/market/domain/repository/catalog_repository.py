"""Abstract repository for the product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (flat text file, in-memory)
live in the infrastructure layer and in the tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from market.domain.model.product import Product


class CatalogRepository(ABC):

    @abstractmethod
    def load(self) -> list[Product]:
        """Return every product in the stored catalog, in stored order."""

    @abstractmethod
    def save(self, products: list[Product]) -> None:
        """Replace the stored catalog with *products*."""
