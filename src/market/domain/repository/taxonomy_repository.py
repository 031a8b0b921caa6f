"""Abstract repository for the category taxonomy."""

from __future__ import annotations

from abc import ABC, abstractmethod

from market.domain.model.taxonomy import CategoryTaxonomy


class TaxonomyRepository(ABC):

    @abstractmethod
    def load(self) -> CategoryTaxonomy:
        """Return the stored taxonomy."""

    @abstractmethod
    def save(self, taxonomy: CategoryTaxonomy) -> None:
        """Persist the taxonomy."""
