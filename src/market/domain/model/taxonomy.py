"""Category taxonomy: which subcategories belong to which category.

An explicitly constructed object that is handed to whoever needs it (the
catalog validates new products against it).  There is no module-level
registry.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from market.domain.exceptions import InvalidArgument


def _require_name(value: str, what: str) -> str:
    if value is None or not value.strip():
        raise InvalidArgument(f"{what} cannot be empty")
    return value.strip()


class CategoryTaxonomy:

    def __init__(self, categories: Mapping[str, Iterable[str]] | None = None) -> None:
        self._categories: dict[str, tuple[str, ...]] = {}
        for name, subcategories in (categories or {}).items():
            self.add_category(name, subcategories)

    @property
    def categories(self) -> dict[str, tuple[str, ...]]:
        """A copy of the category -> subcategories mapping, in insertion order."""
        return dict(self._categories)

    def category_exists(self, category: str) -> bool:
        return _require_name(category, "Category") in self._categories

    def subcategory_exists(self, category: str, subcategory: str) -> bool:
        """Exact match on the category, case-insensitive on the subcategory."""
        category = _require_name(category, "Category")
        wanted = _require_name(subcategory, "Subcategory").lower()
        return any(sub.lower() == wanted for sub in self._categories.get(category, ()))

    def subcategories(self, category: str) -> tuple[str, ...]:
        return self._categories.get(_require_name(category, "Category"), ())

    def add_category(self, category: str, subcategories: Iterable[str]) -> None:
        """Add or replace a category with its subcategories."""
        category = _require_name(category, "Category")
        subs = tuple(_require_name(sub, "Subcategory") for sub in subcategories)
        if not subs:
            raise InvalidArgument(f"Category '{category}' needs at least one subcategory")
        self._categories[category] = subs

    def remove_category(self, category: str) -> None:
        self._categories.pop(_require_name(category, "Category"), None)

    def __len__(self) -> int:
        return len(self._categories)
