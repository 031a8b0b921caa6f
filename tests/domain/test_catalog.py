"""Unit tests for ProductCatalog and search."""

import pytest

from market.domain.exceptions import DuplicateProduct, InvalidArgument, ProductNotFound
from market.domain.model.catalog import ProductCatalog, search_products
from market.domain.model.product import PieceProduct, WeightProduct
from market.domain.model.taxonomy import CategoryTaxonomy
from market.domain.model.value_objects import Money


def _make(title: str, category: str = "Fruit", subcategory: str = "Red") -> PieceProduct:
    return PieceProduct(title, f"{title} description", category, subcategory, Money.of("1.00"), available_pieces=10)


@pytest.fixture
def apples_and_carrots():
    return [_make("Apples", "Fruit", "Red"), _make("Carrots", "Veg", "Orange")]


class TestSearch:

    def test_title_is_case_insensitive_exact(self, apples_and_carrots):
        found = search_products(apples_and_carrots, title="apples")
        assert found == [apples_and_carrots[0]]

    def test_title_is_not_substring(self, apples_and_carrots):
        assert search_products(apples_and_carrots, title="apple") == []

    def test_no_criteria_matches_everything(self, apples_and_carrots):
        assert search_products(apples_and_carrots) == apples_and_carrots
        assert search_products(apples_and_carrots, title="", category="  ") == apples_and_carrots

    def test_criteria_combine(self, apples_and_carrots):
        assert search_products(apples_and_carrots, category="veg", subcategory="ORANGE") == [
            apples_and_carrots[1]
        ]
        assert search_products(apples_and_carrots, category="veg", subcategory="red") == []

    def test_keeps_input_order_and_returns_new_list(self):
        products = [_make("B"), _make("A"), _make("C")]
        found = search_products(products, category="fruit")
        assert found == products
        assert found is not products

    def test_does_not_mutate_input(self, apples_and_carrots):
        before = list(apples_and_carrots)
        search_products(apples_and_carrots, title="carrots")
        assert apples_and_carrots == before

    def test_missing_product_list_rejected(self):
        with pytest.raises(InvalidArgument):
            search_products(None, title="x")


class TestRegistration:

    def test_register_appends(self):
        catalog = ProductCatalog()
        p = _make("Apples")
        catalog.register(p)
        assert catalog.products == [p]
        assert p in catalog

    def test_same_object_twice_rejected(self):
        p = _make("Apples")
        catalog = ProductCatalog([p])
        with pytest.raises(DuplicateProduct):
            catalog.register(p)
        assert len(catalog) == 1

    def test_equal_looking_product_is_a_different_member(self):
        catalog = ProductCatalog([_make("Apples")])
        catalog.register(_make("Apples"))
        assert len(catalog) == 2

    def test_taxonomy_rejects_unknown_category(self):
        catalog = ProductCatalog(taxonomy=CategoryTaxonomy({"Fruit": ["Red"]}))
        with pytest.raises(InvalidArgument, match="Unknown category"):
            catalog.register(_make("Leeks", "Veg", "Green"))

    def test_taxonomy_rejects_unknown_subcategory(self):
        catalog = ProductCatalog(taxonomy=CategoryTaxonomy({"Fruit": ["Red"]}))
        with pytest.raises(InvalidArgument, match="Unknown subcategory"):
            catalog.register(_make("Bananas", "Fruit", "Yellow"))

    def test_taxonomy_subcategory_is_case_insensitive(self):
        catalog = ProductCatalog(taxonomy=CategoryTaxonomy({"Fruit": ["Red"]}))
        catalog.register(_make("Apples", "Fruit", "red"))
        assert len(catalog) == 1

    def test_products_is_a_copy(self):
        catalog = ProductCatalog([_make("Apples")])
        catalog.products.clear()
        assert len(catalog) == 1


class TestRemovalAndEdit:

    def test_remove(self):
        p = _make("Apples")
        catalog = ProductCatalog([p])
        catalog.remove(p)
        assert p not in catalog

    def test_remove_absent_rejected(self):
        catalog = ProductCatalog([_make("Apples")])
        with pytest.raises(ProductNotFound):
            catalog.remove(_make("Apples"))

    def test_edit_member(self):
        p = WeightProduct("Oranges", "Juicy", "Fruit", "Citrus", Money.of("1.20"), available_weight=5)
        catalog = ProductCatalog([p])
        catalog.edit(p, "Blood oranges", "Sicilian", Money.of("2.40"), "3.5")
        assert p.title == "Blood oranges"
        assert str(p.available_weight) == "3.5"

    def test_edit_absent_rejected(self):
        catalog = ProductCatalog()
        with pytest.raises(ProductNotFound):
            catalog.edit(_make("Apples"), "A", "B", Money.of("1"), 1)

    def test_find_by_title(self, apples_and_carrots):
        catalog = ProductCatalog(apples_and_carrots)
        assert catalog.find_by_title(" CARROTS ") is apples_and_carrots[1]
        assert catalog.find_by_title("Leeks") is None
        assert catalog.find_by_title("") is None


class TestUnavailable:

    def test_lists_sold_out_products_of_both_units(self):
        salmon = _make("Salmon")
        oranges = WeightProduct("Oranges", "Juicy", "Fruit", "Orange", Money.of("1.20"), available_weight="0.5")
        catalog = ProductCatalog([salmon, oranges, _make("Kiwis")])

        assert catalog.unavailable() == []

        salmon.reduce_stock(10)
        oranges.reduce_stock("0.5")
        assert catalog.unavailable() == [salmon, oranges]

    def test_empty_catalog(self):
        assert ProductCatalog().unavailable() == []
