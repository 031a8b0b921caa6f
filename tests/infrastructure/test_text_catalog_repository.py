"""Tests for the flat-text catalog file."""

import logging
from decimal import Decimal

import pytest

from market.domain.model.product import PieceProduct, WeightProduct
from market.domain.model.value_objects import Money
from market.infrastructure.persistence.text_catalog_repository import (
    TextCatalogRepository,
    format_weight,
    parse_price,
)

SAMPLE = (
    "Title: Πορτοκάλια 1kg\n"
    "Description: Φρέσκα πορτοκάλια, ιδανικά για χυμό ή κατανάλωση.\n"
    "Category: Φρέσκα τρόφιμα\n"
    "Subcategory: Φρούτα\n"
    "Price: €1.20\n"
    "Quantity: 200.0 κιλά\n"
    "\n"
    "Title: Φιλέτο Σολομού 300g\n"
    "Description: Φρέσκος σολομός φιλέτο έτοιμος για μαγείρεμα.\n"
    "Category: Φρέσκα τρόφιμα\n"
    "Subcategory: Ψάρια\n"
    "Price: €12.00\n"
    "Quantity: 50 τεμάχια\n"
    "\n"
)


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "products.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    return path


class TestLoad:

    def test_parses_both_variants(self, catalog_file):
        oranges, salmon = TextCatalogRepository(catalog_file).load()

        assert isinstance(oranges, WeightProduct)
        assert oranges.title == "Πορτοκάλια 1kg"
        assert oranges.price == Money.of("1.20")
        assert oranges.available_weight == Decimal("200.0")

        assert isinstance(salmon, PieceProduct)
        assert salmon.subcategory == "Ψάρια"
        assert salmon.available_pieces == 50

    def test_accepts_kg_suffix_and_comma_price(self, tmp_path):
        path = tmp_path / "products.txt"
        path.write_text(
            "Title: Carrots\nDescription: Crunchy\nCategory: Veg\nSubcategory: Roots\n"
            "Price: € 1,75\nQuantity: 2.5 kg\n\n",
            encoding="utf-8",
        )
        (carrots,) = TextCatalogRepository(path).load()
        assert carrots.price == Money.of("1.75")
        assert carrots.available_weight == Decimal("2.5")

    def test_malformed_record_is_skipped(self, tmp_path, caplog):
        path = tmp_path / "products.txt"
        broken = (
            "Title: Broken\nDescription: Bad price\nCategory: Veg\nSubcategory: Roots\n"
            "Price: €abc\nQuantity: 3 τεμάχια\n\n"
        )
        unknown_unit = (
            "Title: Milk\nDescription: Fresh\nCategory: Dairy\nSubcategory: Milk\n"
            "Price: €1.00\nQuantity: 3 litres\n\n"
        )
        path.write_text(broken + SAMPLE + unknown_unit, encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            products = TextCatalogRepository(path).load()

        assert [p.title for p in products] == ["Πορτοκάλια 1kg", "Φιλέτο Σολομού 300g"]
        assert "Broken" in caplog.text
        assert "Milk" in caplog.text

    def test_truncated_last_record_is_skipped(self, tmp_path):
        path = tmp_path / "products.txt"
        path.write_text(SAMPLE + "Title: Half\nDescription: cut off\n", encoding="utf-8")
        assert len(TextCatalogRepository(path).load()) == 2

    def test_fractional_pieces_are_skipped(self, tmp_path):
        path = tmp_path / "products.txt"
        path.write_text(
            "Title: Eggs\nDescription: Free range\nCategory: Dairy\nSubcategory: Eggs\n"
            "Price: €0.30\nQuantity: 2.5 τεμάχια\n\n",
            encoding="utf-8",
        )
        assert TextCatalogRepository(path).load() == []

    def test_missing_file_propagates(self, tmp_path):
        with pytest.raises(OSError):
            TextCatalogRepository(tmp_path / "nope.txt").load()


class TestSave:

    def test_round_trip_is_byte_identical(self, catalog_file, tmp_path):
        products = TextCatalogRepository(catalog_file).load()
        out = tmp_path / "out.txt"
        TextCatalogRepository(out).save(products)
        assert out.read_text(encoding="utf-8") == SAMPLE

    def test_saves_reduced_stock(self, catalog_file):
        repo = TextCatalogRepository(catalog_file)
        oranges, salmon = repo.load()
        oranges.reduce_stock("1.5")
        salmon.reduce_stock(2)
        repo.save([oranges, salmon])

        text = catalog_file.read_text(encoding="utf-8")
        assert "Quantity: 198.5 κιλά\n" in text
        assert "Quantity: 48 τεμάχια\n" in text


class TestFieldHelpers:

    @pytest.mark.parametrize(
        "raw, expected",
        [("€12.00", "12.00"), ("€12,5", "12.5"), (" € 3 ", "3")],
    )
    def test_parse_price(self, raw, expected):
        assert parse_price(raw) == Money.of(expected)

    @pytest.mark.parametrize(
        "weight, expected",
        [("200", "200.0"), ("200.00", "200.0"), ("1.5", "1.5"), ("0.125", "0.125"), ("0", "0.0")],
    )
    def test_format_weight(self, weight, expected):
        assert format_weight(Decimal(weight)) == expected
