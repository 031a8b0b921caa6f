"""Tests for the flat-text categories file."""

import pytest

from market.domain.exceptions import InvalidArgument
from market.domain.model.taxonomy import CategoryTaxonomy
from market.infrastructure.persistence.text_taxonomy_repository import TextTaxonomyRepository

SAMPLE = (
    "Φρέσκα τρόφιμα (Φρούτα@Λαχανικά@Ψάρια@Κρέατα)\n"
    "Ποτά (Αναψυκτικά@Νερά@Χυμοί)\n"
)


def test_load(tmp_path):
    path = tmp_path / "categories.txt"
    path.write_text(SAMPLE + "\n", encoding="utf-8")

    taxonomy = TextTaxonomyRepository(path).load()

    assert list(taxonomy.categories) == ["Φρέσκα τρόφιμα", "Ποτά"]
    assert taxonomy.subcategories("Ποτά") == ("Αναψυκτικά", "Νερά", "Χυμοί")
    assert taxonomy.subcategory_exists("Φρέσκα τρόφιμα", "ψάρια")


def test_save_writes_same_format(tmp_path):
    path = tmp_path / "categories.txt"
    repo = TextTaxonomyRepository(path)
    repo.save(CategoryTaxonomy({
        "Φρέσκα τρόφιμα": ["Φρούτα", "Λαχανικά", "Ψάρια", "Κρέατα"],
        "Ποτά": ["Αναψυκτικά", "Νερά", "Χυμοί"],
    }))
    assert path.read_text(encoding="utf-8") == SAMPLE


@pytest.mark.parametrize(
    "line",
    ["Drinks Soda@Water", "Drinks (Soda@Water", "Drinks ()", "(Soda)"],
)
def test_malformed_line_rejected_with_line_number(tmp_path, line):
    path = tmp_path / "categories.txt"
    path.write_text(SAMPLE + line + "\n", encoding="utf-8")
    with pytest.raises(InvalidArgument):
        TextTaxonomyRepository(path).load()


def test_malformed_line_message_names_the_line(tmp_path):
    path = tmp_path / "categories.txt"
    path.write_text(SAMPLE + "Drinks Soda@Water\n", encoding="utf-8")
    with pytest.raises(InvalidArgument, match="line 3"):
        TextTaxonomyRepository(path).load()


def test_missing_file_propagates(tmp_path):
    with pytest.raises(OSError):
        TextTaxonomyRepository(tmp_path / "nope.txt").load()
