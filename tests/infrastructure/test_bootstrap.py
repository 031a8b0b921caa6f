"""Tests for data-directory seeding in the composition root."""

import pytest

from market.infrastructure import bootstrap


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    monkeypatch.setenv(bootstrap.DATA_DIR_ENV, str(tmp_path))
    return tmp_path


@pytest.mark.parametrize(
    "factory",
    [bootstrap.catalog_repository, bootstrap.taxonomy_repository, bootstrap.order_repository],
)
def test_any_repository_seeds_both_text_files(data_dir, factory):
    factory()
    assert (data_dir / bootstrap.PRODUCTS_FILE).exists()
    assert (data_dir / bootstrap.CATEGORIES_FILE).exists()


def test_seeded_data_loads(data_dir):
    products = bootstrap.catalog_repository().load()
    taxonomy = bootstrap.taxonomy_repository().load()

    assert [p.title for p in products] == [p.title for p in bootstrap.default_products()]
    assert list(taxonomy.categories) == list(bootstrap.DEFAULT_CATEGORIES)


def test_existing_files_are_left_alone(data_dir):
    categories = data_dir / bootstrap.CATEGORIES_FILE
    categories.write_text("Ποτά (Νερά)\n", encoding="utf-8")

    bootstrap.catalog_repository()

    assert categories.read_text(encoding="utf-8") == "Ποτά (Νερά)\n"
    assert (data_dir / bootstrap.PRODUCTS_FILE).exists()
