"""Tests for catalog lookup and related products."""

import pytest

from aura.services.catalog.catalog_service import CatalogService


@pytest.fixture
def catalog(products):
    return CatalogService(products)


class TestCatalogService:

    def test_list_all(self, catalog, products):
        assert catalog.list_products() == products

    def test_list_by_category_case_insensitive(self, catalog):
        assert [p.id for p in catalog.list_products("wearable")] == ["p3", "p4"]

    def test_get_product(self, catalog):
        assert catalog.get_product("p5").name == "Aura Slate"
        assert catalog.get_product("missing") is None

    def test_related_same_category_first(self, catalog):
        related = catalog.get_related(catalog.get_product("p3"))

        assert [p.id for p in related] == ["p4", "p1", "p2"]

    def test_related_excludes_product(self, catalog):
        product = catalog.get_product("p5")

        related = catalog.get_related(product, limit=10)

        assert product not in related
        assert len(related) == 5

    def test_sizes_only_for_wearables(self, catalog):
        assert catalog.sizes_for(catalog.get_product("p4")) == ["S", "M", "L"]
        assert catalog.sizes_for(catalog.get_product("p1")) == []
