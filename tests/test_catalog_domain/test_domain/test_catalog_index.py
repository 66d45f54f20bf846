"""Tests for CatalogIndex facets."""

from src.catalog_domain.domain.services.catalog_index import CatalogIndex
from src.common.dtos.catalog_dtos import FacetDTO


class TestCatalogIndex:
    def setup_method(self) -> None:
        self.index = CatalogIndex()

    def test_category_facets_in_first_seen_order_with_counts(self, sample_products) -> None:
        categories, _ = self.index.facets(sample_products)

        assert categories == [
            FacetDTO(id="Bolsos", display_name="Bolsos", count=1),
            FacetDTO(id="Hogar", display_name="Hogar", count=1),
            FacetDTO(id="Escritura", display_name="Escritura", count=2),
            FacetDTO(id="Textil", display_name="Textil", count=1),
        ]

    def test_supplier_facets(self, sample_products) -> None:
        _, suppliers = self.index.facets(sample_products)

        assert [(f.id, f.count) for f in suppliers] == [
            ("Promo Andes", 2),
            ("Regalos Sur", 2),
            ("Textiles Pacífico", 1),
        ]

    def test_facet_order_follows_input_order(self, sample_products) -> None:
        categories, _ = self.index.facets(list(reversed(sample_products)))

        assert [f.id for f in categories] == ["Escritura", "Textil", "Hogar", "Bolsos"]

    def test_counts_sum_to_product_count_and_are_positive(self, sample_products) -> None:
        categories, suppliers = self.index.facets(sample_products)

        assert sum(f.count for f in categories) == len(sample_products)
        assert sum(f.count for f in suppliers) == len(sample_products)
        assert all(f.count > 0 for f in categories + suppliers)

    def test_empty_catalog_has_no_facets(self) -> None:
        assert self.index.facets([]) == ([], [])

    def test_facets_accept_a_generator(self, sample_products) -> None:
        categories, suppliers = self.index.facets(p for p in sample_products)

        assert len(categories) == 4
        assert len(suppliers) == 3

    def test_price_bounds(self, sample_products) -> None:
        assert self.index.price_bounds(sample_products) == (890, 15990)
        assert self.index.price_bounds([]) is None
