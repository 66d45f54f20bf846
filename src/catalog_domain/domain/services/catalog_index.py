# src/catalog_domain/domain/services/catalog_index.py
"""Facet derivation for the catalog filter controls."""

from typing import Callable, Iterable

from src.catalog_domain.domain.entities.product import Product
from src.common.dtos.catalog_dtos import FacetDTO


class CatalogIndex:
    """Derives category and supplier facets (distinct values with counts) from a product set."""

    @staticmethod
    def _count_by(products: Iterable[Product], key: Callable[[Product], str]) -> list[FacetDTO]:
        # dicts keep insertion order, so facets come out in first-seen order
        counts: dict[str, int] = {}
        for product in products:
            value = key(product)
            counts[value] = counts.get(value, 0) + 1
        return [FacetDTO(id=value, display_name=value, count=count) for value, count in counts.items()]

    def category_facets(self, products: Iterable[Product]) -> list[FacetDTO]:
        return self._count_by(products, lambda p: p.category)

    def supplier_facets(self, products: Iterable[Product]) -> list[FacetDTO]:
        return self._count_by(products, lambda p: p.supplier)

    def facets(self, products: Iterable[Product]) -> tuple[list[FacetDTO], list[FacetDTO]]:
        """Returns (category facets, supplier facets). Pure, safe to recompute on every catalog change."""
        products = list(products)
        return self.category_facets(products), self.supplier_facets(products)

    @staticmethod
    def price_bounds(products: Iterable[Product]) -> tuple[float, float] | None:
        """Lowest and highest base price in the catalog, or None for an empty catalog."""
        prices = [p.base_price for p in products]
        if not prices:
            return None
        return min(prices), max(prices)
