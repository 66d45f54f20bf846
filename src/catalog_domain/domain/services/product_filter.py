# src/catalog_domain/domain/services/product_filter.py
"""Composition of catalog filter predicates."""

import logging
from typing import Callable, Iterable

from src.catalog_domain.domain.entities.filter_state import FilterState
from src.catalog_domain.domain.entities.product import Product

logger = logging.getLogger(__name__)

ProductPredicate = Callable[[Product], bool]


class FilterPredicateComposer:
    """
    Builds a single conjunctive predicate from a FilterState.

    Category and supplier tests are exact matches skipped for the "all" sentinel,
    the price test is always active and inclusive on base price, and the search
    test is a case-insensitive substring match on name or SKU, skipped when empty.
    """

    def predicates(self, state: FilterState) -> list[ProductPredicate]:
        predicates: list[ProductPredicate] = []

        if state.filters_category:
            category = state.selected_category
            predicates.append(lambda p: p.category == category)

        if state.filters_supplier:
            supplier = state.selected_supplier
            predicates.append(lambda p: p.supplier == supplier)

        price_range = state.price_range
        predicates.append(lambda p: price_range.contains(p.base_price))

        if state.search_query:
            needle = state.search_query.lower()
            predicates.append(lambda p: needle in p.name.lower() or needle in p.sku.lower())

        return predicates

    def compose(self, state: FilterState) -> ProductPredicate:
        predicates = self.predicates(state)
        return lambda product: all(predicate(product) for predicate in predicates)

    def apply(self, products: Iterable[Product], state: FilterState) -> list[Product]:
        """Returns the products matching every active criterion, in their original relative order."""
        predicate = self.compose(state)
        filtered = [product for product in products if predicate(product)]
        logger.debug(f"Filter {state} kept {len(filtered)} products")
        return filtered
