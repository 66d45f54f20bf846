# src/catalog_domain/domain/services/product_sorter.py
"""Stable ordering of product sequences."""

import logging
import math
import unicodedata
from typing import Iterable

from src.catalog_domain.domain.entities.filter_state import SortKey
from src.catalog_domain.domain.entities.product import Product

logger = logging.getLogger(__name__)


def collation_key(text: str) -> tuple[str, str]:
    """
    Approximates locale-aware ordering: accents and case are ignored first,
    then lowercase sorts before uppercase among otherwise equal names.
    """
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()
    return base, text.swapcase()


def stock_rank(product: Product) -> float:
    # Absent stock is unbounded and ranks first in descending order
    return math.inf if product.has_unbounded_stock else product.stock


class ProductSorter:
    """Sorts by name (ascending), base price (ascending) or stock (descending). Python's sort is stable."""

    def sort(self, products: Iterable[Product], key: SortKey | str) -> list[Product]:
        products = list(products)
        if key == SortKey.NAME:
            return sorted(products, key=lambda p: collation_key(p.name))
        if key == SortKey.PRICE:
            return sorted(products, key=lambda p: p.base_price)
        if key == SortKey.STOCK:
            return sorted(products, key=stock_rank, reverse=True)

        logger.debug(f"Unknown sort key '{key}', keeping input order")
        return products
