"""Data Transfer Objects for catalog queries."""

from dataclasses import dataclass, field
from typing import Optional

from src.catalog_domain.domain.entities.product import Product


@dataclass
class FacetDTO:
    """A distinct category or supplier value with its occurrence count."""

    id: str
    display_name: str
    count: int


@dataclass
class CatalogQueryResultDTO:
    """Filtered and sorted products together with the listing stats."""

    products: list[Product] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.products)

    @property
    def categories_count(self) -> int:
        return len({p.category for p in self.products})


@dataclass
class ProductSummaryDTO:
    """Listing card data for a single product."""

    product_id: int | str
    name: str
    status_label: str
    stock_status: str  # out_of_stock, low_stock, in_stock, unbounded
    base_price: float
    lowest_price: Optional[float] = None  # Cheapest price break, if any
    feature_preview: list[str] = field(default_factory=list)
    extra_features: int = 0
    color_preview: list[str] = field(default_factory=list)
    extra_colors: int = 0
