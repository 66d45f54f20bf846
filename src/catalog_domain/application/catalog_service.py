# src/catalog_domain/application/catalog_service.py
"""Application service for browsing the catalog."""

import logging
from typing import Optional

from src.catalog_domain.domain.entities.filter_state import FilterState, PriceRange
from src.catalog_domain.domain.entities.product import Product, ProductStatus
from src.catalog_domain.domain.repositories.catalog_repository import ICatalogRepository
from src.catalog_domain.domain.services.catalog_index import CatalogIndex
from src.catalog_domain.domain.services.product_filter import FilterPredicateComposer
from src.catalog_domain.domain.services.product_sorter import ProductSorter
from src.common.config.settings import settings
from src.common.dtos.catalog_dtos import CatalogQueryResultDTO, FacetDTO, ProductSummaryDTO

logger = logging.getLogger(__name__)

STATUS_LABELS = {
    ProductStatus.ACTIVE: "Disponible",
    ProductStatus.INACTIVE: "No disponible",
    ProductStatus.PENDING: "Pendiente",
}

PREVIEW_SIZE = 3


def query_catalog(
    products: list[Product],
    state: FilterState,
    composer: Optional[FilterPredicateComposer] = None,
    sorter: Optional[ProductSorter] = None,
) -> list[Product]:
    """Filters then sorts. Pure: the input sequence is never mutated."""
    composer = composer or FilterPredicateComposer()
    sorter = sorter or ProductSorter()
    return sorter.sort(composer.apply(products, state), state.sort_key)


def stock_status(product: Product) -> str:
    if product.has_unbounded_stock:
        return "unbounded"
    if product.stock == 0:
        return "out_of_stock"
    if product.stock < settings.LOW_STOCK_THRESHOLD:
        return "low_stock"
    return "in_stock"


class CatalogApplicationService:
    """Serves catalog queries and facets over a product set loaded once per session."""

    def __init__(
        self,
        catalog_repo: ICatalogRepository,
        index: Optional[CatalogIndex] = None,
        composer: Optional[FilterPredicateComposer] = None,
        sorter: Optional[ProductSorter] = None,
    ) -> None:
        self.catalog_repo = catalog_repo
        self.index = index or CatalogIndex()
        self.composer = composer or FilterPredicateComposer()
        self.sorter = sorter or ProductSorter()
        self._products: list[Product] | None = None

    @property
    def products(self) -> list[Product]:
        if self._products is None:
            self._products = self.catalog_repo.get_all()
            logger.info(f"Catalog ready with {len(self._products)} products")
        return self._products

    def query(self, state: FilterState) -> CatalogQueryResultDTO:
        """Runs a full query and returns the listing with its stats."""
        return CatalogQueryResultDTO(products=query_catalog(self.products, state, self.composer, self.sorter))

    def facets(self) -> tuple[list[FacetDTO], list[FacetDTO]]:
        return self.index.facets(self.products)

    def price_bounds(self) -> PriceRange:
        """Catalog-wide base price bounds, falling back to the default range for an empty catalog."""
        bounds = self.index.price_bounds(self.products)
        if bounds is None:
            return PriceRange(min=settings.DEFAULT_PRICE_MIN, max=settings.DEFAULT_PRICE_MAX)
        return PriceRange(min=bounds[0], max=bounds[1])

    def clear_filters(self) -> FilterState:
        return FilterState.cleared()

    def get_product(self, product_id: int | str) -> Optional[Product]:
        """Looks up a product by id. Unknown ids return None."""
        product = next((p for p in self.products if p.id == product_id), None)
        if product is None:
            logger.warning(f"Product {product_id} not found in catalog")
        return product

    def summarize(self, product: Product) -> ProductSummaryDTO:
        """Builds the listing card data for a product."""
        lowest_price = min((pb.price for pb in product.price_breaks), default=None)
        return ProductSummaryDTO(
            product_id=product.id,
            name=product.name,
            status_label=STATUS_LABELS[product.status],
            stock_status=stock_status(product),
            base_price=product.base_price,
            lowest_price=lowest_price,
            feature_preview=list(product.features[:PREVIEW_SIZE]),
            extra_features=max(len(product.features) - PREVIEW_SIZE, 0),
            color_preview=list(product.colors[:PREVIEW_SIZE]),
            extra_colors=max(len(product.colors) - PREVIEW_SIZE, 0),
        )
