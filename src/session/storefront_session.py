# src/session/storefront_session.py
"""Event-driven controller for one local storefront session."""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from src.cart_domain.application.cart_service import CartStore
from src.cart_domain.domain.entities.cart import CartItem
from src.catalog_domain.application.catalog_service import CatalogApplicationService
from src.catalog_domain.domain.entities.filter_state import FilterState, PriceRange, SortKey
from src.catalog_domain.domain.entities.product import Product
from src.common.dtos.catalog_dtos import CatalogQueryResultDTO
from src.common.dtos.pricing_dtos import PriceQuoteDTO, QuotationRequestDTO
from src.common.exceptions.custom_exceptions import MissingExportFieldsError
from src.pricing_domain.application.pricing_service import PricingApplicationService

logger = logging.getLogger(__name__)


@dataclass
class CartLineView:
    item: CartItem
    product: Optional[Product]
    quote: PriceQuoteDTO


@dataclass
class CartView:
    lines: list[CartLineView] = field(default_factory=list)
    total_items: int = 0
    total_price: float = 0.0


class StorefrontSession:
    """
    Holds the mutable session state (filters, chosen product and quantity) and
    the injected CartStore. Each event re-derives the affected view from the
    current state; nothing is cached between events.
    """

    def __init__(
        self,
        catalog_service: CatalogApplicationService,
        pricing_service: PricingApplicationService,
        cart_store: CartStore,
    ) -> None:
        self.catalog_service = catalog_service
        self.pricing_service = pricing_service
        self.cart_store = cart_store
        self.filter_state = FilterState.cleared()
        self.selected_product: Optional[Product] = None
        self.quantity = 1

    def __enter__(self) -> "StorefrontSession":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def close(self) -> None:
        """Ends the session and releases the cart store."""
        self.cart_store.close()
        logger.info("Storefront session closed")

    # --- Catalog events ---

    def listing(self) -> CatalogQueryResultDTO:
        return self.catalog_service.query(self.filter_state)

    def _update_filters(self, **changes) -> CatalogQueryResultDTO:
        self.filter_state = self.filter_state.with_changes(**changes)
        return self.listing()

    def set_category(self, category: str) -> CatalogQueryResultDTO:
        return self._update_filters(selected_category=category)

    def set_supplier(self, supplier: str) -> CatalogQueryResultDTO:
        return self._update_filters(selected_supplier=supplier)

    def set_price_range(self, min_price: float, max_price: float) -> CatalogQueryResultDTO:
        return self._update_filters(price_range=PriceRange(min=min_price, max=max_price))

    def set_search(self, query: str) -> CatalogQueryResultDTO:
        return self._update_filters(search_query=query or "")

    def set_sort(self, sort_key: SortKey | str) -> CatalogQueryResultDTO:
        return self._update_filters(sort_key=sort_key)

    def clear_filters(self) -> CatalogQueryResultDTO:
        self.filter_state = self.catalog_service.clear_filters()
        return self.listing()

    # --- Pricing events ---

    def select_product(self, product_id: int | str) -> Optional[PriceQuoteDTO]:
        """Chooses the product to price. The quantity resets to 1; unknown ids clear the selection."""
        self.selected_product = self.catalog_service.get_product(product_id)
        self.quantity = 1
        if self.selected_product is None:
            return None
        return self.current_quote()

    def set_quantity(self, raw: Any) -> PriceQuoteDTO:
        if self.selected_product is not None:
            self.quantity = self.pricing_service.quantity_from_input(self.selected_product, raw)
        return self.current_quote()

    def select_tier(self, index: int) -> PriceQuoteDTO:
        if self.selected_product is not None:
            quantity = self.pricing_service.select_tier(self.selected_product, index)
            if quantity is not None:
                self.quantity = quantity
        return self.current_quote()

    def current_quote(self) -> PriceQuoteDTO:
        return self.pricing_service.quote(self.selected_product, self.quantity)

    def export_quotation(self, company_name: str, company_email: str) -> Optional[str]:
        """Exports the current quotation. Returns None (and saves nothing) when company data is missing."""
        if self.selected_product is None:
            logger.warning("No product selected, quotation not exported")
            return None
        request = QuotationRequestDTO(company_name=company_name, company_email=company_email)
        try:
            return self.pricing_service.export_quotation(self.selected_product, self.quantity, request)
        except MissingExportFieldsError as e:
            logger.warning(f"Por favor completa los datos de empresa y email ({e})")
            return None

    # --- Cart events ---

    def add_to_cart(self, selected_color: Optional[str] = None, selected_size: Optional[str] = None) -> int:
        """Adds the selected product at the current quantity. Returns the cart's total item count."""
        if self.selected_product is not None:
            self.cart_store.add_item(
                CartItem(
                    product_id=self.selected_product.id,
                    quantity=self.quantity,
                    selected_color=selected_color,
                    selected_size=selected_size,
                )
            )
        return self.cart_store.total_items

    def remove_from_cart(self, product_id: int | str) -> int:
        self.cart_store.remove_item(product_id)
        return self.cart_store.total_items

    def clear_cart(self) -> int:
        self.cart_store.clear()
        return self.cart_store.total_items

    def cart_view(self) -> CartView:
        """Cart lines priced at their aggregated quantity. Lines for products no longer in the catalog price at zero."""
        lines = []
        for item in self.cart_store.items:
            product = self.catalog_service.get_product(item.product_id)
            quote = self.pricing_service.quote(product, item.quantity)
            lines.append(CartLineView(item=item, product=product, quote=quote))
        return CartView(
            lines=lines,
            total_items=self.cart_store.total_items,
            total_price=sum(line.quote.total_price for line in lines),
        )
