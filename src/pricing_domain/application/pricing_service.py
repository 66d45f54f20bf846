# src/pricing_domain/application/pricing_service.py
"""Application service for tiered pricing and quotation export."""

import logging
from typing import Any, Optional

from src.catalog_domain.domain.entities.product import Product
from src.common.dtos.pricing_dtos import PriceQuoteDTO, PriceTierDTO, QuotationDTO, QuotationRequestDTO
from src.common.exceptions.custom_exceptions import MissingExportFieldsError
from src.common.utils.currency_utils import format_price
from src.pricing_domain.domain.repositories.quotation_file_saver import IQuotationFileSaver
from src.pricing_domain.domain.services.price_break_resolver import (
    PriceBreakResolver,
    clamp_quantity,
    max_quantity,
    parse_quantity_input,
)
from src.pricing_domain.domain.services.quotation_formatter import format_quotation

logger = logging.getLogger(__name__)


def resolve_price(
    product: Optional[Product], quantity: int, resolver: Optional[PriceBreakResolver] = None
) -> PriceQuoteDTO:
    """Resolves the price of a product at a quantity. An unknown (None) product yields an all-zero quote."""
    if product is None:
        return PriceQuoteDTO(quantity=0, unit_price=0.0, total_price=0.0, discount_percent=0.0)
    resolver = resolver or PriceBreakResolver()
    return resolver.resolve(product.base_price, product.price_breaks, quantity)


class PricingApplicationService:
    """Quantity handling, price quotes and quotation export for a chosen product."""

    def __init__(self, file_saver: IQuotationFileSaver, resolver: Optional[PriceBreakResolver] = None) -> None:
        self.file_saver = file_saver
        self.resolver = resolver or PriceBreakResolver()

    def max_quantity(self, product: Product) -> int:
        return max_quantity(product.stock)

    def quantity_from_input(self, product: Product, raw: Any) -> int:
        """Turns raw quantity input into a valid quantity for the product. Never raises."""
        return parse_quantity_input(raw, self.max_quantity(product))

    def quote(self, product: Optional[Product], quantity: int) -> PriceQuoteDTO:
        return resolve_price(product, quantity, self.resolver)

    def price_tiers(self, product: Product, quantity: int) -> list[PriceTierDTO]:
        """Lists the product's price breaks in table order, flagged active once quantity reaches them."""
        return [
            PriceTierDTO(
                index=index,
                min_qty=price_break.min_qty,
                price=price_break.price,
                formatted_price=format_price(price_break.price),
                active=quantity >= price_break.min_qty,
                discount=price_break.discount,
            )
            for index, price_break in enumerate(product.price_breaks)
        ]

    def select_tier(self, product: Product, index: int) -> Optional[int]:
        """Returns the quantity that selecting a tier implies (its minimum, clamped), or None for a bad index."""
        if not 0 <= index < len(product.price_breaks):
            logger.warning(f"Price tier {index} does not exist for product {product.id}")
            return None
        return clamp_quantity(product.price_breaks[index].min_qty, self.max_quantity(product))

    def build_quotation(self, product: Product, quantity: int, request: QuotationRequestDTO) -> QuotationDTO:
        """Formats the quotation text. Raises MissingExportFieldsError without company name and email."""
        missing = [
            name
            for name, value in (("company_name", request.company_name), ("company_email", request.company_email))
            if not value
        ]
        if missing:
            raise MissingExportFieldsError(missing)
        return format_quotation(request, product, self.quote(product, quantity))

    def export_quotation(self, product: Product, quantity: int, request: QuotationRequestDTO) -> str:
        """Formats the quotation and hands it to the file saver. Nothing is saved when fields are missing."""
        quotation = self.build_quotation(product, quantity, request)
        location = self.file_saver.save(quotation.content, quotation.filename)
        logger.info(f"Quotation for {product.sku} x{quantity} exported for {request.company_name}")
        return location
