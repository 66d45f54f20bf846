# src/pricing_domain/domain/services/quotation_formatter.py
"""Plain-text quotation rendering."""

from src.catalog_domain.domain.entities.product import Product
from src.common.dtos.pricing_dtos import PriceQuoteDTO, QuotationDTO, QuotationRequestDTO
from src.common.utils.currency_utils import format_percent, format_price


def quotation_filename(product: Product) -> str:
    return f"cotizacion_{product.name}.txt"


def format_quotation(request: QuotationRequestDTO, product: Product, quote: PriceQuoteDTO) -> QuotationDTO:
    """Renders the quotation text. Output depends only on its inputs and the currency settings."""
    lines = [
        f"Cotización solicitada por: {request.company_name}",
        f"Email: {request.company_email}",
        "",
        f"Producto: {product.name}",
        f"SKU: {product.sku}",
        f"Cantidad: {quote.quantity}",
        f"Precio unitario: {format_price(quote.unit_price)}",
        f"Descuento aplicado: {format_percent(quote.discount_percent)}",
        f"Precio total: {format_price(quote.total_price)}",
    ]
    return QuotationDTO(filename=quotation_filename(product), content="\n".join(lines) + "\n")
