"""Data Transfer Objects for tiered pricing and quotations."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class PriceQuoteDTO:
    """Resolved price for a product and quantity."""

    quantity: int
    unit_price: float
    total_price: float
    discount_percent: float


@dataclass
class PriceTierDTO:
    """A price break as shown to the buyer, flagged active once the quantity reaches it."""

    index: int
    min_qty: int
    price: float
    formatted_price: str
    active: bool
    discount: Optional[float] = None


@dataclass
class QuotationRequestDTO:
    """Company details required to export a quotation."""

    company_name: str
    company_email: str


@dataclass
class QuotationDTO:
    """A formatted quotation ready to hand to a file saver."""

    filename: str
    content: str
