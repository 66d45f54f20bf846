# src/pricing_domain/domain/services/price_break_resolver.py
"""Volume-tiered unit price resolution."""

import logging
import re
from typing import Any, Optional, Sequence

from src.catalog_domain.domain.entities.product import PriceBreak
from src.common.config.settings import settings
from src.common.dtos.pricing_dtos import PriceQuoteDTO

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def max_quantity(stock: Optional[int]) -> int:
    """Upper bound for a requested quantity. Absent stock falls back to UNBOUNDED_STOCK_DEFAULT."""
    return settings.UNBOUNDED_STOCK_DEFAULT if stock is None else stock


def clamp_quantity(quantity: int, max_qty: int) -> int:
    """Clamps into [1, max_qty]. The lower bound wins when max_qty is below 1."""
    return max(1, min(max_qty, quantity))


def parse_quantity_input(raw: Any, max_qty: int) -> int:
    """
    Parses a quantity typed by the buyer. The leading integer of the text is used
    ("12 units" -> 12, "3.7" -> 3); unparsable or zero input becomes 1, then the
    result is clamped into [1, max_qty].
    """
    if isinstance(raw, bool):
        parsed = 0
    elif isinstance(raw, int):
        parsed = raw
    elif isinstance(raw, float):
        parsed = int(raw) if raw == raw and abs(raw) != float("inf") else 0
    else:
        match = _LEADING_INT.match(str(raw)) if raw is not None else None
        parsed = int(match.group(1)) if match else 0

    quantity = clamp_quantity(parsed or 1, max_qty)
    if quantity != parsed:
        logger.debug(f"Quantity input {raw!r} adjusted to {quantity}")
    return quantity


class PriceBreakResolver:
    """
    Picks the price break for a quantity and computes totals and discount.

    The first break in table order is the starting selection even when its
    minimum quantity is not reached. A later break replaces the selection only
    when the quantity reaches its minimum and its price is strictly lower.
    """

    def select_break(self, price_breaks: Sequence[PriceBreak], quantity: int) -> Optional[PriceBreak]:
        if not price_breaks:
            return None
        selected = price_breaks[0]
        for candidate in price_breaks:
            if quantity >= candidate.min_qty and candidate.price < selected.price:
                selected = candidate
        return selected

    def total_price(self, base_price: float, price_breaks: Sequence[PriceBreak], quantity: int) -> float:
        quantity = self._safe_quantity(quantity)
        if quantity == 0:
            return 0.0
        selected = self.select_break(price_breaks, quantity)
        if selected is None:
            return base_price * quantity
        return selected.price * quantity

    def discount_percent(self, base_price: float, price_breaks: Sequence[PriceBreak], quantity: int) -> float:
        quantity = self._safe_quantity(quantity)
        if not price_breaks or quantity == 0:
            return 0.0
        base_total = base_price * quantity
        if base_total == 0:
            return 0.0
        return (base_total - self.total_price(base_price, price_breaks, quantity)) / base_total * 100

    def resolve(self, base_price: float, price_breaks: Sequence[PriceBreak], quantity: int) -> PriceQuoteDTO:
        """Returns unit price, total and discount. Never raises; quantity 0 yields an all-zero quote."""
        quantity = self._safe_quantity(quantity)
        total = self.total_price(base_price, price_breaks, quantity)
        return PriceQuoteDTO(
            quantity=quantity,
            unit_price=total / quantity if quantity else 0.0,
            total_price=total,
            discount_percent=self.discount_percent(base_price, price_breaks, quantity),
        )

    @staticmethod
    def _safe_quantity(quantity: Any) -> int:
        try:
            value = int(quantity)
        except (TypeError, ValueError, OverflowError):
            logger.warning(f"Invalid quantity {quantity!r}, resolving as 0")
            return 0
        return max(value, 0)
