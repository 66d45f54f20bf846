"""Utility functions for currency and percentage formatting."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from src.common.config.settings import settings


def format_price(amount: float | int | None) -> str:
    """Formats an amount with the configured currency rule, e.g. 1234567 -> '$1.234.567'."""
    if amount is None:
        return ""
    try:
        value = Decimal(str(amount))
    except (InvalidOperation, ValueError):
        return ""

    decimals = max(settings.CURRENCY_DECIMALS, 0)
    quantum = Decimal(1).scaleb(-decimals)
    value = value.quantize(quantum, rounding=ROUND_HALF_UP)

    sign = "-" if value < 0 else ""
    integer_part, _, fraction_part = f"{abs(value):.{decimals}f}".partition(".")

    groups = []
    while len(integer_part) > 3:
        groups.insert(0, integer_part[-3:])
        integer_part = integer_part[:-3]
    groups.insert(0, integer_part)

    formatted = settings.THOUSANDS_SEPARATOR.join(groups)
    if fraction_part:
        formatted += settings.DECIMAL_SEPARATOR + fraction_part
    return f"{sign}{settings.CURRENCY_SYMBOL}{formatted}"


def format_percent(value: float, decimals: int = 1) -> str:
    """Formats a percentage with a fixed number of decimals, e.g. 10 -> '10.0%'."""
    return f"{value:.{decimals}f}%"
