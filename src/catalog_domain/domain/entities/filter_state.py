"""Filter state value objects for catalog queries."""

from dataclasses import dataclass, field, replace
from enum import Enum

from src.common.config.settings import settings

# Sentinel selecting every category or supplier
ALL = "all"


class SortKey(str, Enum):
    NAME = "name"
    PRICE = "price"
    STOCK = "stock"


@dataclass(frozen=True)
class PriceRange:
    """Inclusive bounds on base price. min <= max is expected but not enforced."""

    min: float
    max: float

    def contains(self, price: float) -> bool:
        return self.min <= price <= self.max


def default_price_range() -> PriceRange:
    return PriceRange(min=settings.DEFAULT_PRICE_MIN, max=settings.DEFAULT_PRICE_MAX)


@dataclass(frozen=True)
class FilterState:
    """Criteria for a catalog query. Unknown sort keys are kept as plain strings."""

    selected_category: str = ALL
    selected_supplier: str = ALL
    price_range: PriceRange = field(default_factory=default_price_range)
    search_query: str = ""
    sort_key: SortKey | str = SortKey.NAME

    @property
    def filters_category(self) -> bool:
        return self.selected_category != ALL

    @property
    def filters_supplier(self) -> bool:
        return self.selected_supplier != ALL

    def with_changes(self, **changes) -> "FilterState":
        """Returns a copy with the given fields replaced."""
        return replace(self, **changes)

    @classmethod
    def cleared(cls) -> "FilterState":
        """Default state: every category and supplier, default price range, no search, sorted by name."""
        return cls()
