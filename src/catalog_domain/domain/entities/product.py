"""Product and PriceBreak entities."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

logger = logging.getLogger(__name__)


class ProductStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"


@dataclass(frozen=True)  # Value objects are immutable
class PriceBreak:
    """A quantity threshold at which a different unit price applies."""

    min_qty: int
    price: float
    discount: Optional[float] = None  # Display only, never used for calculation

    def __post_init__(self) -> None:
        if self.min_qty < 1:
            raise ValueError("Price break minimum quantity must be positive.")
        if self.price < 0:
            raise ValueError("Price break price cannot be negative.")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PriceBreak":
        return cls(
            min_qty=int(data["minQty"]),
            price=float(data["price"]),
            discount=float(data["discount"]) if data.get("discount") is not None else None,
        )


@dataclass(frozen=True)
class Product:
    """A catalog item. Immutable for the lifetime of a session."""

    id: int | str
    name: str
    sku: str
    category: str
    supplier: str
    base_price: float
    stock: Optional[int] = None  # None means unbounded
    price_breaks: tuple[PriceBreak, ...] = field(default_factory=tuple)
    status: ProductStatus = ProductStatus.ACTIVE
    features: tuple[str, ...] = field(default_factory=tuple)
    colors: tuple[str, ...] = field(default_factory=tuple)
    images: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Post-initialization for validation."""
        if self.base_price < 0:
            raise ValueError("Base price cannot be negative.")
        if self.stock is not None and self.stock < 0:
            raise ValueError("Stock cannot be negative.")

    @property
    def has_unbounded_stock(self) -> bool:
        return self.stock is None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Product":
        """Creates a Product from a catalog JSON record (camelCase keys)."""
        missing = [key for key in ("id", "name", "sku", "category", "supplier", "basePrice") if key not in data]
        if missing:
            logger.error(f"Product record missing fields {missing}: {data.get('id', 'unknown')}")
            raise ValueError(f"Product record is missing required fields: {', '.join(missing)}")

        stock = data.get("stock")
        return cls(
            id=data["id"],
            name=str(data["name"]),
            sku=str(data["sku"]),
            category=str(data["category"]),
            supplier=str(data["supplier"]),
            base_price=float(data["basePrice"]),
            stock=int(stock) if stock is not None else None,
            price_breaks=tuple(PriceBreak.from_dict(pb) for pb in data.get("priceBreaks") or []),
            status=ProductStatus(data.get("status", ProductStatus.ACTIVE.value)),
            features=tuple(data.get("features") or []),
            colors=tuple(data.get("colors") or []),
            images=tuple(data.get("images") or []),
        )
