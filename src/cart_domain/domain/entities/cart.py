"""Cart and CartItem entities."""

import json
from dataclasses import dataclass, field, replace
from typing import Any, Optional


@dataclass
class CartItem:
    """One cart line. A cart holds at most one line per product id."""

    product_id: int | str
    quantity: int
    selected_color: Optional[str] = None
    selected_size: Optional[str] = None

    def __post_init__(self) -> None:
        """Post-initialization for validation."""
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int) or self.quantity < 1:
            raise ValueError("Cart item quantity must be a positive integer.")

    def to_dict(self) -> dict[str, Any]:
        return {
            "productId": self.product_id,
            "quantity": self.quantity,
            "selectedColor": self.selected_color,
            "selectedSize": self.selected_size,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CartItem":
        return cls(
            product_id=data["productId"],
            quantity=data["quantity"],
            selected_color=data.get("selectedColor"),
            selected_size=data.get("selectedSize"),
        )


@dataclass
class Cart:
    """Ordered cart lines. Lines keep insertion order; repeat adds merge into the existing line."""

    items: list[CartItem] = field(default_factory=list)

    @property
    def total_items(self) -> int:
        return sum(item.quantity for item in self.items)

    def find(self, product_id: int | str) -> Optional[CartItem]:
        return next((item for item in self.items if item.product_id == product_id), None)

    def add(self, item: CartItem) -> None:
        existing_index = next(
            (index for index, line in enumerate(self.items) if line.product_id == item.product_id), None
        )
        if existing_index is None:
            self.items.append(replace(item))
            return
        # Color and size of the original line are kept
        existing = self.items[existing_index]
        self.items[existing_index] = replace(existing, quantity=existing.quantity + item.quantity)

    def remove(self, product_id: int | str) -> bool:
        remaining = [item for item in self.items if item.product_id != product_id]
        removed = len(remaining) != len(self.items)
        self.items = remaining
        return removed

    def clear(self) -> None:
        self.items = []

    def to_json(self) -> str:
        return json.dumps([item.to_dict() for item in self.items], ensure_ascii=False)

    @classmethod
    def from_json(cls, payload: str) -> "Cart":
        """Parses a serialized cart. Raises ValueError (json.JSONDecodeError included) on malformed payloads."""
        try:
            data = json.loads(payload)
        except RecursionError as e:
            raise ValueError("Serialized cart is nested too deeply") from e
        if not isinstance(data, list):
            raise ValueError("Serialized cart must be a list of items")
        cart = cls()
        for record in data:
            if not isinstance(record, dict):
                raise ValueError(f"Invalid cart item {record!r}")
            try:
                cart.add(CartItem.from_dict(record))
            except KeyError as e:
                raise ValueError(f"Cart item missing field {e}") from e
        return cart
