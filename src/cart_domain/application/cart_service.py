# src/cart_domain/application/cart_service.py
"""Cart store: aggregates cart lines per product and persists them after every mutation."""

import logging
from dataclasses import replace
from typing import Optional

from src.cart_domain.domain.entities.cart import Cart, CartItem
from src.cart_domain.domain.repositories.key_value_store import IKeyValueStore
from src.common.config.settings import settings
from src.common.exceptions.custom_exceptions import ApplicationError

logger = logging.getLogger(__name__)


class CartStore:
    """
    Owns the session cart. Every mutation runs to completion, then the whole cart
    is written to the key-value store under one fixed key (last write wins).

    No mutation raises: persistence failures are logged and the in-memory cart
    stays authoritative; a missing or corrupt stored cart starts an empty one.
    """

    def __init__(self, store: IKeyValueStore, storage_key: Optional[str] = None) -> None:
        self.store = store
        self.storage_key = storage_key or settings.CART_STORAGE_KEY
        self._cart = self._restore()

    def _restore(self) -> Cart:
        try:
            payload = self.store.get(self.storage_key)
        except Exception as e:
            logger.error(f"Could not read stored cart '{self.storage_key}': {e}")
            return Cart()

        if payload is None:
            return Cart()

        try:
            cart = Cart.from_json(payload)
        except (ValueError, TypeError) as e:
            logger.warning(f"Stored cart '{self.storage_key}' is corrupt, starting empty: {e}")
            return Cart()

        logger.info(f"Restored cart with {len(cart.items)} lines ({cart.total_items} items)")
        return cart

    def _persist(self) -> None:
        try:
            self.store.set(self.storage_key, self._cart.to_json())
        except Exception as e:
            logger.error(f"Could not persist cart '{self.storage_key}': {e}")

    @property
    def items(self) -> list[CartItem]:
        """Copy of the cart lines in order."""
        return [replace(item) for item in self._cart.items]

    @property
    def total_items(self) -> int:
        return self._cart.total_items

    def get_item(self, product_id: int | str) -> Optional[CartItem]:
        item = self._cart.find(product_id)
        return replace(item) if item is not None else None

    def add_item(self, item: CartItem) -> None:
        """Adds a line, or adds the quantity to the existing line for the same product."""
        if not isinstance(item, CartItem):
            logger.warning(f"Ignoring invalid cart item {item!r}")
            return
        self._cart.add(item)
        logger.info(f"Added {item.quantity} x product {item.product_id} to cart (total items: {self.total_items})")
        self._persist()

    def remove_item(self, product_id: int | str) -> None:
        """Removes the line for a product. Unknown products are ignored."""
        if not self._cart.remove(product_id):
            logger.debug(f"Product {product_id} not in cart, nothing removed")
            return
        logger.info(f"Removed product {product_id} from cart")
        self._persist()

    def clear(self) -> None:
        self._cart.clear()
        logger.info("Cart cleared")
        self._persist()

    def close(self) -> None:
        try:
            self.store.close()
        except ApplicationError as e:
            logger.error(f"Error closing cart store: {e}")
