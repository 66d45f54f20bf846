# src/catalog_domain/infrastructure/persistence/json_catalog_repository.py
"""JSON file implementation of the catalog source."""

import json
import logging
from typing import Any, Optional

from src.catalog_domain.domain.entities.product import Product
from src.catalog_domain.domain.repositories.catalog_repository import ICatalogRepository
from src.common.config.settings import settings
from src.common.exceptions.custom_exceptions import CatalogError

logger = logging.getLogger(__name__)


def parse_products(payload: Any) -> list[Product]:
    """Parses a catalog payload: either a list of product records or {"products": [...]}."""
    if isinstance(payload, dict) and "products" in payload:
        records = payload["products"]
    elif isinstance(payload, list):
        records = payload
    else:
        raise CatalogError("Invalid catalog format, expected a list of products")
    if not isinstance(records, list):
        raise CatalogError("Invalid catalog format, \"products\" must be a list")

    products = []
    for record in records:
        try:
            products.append(Product.from_dict(record))
        except (ValueError, TypeError, KeyError) as e:
            raise CatalogError(f"Invalid product record {record!r}", original_exception=e)

    seen_ids = set()
    for product in products:
        if product.id in seen_ids:
            raise CatalogError(f"Duplicate product id {product.id}")
        seen_ids.add(product.id)
    return products


class JsonCatalogRepository(ICatalogRepository):
    """Loads the product catalog once from a JSON file and serves it read-only."""

    def __init__(self, catalog_path: Optional[str] = None) -> None:
        self.catalog_path = catalog_path or settings.CATALOG_PATH
        self._products: list[Product] | None = None

    def _load(self) -> list[Product]:
        try:
            with open(self.catalog_path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except FileNotFoundError as e:
            raise CatalogError(f"Catalog file not found at {self.catalog_path}", original_exception=e)
        except json.JSONDecodeError as e:
            raise CatalogError(f"Error decoding catalog from {self.catalog_path}", original_exception=e)

        products = parse_products(payload)
        logger.info(f"Loaded {len(products)} products from {self.catalog_path}")
        return products

    def get_all(self) -> list[Product]:
        if self._products is None:
            self._products = self._load()
        return list(self._products)
