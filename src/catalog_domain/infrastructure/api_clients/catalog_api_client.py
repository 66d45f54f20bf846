"""Client for a read-only HTTP catalog feed."""

import json
import logging
from typing import Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from src.catalog_domain.domain.entities.product import Product
from src.catalog_domain.domain.repositories.catalog_repository import ICatalogRepository
from src.catalog_domain.infrastructure.persistence.json_catalog_repository import parse_products
from src.common.config.settings import settings
from src.common.exceptions.custom_exceptions import APIError

logger = logging.getLogger(__name__)


class CatalogApiClient(ICatalogRepository):
    """Fetches the complete product feed once at startup. Queries never go back to the server."""

    def __init__(self, base_url: Optional[str] = None, token: Optional[str] = None) -> None:
        self.base_url = base_url or settings.CATALOG_API_BASE_URL
        self.token = token or settings.CATALOG_API_TOKEN
        self._products: list[Product] | None = None

        self.session = requests.Session()
        retry_strategy = Retry(
            total=3,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["HEAD", "GET", "OPTIONS"],
            backoff_factor=1,
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

    def fetch_products(self) -> list[Product]:
        """Downloads and parses the product feed."""
        if not self.base_url:
            raise APIError("CATALOG_API_BASE_URL is not set in environment variables.")

        url = f"{self.base_url}/products"
        params = {"token": self.token} if self.token else {}

        try:
            response = self.session.get(url, params=params, timeout=30)
            response.raise_for_status()
            payload = response.json()
        except requests.exceptions.Timeout as e:
            raise APIError(f"Catalog request timed out: {e}", original_exception=e)
        except requests.exceptions.RequestException as e:
            status_code = e.response.status_code if e.response is not None else None
            raise APIError(f"Error fetching catalog: {e}", original_exception=e, status_code=status_code)
        except json.JSONDecodeError as e:
            raise APIError(f"Failed to decode catalog JSON response: {e}", original_exception=e)

        products = parse_products(payload)
        logger.info(f"Fetched {len(products)} products from {url}")
        return products

    def get_all(self) -> list[Product]:
        if self._products is None:
            self._products = self.fetch_products()
        return list(self._products)
