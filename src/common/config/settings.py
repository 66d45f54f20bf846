"""Application settings and environment variables."""

import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file


class Settings:
    # Catalog source
    CATALOG_PATH: str = os.getenv("CATALOG_PATH", os.path.join("data", "products.json"))
    CATALOG_API_BASE_URL: Optional[str] = os.getenv("CATALOG_API_BASE_URL")
    CATALOG_API_TOKEN: Optional[str] = os.getenv("CATALOG_API_TOKEN")

    # Cart persistence
    CART_STORAGE_KEY: str = os.getenv("CART_STORAGE_KEY", "cart")
    CART_STORAGE_BACKEND: str = os.getenv("CART_STORAGE_BACKEND", "file")  # file, mysql
    CART_STORAGE_PATH: str = os.getenv("CART_STORAGE_PATH", ".storefront_store.json")

    DB_HOST: str = os.getenv("DB_HOST", "localhost")
    DB_DATABASE: str = os.getenv("DB_NAME", "storefront_db")
    DB_USER: str = os.getenv("DB_USER", "user")
    DB_PASSWORD: str = os.getenv("DB_PASSWORD", "password")

    # Quotation export
    QUOTATION_EXPORT_DIR: str = os.getenv("QUOTATION_EXPORT_DIR", "exports")

    # Catalog filters
    DEFAULT_PRICE_MIN: float = float(os.getenv("DEFAULT_PRICE_MIN", "0"))
    DEFAULT_PRICE_MAX: float = float(os.getenv("DEFAULT_PRICE_MAX", "100000"))

    # Quantities and stock
    UNBOUNDED_STOCK_DEFAULT: int = int(os.getenv("UNBOUNDED_STOCK_DEFAULT", "10000"))
    LOW_STOCK_THRESHOLD: int = int(os.getenv("LOW_STOCK_THRESHOLD", "10"))

    # Currency formatting (Chilean peso, es-CL)
    CURRENCY_SYMBOL: str = os.getenv("CURRENCY_SYMBOL", "$")
    THOUSANDS_SEPARATOR: str = os.getenv("THOUSANDS_SEPARATOR", ".")
    DECIMAL_SEPARATOR: str = os.getenv("DECIMAL_SEPARATOR", ",")
    CURRENCY_DECIMALS: int = int(os.getenv("CURRENCY_DECIMALS", "0"))

    # Logging settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")  # INFO, DEBUG, WARNING, ERROR, CRITICAL


settings = Settings()
