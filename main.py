"""Main application entry point for the storefront catalog session."""

import logging

# Cart Domain Imports
from src.cart_domain.application.cart_service import CartStore
from src.cart_domain.domain.repositories.key_value_store import IKeyValueStore
from src.cart_domain.infrastructure.persistence.json_file_key_value_store import JsonFileKeyValueStore
from src.cart_domain.infrastructure.persistence.mysql_key_value_store import MySQLKeyValueStore

# Catalog Domain Imports
from src.catalog_domain.application.catalog_service import CatalogApplicationService
from src.catalog_domain.domain.repositories.catalog_repository import ICatalogRepository
from src.catalog_domain.infrastructure.api_clients.catalog_api_client import CatalogApiClient
from src.catalog_domain.infrastructure.persistence.json_catalog_repository import JsonCatalogRepository
from src.common.config.settings import settings
from src.common.exceptions.custom_exceptions import ApplicationError, DatabaseError
from src.common.logger_config import setup_logging
from src.common.utils.currency_utils import format_percent, format_price

# Pricing Domain Imports
from src.pricing_domain.application.pricing_service import PricingApplicationService
from src.pricing_domain.infrastructure.export.local_file_saver import LocalQuotationFileSaver
from src.session.storefront_session import StorefrontSession

logger = logging.getLogger(__name__)


def create_catalog_repository() -> ICatalogRepository:
    """Uses the HTTP catalog feed when configured, the JSON file otherwise."""
    if settings.CATALOG_API_BASE_URL:
        return CatalogApiClient()
    return JsonCatalogRepository()


def create_key_value_store() -> IKeyValueStore:
    if settings.CART_STORAGE_BACKEND == "mysql":
        store = MySQLKeyValueStore()
        try:
            store.create_tables()
        except DatabaseError as e:
            logger.error(f"Error creating key-value table: {e}")
            raise
        return store
    return JsonFileKeyValueStore()


def setup_session() -> StorefrontSession:
    """Initializes and wires up one storefront session."""
    catalog_service = CatalogApplicationService(catalog_repo=create_catalog_repository())
    pricing_service = PricingApplicationService(file_saver=LocalQuotationFileSaver())
    cart_store = CartStore(store=create_key_value_store())
    return StorefrontSession(catalog_service, pricing_service, cart_store)


def run_demo_session() -> None:
    """Browses the catalog, prices a product and adds it to the cart."""
    with setup_session() as session:
        categories, suppliers = session.catalog_service.facets()
        print("Categorías: " + ", ".join(f"{f.display_name} ({f.count})" for f in categories))
        print("Proveedores: " + ", ".join(f"{f.display_name} ({f.count})" for f in suppliers))

        listing = session.set_sort("price")
        print(f"\n--- {listing.total} productos en {listing.categories_count} categorías ---")
        for product in listing.products:
            price = format_price(product.base_price)
            print(f"  {product.sku:<12} {product.name:<30} {price:>12}  stock: {product.stock}")

        if not listing.products:
            return

        product = listing.products[0]
        session.select_product(product.id)
        quote = session.set_quantity("50")
        print(
            f"\n{product.name} x{quote.quantity}: unitario {format_price(quote.unit_price)}, "
            f"descuento {format_percent(quote.discount_percent)}, total {format_price(quote.total_price)}"
        )

        total_items = session.add_to_cart()
        print(f"Carrito ({total_items})")


if __name__ == "__main__":
    setup_logging()
    try:
        run_demo_session()
    except ApplicationError as e:
        logger.error(f"Storefront session failed: {e}")
