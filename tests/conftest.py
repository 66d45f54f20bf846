# tests/conftest.py
import pytest
from unittest.mock import Mock
from typing import Optional

from src.cart_domain.domain.repositories.key_value_store import IKeyValueStore
from src.catalog_domain.domain.entities.product import PriceBreak, Product, ProductStatus
from src.catalog_domain.domain.repositories.catalog_repository import ICatalogRepository
from src.common.config.settings import settings
from src.pricing_domain.domain.repositories.quotation_file_saver import IQuotationFileSaver


class InMemoryKeyValueStore(IKeyValueStore):
    """Key-value store double that records writes."""

    def __init__(self, initial: Optional[dict[str, str]] = None) -> None:
        self.data: dict[str, str] = dict(initial or {})
        self.set_calls = 0
        self.closed = False

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.set_calls += 1
        self.data[key] = value

    def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def mock_storefront_settings(mocker) -> None:
    """Pins the currency rule, default filters and cart key so tests do not depend on the environment."""
    mocker.patch.object(settings, "CURRENCY_SYMBOL", "$")
    mocker.patch.object(settings, "THOUSANDS_SEPARATOR", ".")
    mocker.patch.object(settings, "DECIMAL_SEPARATOR", ",")
    mocker.patch.object(settings, "CURRENCY_DECIMALS", 0)
    mocker.patch.object(settings, "DEFAULT_PRICE_MIN", 0)
    mocker.patch.object(settings, "DEFAULT_PRICE_MAX", 100000)
    mocker.patch.object(settings, "UNBOUNDED_STOCK_DEFAULT", 10000)
    mocker.patch.object(settings, "LOW_STOCK_THRESHOLD", 10)
    mocker.patch.object(settings, "CART_STORAGE_KEY", "cart")


@pytest.fixture
def sample_catalog_records() -> list[dict]:
    """Catalog records as they appear in the JSON catalog."""
    return [
        {
            "id": 1,
            "name": "Mochila Ejecutiva",
            "sku": "MOC-001",
            "category": "Bolsos",
            "supplier": "Promo Andes",
            "basePrice": 15990,
            "stock": 120,
            "priceBreaks": [
                {"minQty": 10, "price": 14500, "discount": 9},
                {"minQty": 50, "price": 12900, "discount": 19},
                {"minQty": 100, "price": 11500, "discount": 28},
            ],
            "status": "active",
            "features": ["Compartimento notebook", "Impermeable", "Logo bordado", "Puerto USB"],
            "colors": ["#000000", "#1f3a93", "#7f8c8d"],
        },
        {
            "id": 2,
            "name": "Botella Térmica",
            "sku": "BOT-210",
            "category": "Hogar",
            "supplier": "Regalos Sur",
            "basePrice": 6990,
            "stock": 8,
            "priceBreaks": [{"minQty": 25, "price": 6200}, {"minQty": 100, "price": 5400}],
            "status": "active",
            "colors": ["#ffffff", "#c0392b", "#27ae60", "#2980b9", "#8e44ad"],
        },
        {
            "id": 3,
            "name": "Lápiz Metálico",
            "sku": "LAP-033",
            "category": "Escritura",
            "supplier": "Promo Andes",
            "basePrice": 890,
            "priceBreaks": [],
            "status": "active",
        },
        {
            "id": 4,
            "name": "Polera Algodón",
            "sku": "POL-150",
            "category": "Textil",
            "supplier": "Textiles Pacífico",
            "basePrice": 4990,
            "stock": 0,
            "priceBreaks": [{"minQty": 50, "price": 4200, "discount": 16}],
            "status": "pending",
        },
        {
            "id": 5,
            "name": "agenda 2027",
            "sku": "AGE-027",
            "category": "Escritura",
            "supplier": "Regalos Sur",
            "basePrice": 8990,
            "stock": 300,
            "priceBreaks": [{"minQty": 20, "price": 8100}, {"minQty": 200, "price": 7300}],
            "status": "inactive",
        },
    ]


@pytest.fixture
def sample_products(sample_catalog_records) -> list[Product]:
    """The sample catalog as Product entities, in catalog order (ids 1-5)."""
    return [Product.from_dict(record) for record in sample_catalog_records]


@pytest.fixture
def tiered_product() -> Product:
    """Product with basePrice 10000 and breaks at 10 (9000) and 50 (7000)."""
    return Product(
        id=100,
        name="Taza Cerámica",
        sku="TAZ-01",
        category="Hogar",
        supplier="Regalos Sur",
        base_price=10000,
        stock=None,
        price_breaks=(PriceBreak(min_qty=10, price=9000), PriceBreak(min_qty=50, price=7000)),
        status=ProductStatus.ACTIVE,
    )


@pytest.fixture
def mock_catalog_repository(sample_products) -> Mock:
    repo = Mock(spec=ICatalogRepository)
    repo.get_all.return_value = sample_products
    return repo


@pytest.fixture
def mock_file_saver() -> Mock:
    saver = Mock(spec=IQuotationFileSaver)
    saver.save.return_value = "exports/cotizacion.txt"
    return saver


@pytest.fixture
def key_value_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def make_key_value_store():
    """Factory for stores pre-filled with raw payloads."""
    return InMemoryKeyValueStore
