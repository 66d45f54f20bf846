"""Tests for the pricing application service."""

import pytest

from src.common.dtos.pricing_dtos import PriceQuoteDTO, QuotationRequestDTO
from src.common.exceptions.custom_exceptions import MissingExportFieldsError
from src.pricing_domain.application.pricing_service import PricingApplicationService, resolve_price


@pytest.fixture
def pricing_service(mock_file_saver) -> PricingApplicationService:
    return PricingApplicationService(file_saver=mock_file_saver)


@pytest.fixture
def company() -> QuotationRequestDTO:
    return QuotationRequestDTO(company_name="Acme SpA", company_email="compras@acme.cl")


def test_resolve_price_for_product(tiered_product) -> None:
    assert resolve_price(tiered_product, 60) == PriceQuoteDTO(
        quantity=60, unit_price=7000, total_price=420000, discount_percent=pytest.approx(30.0)
    )


def test_resolve_price_for_unknown_product() -> None:
    assert resolve_price(None, 5) == PriceQuoteDTO(quantity=0, unit_price=0, total_price=0, discount_percent=0)


def test_quantity_from_input_is_clamped_to_stock(pricing_service, sample_products) -> None:
    bottle = sample_products[1]  # stock 8

    assert pricing_service.quantity_from_input(bottle, "25") == 8
    assert pricing_service.quantity_from_input(bottle, "x") == 1


def test_quantity_from_input_uses_unbounded_default(pricing_service, tiered_product) -> None:
    assert pricing_service.max_quantity(tiered_product) == 10000
    assert pricing_service.quantity_from_input(tiered_product, "20000") == 10000


def test_out_of_stock_product_still_allows_one(pricing_service, sample_products) -> None:
    assert pricing_service.quantity_from_input(sample_products[3], "5") == 1


def test_price_tiers_flag_reached_thresholds(pricing_service, sample_products) -> None:
    tiers = pricing_service.price_tiers(sample_products[0], 50)

    assert [tier.active for tier in tiers] == [True, True, False]
    assert [tier.min_qty for tier in tiers] == [10, 50, 100]
    assert tiers[0].formatted_price == "$14.500"
    assert tiers[2].discount == 28


def test_price_tiers_empty_without_breaks(pricing_service, sample_products) -> None:
    assert pricing_service.price_tiers(sample_products[2], 10) == []


def test_select_tier_sets_quantity_to_minimum(pricing_service, sample_products) -> None:
    assert pricing_service.select_tier(sample_products[0], 2) == 100


def test_select_tier_is_clamped_to_stock(pricing_service, sample_products) -> None:
    assert pricing_service.select_tier(sample_products[1], 0) == 8


def test_select_tier_with_bad_index(pricing_service, sample_products) -> None:
    assert pricing_service.select_tier(sample_products[0], 3) is None
    assert pricing_service.select_tier(sample_products[0], -1) is None


def test_export_quotation_hands_content_to_file_saver(
    pricing_service, mock_file_saver, tiered_product, company
) -> None:
    location = pricing_service.export_quotation(tiered_product, 5, company)

    assert location == "exports/cotizacion.txt"
    mock_file_saver.save.assert_called_once()
    content, filename = mock_file_saver.save.call_args[0]
    assert filename == "cotizacion_Taza Cerámica.txt"
    assert "Precio total: $45.000" in content


@pytest.mark.parametrize(
    "name, email, missing",
    [
        ("", "compras@acme.cl", ["company_name"]),
        ("Acme SpA", "", ["company_email"]),
        ("", "", ["company_name", "company_email"]),
    ],
)
def test_export_refused_without_company_data(
    pricing_service, mock_file_saver, tiered_product, name, email, missing
) -> None:
    with pytest.raises(MissingExportFieldsError) as exc_info:
        pricing_service.export_quotation(tiered_product, 5, QuotationRequestDTO(company_name=name, company_email=email))

    assert exc_info.value.missing_fields == missing
    mock_file_saver.save.assert_not_called()
