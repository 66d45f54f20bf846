"""Tests for Cart and CartItem entities."""

import json

import pytest

from src.cart_domain.domain.entities.cart import Cart, CartItem


@pytest.mark.parametrize("quantity", [0, -1, 1.5, "2", True])
def test_cart_item_requires_positive_integer_quantity(quantity) -> None:
    with pytest.raises(ValueError):
        CartItem(product_id=1, quantity=quantity)


def test_add_merges_quantities_and_keeps_original_options() -> None:
    cart = Cart()
    cart.add(CartItem(product_id=1, quantity=2, selected_color="#000000", selected_size="M"))
    cart.add(CartItem(product_id=1, quantity=3, selected_color="#ffffff", selected_size="L"))

    assert cart.items == [CartItem(product_id=1, quantity=5, selected_color="#000000", selected_size="M")]


def test_add_preserves_insertion_order() -> None:
    cart = Cart()
    for product_id in (3, 1, 2):
        cart.add(CartItem(product_id=product_id, quantity=1))
    cart.add(CartItem(product_id=1, quantity=4))

    assert [item.product_id for item in cart.items] == [3, 1, 2]
    assert cart.total_items == 7


def test_add_stores_a_copy_of_the_item() -> None:
    cart = Cart()
    item = CartItem(product_id=1, quantity=2)
    cart.add(item)

    item.quantity = 50

    assert cart.find(1).quantity == 2


def test_remove_reports_whether_a_line_was_removed() -> None:
    cart = Cart([CartItem(product_id=1, quantity=2)])

    assert cart.remove(2) is False
    assert cart.remove(1) is True
    assert cart.items == []


def test_json_round_trip_uses_camel_case_keys() -> None:
    cart = Cart([CartItem(product_id=1, quantity=2, selected_color="#000000")])

    payload = cart.to_json()

    assert json.loads(payload) == [
        {"productId": 1, "quantity": 2, "selectedColor": "#000000", "selectedSize": None}
    ]
    assert Cart.from_json(payload) == cart


def test_from_json_merges_duplicate_lines() -> None:
    payload = json.dumps([{"productId": 1, "quantity": 2}, {"productId": 1, "quantity": 3}])

    assert Cart.from_json(payload).items == [CartItem(product_id=1, quantity=5)]


@pytest.mark.parametrize(
    "payload",
    [
        "not json",
        "{}",
        "[1, 2]",
        '[{"quantity": 2}]',
        '[{"productId": 1, "quantity": 0}]',
        '[{"productId": 1, "quantity": "2"}]',
        "[" * 200000,
    ],
)
def test_from_json_rejects_malformed_payloads(payload) -> None:
    with pytest.raises(ValueError):
        Cart.from_json(payload)
