"""Tests for cart line item management."""

import pytest
from protean.exceptions import ValidationError
from storefront.cart.cart import Cart
from storefront.cart.events import CartItemAdded, CartItemQuantityUpdated, CartItemRemoved
from storefront.errors import PRODUCT_NOT_IN_CART, CartError


def _make_cart():
    cart = Cart.create(email="jane@example.com")
    cart._events.clear()
    return cart


class TestAddItem:
    def test_add_item(self):
        cart = _make_cart()
        cart.add_item("prod-001", cost=50.0, quantity=2, product_name="Shoes")
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 2
        assert cart.items[0].product_name == "Shoes"

    def test_add_item_raises_event(self):
        cart = _make_cart()
        cart.add_item("prod-001", cost=50.0, quantity=1)
        assert len(cart._events) == 1
        event = cart._events[0]
        assert isinstance(event, CartItemAdded)
        assert event.product_id == "prod-001"
        assert event.quantity == 1

    def test_items_keep_insertion_order(self):
        cart = _make_cart()
        cart.add_item("prod-001", cost=1.0, quantity=1)
        cart.add_item("prod-002", cost=1.0, quantity=1)
        cart.add_item("prod-003", cost=1.0, quantity=1)
        assert [str(i.product_id) for i in cart.items] == ["prod-001", "prod-002", "prod-003"]

    def test_add_same_product_twice_is_rejected(self):
        cart = _make_cart()
        cart.add_item("prod-001", cost=50.0, quantity=1)
        with pytest.raises(ValidationError) as exc:
            cart.add_item("prod-001", cost=50.0, quantity=3)
        assert "items" in exc.value.messages

    def test_quantity_must_be_positive(self):
        cart = _make_cart()
        with pytest.raises(ValidationError):
            cart.add_item("prod-001", cost=50.0, quantity=0)


class TestUpdateQuantity:
    def test_update_quantity(self):
        cart = _make_cart()
        cart.add_item("prod-001", cost=50.0, quantity=1)
        cart.update_item_quantity("prod-001", 5)
        assert cart.items[0].quantity == 5

    def test_update_quantity_raises_event(self):
        cart = _make_cart()
        cart.add_item("prod-001", cost=50.0, quantity=1)
        cart._events.clear()
        cart.update_item_quantity("prod-001", 3)
        assert len(cart._events) == 1
        event = cart._events[0]
        assert isinstance(event, CartItemQuantityUpdated)
        assert event.previous_quantity == 1
        assert event.new_quantity == 3

    def test_update_product_not_in_cart(self):
        cart = _make_cart()
        with pytest.raises(CartError) as exc:
            cart.update_item_quantity("prod-404", 5)
        assert exc.value.status_code == 400
        assert exc.value.message == PRODUCT_NOT_IN_CART


class TestRemoveItem:
    def test_remove_item(self):
        cart = _make_cart()
        cart.add_item("prod-001", cost=50.0, quantity=1)
        cart.add_item("prod-002", cost=10.0, quantity=1)
        cart.remove_item("prod-001")
        assert len(cart.items) == 1
        assert str(cart.items[0].product_id) == "prod-002"

    def test_remove_item_raises_event(self):
        cart = _make_cart()
        cart.add_item("prod-001", cost=50.0, quantity=1)
        cart._events.clear()
        cart.remove_item("prod-001")
        assert isinstance(cart._events[0], CartItemRemoved)

    def test_remove_product_not_in_cart(self):
        cart = _make_cart()
        with pytest.raises(CartError) as exc:
            cart.remove_item("prod-404")
        assert exc.value.status_code == 400
        assert exc.value.message == PRODUCT_NOT_IN_CART
