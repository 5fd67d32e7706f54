"""Tests for the ShoppingCart aggregate and its lines."""

import pytest
from protean.exceptions import ValidationError

from storefront.cart.cart import CartItem, ShoppingCart
from storefront.cart.events import CartCleared, CartItemAdded, CartItemRemoved, CartQuantityUpdated
from storefront.exceptions import CartItemNotFound


def _make_cart():
    return ShoppingCart.create(session_id="cart_test_001")


def _events_of(cart, event_cls):
    return [e for e in cart._events if isinstance(e, event_cls)]


class TestCartCreation:
    def test_new_cart_is_empty(self):
        cart = _make_cart()
        assert cart.session_id == "cart_test_001"
        assert len(cart.items) == 0
        assert cart.created_at is not None

    def test_session_id_is_required(self):
        with pytest.raises(ValidationError) as exc:
            ShoppingCart()
        assert "session_id" in exc.value.messages

    def test_item_quantity_must_be_positive(self):
        with pytest.raises(ValidationError):
            CartItem(product_id="prod-001", quantity=0)


class TestAddItem:
    def test_add_item_creates_line(self):
        cart = _make_cart()
        item = cart.add_item("prod-001", 2)
        assert len(cart.items) == 1
        assert item.quantity == 2
        assert str(item.product_id) == "prod-001"

    def test_adding_same_product_merges_quantities(self):
        cart = _make_cart()
        cart.add_item("prod-001", 2)
        cart.add_item("prod-001", 3)
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 5

    def test_different_products_get_separate_lines(self):
        cart = _make_cart()
        cart.add_item("prod-001", 1)
        cart.add_item("prod-002", 1)
        assert len(cart.items) == 2

    def test_add_item_raises_event_with_line_quantity(self):
        cart = _make_cart()
        cart.add_item("prod-001", 2)
        cart.add_item("prod-001", 3)

        events = _events_of(cart, CartItemAdded)
        assert len(events) == 2
        assert events[-1].quantity == 3
        assert events[-1].line_quantity == 5
        assert events[-1].session_id == "cart_test_001"

    def test_lines_are_ordered_by_first_add(self):
        cart = _make_cart()
        cart.add_item("prod-001", 1)
        cart.add_item("prod-002", 1)
        cart.add_item("prod-001", 1)

        assert [str(item.product_id) for item in cart.ordered_items()] == ["prod-001", "prod-002"]


class TestUpdateItemQuantity:
    def test_overwrites_quantity(self):
        cart = _make_cart()
        item = cart.add_item("prod-001", 2)
        updated = cart.update_item_quantity(str(item.id), 7)
        assert updated.quantity == 7

        event = _events_of(cart, CartQuantityUpdated)[0]
        assert event.previous_quantity == 2
        assert event.new_quantity == 7

    def test_zero_quantity_removes_line(self):
        cart = _make_cart()
        item = cart.add_item("prod-001", 2)
        assert cart.update_item_quantity(str(item.id), 0) is None
        assert len(cart.items) == 0
        assert len(_events_of(cart, CartItemRemoved)) == 1

    def test_negative_quantity_removes_line(self):
        cart = _make_cart()
        item = cart.add_item("prod-001", 2)
        assert cart.update_item_quantity(str(item.id), -3) is None
        assert len(cart.items) == 0

    def test_unknown_line_raises_not_found(self):
        cart = _make_cart()
        with pytest.raises(CartItemNotFound):
            cart.update_item_quantity("missing-item", 1)


class TestRemoveAndClear:
    def test_remove_existing_line(self):
        cart = _make_cart()
        item = cart.add_item("prod-001", 1)
        assert cart.remove_item(str(item.id)) is True
        assert len(cart.items) == 0

    def test_remove_missing_line_returns_false(self):
        cart = _make_cart()
        assert cart.remove_item("missing-item") is False
        assert _events_of(cart, CartItemRemoved) == []

    def test_clear_removes_all_lines(self):
        cart = _make_cart()
        cart.add_item("prod-001", 1)
        cart.add_item("prod-002", 4)
        assert cart.clear() == 2
        assert len(cart.items) == 0
        assert _events_of(cart, CartCleared)[0].items_removed == 2

    def test_clear_is_idempotent(self):
        cart = _make_cart()
        cart.add_item("prod-001", 1)
        cart.clear()
        assert cart.clear() == 0
        assert len(cart.items) == 0
