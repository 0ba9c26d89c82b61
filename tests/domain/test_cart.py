"""Unit tests for the ShoppingCart aggregate."""

import dataclasses
import logging

import pytest

from storefront.domain.model.cart import CartLine, ShoppingCart, lines_total
from storefront.domain.model.product import Clothing, Electronics, Grocery
from storefront.domain.model.value_objects import Money, Quantity

PHONE = Electronics(1, "Smartphone", Money.of("699.99"), "ELEC-100", 12)
JACKET = Clothing(2, "Leather Jacket", Money.of("250.00"), "CLOTH-200", "L")
MILK = Grocery(3, "Organic Milk", Money.of("3.49"), "GROC-300", "2025-12-01")


def _full_cart() -> ShoppingCart:
    cart = ShoppingCart()
    cart.add_product(PHONE)
    cart.add_product(JACKET)
    cart.add_product(MILK)
    return cart


class TestAddProduct:

    def test_new_product_creates_line(self):
        cart = ShoppingCart()
        cart.add_product(PHONE, 2)
        assert cart.quantity_of(PHONE.id) == 2
        assert len(cart) == 1

    def test_same_product_merges_quantities(self):
        cart = ShoppingCart()
        cart.add_product(JACKET, 2)
        cart.add_product(JACKET, 3)
        assert cart.quantity_of(JACKET.id) == 5
        assert len(cart) == 1

    def test_merge_is_by_id_not_by_object(self):
        cart = ShoppingCart()
        cart.add_product(MILK)
        cart.add_product(Grocery(3, "Organic Milk", Money.of("3.49"), "GROC-300", "2025-12-01"))
        assert cart.quantity_of(3) == 2

    def test_none_is_ignored(self):
        cart = ShoppingCart()
        cart.add_product(None)
        assert cart.empty()

    def test_zero_quantity_is_ignored(self):
        cart = ShoppingCart()
        cart.add_product(PHONE, 0)
        assert cart.empty()

    def test_negative_quantity_is_ignored(self):
        cart = _full_cart()
        cart.add_product(PHONE, -4)
        assert cart.quantity_of(PHONE.id) == 1

    @pytest.mark.parametrize("qty", [True, False, 1.5, "2", None])
    def test_non_integer_quantity_is_ignored(self, qty):
        cart = _full_cart()
        cart.add_product(PHONE, qty)
        cart.add_product(Grocery(8, "Bread", Money.of("2"), "GROC-8", "2025-01-01"), qty)
        assert cart.quantity_of(PHONE.id) == 1
        assert 8 not in cart

    def test_product_is_shared_not_copied(self):
        cart = ShoppingCart()
        cart.add_product(PHONE)
        assert next(iter(cart)).product is PHONE


class TestRemoveProduct:

    def test_partial_removal_decrements(self):
        cart = ShoppingCart()
        cart.add_product(PHONE, 5)
        cart.remove_product(PHONE.id, 2)
        assert cart.quantity_of(PHONE.id) == 3

    def test_removing_exact_quantity_deletes_line(self):
        cart = ShoppingCart()
        cart.add_product(PHONE, 2)
        cart.remove_product(PHONE.id, 2)
        assert PHONE.id not in cart
        assert cart.empty()

    def test_removing_more_than_held_deletes_line(self):
        cart = ShoppingCart()
        cart.add_product(PHONE, 2)
        cart.remove_product(PHONE.id, 10)
        assert cart.quantity_of(PHONE.id) == 0
        assert PHONE.id not in cart

    def test_default_removes_one_unit(self):
        cart = ShoppingCart()
        cart.add_product(MILK, 3)
        cart.remove_product(MILK.id)
        assert cart.quantity_of(MILK.id) == 2

    def test_unknown_id_is_silent_noop(self):
        cart = _full_cart()
        before = str(cart)
        cart.remove_product(999, 1)
        assert str(cart) == before
        assert cart.total() == Money.of("870.981")

    def test_unknown_id_is_logged_at_debug_only(self, caplog):
        cart = _full_cart()
        with caplog.at_level(logging.DEBUG, logger="storefront.domain.model.cart"):
            cart.remove_product(999)
        assert all(r.levelno == logging.DEBUG for r in caplog.records)

    def test_zero_quantity_keeps_line(self):
        cart = _full_cart()
        cart.remove_product(PHONE.id, 0)
        assert cart.quantity_of(PHONE.id) == 1

    @pytest.mark.parametrize("qty", [True, 1.5, "2", None])
    def test_non_integer_quantity_keeps_line(self, qty):
        cart = _full_cart()
        cart.remove_product(PHONE.id, qty)
        assert cart.quantity_of(PHONE.id) == 1


class TestOperators:

    def test_iadd_mutates_in_place(self):
        cart = ShoppingCart()
        original = cart
        cart += PHONE
        assert cart is original
        assert cart.quantity_of(PHONE.id) == 1

    def test_add_returns_new_cart_and_leaves_original(self):
        cart = ShoppingCart()
        cart += PHONE
        combined = cart + JACKET
        assert combined is not cart
        assert JACKET.id not in cart
        assert combined.quantity_of(JACKET.id) == 1
        assert combined.quantity_of(PHONE.id) == 1

    def test_add_does_not_share_lines_with_original(self):
        cart = ShoppingCart()
        cart += PHONE
        combined = cart + PHONE
        assert combined.quantity_of(PHONE.id) == 2
        assert cart.quantity_of(PHONE.id) == 1


class TestTotal:

    def test_empty_cart_total_is_zero(self):
        assert ShoppingCart().total() == Money.zero()

    def test_scenario_total(self):
        assert _full_cart().total() == Money.of("870.981")

    def test_total_multiplies_by_quantity(self):
        cart = ShoppingCart()
        cart.add_product(JACKET, 2)
        cart.add_product(MILK, 3)
        assert cart.total() == Money.of("485.47")

    def test_clearance_clothing_uses_clearance_rate(self):
        cart = ShoppingCart()
        cart.add_product(Clothing(4, "Coat", Money.of("100"), "CLOTH-4", "M", True))
        assert cart.total() == Money.of("70")

    def test_lines_total_helper(self):
        lines = [CartLine(PHONE, Quantity(1)), CartLine(MILK, Quantity(2))]
        assert lines_total(lines) == Money.of("636.971")


class TestSnapshot:

    def test_snapshot_is_a_copy(self):
        cart = _full_cart()
        snapshot = cart.items_snapshot()
        snapshot.pop(PHONE.id)
        snapshot[JACKET.id] = CartLine(JACKET, Quantity(9))
        assert cart.quantity_of(PHONE.id) == 1
        assert cart.quantity_of(JACKET.id) == 1

    def test_cart_changes_do_not_reach_snapshot(self):
        cart = _full_cart()
        snapshot = cart.items_snapshot()
        cart.add_product(MILK, 4)
        cart.remove_product(PHONE.id)
        assert snapshot[MILK.id].quantity == Quantity(1)
        assert PHONE.id in snapshot

    def test_lines_are_frozen(self):
        line = next(iter(_full_cart()))
        with pytest.raises(dataclasses.FrozenInstanceError):
            line.quantity = Quantity(9)  # type: ignore[misc]


class TestClearAndRender:

    def test_clear_empties_cart(self):
        cart = _full_cart()
        cart.clear()
        assert cart.empty()
        assert len(cart) == 0

    def test_render(self):
        assert str(_full_cart()) == "\n".join([
            "ShoppingCart:",
            "  x1 [Electronics] Smartphone (SKU:ELEC-100) : 629.99",
            "  x1 [Clothing] Leather Jacket (Size:L, SKU:CLOTH-200) : 237.50",
            "  x1 [Grocery] Organic Milk (exp:2025-12-01, SKU:GROC-300) : 3.49",
            "Total: 870.98",
        ])

    def test_render_empty(self):
        assert str(ShoppingCart()) == "ShoppingCart:\nTotal: 0.00"
