"""
Tests for the Cart model.

Covers:
- add / remove (membership by equality, first match)
- find_by_id never raising
- total and count, including the empty cart
- apply_discount_to_all leaving the cart untouched on a bad rate
- clear and replace_items
"""

import pytest

from app.exceptions import InvalidArgumentError
from domain.models import Cart, Item
from test_fixtures import make_item, make_sample_items, sample_cart


def test_new_cart_is_empty():
    cart = Cart()

    assert cart.count() == 0
    assert len(cart) == 0
    assert cart.total() == 0
    assert cart.items == []


def test_add_rejects_null_item():
    cart = Cart()

    with pytest.raises(InvalidArgumentError):
        cart.add(None)

    assert cart.count() == 0


def test_add_preserves_insertion_order_and_duplicates():
    cart = Cart()
    laptop, headphones, mouse = make_sample_items()

    cart.add(mouse)
    cart.add(laptop)
    cart.add(headphones)
    cart.add(Item(3, "Mouse", 50.0))

    assert [i.id for i in cart.items] == [3, 1, 2, 3]
    assert cart.count() == 4


def test_sample_cart_total(sample_cart):
    assert sample_cart.total() == pytest.approx(1400.00)
    assert sample_cart.count() == 3


def test_remove_uses_structural_equality(sample_cart):
    """
    Verifies:
    - A different instance with the same (id, name, price) removes the stored item
    - Remaining order is unchanged
    """
    sample_cart.remove(Item(2, "Headphones", 150.00))

    assert [i.name for i in sample_cart.items] == ["Laptop", "Mouse"]


def test_remove_takes_first_match_only():
    cart = Cart()
    first = make_item(9, "Cable", 5.0)
    second = make_item(9, "Cable", 5.0)
    cart.add(first)
    cart.add(make_item(10, "Plug", 3.0))
    cart.add(second)

    cart.remove(make_item(9, "Cable", 5.0))

    assert cart.count() == 2
    assert cart.items[0].id == 10
    assert cart.items[1] is second


def test_remove_absent_item_raises(sample_cart):
    with pytest.raises(InvalidArgumentError):
        sample_cart.remove(Item(2, "Headphones", 149.99))

    assert sample_cart.count() == 3


def test_add_then_remove_restores_count(sample_cart):
    before = sample_cart.count()
    item = make_item(4, "Webcam", 80.0)

    sample_cart.add(item)
    sample_cart.remove(item)

    assert sample_cart.count() == before


def test_find_by_id_on_empty_cart_returns_none():
    assert Cart().find_by_id(1) is None


def test_find_by_id_absent_returns_none(sample_cart):
    assert sample_cart.find_by_id(99) is None


def test_find_by_id_returns_first_match():
    cart = Cart()
    first = make_item(7, "Charger", 20.0)
    cart.add(first)
    cart.add(make_item(7, "Charger (spare)", 25.0))

    assert cart.find_by_id(7) is first


def test_apply_discount_to_all(sample_cart):
    sample_cart.apply_discount_to_all(10)

    prices = [i.price for i in sample_cart.items]
    assert prices == pytest.approx([1080.0, 135.0, 45.0])
    assert sample_cart.total() == pytest.approx(1260.0)


@pytest.mark.parametrize("rate", [-1, 101, None, float("nan")])
def test_apply_discount_to_all_bad_rate_leaves_items_unchanged(sample_cart, rate):
    with pytest.raises(InvalidArgumentError):
        sample_cart.apply_discount_to_all(rate)

    assert [i.price for i in sample_cart.items] == [1200.0, 150.0, 50.0]


def test_apply_discount_to_all_on_empty_cart_still_validates():
    with pytest.raises(InvalidArgumentError):
        Cart().apply_discount_to_all(200)


def test_clear_empties_cart(sample_cart):
    sample_cart.clear()

    assert sample_cart.count() == 0
    assert sample_cart.total() == 0


def test_items_returns_copy(sample_cart):
    items = sample_cart.items
    items.append(None)
    items.clear()

    assert sample_cart.count() == 3


def test_iteration_follows_insertion_order(sample_cart):
    assert [i.name for i in sample_cart] == ["Laptop", "Headphones", "Mouse"]


def test_replace_items_rejects_null_entries(sample_cart):
    with pytest.raises(InvalidArgumentError):
        sample_cart.replace_items([make_item(), None])

    assert sample_cart.count() == 3


def test_replace_items_swaps_contents(sample_cart):
    sample_cart.replace_items([make_item(8, "Desk", 300.0)])

    assert sample_cart.items == [Item(8, "Desk", 300.0)]


def test_cart_repr_lists_items():
    cart = Cart([make_item(3, "Mouse", 50.0)])
    assert repr(cart) == "Cart(items=[Item(id=3, name='Mouse', price=50.0)])"
