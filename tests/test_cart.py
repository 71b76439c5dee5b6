import random
from decimal import Decimal

import pytest

from hotel_ops.core.errors import EmptyCartError, ItemUnavailableError, MissingDestinationError
from hotel_ops.models.cart import OrderDetails
from hotel_ops.models.catalog import MenuItem
from hotel_ops.services.cart import CartAggregator, CartStore


def _item(item_id: str, price: str = "10.00", available: bool = True, name: str = "") -> MenuItem:
    return MenuItem(id=item_id, name=name or f"Item {item_id}", price=Decimal(price), is_available=available)


SOUP = _item("soup", "6.50")
STEAK = _item("steak", "28.00")
TEA = _item("tea", "0.10")


def test_add_new_item_creates_line_with_quantity_one():
    cart = CartAggregator()
    line = cart.add(SOUP)

    assert line.item_id == "soup"
    assert line.quantity == 1
    assert line.unit_price == Decimal("6.50")
    assert len(cart) == 1


def test_add_existing_item_increments_in_place():
    cart = CartAggregator()
    cart.add(SOUP)
    cart.add(STEAK)
    cart.add(SOUP)

    assert [line.item_id for line in cart.lines] == ["soup", "steak"]
    assert cart.get_line("soup").quantity == 2
    assert cart.item_count() == 3


def test_add_unavailable_item_fails_and_leaves_cart_unchanged():
    cart = CartAggregator()
    cart.add(SOUP)

    with pytest.raises(ItemUnavailableError):
        cart.add(_item("lobster", "55.00", available=False))

    assert [line.item_id for line in cart.lines] == ["soup"]


def test_price_is_captured_when_first_added():
    cart = CartAggregator()
    cart.add(_item("soup", "6.50"))
    cart.add(_item("soup", "7.00"))

    line = cart.get_line("soup")
    assert line.quantity == 2
    assert line.unit_price == Decimal("6.50")
    assert cart.total() == Decimal("13.00")


def test_remove_decrements_then_deletes():
    cart = CartAggregator()
    cart.add(SOUP)
    cart.add(SOUP)

    cart.remove("soup")
    assert cart.get_line("soup").quantity == 1

    cart.remove("soup")
    assert cart.get_line("soup") is None
    assert cart.is_empty


def test_remove_unknown_item_is_a_no_op():
    cart = CartAggregator()
    cart.add(SOUP)

    cart.remove("nope")
    cart.remove("nope")

    assert cart.get_line("soup").quantity == 1


def test_add_then_remove_restores_previous_state():
    cart = CartAggregator()
    cart.add(SOUP)
    cart.add(SOUP)
    before = cart.lines

    cart.add(STEAK)
    cart.remove("steak")

    assert cart.lines == before


def test_re_adding_after_removal_appends_at_end():
    cart = CartAggregator()
    cart.add(SOUP)
    cart.add(STEAK)
    cart.remove("soup")
    cart.add(SOUP)

    assert [line.item_id for line in cart.lines] == ["steak", "soup"]


def test_total_of_empty_cart_is_zero():
    assert CartAggregator().total() == Decimal("0")


def test_total_uses_exact_decimals():
    cart = CartAggregator()
    for _ in range(3):
        cart.add(TEA)

    assert cart.total() == Decimal("0.30")


def test_lines_are_copies():
    cart = CartAggregator()
    cart.add(SOUP)

    cart.lines[0].quantity = 99

    assert cart.get_line("soup").quantity == 1


def test_random_add_remove_sequences_keep_invariants():
    rng = random.Random(20240101)
    catalog = [SOUP, STEAK, TEA, _item("wine", "42.90")]
    cart = CartAggregator()

    for _ in range(500):
        item = rng.choice(catalog)
        if rng.random() < 0.6:
            cart.add(item)
        else:
            cart.remove(item.id)

        ids = [line.item_id for line in cart.lines]
        assert len(ids) == len(set(ids))
        assert all(line.quantity >= 1 for line in cart.lines)
        assert cart.total() == sum(
            (line.quantity * line.unit_price for line in cart.lines), Decimal("0")
        )


def test_submission_of_empty_cart_fails():
    with pytest.raises(EmptyCartError):
        CartAggregator().to_submission(OrderDetails(destination="204"))


@pytest.mark.parametrize("destination", ["", "   "])
def test_submission_without_destination_fails(destination):
    cart = CartAggregator()
    cart.add(SOUP)

    with pytest.raises(MissingDestinationError):
        cart.to_submission(OrderDetails(destination=destination))


def test_submission_is_a_snapshot():
    cart = CartAggregator()
    cart.add(SOUP)
    cart.add(STEAK)
    cart.add(SOUP)
    expected_total = cart.total()

    submission = cart.to_submission(
        OrderDetails(destination=" 204 ", special_instructions="No onions")
    )
    cart.add(STEAK)
    cart.remove("soup")

    assert submission.total == expected_total == Decimal("41.00")
    assert submission.destination == "204"
    assert submission.special_instructions == "No onions"
    assert [(l.item_id, l.quantity) for l in submission.lines] == [("soup", 2), ("steak", 1)]
    assert not cart.is_empty


def test_submission_payload_matches_order_table():
    cart = CartAggregator()
    cart.add(SOUP)
    cart.add(SOUP)

    payload = cart.to_submission(OrderDetails(destination="204")).to_payload()

    assert payload["room_number"] == "204"
    assert payload["items"] == [
        {"menu_item_id": "soup", "quantity": 2, "unit_price": Decimal("6.50")}
    ]
    assert payload["total_amount"] == Decimal("13.00")
    assert payload["status"] == "pending"


def test_clear_empties_cart():
    cart = CartAggregator()
    cart.add(SOUP)
    cart.clear()
    cart.clear()

    assert cart.is_empty
    assert cart.total() == Decimal("0")


def test_cart_store_lifecycle():
    store = CartStore()
    cart = store.create_cart()

    assert store.get_cart(cart.cart_id) is cart
    assert store.get_or_create_cart(cart.cart_id) is cart
    assert store.get_or_create_cart("missing") is not cart
    assert store.delete_cart(cart.cart_id)
    assert not store.delete_cart(cart.cart_id)
    assert store.get_cart(cart.cart_id) is None
