import asyncio
from datetime import date
from decimal import Decimal

import pytest

from hotel_ops.core.errors import (
    EmptyCartError,
    InvalidRangeError,
    ItemUnavailableError,
    MissingDestinationError,
    ServerError,
)
from hotel_ops.models.cart import OrderDetails
from hotel_ops.models.catalog import MenuItem
from hotel_ops.models.room import Room
from hotel_ops.services.cart import CartAggregator
from hotel_ops.services.checkout import CheckoutService

from _helpers import booking_row, menu_item_row, order_row, room_row


@pytest.fixture
def checkout(backend) -> CheckoutService:
    return CheckoutService(backend)


def _cart_with_sandwiches(count: int = 2) -> CartAggregator:
    cart = CartAggregator()
    item = MenuItem.model_validate(menu_item_row())
    for _ in range(count):
        cart.add(item)
    return cart


def test_place_order_clears_cart_after_confirmation(fake_api, checkout):
    fake_api.add("POST", "/rest/v1/orders", status=201, json=[order_row()])
    cart = _cart_with_sandwiches()

    order = asyncio.run(checkout.place_order(cart, OrderDetails(destination="204")))

    assert order.id == "o-1"
    assert cart.is_empty
    assert len(fake_api.sent("POST", "/rest/v1/orders")) == 1


def test_failed_order_keeps_cart(fake_api, checkout):
    fake_api.add("POST", "/rest/v1/orders", status=500, json={"message": "database unavailable"})
    cart = _cart_with_sandwiches()

    with pytest.raises(ServerError):
        asyncio.run(checkout.place_order(cart, OrderDetails(destination="204")))

    assert cart.item_count() == 2
    assert cart.total() == Decimal("25.0")


def test_empty_cart_is_rejected_before_any_request(fake_api, checkout):
    with pytest.raises(EmptyCartError):
        asyncio.run(checkout.place_order(CartAggregator(), OrderDetails(destination="204")))

    assert fake_api.requests == []


def test_missing_room_number_is_rejected_before_any_request(fake_api, checkout):
    cart = _cart_with_sandwiches(1)

    with pytest.raises(MissingDestinationError):
        asyncio.run(checkout.place_order(cart, OrderDetails(destination="  ")))

    assert fake_api.requests == []
    assert not cart.is_empty


def test_book_room_creates_booking_then_marks_room_booked(fake_api, backend, checkout):
    backend.session.start("token", {"id": "u-1"})
    fake_api.add("POST", "/rest/v1/bookings", status=201, json=[booking_row()])
    fake_api.add("PATCH", "/rest/v1/rooms", json=[room_row(status="booked")])
    room = Room.model_validate(room_row(price=100))

    booking = asyncio.run(checkout.book_room(room, date(2024, 1, 1), date(2024, 1, 3), "Late arrival"))

    assert [r.method for r in fake_api.requests] == ["POST", "PATCH"]
    sent = fake_api.body(fake_api.requests[0])
    assert sent["total_price"] == "200"
    assert sent["user_id"] == "u-1"
    assert sent["status"] == "confirmed"
    assert sent["special_requests"] == "Late arrival"
    assert fake_api.body(fake_api.requests[1]) == {"status": "booked"}
    assert fake_api.requests[1].url.params["id"] == "eq.r-101"
    assert booking.id == "b-1"


def test_booking_unavailable_room_sends_nothing(fake_api, checkout):
    room = Room.model_validate(room_row(status="occupied"))

    with pytest.raises(ItemUnavailableError):
        asyncio.run(checkout.book_room(room, date(2024, 1, 1), date(2024, 1, 3)))

    assert fake_api.requests == []


def test_booking_invalid_range_sends_nothing(fake_api, checkout):
    room = Room.model_validate(room_row())

    with pytest.raises(InvalidRangeError):
        asyncio.run(checkout.book_room(room, date(2024, 1, 3), date(2024, 1, 3)))

    assert fake_api.requests == []


def test_failed_room_update_cancels_booking(fake_api, backend, checkout):
    backend.session.start("token", {"id": "u-1"})
    fake_api.add("POST", "/rest/v1/bookings", status=201, json=[booking_row()])
    fake_api.add("PATCH", "/rest/v1/rooms", status=500, json={"message": "rooms table locked"})
    fake_api.add("PATCH", "/rest/v1/bookings", json=[booking_row(status="cancelled")])
    room = Room.model_validate(room_row())

    with pytest.raises(ServerError):
        asyncio.run(checkout.book_room(room, date(2024, 1, 1), date(2024, 1, 3)))

    assert [(r.method, r.url.path) for r in fake_api.requests] == [
        ("POST", "/rest/v1/bookings"),
        ("PATCH", "/rest/v1/rooms"),
        ("PATCH", "/rest/v1/bookings"),
    ]
    cancel = fake_api.requests[2]
    assert cancel.url.params["id"] == "eq.b-1"
    assert fake_api.body(cancel) == {"status": "cancelled"}


def test_room_update_error_survives_failed_cancellation(fake_api, checkout):
    fake_api.add("POST", "/rest/v1/bookings", status=201, json=[booking_row()])
    fake_api.add("PATCH", "/rest/v1/rooms", status=500, json={"message": "rooms table locked"})
    fake_api.add("PATCH", "/rest/v1/bookings", status=503, json={"message": "unavailable"})
    room = Room.model_validate(room_row())

    with pytest.raises(ServerError) as exc_info:
        asyncio.run(checkout.book_room(room, date(2024, 1, 1), date(2024, 1, 3)))

    assert exc_info.value.message == "rooms table locked"
