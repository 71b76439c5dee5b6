"""Order and booking workflows"""

import logging
from typing import Optional

from ..core.errors import GatewayError, ItemUnavailableError
from ..models.booking import DateLike
from ..models.cart import OrderDetails
from ..models.catalog import FoodOrder
from ..models.room import Booking, BookingRequest, BookingStatus, Room, RoomStatus
from .backend import HotelBackend
from .cart import CartAggregator
from .pricing import BookingPriceCalculator

logger = logging.getLogger(__name__)


class CheckoutService:
    """
    Binds the cart and the price calculator to the backend.

    Local validation runs first, so invalid input never reaches the
    network. State is only reset once the backend has confirmed.
    """

    def __init__(
        self,
        backend: HotelBackend,
        calculator: Optional[BookingPriceCalculator] = None,
    ):
        self.backend = backend
        self.calculator = calculator or BookingPriceCalculator()

    async def place_order(self, cart: CartAggregator, extra: OrderDetails) -> FoodOrder:
        """Submit the cart as a room-service order and empty it"""
        submission = cart.to_submission(extra)
        order = await self.backend.food.create_order(submission)
        cart.clear()
        return order

    async def book_room(
        self,
        room: Room,
        check_in: DateLike,
        check_out: DateLike,
        special_requests: Optional[str] = None,
    ) -> Booking:
        """
        Book a room for a stay and mark it booked.

        Args:
            room: Room to book, must be available
            check_in: Check-in date
            check_out: Check-out date
            special_requests: Optional guest requests

        Returns:
            The created booking

        Raises:
            GatewayError: the booking or the room update failed; a booking
                whose room could not be marked booked is cancelled first
        """
        if not room.is_available:
            raise ItemUnavailableError(room.id, f"Room {room.room_number}")

        quote = self.calculator.quote(room.price_per_night, check_in, check_out)
        request = BookingRequest(
            room_id=room.id,
            check_in_date=quote.check_in,
            check_out_date=quote.check_out,
            total_price=quote.total,
            user_id=self.backend.session.user_id,
            status=BookingStatus.CONFIRMED,
            special_requests=special_requests or None,
        )

        booking = await self.backend.rooms.create_booking(request)
        try:
            await self.backend.rooms.set_room_status(room.id, RoomStatus.BOOKED)
        except GatewayError as exc:
            # A booking must not outlive a failed room update
            logger.error(f"Could not mark room {room.room_number} booked: {exc.message}")
            await self._withdraw(booking)
            raise
        logger.info(
            f"Room {room.room_number} booked: {quote.nights} night(s), total {quote.total}"
        )
        return booking

    async def _withdraw(self, booking: Booking) -> None:
        try:
            await self.backend.rooms.cancel_booking(booking.id)
            logger.info(f"Booking {booking.id} cancelled")
        except GatewayError as exc:
            logger.error(f"Booking {booking.id} left without a booked room: {exc.message}")
