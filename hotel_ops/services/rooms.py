"""Room and booking API"""

import logging
from typing import Any

from ..models.room import Booking, BookingRequest, BookingStatus, Room, RoomStatus
from .gateway import GatewayClient, eq

logger = logging.getLogger(__name__)


class RoomService:
    """Rooms and bookings tables"""

    def __init__(self, gateway: GatewayClient):
        self.gateway = gateway

    # ==================== Rooms ====================

    async def list_rooms(self) -> list[Room]:
        data = await self.gateway.table(
            "GET", "rooms", params={"select": "*", "order": "room_number.asc"}
        )
        return self.gateway.decode(list[Room], data or [])

    async def get_available_rooms(self) -> list[Room]:
        data = await self.gateway.table(
            "GET",
            "rooms",
            params={"select": "*", "status": eq(RoomStatus.AVAILABLE.value)},
        )
        return self.gateway.decode(list[Room], data or [])

    async def get_room(self, room_id: str) -> Room:
        data = await self.gateway.table(
            "GET", "rooms", params={"select": "*", "id": eq(room_id)}
        )
        return self.gateway.decode_single(Room, data)

    async def create_room(self, room: dict[str, Any]) -> Room:
        data = await self.gateway.table("POST", "rooms", body=room)
        return self.gateway.decode_single(Room, data)

    async def update_room(self, room_id: str, changes: dict[str, Any]) -> Room:
        data = await self.gateway.table(
            "PATCH", "rooms", params={"id": eq(room_id)}, body=changes
        )
        return self.gateway.decode_single(Room, data)

    async def set_room_status(self, room_id: str, status: RoomStatus) -> Room:
        logger.info(f"Room {room_id} -> {status.value}")
        return await self.update_room(room_id, {"status": status.value})

    async def delete_room(self, room_id: str) -> None:
        await self.gateway.table("DELETE", "rooms", params={"id": eq(room_id)})

    # ==================== Bookings ====================

    async def list_bookings(self) -> list[Booking]:
        """List bookings, newest first"""
        data = await self.gateway.table(
            "GET", "bookings", params={"select": "*", "order": "created_at.desc"}
        )
        return self.gateway.decode(list[Booking], data or [])

    async def create_booking(self, request: BookingRequest) -> Booking:
        data = await self.gateway.table("POST", "bookings", body=request.to_payload())
        booking = self.gateway.decode_single(Booking, data)
        logger.info(f"Booking {booking.id} created for room {booking.room_id}")
        return booking

    async def cancel_booking(self, booking_id: str) -> Booking:
        data = await self.gateway.table(
            "PATCH",
            "bookings",
            params={"id": eq(booking_id)},
            body={"status": BookingStatus.CANCELLED.value},
        )
        return self.gateway.decode_single(Booking, data)
