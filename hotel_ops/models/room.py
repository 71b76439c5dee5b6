"""Room and booking models"""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class RoomStatus(str, Enum):
    AVAILABLE = "available"
    BOOKED = "booked"
    OCCUPIED = "occupied"
    MAINTENANCE = "maintenance"


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class Room(BaseModel):
    """Hotel room"""
    id: str
    room_number: str
    room_type: str = ""
    description: str = ""
    price_per_night: Decimal = Field(ge=0)
    capacity: int = Field(ge=0, default=1)
    amenities: list[str] = []
    status: RoomStatus = RoomStatus.AVAILABLE
    floor: Optional[int] = None

    model_config = ConfigDict(frozen=True, extra="ignore")

    @property
    def is_available(self) -> bool:
        return self.status == RoomStatus.AVAILABLE


class Booking(BaseModel):
    """Room booking as stored by the backend"""
    id: str
    room_id: str
    user_id: Optional[str] = None
    check_in_date: date
    check_out_date: date
    total_price: Decimal = Decimal("0")
    status: BookingStatus = BookingStatus.PENDING
    special_requests: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(extra="ignore")


class BookingRequest(BaseModel):
    """New booking to be created"""
    room_id: str
    check_in_date: date
    check_out_date: date
    total_price: Decimal
    user_id: Optional[str] = None
    status: BookingStatus = BookingStatus.CONFIRMED
    special_requests: Optional[str] = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "room_id": self.room_id,
            "check_in_date": self.check_in_date.isoformat(),
            "check_out_date": self.check_out_date.isoformat(),
            "total_price": self.total_price,
            "status": self.status.value,
        }
        if self.user_id:
            payload["user_id"] = self.user_id
        if self.special_requests:
            payload["special_requests"] = self.special_requests
        return payload
