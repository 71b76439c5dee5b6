"""Dashboard data loading and summary figures"""

import asyncio
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from ..core.errors import AuthError, GatewayError, StaleResultError
from ..models.catalog import FoodOrder, MenuItem, OrderStatus
from ..models.room import Booking, BookingStatus, Room, RoomStatus
from ..models.supply import InventoryItem, Supplier
from .backend import HotelBackend

logger = logging.getLogger(__name__)


class Generation:
    """Counter that tells a current result from a superseded one"""

    def __init__(self):
        self.value = 0

    def next(self) -> int:
        self.value += 1
        return self.value

    def is_current(self, token: int) -> bool:
        return token == self.value

    def invalidate(self) -> None:
        self.value += 1


@dataclass
class DashboardSummary:
    total_rooms: int
    available_rooms: int
    occupancy_rate: float
    pending_orders: int
    booking_revenue: Decimal
    low_stock_count: int


@dataclass
class DashboardSnapshot:
    """Data behind the dashboard; sections that failed stay empty"""
    generation: int
    rooms: list[Room] = field(default_factory=list)
    bookings: list[Booking] = field(default_factory=list)
    menu_items: list[MenuItem] = field(default_factory=list)
    orders: list[FoodOrder] = field(default_factory=list)
    inventory: list[InventoryItem] = field(default_factory=list)
    suppliers: list[Supplier] = field(default_factory=list)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def low_stock(self) -> list[InventoryItem]:
        return [item for item in self.inventory if item.is_low_stock]

    def summary(self) -> DashboardSummary:
        total_rooms = len(self.rooms)
        available = sum(1 for room in self.rooms if room.status == RoomStatus.AVAILABLE)
        in_use = sum(
            1 for room in self.rooms
            if room.status in (RoomStatus.BOOKED, RoomStatus.OCCUPIED)
        )
        revenue = sum(
            (b.total_price for b in self.bookings if b.status != BookingStatus.CANCELLED),
            Decimal("0"),
        )
        return DashboardSummary(
            total_rooms=total_rooms,
            available_rooms=available,
            occupancy_rate=round(in_use / total_rooms, 4) if total_rooms else 0.0,
            pending_orders=sum(1 for o in self.orders if o.status == OrderStatus.PENDING),
            booking_revenue=revenue,
            low_stock_count=len(self.low_stock),
        )


class DashboardLoader:
    """
    Fetches every dashboard section concurrently.

    Sections are independent: one failing request leaves its section
    empty and records the message, except AuthError which propagates.
    A load that has been superseded by a newer one (or cancelled) raises
    StaleResultError instead of returning old data.
    """

    def __init__(self, backend: HotelBackend):
        self.backend = backend
        self.generation = Generation()
        self.latest: Optional[DashboardSnapshot] = None

    async def load(self) -> DashboardSnapshot:
        token = self.generation.next()
        sections = {
            "rooms": self.backend.rooms.list_rooms(),
            "bookings": self.backend.rooms.list_bookings(),
            "menu_items": self.backend.food.list_menu_items(),
            "orders": self.backend.food.list_orders(),
            "inventory": self.backend.supply.list_inventory(),
            "suppliers": self.backend.supply.list_suppliers(),
        }
        results = await asyncio.gather(*sections.values(), return_exceptions=True)

        if not self.generation.is_current(token):
            logger.debug(f"Discarding dashboard load {token}")
            raise StaleResultError(f"Dashboard load {token} was superseded")

        snapshot = DashboardSnapshot(generation=token)
        for name, result in zip(sections, results):
            if isinstance(result, AuthError):
                raise result
            if isinstance(result, GatewayError):
                logger.warning(f"Dashboard section {name} failed: {result.message}")
                snapshot.errors[name] = result.message
                continue
            if isinstance(result, BaseException):
                raise result
            setattr(snapshot, name, result)

        self.latest = snapshot
        return snapshot

    def cancel(self) -> None:
        """Make any in-flight load stale"""
        self.generation.invalidate()
