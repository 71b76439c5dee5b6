# Hotel Ops Models

from .catalog import CatalogItem, MenuItem, FoodOrder, FoodOrderItem, OrderStatus
from .room import Room, RoomStatus, Booking, BookingRequest, BookingStatus
from .supply import (
    InventoryItem,
    Supplier,
    PurchaseOrder,
    PurchaseOrderItem,
    PurchaseOrderStatus,
)
from .cart import CartLine, OrderDetails, OrderLine, OrderSubmission
from .booking import DateRange, BookingQuote
from .auth import LoginCredentials, RegisterData, AuthUser, AuthResponse

__all__ = [
    "CatalogItem",
    "MenuItem",
    "FoodOrder",
    "FoodOrderItem",
    "OrderStatus",
    "Room",
    "RoomStatus",
    "Booking",
    "BookingRequest",
    "BookingStatus",
    "InventoryItem",
    "Supplier",
    "PurchaseOrder",
    "PurchaseOrderItem",
    "PurchaseOrderStatus",
    "CartLine",
    "OrderDetails",
    "OrderLine",
    "OrderSubmission",
    "DateRange",
    "BookingQuote",
    "LoginCredentials",
    "RegisterData",
    "AuthUser",
    "AuthResponse",
]
