"""Catalog models: selectable items and the room-service menu"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CatalogItem(BaseModel):
    """Item that can be put in a cart"""
    id: str
    name: str
    price: Decimal = Field(ge=0)
    is_available: bool = True
    category: str = ""

    model_config = ConfigDict(frozen=True, extra="ignore")


class MenuItem(CatalogItem):
    """Room-service menu item"""
    description: str = ""
    preparation_time: Optional[int] = None
    created_at: Optional[datetime] = None


class OrderStatus(str, Enum):
    PENDING = "pending"
    PREPARING = "preparing"
    READY = "ready"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class FoodOrderItem(BaseModel):
    """Item in a room-service order"""
    menu_item_id: str
    quantity: int = Field(gt=0)
    unit_price: Decimal = Field(ge=0)

    model_config = ConfigDict(extra="ignore")


class FoodOrder(BaseModel):
    """Room-service order as stored by the backend"""
    id: str
    room_number: Optional[str] = None
    user_id: Optional[str] = None
    status: OrderStatus = OrderStatus.PENDING
    items: list[FoodOrderItem] = []
    total_amount: Decimal = Decimal("0")
    special_instructions: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(extra="ignore")
