"""Inventory, supplier and purchase order models"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PurchaseOrderStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    ORDERED = "ordered"
    RECEIVED = "received"
    CANCELLED = "cancelled"


class InventoryItem(BaseModel):
    """Stocked item"""
    id: str
    name: str
    category: str = ""
    description: str = ""
    quantity: int = 0
    unit: str = ""
    min_quantity: int = 0
    price: Decimal = Decimal("0")
    supplier_id: Optional[str] = None

    model_config = ConfigDict(extra="ignore")

    @property
    def is_low_stock(self) -> bool:
        return self.quantity < self.min_quantity


class Supplier(BaseModel):
    """Supplier of inventory items"""
    id: str
    name: str
    contact_person: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    is_active: bool = True

    model_config = ConfigDict(extra="ignore")


class PurchaseOrderItem(BaseModel):
    """Line of a purchase order"""
    inventory_item_id: str
    quantity: int = Field(gt=0)
    unit_price: Decimal = Field(ge=0)

    @property
    def total_price(self) -> Decimal:
        return self.unit_price * self.quantity


class PurchaseOrder(BaseModel):
    """Purchase order placed with a supplier"""
    id: str
    supplier_id: str
    status: PurchaseOrderStatus = PurchaseOrderStatus.PENDING
    items: list[PurchaseOrderItem] = []
    total_amount: Decimal = Decimal("0")
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(extra="ignore")
