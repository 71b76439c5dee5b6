"""Cart and order submission models"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CartLine(BaseModel):
    """Item in a cart, priced at the moment it was added"""
    item_id: str
    name: str
    quantity: int = Field(default=1, ge=1)
    unit_price: Decimal = Field(ge=0)

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity


class OrderDetails(BaseModel):
    """Free-text fields collected at checkout"""
    destination: str = ""
    special_instructions: str = ""


class OrderLine(BaseModel):
    """Line of a submitted order"""
    item_id: str
    quantity: int
    unit_price: Decimal

    model_config = ConfigDict(frozen=True)


class OrderSubmission(BaseModel):
    """One-shot order payload built from a cart"""
    lines: tuple[OrderLine, ...]
    total: Decimal
    destination: str
    special_instructions: str = ""
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = ConfigDict(frozen=True)

    def to_payload(self) -> dict[str, Any]:
        """Body of the create-order request"""
        return {
            "room_number": self.destination,
            "items": [
                {
                    "menu_item_id": line.item_id,
                    "quantity": line.quantity,
                    "unit_price": line.unit_price,
                }
                for line in self.lines
            ],
            "total_amount": self.total,
            "special_instructions": self.special_instructions,
            "status": "pending",
        }
