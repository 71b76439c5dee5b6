"""Inventory, supplier and purchase order API"""

import logging
from decimal import Decimal

from ..models.supply import (
    InventoryItem,
    PurchaseOrder,
    PurchaseOrderItem,
    PurchaseOrderStatus,
    Supplier,
)
from .gateway import GatewayClient, eq

logger = logging.getLogger(__name__)


class SupplyService:
    """Inventory, suppliers and purchase orders tables"""

    def __init__(self, gateway: GatewayClient):
        self.gateway = gateway

    async def list_inventory(self) -> list[InventoryItem]:
        data = await self.gateway.table(
            "GET", "inventory_items", params={"select": "*", "order": "name.asc"}
        )
        return self.gateway.decode(list[InventoryItem], data or [])

    async def list_low_stock(self) -> list[InventoryItem]:
        """Items whose quantity is below their minimum"""
        # PostgREST filters cannot compare two columns, so filter here.
        return [item for item in await self.list_inventory() if item.is_low_stock]

    async def list_suppliers(self) -> list[Supplier]:
        data = await self.gateway.table(
            "GET", "suppliers", params={"select": "*", "order": "name.asc"}
        )
        return self.gateway.decode(list[Supplier], data or [])

    async def list_purchase_orders(self) -> list[PurchaseOrder]:
        data = await self.gateway.table(
            "GET", "purchase_orders", params={"select": "*", "order": "created_at.desc"}
        )
        return self.gateway.decode(list[PurchaseOrder], data or [])

    async def create_purchase_order(
        self,
        supplier_id: str,
        items: list[PurchaseOrderItem],
        notes: str = "",
    ) -> PurchaseOrder:
        """
        Place a purchase order with a supplier.

        Args:
            supplier_id: Supplier to order from
            items: Inventory items with quantities and agreed unit prices
            notes: Optional free-text notes

        Returns:
            The stored purchase order
        """
        if not items:
            raise ValueError("Purchase order needs at least one item")

        total = sum((item.total_price for item in items), Decimal("0"))
        body = {
            "supplier_id": supplier_id,
            "items": [
                {
                    "inventory_item_id": item.inventory_item_id,
                    "quantity": item.quantity,
                    "unit_price": item.unit_price,
                }
                for item in items
            ],
            "total_amount": total,
            "status": PurchaseOrderStatus.PENDING.value,
        }
        if notes:
            body["notes"] = notes

        data = await self.gateway.table("POST", "purchase_orders", body=body)
        order = self.gateway.decode_single(PurchaseOrder, data)
        logger.info(f"Purchase order {order.id} placed with supplier {supplier_id}: {total}")
        return order

    async def update_purchase_order_status(
        self, order_id: str, status: PurchaseOrderStatus
    ) -> PurchaseOrder:
        data = await self.gateway.table(
            "PATCH",
            "purchase_orders",
            params={"id": eq(order_id)},
            body={"status": status.value},
        )
        return self.gateway.decode_single(PurchaseOrder, data)
