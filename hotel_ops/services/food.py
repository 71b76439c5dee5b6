"""Room-service menu and order API"""

import logging
from typing import Any

from ..models.cart import OrderSubmission
from ..models.catalog import FoodOrder, MenuItem, OrderStatus
from .gateway import GatewayClient, eq

logger = logging.getLogger(__name__)


class FoodService:
    """Menu items and orders tables"""

    def __init__(self, gateway: GatewayClient):
        self.gateway = gateway

    async def list_menu_items(self) -> list[MenuItem]:
        data = await self.gateway.table(
            "GET", "menu_items", params={"select": "*", "order": "category.asc"}
        )
        return self.gateway.decode(list[MenuItem], data or [])

    async def get_menu_item(self, item_id: str) -> MenuItem:
        data = await self.gateway.table(
            "GET", "menu_items", params={"select": "*", "id": eq(item_id)}
        )
        return self.gateway.decode_single(MenuItem, data)

    async def create_menu_item(self, item: dict[str, Any]) -> MenuItem:
        data = await self.gateway.table("POST", "menu_items", body=item)
        return self.gateway.decode_single(MenuItem, data)

    async def list_orders(self) -> list[FoodOrder]:
        data = await self.gateway.table(
            "GET", "orders", params={"select": "*", "order": "created_at.desc"}
        )
        return self.gateway.decode(list[FoodOrder], data or [])

    async def create_order(self, submission: OrderSubmission) -> FoodOrder:
        """Send an order snapshot; the backend stores it as pending"""
        data = await self.gateway.table("POST", "orders", body=submission.to_payload())
        order = self.gateway.decode_single(FoodOrder, data)
        logger.info(
            f"Order {order.id} placed for room {submission.destination}: "
            f"{len(submission.lines)} line(s), total {submission.total}"
        )
        return order

    async def update_order_status(self, order_id: str, status: OrderStatus) -> FoodOrder:
        data = await self.gateway.table(
            "PATCH", "orders", params={"id": eq(order_id)}, body={"status": status.value}
        )
        return self.gateway.decode_single(FoodOrder, data)
