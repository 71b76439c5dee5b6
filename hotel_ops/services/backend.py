"""Domain services sharing one gateway"""

from typing import Optional

import httpx

from ..core.config import Settings
from ..core.session import SessionState
from .auth import AuthService
from .food import FoodService
from .gateway import GatewayClient
from .rooms import RoomService
from .supply import SupplyService


class HotelBackend:
    """Entry point to every remote operation"""

    def __init__(self, gateway: GatewayClient):
        self.gateway = gateway
        self.rooms = RoomService(gateway)
        self.food = FoodService(gateway)
        self.supply = SupplyService(gateway)
        self.auth = AuthService(gateway)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        session: SessionState,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "HotelBackend":
        return cls(GatewayClient.from_settings(settings, session, transport=transport))

    @property
    def session(self) -> SessionState:
        return self.gateway.session

    async def close(self) -> None:
        await self.gateway.close()
