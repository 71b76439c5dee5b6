"""Dashboard routes"""

from dataclasses import asdict

from fastapi import APIRouter, Depends

from ..services.dashboard import DashboardLoader
from .deps import get_dashboard_loader

router = APIRouter(prefix="/api/dashboard", tags=["Dashboard"])


@router.get("")
async def get_dashboard(loader: DashboardLoader = Depends(get_dashboard_loader)):
    """All dashboard sections plus summary figures"""
    snapshot = await loader.load()
    return {
        "summary": asdict(snapshot.summary()),
        "rooms": snapshot.rooms,
        "bookings": snapshot.bookings,
        "menu_items": snapshot.menu_items,
        "orders": snapshot.orders,
        "inventory": snapshot.inventory,
        "low_stock": snapshot.low_stock,
        "suppliers": snapshot.suppliers,
        "errors": snapshot.errors,
    }
