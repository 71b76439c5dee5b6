# Hotel Ops Routes

from .cart import router as cart_router
from .bookings import router as bookings_router
from .auth import router as auth_router
from .dashboard import router as dashboard_router

__all__ = ["cart_router", "bookings_router", "auth_router", "dashboard_router"]
