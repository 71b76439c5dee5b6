"""Shared service instances for the API routes"""

from typing import Optional

from fastapi import Depends

from ..core.config import settings
from ..core.session import SessionState
from ..core.storage import FileStorage, MemoryStorage
from ..services.backend import HotelBackend
from ..services.cart import CartStore, cart_store
from ..services.checkout import CheckoutService
from ..services.dashboard import DashboardLoader
from ..services.pricing import BookingPriceCalculator

session_state: Optional[SessionState] = None
backend: Optional[HotelBackend] = None


def get_session_state() -> SessionState:
    """Get or create the process-wide session state"""
    global session_state
    if session_state is None:
        storage = (
            FileStorage(settings.session_storage_path)
            if settings.session_storage_path
            else MemoryStorage()
        )
        session_state = SessionState(storage)
        session_state.restore()
    return session_state


def get_backend() -> HotelBackend:
    """Get or create the backend client"""
    global backend
    if backend is None:
        backend = HotelBackend.from_settings(settings, get_session_state())
    return backend


def get_calculator() -> BookingPriceCalculator:
    return BookingPriceCalculator()


def get_checkout_service(
    backend: HotelBackend = Depends(get_backend),
    calculator: BookingPriceCalculator = Depends(get_calculator),
) -> CheckoutService:
    return CheckoutService(backend, calculator)


def get_dashboard_loader(backend: HotelBackend = Depends(get_backend)) -> DashboardLoader:
    """One loader per request; the stale-result guard applies within a loader"""
    return DashboardLoader(backend)


def get_cart_store() -> CartStore:
    return cart_store
