# Hotel Ops Services

from .gateway import GatewayClient
from .backend import HotelBackend
from .cart import CartAggregator, CartStore, cart_store
from .pricing import BookingPriceCalculator, format_amount
from .checkout import CheckoutService
from .dashboard import DashboardLoader, DashboardSnapshot

__all__ = [
    "GatewayClient",
    "HotelBackend",
    "CartAggregator",
    "CartStore",
    "cart_store",
    "BookingPriceCalculator",
    "format_amount",
    "CheckoutService",
    "DashboardLoader",
    "DashboardSnapshot",
]
