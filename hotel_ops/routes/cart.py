"""Room-service cart routes"""

from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from ..core.config import settings
from ..models.cart import CartLine, OrderDetails
from ..models.catalog import FoodOrder
from ..services.backend import HotelBackend
from ..services.cart import CartAggregator, CartStore
from ..services.checkout import CheckoutService
from ..services.pricing import format_amount
from .deps import get_backend, get_cart_store, get_checkout_service

router = APIRouter(prefix="/api/cart", tags=["Cart"])


class AddToCartRequest(BaseModel):
    """Request to add one unit of a menu item"""
    item_id: str


class CartResponse(BaseModel):
    """Cart API response"""
    cart_id: str
    items: list[CartLine]
    item_count: int
    total: Decimal
    total_display: str
    message: Optional[str] = None


class CheckoutResponse(BaseModel):
    """Placed order"""
    order: FoodOrder
    message: str


def _cart_response(cart: CartAggregator, message: Optional[str] = None) -> CartResponse:
    total = cart.total()
    return CartResponse(
        cart_id=cart.cart_id,
        items=cart.lines,
        item_count=cart.item_count(),
        total=total,
        total_display=format_amount(total, settings.currency),
        message=message,
    )


def _require_cart(store: CartStore, cart_id: str) -> CartAggregator:
    cart = store.get_cart(cart_id)
    if not cart:
        raise HTTPException(status_code=404, detail="Cart not found")
    return cart


@router.post("", response_model=CartResponse)
async def create_cart(store: CartStore = Depends(get_cart_store)):
    """Create a new cart"""
    return _cart_response(store.create_cart(), message="Cart created")


@router.get("/{cart_id}", response_model=CartResponse)
async def get_cart(cart_id: str, store: CartStore = Depends(get_cart_store)):
    return _cart_response(_require_cart(store, cart_id))


@router.post("/{cart_id}/items", response_model=CartResponse)
async def add_to_cart(
    cart_id: str,
    request: AddToCartRequest,
    store: CartStore = Depends(get_cart_store),
    backend: HotelBackend = Depends(get_backend),
):
    """Add a menu item, priced as the backend lists it now"""
    cart = _require_cart(store, cart_id)
    item = await backend.food.get_menu_item(request.item_id)
    cart.add(item)
    return _cart_response(cart, message=f"Added {item.name} to cart")


@router.delete("/{cart_id}/items/{item_id}", response_model=CartResponse)
async def remove_from_cart(
    cart_id: str,
    item_id: str,
    store: CartStore = Depends(get_cart_store),
):
    """Remove one unit of an item"""
    cart = _require_cart(store, cart_id)
    cart.remove(item_id)
    return _cart_response(cart, message="Item removed")


@router.delete("/{cart_id}", response_model=CartResponse)
async def clear_cart(cart_id: str, store: CartStore = Depends(get_cart_store)):
    """Cancel: empty the cart"""
    cart = _require_cart(store, cart_id)
    cart.clear()
    return _cart_response(cart, message="Cart cleared")


@router.post("/{cart_id}/checkout", response_model=CheckoutResponse)
async def checkout(
    cart_id: str,
    details: OrderDetails,
    store: CartStore = Depends(get_cart_store),
    service: CheckoutService = Depends(get_checkout_service),
):
    """Place the cart as a room-service order"""
    cart = _require_cart(store, cart_id)
    order = await service.place_order(cart, details)
    return CheckoutResponse(
        order=order,
        message=f"Order placed for room {order.room_number or details.destination.strip()}",
    )
