"""Booking routes"""

from datetime import date
from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from ..core.config import settings
from ..models.room import Booking
from ..services.backend import HotelBackend
from ..services.checkout import CheckoutService
from ..services.pricing import BookingPriceCalculator, format_amount
from .deps import get_backend, get_calculator, get_checkout_service

router = APIRouter(prefix="/api/bookings", tags=["Bookings"])


class QuoteRequest(BaseModel):
    """Stay to price, by room or by explicit rate"""
    check_in: date
    check_out: date
    room_id: Optional[str] = None
    rate: Optional[Decimal] = None


class QuoteResponse(BaseModel):
    rate: Decimal
    nights: int
    total: Decimal
    total_display: str
    check_in: date
    check_out: date


class CreateBookingRequest(BaseModel):
    room_id: str
    check_in: date
    check_out: date
    special_requests: Optional[str] = None


@router.get("", response_model=list[Booking])
async def list_bookings(backend: HotelBackend = Depends(get_backend)):
    """List bookings, newest first"""
    return await backend.rooms.list_bookings()


@router.post("/quote", response_model=QuoteResponse)
async def quote_stay(
    request: QuoteRequest,
    calculator: BookingPriceCalculator = Depends(get_calculator),
    backend: HotelBackend = Depends(get_backend),
):
    """Price a stay without booking it"""
    rate = request.rate
    if rate is None:
        if not request.room_id:
            raise HTTPException(status_code=400, detail="Either room_id or rate is required")
        room = await backend.rooms.get_room(request.room_id)
        rate = room.price_per_night

    quote = calculator.quote(rate, request.check_in, request.check_out)
    return QuoteResponse(
        rate=quote.rate,
        nights=quote.nights,
        total=quote.total,
        total_display=format_amount(quote.total, settings.currency),
        check_in=quote.check_in,
        check_out=quote.check_out,
    )


@router.post("", response_model=Booking)
async def create_booking(
    request: CreateBookingRequest,
    backend: HotelBackend = Depends(get_backend),
    service: CheckoutService = Depends(get_checkout_service),
):
    """Book a room"""
    room = await backend.rooms.get_room(request.room_id)
    return await service.book_room(
        room,
        request.check_in,
        request.check_out,
        special_requests=request.special_requests,
    )
