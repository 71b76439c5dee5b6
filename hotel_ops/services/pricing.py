"""Booking price calculation"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

from ..core.errors import InvalidRateError
from ..models.booking import BookingQuote, DateLike, DateRange

Amount = Union[Decimal, int, float, str]

CENT = Decimal("0.01")


def to_decimal(value: Amount) -> Decimal:
    """Convert a money value to Decimal without float artifacts"""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def format_amount(amount: Amount, currency: str = "USD") -> str:
    """Two-decimal display string, e.g. '$1,250.00'"""
    value = to_decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)
    if currency.upper() == "USD":
        return f"${value:,.2f}"
    return f"{value:,.2f} {currency.upper()}"


class BookingPriceCalculator:
    """Prices a stay as nights x nightly rate"""

    def nights(self, check_in: DateLike, check_out: DateLike) -> int:
        return DateRange(check_in, check_out).nights

    def quote(self, rate: Amount, check_in: DateLike, check_out: DateLike) -> BookingQuote:
        """
        Quote a stay.

        Args:
            rate: Nightly rate, must not be negative
            check_in: Check-in date (or datetime)
            check_out: Check-out date (or datetime)

        Returns:
            Quote with the number of nights and the exact total
        """
        nightly_rate = to_decimal(rate)
        if nightly_rate < 0:
            raise InvalidRateError(f"Nightly rate cannot be negative: {nightly_rate}")

        stay = DateRange(check_in, check_out)
        nights = stay.nights
        return BookingQuote(
            rate=nightly_rate,
            nights=nights,
            total=nightly_rate * nights,
            check_in=stay.start_date,
            check_out=stay.end_date,
        )
