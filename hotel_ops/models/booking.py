"""Stay date range and price quote"""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Union

from ..core.errors import InvalidRangeError

DateLike = Union[date, datetime]


def _as_date(value: DateLike) -> date:
    return value.date() if isinstance(value, datetime) else value


def _as_datetime(value: DateLike) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


@dataclass(frozen=True)
class DateRange:
    """Check-in and check-out; check-out must fall on a later calendar day"""
    check_in: DateLike
    check_out: DateLike

    def __post_init__(self):
        if (_as_date(self.check_out) - _as_date(self.check_in)).days < 1:
            raise InvalidRangeError(
                f"Check-out ({_as_date(self.check_out)}) must be after "
                f"check-in ({_as_date(self.check_in)})"
            )

    @property
    def nights(self) -> int:
        """Elapsed days, partial days rounded up"""
        elapsed = _as_datetime(self.check_out) - _as_datetime(self.check_in)
        nights = elapsed.days
        if elapsed - timedelta(days=elapsed.days):
            nights += 1
        return max(nights, 1)

    @property
    def start_date(self) -> date:
        return _as_date(self.check_in)

    @property
    def end_date(self) -> date:
        return _as_date(self.check_out)


@dataclass(frozen=True)
class BookingQuote:
    """Computed price of a stay; never persisted"""
    rate: Decimal
    nights: int
    total: Decimal
    check_in: date
    check_out: date
