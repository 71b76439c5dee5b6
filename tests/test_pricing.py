from datetime import date, datetime
from decimal import Decimal

import pytest

from hotel_ops.core.errors import InvalidRangeError, InvalidRateError
from hotel_ops.models.booking import DateRange
from hotel_ops.services.pricing import BookingPriceCalculator, format_amount

calculator = BookingPriceCalculator()


def test_two_night_quote():
    quote = calculator.quote(100, date(2024, 1, 1), date(2024, 1, 3))

    assert quote.nights == 2
    assert quote.total == Decimal("200")
    assert quote.check_in == date(2024, 1, 1)
    assert quote.check_out == date(2024, 1, 3)


def test_same_day_stay_is_rejected():
    with pytest.raises(InvalidRangeError):
        calculator.quote(100, date(2024, 1, 1), date(2024, 1, 1))


def test_checkout_before_checkin_is_rejected():
    with pytest.raises(InvalidRangeError):
        calculator.nights(date(2024, 1, 5), date(2024, 1, 3))


def test_negative_rate_is_rejected():
    with pytest.raises(InvalidRateError):
        calculator.quote(-1, date(2024, 1, 1), date(2024, 1, 2))


def test_zero_rate_is_allowed():
    assert calculator.quote(0, date(2024, 1, 1), date(2024, 1, 4)).total == Decimal("0")


def test_overnight_partial_day_counts_as_one_night():
    assert calculator.nights(datetime(2024, 1, 1, 20, 0), datetime(2024, 1, 2, 10, 0)) == 1


def test_partial_days_round_up():
    assert calculator.nights(datetime(2024, 1, 1, 10, 0), datetime(2024, 1, 3, 12, 0)) == 3


def test_same_calendar_day_with_times_is_rejected():
    with pytest.raises(InvalidRangeError):
        calculator.nights(datetime(2024, 1, 1, 8, 0), datetime(2024, 1, 1, 22, 0))


def test_crosses_month_and_leap_day():
    assert calculator.nights(date(2024, 2, 27), date(2024, 3, 2)) == 4


def test_float_rate_does_not_accumulate_error():
    quote = calculator.quote(99.99, date(2024, 1, 1), date(2024, 1, 4))

    assert quote.rate == Decimal("99.99")
    assert quote.total == Decimal("299.97")


def test_date_range_exposes_calendar_dates():
    stay = DateRange(datetime(2024, 1, 1, 15, 0), datetime(2024, 1, 3, 11, 0))

    assert stay.start_date == date(2024, 1, 1)
    assert stay.end_date == date(2024, 1, 3)
    assert stay.nights == 2


@pytest.mark.parametrize(
    "amount,currency,expected",
    [
        (Decimal("1250"), "USD", "$1,250.00"),
        ("10.005", "usd", "$10.01"),
        (12.5, "EUR", "12.50 EUR"),
        (0, "USD", "$0.00"),
    ],
)
def test_format_amount(amount, currency, expected):
    assert format_amount(amount, currency) == expected
