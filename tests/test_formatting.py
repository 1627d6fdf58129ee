from datetime import date, datetime, timezone

import pytest

from clinicflow.utils.formatting import (
    INVALID_DATE,
    NOT_AVAILABLE,
    calculate_age,
    format_currency,
    format_date,
    format_datetime,
    parse_datetime,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2024-07-10T10:00:00.000Z", "10-07-2024"),
        ("2024-07-10", "10-07-2024"),
        (date(2023, 1, 5), "05-01-2023"),
        (None, NOT_AVAILABLE),
        ("", NOT_AVAILABLE),
        ("not a date", INVALID_DATE),
    ],
)
def test_format_date(value, expected):
    assert format_date(value) == expected


def test_format_datetime():
    value = datetime(2024, 8, 12, 14, 5, tzinfo=timezone.utc)
    assert format_datetime(value) == "12-08-2024, 02:05 PM"
    assert format_datetime("31-31-2024") == INVALID_DATE


def test_parse_datetime_accepts_trailing_z():
    assert parse_datetime("2024-08-12T12:00:00Z").tzinfo is not None


@pytest.mark.parametrize(
    "amount, currency, expected",
    [
        (0, "INR", "₹0.00"),
        (500, "INR", "₹500.00"),
        (2400, "INR", "₹2,400.00"),
        (100000, "INR", "₹1,00,000.00"),
        (12345678.5, "INR", "₹1,23,45,678.50"),
        (-750, "INR", "-₹750.00"),
        (1234567, "USD", "$1,234,567.00"),
        (10, "CHF", "CHF 10.00"),
    ],
)
def test_format_currency(amount, currency, expected):
    assert format_currency(amount, currency) == expected


def test_calculate_age():
    assert calculate_age("1985-03-14", today=date(2024, 3, 13)) == 38
    assert calculate_age("1985-03-14", today=date(2024, 3, 14)) == 39
    assert calculate_age(None) is None
    assert calculate_age("garbage") is None
