"""Unit tests for user input parsing helpers."""

import datetime as dt
from decimal import Decimal

import pytest

from grana.utils.parsing import (
    ensure_finite_number,
    normalize_payment_date,
    parse_decimal_input,
    parse_number,
)


class TestParseDecimalInput:
    """Test comma/dot decimal parsing."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("12,5", 12.5),
            ("12.5", 12.5),
            ("1.234,56", 1234.56),
            ("1 234,56", 1234.56),
            ("  20 ", 20.0),
            ("-3,5", -3.5),
            (7, 7.0),
            (2.25, 2.25),
            (Decimal("1.5"), 1.5),
        ],
    )
    def test_valid(self, raw, expected):
        """Test accepted amount formats."""
        assert parse_decimal_input(raw) == pytest.approx(expected)

    @pytest.mark.parametrize(
        "raw", [None, "", "   ", "abc", "1_000", "nan", "inf", float("nan"), "12,5,3"]
    )
    def test_invalid(self, raw):
        """Test that unusable values give None."""
        assert parse_decimal_input(raw) is None


class TestParseNumber:
    """Test lenient form number parsing."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("R$ 1000", 1000.0),
            ("0.8%", 0.8),
            ("-12", -12.0),
            ("", 0.0),
            ("abc", 0.0),
            (5, 5.0),
        ],
    )
    def test_parse(self, raw, expected):
        """Test that non-numeric characters are dropped."""
        assert parse_number(raw) == expected

    def test_fallback_for_unparseable(self):
        """Test the fallback when the cleaned text is not a number."""
        assert parse_number("1.2.3", fallback=5.0) == 5.0
        assert parse_number("--", fallback=1.0) == 1.0

    def test_none_and_non_finite_use_fallback(self):
        """Test missing and non-finite values."""
        assert parse_number(None, fallback=3.0) == 3.0
        assert parse_number(float("inf"), fallback=2.0) == 2.0


class TestEnsureFiniteNumber:
    """Test finite number coercion."""

    def test_values(self):
        """Test finite numbers, non-finite numbers and non-numbers."""
        assert ensure_finite_number(3) == 3.0
        assert ensure_finite_number(float("nan")) == 0.0
        assert ensure_finite_number("3", fallback=-1.0) == -1.0
        assert ensure_finite_number(True) == 0.0


class TestNormalizePaymentDate:
    """Test payment date normalization."""

    def test_iso_string(self):
        """Test a YYYY-MM-DD string."""
        assert normalize_payment_date("2024-03-05") == dt.date(2024, 3, 5)

    def test_date_and_datetime(self):
        """Test that dates pass through and datetimes lose their time."""
        assert normalize_payment_date(dt.date(2024, 3, 5)) == dt.date(2024, 3, 5)
        assert normalize_payment_date(dt.datetime(2024, 3, 5, 10)) == dt.date(2024, 3, 5)

    @pytest.mark.parametrize(
        "raw",
        [None, "", "2024-03", "2024/03/05", "2024-00-10", "2024-13-01", "2024-02-30", "a-b-c"],
    )
    def test_invalid(self, raw):
        """Test that malformed and impossible dates give None."""
        assert normalize_payment_date(raw) is None
