"""Unit tests for the OvertimeRecord model."""

import datetime as dt

import pytest
from pydantic import ValidationError

from grana.models.overtime import OvertimeRecord


def make_record(**overrides):
    fields = {
        "start_time": "2024-03-01T22:00:00",
        "end_time": "2024-03-02T06:00:00",
        "hourly_rate": "20",
        "overtime_percentage": "0.5",
    }
    fields.update(overrides)
    return OvertimeRecord(**fields)


class TestOvertimeRecord:
    """Test suite for OvertimeRecord."""

    def test_parses_iso_timestamps(self):
        """Test that exported timestamps become datetimes."""
        record = make_record()
        assert record.start_time == dt.datetime(2024, 3, 1, 22, 0)
        assert record.end_time == dt.datetime(2024, 3, 2, 6, 0)

    @pytest.mark.parametrize(
        "raw,expected", [("25,50", 25.5), ("1.234,56", 1234.56), (" 30 ", 30.0), (18, 18.0)]
    )
    def test_parses_rate_text(self, raw, expected):
        """Test comma and dot decimal marks in the hourly rate."""
        assert make_record(hourly_rate=raw).hourly_rate == pytest.approx(expected)

    @pytest.mark.parametrize("raw", ["abc", "", None, "nan"])
    def test_rejects_invalid_rate(self, raw):
        """Test that the hourly rate is required and numeric."""
        with pytest.raises(ValidationError, match="hourly_rate must be a finite number"):
            make_record(hourly_rate=raw)

    def test_rejects_invalid_percentage(self):
        """Test that the overtime percentage is required and numeric."""
        with pytest.raises(ValidationError, match="overtime_percentage"):
            make_record(overtime_percentage="x")

    def test_optional_fields_default_to_none(self):
        """Test defaults for fields not yet stored."""
        record = make_record()
        assert record.id is None
        assert record.payment_date is None
        assert record.total_value is None

    def test_total_value_parsed_leniently(self):
        """Test that a malformed stored total reads as None."""
        assert make_record(total_value="288,00").total_value == 288.0
        assert make_record(total_value="n/a").total_value is None

    def test_payment_date(self):
        """Test payment date parsing."""
        assert make_record(payment_date="2024-04-05").payment_date == dt.date(2024, 4, 5)
        assert make_record(payment_date="  ").payment_date is None

    @pytest.mark.parametrize("raw", ["2024-02-30", "05/04/2024", "2024-13-01"])
    def test_rejects_invalid_payment_date(self, raw):
        """Test that impossible or malformed dates are rejected."""
        with pytest.raises(ValidationError, match="Invalid payment date"):
            make_record(payment_date=raw)

    def test_validate_assignment(self):
        """Test that assignments are validated too."""
        record = make_record()
        record.hourly_rate = "22,5"
        assert record.hourly_rate == 22.5
        with pytest.raises(ValidationError):
            record.hourly_rate = "abc"

    def test_ignores_unknown_columns(self):
        """Test that extra export columns are ignored."""
        record = make_record(created_at="2024-03-02T07:00:00")
        assert not hasattr(record, "created_at")
