"""Unit tests for overtime record preparation and summaries."""

import datetime as dt

import pytest

from grana.aggregators.overtime_aggregator import (
    MONTHLY_COLUMNS,
    OvertimeSummary,
    build_overtime_record,
    group_by_payment_month,
    record_duration_minutes,
    summarize_overtime_records,
)
from grana.models.overtime import OvertimeRecord


class TestBuildOvertimeRecord:
    """Test suite for build_overtime_record."""

    def test_night_shift(self):
        """Test a shift typed as 22:00 to 06:00 on the same date."""
        record = build_overtime_record(
            dt.datetime(2024, 3, 1, 22, 0),
            dt.datetime(2024, 3, 1, 6, 0),
            hourly_rate="20",
            overtime_percentage="0,5",
            user_id="user-1",
        )
        assert record.end_time == dt.datetime(2024, 3, 2, 6, 0)
        assert record.payment_date == dt.date(2024, 3, 2)
        assert record.total_value == 288.0
        assert record.user_id == "user-1"

    def test_total_rounded_to_cents(self):
        """Test that the stored total has two decimals."""
        record = build_overtime_record(
            dt.datetime(2024, 3, 1, 8, 0),
            dt.datetime(2024, 3, 1, 8, 20),
            hourly_rate="10",
            overtime_percentage="0",
        )
        assert record.total_value == 3.33

    def test_explicit_payment_date(self):
        """Test that a given payment date is kept."""
        record = build_overtime_record(
            dt.datetime(2024, 3, 1, 8, 0),
            dt.datetime(2024, 3, 1, 10, 0),
            hourly_rate=20,
            overtime_percentage=0.75,
            payment_date="2024-04-05",
        )
        assert record.payment_date == dt.date(2024, 4, 5)

    @pytest.mark.parametrize(
        "overrides,message",
        [
            ({"start": None}, "Shift start and end are required"),
            ({"hourly_rate": "abc"}, "Invalid hourly rate"),
            ({"overtime_percentage": ""}, "Invalid overtime percentage"),
            ({"payment_date": "2024-02-30"}, "Invalid payment date"),
        ],
    )
    def test_invalid_input(self, overrides, message):
        """Test that invalid form values are rejected."""
        kwargs = {
            "start": dt.datetime(2024, 3, 1, 8, 0),
            "end": dt.datetime(2024, 3, 1, 10, 0),
            "hourly_rate": "20",
            "overtime_percentage": "0.5",
        }
        kwargs.update(overrides)
        with pytest.raises(ValueError, match=message):
            build_overtime_record(**kwargs)


class TestRecordDurationMinutes:
    """Test whole-minute durations."""

    def test_rounds_half_up(self):
        """Test rounding of seconds."""
        record = OvertimeRecord(
            start_time=dt.datetime(2024, 3, 1, 8, 0, 0),
            end_time=dt.datetime(2024, 3, 1, 8, 10, 30),
            hourly_rate=1,
            overtime_percentage=0,
        )
        assert record_duration_minutes(record) == 11

    def test_reversed_is_zero(self):
        """Test that a reversed stored record counts as zero."""
        record = OvertimeRecord(
            start_time=dt.datetime(2024, 3, 1, 10, 0),
            end_time=dt.datetime(2024, 3, 1, 8, 0),
            hourly_rate=1,
            overtime_percentage=0,
        )
        assert record_duration_minutes(record) == 0


class TestSummarizeOvertimeRecords:
    """Test summaries of stored records."""

    def test_totals_and_order(self, night_shift_record, day_shift_record):
        """Test that records are sorted newest first and totaled."""
        summary = summarize_overtime_records([night_shift_record, day_shift_record])

        assert isinstance(summary, OvertimeSummary)
        assert [r.id for r in summary.records] == [2, 1]
        assert summary.total_minutes == 600
        assert summary.total_value == pytest.approx(393.0)
        assert summary.record_count == 2

    def test_missing_total_counts_as_zero(self, night_shift_record):
        """Test records without a stored total."""
        unpaid = night_shift_record.model_copy(update={"id": 3, "total_value": None})
        summary = summarize_overtime_records([night_shift_record, unpaid])
        assert summary.total_value == pytest.approx(288.0)

    def test_empty(self):
        """Test summarizing no records."""
        summary = summarize_overtime_records([])
        assert summary.record_count == 0
        assert summary.total_minutes == 0
        assert summary.total_value == 0.0


class TestGroupByPaymentMonth:
    """Test monthly totals."""

    def test_groups_by_payment_month(self, night_shift_record, day_shift_record):
        """Test that both records paid in April share a row."""
        may_record = day_shift_record.model_copy(
            update={"id": 3, "payment_date": dt.date(2024, 5, 5)}
        )
        monthly = group_by_payment_month([night_shift_record, day_shift_record, may_record])

        assert list(monthly.columns) == MONTHLY_COLUMNS
        assert list(monthly["month"]) == ["2024-04", "2024-05"]
        assert list(monthly["records"]) == [2, 1]
        assert list(monthly["total_minutes"]) == [600, 120]
        assert list(monthly["total_value"]) == pytest.approx([393.0, 105.0])

    def test_falls_back_to_end_date(self, day_shift_record):
        """Test that records without a payment date use the shift's end."""
        record = day_shift_record.model_copy(update={"payment_date": None})
        monthly = group_by_payment_month([record])
        assert list(monthly["month"]) == ["2024-03"]

    def test_empty(self):
        """Test that no records give an empty frame with the columns."""
        monthly = group_by_payment_month([])
        assert monthly.empty
        assert list(monthly.columns) == MONTHLY_COLUMNS
