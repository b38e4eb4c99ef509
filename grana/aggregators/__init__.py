"""Aggregators for stored overtime records."""

from grana.aggregators.overtime_aggregator import (
    OvertimeSummary,
    build_overtime_record,
    group_by_payment_month,
    record_duration_minutes,
    summarize_overtime_records,
)

__all__ = [
    "OvertimeSummary",
    "build_overtime_record",
    "group_by_payment_month",
    "record_duration_minutes",
    "summarize_overtime_records",
]
