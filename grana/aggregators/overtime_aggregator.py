"""Overtime record preparation and summaries.

This module covers the two ends of the overtime workflow around the pay
calculator:
- Building the record that gets stored when a shift is registered
- Summarizing stored records (total time, total paid, monthly totals)
"""

import datetime as dt
import logging
import math
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

import pandas as pd

from grana.calculators.overtime_calculator import calculate_overtime_pay
from grana.calculators.time_utils import calculate_elapsed_minutes, ensure_end_date
from grana.models.overtime import OvertimeRecord
from grana.utils.parsing import (
    ensure_finite_number,
    normalize_payment_date,
    parse_decimal_input,
)

logger = logging.getLogger(__name__)

MONTHLY_COLUMNS = ["month", "records", "total_minutes", "total_value"]


@dataclass
class OvertimeSummary:
    """Summary of stored overtime records.

    Attributes:
        records: Records sorted by start time, most recent first
        total_minutes: Sum of each record's whole-minute duration
        total_value: Sum of the stored total values
    """

    records: List[OvertimeRecord]
    total_minutes: int
    total_value: float

    @property
    def record_count(self) -> int:
        return len(self.records)


def build_overtime_record(
    start: Optional[dt.datetime],
    end: Optional[dt.datetime],
    hourly_rate: Any,
    overtime_percentage: Any,
    payment_date: Any = None,
    user_id: Optional[str] = None,
) -> OvertimeRecord:
    """Build the record stored when a shift is registered.

    The end is moved to the next day when needed, amounts are parsed from
    user text and the total is calculated and rounded to cents.

    Args:
        start: Shift start
        end: Shift end as typed
        hourly_rate: Hourly rate (number or text such as "25,50")
        overtime_percentage: Overtime fraction (number or text such as "0.75")
        payment_date: Payment date; defaults to the day the shift ends
        user_id: Owner of the record

    Returns:
        OvertimeRecord ready to be stored

    Raises:
        ValueError: If the shift bounds, amounts or payment date are invalid

    Example:
        >>> record = build_overtime_record(
        ...     dt.datetime(2024, 3, 1, 22, 0),
        ...     dt.datetime(2024, 3, 1, 6, 0),
        ...     hourly_rate="20",
        ...     overtime_percentage="0,5",
        ... )
        >>> record.end_time, record.payment_date, record.total_value
        (datetime.datetime(2024, 3, 2, 6, 0), datetime.date(2024, 3, 2), 288.0)
    """
    start_time, end_time = ensure_end_date(start, end)
    if start_time is None or end_time is None:
        raise ValueError("Shift start and end are required")

    parsed_rate = parse_decimal_input(hourly_rate)
    if parsed_rate is None:
        raise ValueError(f"Invalid hourly rate: {hourly_rate!r}")

    parsed_percentage = parse_decimal_input(overtime_percentage)
    if parsed_percentage is None:
        raise ValueError(f"Invalid overtime percentage: {overtime_percentage!r}")

    if payment_date is None or payment_date == "":
        paid_on = end_time.date()
    else:
        paid_on = normalize_payment_date(payment_date)
        if paid_on is None:
            raise ValueError(f"Invalid payment date: {payment_date!r}")

    computed = calculate_overtime_pay(
        start_time, end_time, parsed_rate, parsed_percentage
    )

    return OvertimeRecord(
        user_id=user_id,
        start_time=start_time,
        end_time=end_time,
        hourly_rate=parsed_rate,
        overtime_percentage=parsed_percentage,
        payment_date=paid_on,
        total_value=ensure_finite_number(round(computed.total_value, 2), 0.0),
    )


def record_duration_minutes(record: OvertimeRecord) -> int:
    """Whole-minute duration of a stored record; reversed shifts count as 0."""
    minutes = calculate_elapsed_minutes(record.start_time, record.end_time)
    if not math.isfinite(minutes):
        return 0
    return max(0, math.floor(minutes + 0.5))


def summarize_overtime_records(records: Sequence[OvertimeRecord]) -> OvertimeSummary:
    """Sort stored records and total their durations and values.

    Records without a stored total value count as zero.
    """
    ordered = sorted(records, key=lambda r: r.start_time, reverse=True)

    total_minutes = sum(record_duration_minutes(r) for r in ordered)
    total_value = sum(
        (r.total_value for r in ordered if r.total_value is not None), 0.0
    )

    logger.info(
        f"Summarized {len(ordered)} overtime records: "
        f"{total_minutes} minutes, {total_value:.2f} paid"
    )

    return OvertimeSummary(
        records=ordered, total_minutes=total_minutes, total_value=total_value
    )


def group_by_payment_month(records: Sequence[OvertimeRecord]) -> pd.DataFrame:
    """Total stored records per payment month.

    Records without a payment date are assigned to the month their shift
    ended.

    Returns:
        DataFrame with columns month ("YYYY-MM"), records, total_minutes and
        total_value, one row per month in ascending order
    """
    if not records:
        return pd.DataFrame(columns=MONTHLY_COLUMNS)

    frame = pd.DataFrame(
        {
            "month": [
                (r.payment_date or r.end_time.date()).strftime("%Y-%m")
                for r in records
            ],
            "minutes": [record_duration_minutes(r) for r in records],
            "value": [r.total_value or 0.0 for r in records],
        }
    )

    monthly = (
        frame.groupby("month", sort=True)
        .agg(
            records=("value", "size"),
            total_minutes=("minutes", "sum"),
            total_value=("value", "sum"),
        )
        .reset_index()
    )

    logger.debug(f"Grouped {len(records)} records into {len(monthly)} months")
    return monthly[MONTHLY_COLUMNS]
