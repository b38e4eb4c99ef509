"""Overtime pay calculator.

This module implements the pay rules for registered overtime:
- Every hour of the shift earns the hourly rate plus the overtime percentage
- Hours between 22:00 and 06:00 additionally earn a 30% night premium

Formula:
    base_value  = hours × rate × (1 + overtime_percentage)
    night_extra = night_hours × rate × 0.30
    total_value = base_value + night_extra

Night hours are part of ``hours`` as well, so the night premium stacks on
top of the overtime rate instead of replacing it.

Incomplete input (missing timestamps, no rate, no percentage) yields an
all-zero result instead of an error so partially filled forms can still show
a summary. Negative values are not rejected; they flow through the formula.
"""

import datetime as dt
import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

from grana.calculators.time_utils import (
    calculate_elapsed_minutes,
    calculate_night_minutes,
    ensure_end_date,
)
from grana.models.overtime import OvertimeRecord
from grana.utils.logging_utils import log_function_call

logger = logging.getLogger(__name__)

NIGHT_BONUS_MULTIPLIER = 0.30

# Overtime percentages offered when registering a shift
OVERTIME_PERCENTAGES = (0.75, 1.00, 1.20)


@dataclass(frozen=True)
class OvertimePayResult:
    """Pay breakdown for a single shift.

    Attributes:
        total_minutes: Duration of the (normalized) shift
        night_minutes: Part of total_minutes inside the 22:00-06:00 window
        base_value: All hours × rate × (1 + overtime percentage)
        night_extra: Night hours × rate × 0.30
        total_value: base_value + night_extra
    """

    total_minutes: float
    night_minutes: float
    base_value: float
    night_extra: float
    total_value: float

    @classmethod
    def zero(cls) -> "OvertimePayResult":
        return cls(
            total_minutes=0.0,
            night_minutes=0.0,
            base_value=0.0,
            night_extra=0.0,
            total_value=0.0,
        )


@dataclass(frozen=True)
class AggregateOvertimeResult:
    """Summed pay breakdown for several shifts."""

    total_minutes: float
    night_minutes: float
    base_value: float
    night_extra: float
    total_value: float
    entry_count: int


def _is_missing_rate(hourly_rate: Optional[float]) -> bool:
    # Zero and NaN rates leave nothing to pay, same as an empty field
    return not hourly_rate or not math.isfinite(hourly_rate)


def calculate_overtime_pay(
    start: Optional[dt.datetime],
    end: Optional[dt.datetime],
    hourly_rate: Optional[float],
    overtime_percentage: Optional[float],
) -> OvertimePayResult:
    """Calculate the pay breakdown for an overtime shift.

    Args:
        start: Shift start
        end: Shift end; when not after start it is moved to the next day
        hourly_rate: Base hourly rate
        overtime_percentage: Extra fraction paid on every hour (0.5 = +50%)

    Returns:
        OvertimePayResult, all zeros when any input is missing

    Example:
        >>> result = calculate_overtime_pay(
        ...     dt.datetime(2024, 3, 1, 22, 0),
        ...     dt.datetime(2024, 3, 1, 6, 0),
        ...     hourly_rate=20,
        ...     overtime_percentage=0.5,
        ... )
        >>> result.total_minutes, result.night_minutes
        (480.0, 480.0)
        >>> result.base_value, result.night_extra, result.total_value
        (240.0, 48.0, 288.0)
    """
    if (
        start is None
        or end is None
        or _is_missing_rate(hourly_rate)
        or overtime_percentage is None
        or not math.isfinite(overtime_percentage)
    ):
        return OvertimePayResult.zero()

    safe_start, safe_end = ensure_end_date(start, end)
    total_minutes = calculate_elapsed_minutes(safe_start, safe_end)
    night_minutes = calculate_night_minutes(safe_start, safe_end)

    rate = float(hourly_rate)
    hours = total_minutes / 60
    night_hours = night_minutes / 60

    base_value = hours * rate * (1 + float(overtime_percentage))
    night_extra = night_hours * rate * NIGHT_BONUS_MULTIPLIER

    return OvertimePayResult(
        total_minutes=total_minutes,
        night_minutes=night_minutes,
        base_value=base_value,
        night_extra=night_extra,
        total_value=base_value + night_extra,
    )


def calculate_overtime_for_record(record: OvertimeRecord) -> OvertimePayResult:
    """Recalculate the pay breakdown of a stored overtime record."""
    return calculate_overtime_pay(
        record.start_time,
        record.end_time,
        record.hourly_rate,
        record.overtime_percentage,
    )


@log_function_call
def calculate_overtime_batch(
    records: Sequence[OvertimeRecord],
) -> List[OvertimePayResult]:
    """Calculate pay for several records, keeping their order.

    Records whose recalculated total differs from the stored ``total_value``
    by more than a cent are logged, since the stored value is what was paid.
    """
    results = []

    for record in records:
        result = calculate_overtime_for_record(record)
        if (
            record.total_value is not None
            and abs(round(result.total_value, 2) - record.total_value) > 0.01
        ):
            logger.warning(
                f"Stored total {record.total_value:.2f} differs from recalculated "
                f"{result.total_value:.2f} for record {record.id}"
            )
        results.append(result)

    logger.info(f"Calculated overtime pay for {len(results)} records")
    return results


def aggregate_overtime(
    results: Sequence[OvertimePayResult],
) -> AggregateOvertimeResult:
    """Sum several pay breakdowns.

    Example:
        >>> aggregate_overtime([]).entry_count
        0
    """
    return AggregateOvertimeResult(
        total_minutes=sum((r.total_minutes for r in results), 0.0),
        night_minutes=sum((r.night_minutes for r in results), 0.0),
        base_value=sum((r.base_value for r in results), 0.0),
        night_extra=sum((r.night_extra for r in results), 0.0),
        total_value=sum((r.total_value for r in results), 0.0),
        entry_count=len(results),
    )
