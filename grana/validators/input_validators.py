"""Opt-in validation for calculator inputs.

The calculators accept anything numeric and never raise; negative rates or
reversed shifts simply flow through the formulas. Callers that want stricter
behaviour (the CLI, record import) run these checks first and decide what to
do with the resulting report.
"""

import datetime as dt
import math
from typing import Any, Optional

from grana.validators.validation_report import ValidationReport


def _check_amount(
    report: ValidationReport, field_name: str, value: Any, allow_negative: bool = False
) -> None:
    if value is None:
        report.add_error(field_name, "Value is required", value)
        return
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        report.add_error(field_name, f"Expected a number, got {type(value).__name__}", value)
        return
    if not math.isfinite(value):
        report.add_error(field_name, "Value must be a finite number", value)
        return
    if not allow_negative and value < 0:
        report.add_error(field_name, "Value must not be negative", value)


def validate_overtime_inputs(
    start: Optional[dt.datetime],
    end: Optional[dt.datetime],
    hourly_rate: Any,
    overtime_percentage: Any,
) -> ValidationReport:
    """Validate the inputs of calculate_overtime_pay().

    Args:
        start: Shift start
        end: Shift end
        hourly_rate: Base hourly rate
        overtime_percentage: Extra fraction paid on every hour

    Returns:
        ValidationReport with errors for missing, non-finite or negative
        values, and a warning when the end will be moved to the next day
    """
    report = ValidationReport()

    if start is None:
        report.add_error("start_time", "Shift start is required")
    if end is None:
        report.add_error("end_time", "Shift end is required")

    if start is not None and end is not None and end <= start:
        if end + dt.timedelta(days=1) <= start:
            report.add_error(
                "end_time",
                "Shift end is more than a day before its start",
                end,
            )
        else:
            report.add_warning(
                "end_time",
                "Shift end is not after its start; it will be moved to the next day",
                end,
            )

    _check_amount(report, "hourly_rate", hourly_rate)
    if isinstance(hourly_rate, (int, float)) and hourly_rate == 0:
        report.add_warning("hourly_rate", "Hourly rate is zero; nothing will be paid", 0)

    _check_amount(report, "overtime_percentage", overtime_percentage)

    return report


def validate_projection_inputs(
    initial_amount: Any,
    monthly_contribution: Any,
    period_months: Any,
    monthly_rate: Any,
    max_months: Optional[int] = None,
) -> ValidationReport:
    """Validate the inputs of build_compound_projection().

    Negative amounts and months are errors here even though the projector
    clamps them to zero. A monthly rate at or below -100% wipes out the
    balance and is reported as an error as well.
    """
    report = ValidationReport()

    _check_amount(report, "initial_amount", initial_amount)
    _check_amount(report, "monthly_contribution", monthly_contribution)
    _check_amount(report, "period_months", period_months)
    _check_amount(report, "monthly_rate", monthly_rate, allow_negative=True)

    if isinstance(period_months, float) and not period_months.is_integer():
        report.add_warning(
            "period_months", "Fractional months are truncated", period_months
        )

    if (
        max_months is not None
        and isinstance(period_months, (int, float))
        and period_months > max_months
    ):
        report.add_warning(
            "period_months",
            f"Projection will be capped at {max_months} months",
            period_months,
        )

    if (
        isinstance(monthly_rate, (int, float))
        and math.isfinite(monthly_rate)
        and monthly_rate <= -1
    ):
        report.add_error("monthly_rate", "Rate must be above -100%", monthly_rate)

    return report
