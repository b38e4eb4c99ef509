"""Compound-interest projection engine.

Simulates a fixed monthly contribution growing at a fixed monthly rate:

    balance[0] = initial
    balance[m] = (balance[m-1] + contribution) × (1 + rate)

The contribution is added before the month's growth is applied, so each
contribution already earns interest in the month it is made.
"""

import logging
import math
from dataclasses import dataclass
from typing import List, Optional

from grana.models.projection import ProjectionInputs

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectionRow:
    """Account snapshot at the end of a month.

    Attributes:
        month: Month index (0 is the initial amount alone)
        balance: Balance including growth
        invested: Cumulative contributed principal, initial amount included
    """

    month: int
    balance: float
    invested: float


@dataclass(frozen=True)
class ProjectionResult:
    """Trajectory and summary totals of a projection.

    Attributes:
        rows: One ProjectionRow per month, month 0 included
        invested_total: Principal contributed by the last month
        total: Final balance
        interest: total - invested_total (negative for a losing rate)
    """

    rows: List[ProjectionRow]
    invested_total: float
    total: float
    interest: float


@dataclass(frozen=True)
class ProjectionParameters:
    """Normalized inputs of build_compound_projection()."""

    initial_amount: float
    monthly_contribution: float
    period_months: int
    monthly_rate: float


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def convert_annual_rate_to_monthly(annual_rate_percent: float) -> float:
    """Convert an annual rate in percent to the equivalent monthly fraction.

    Computes ``(1 + annual/100) ** (1/12) - 1``.

    Args:
        annual_rate_percent: Annual rate in percent (12 means 12% a year)

    Returns:
        Monthly rate as a fraction; NaN when the annual rate is below -100%

    Example:
        >>> round(convert_annual_rate_to_monthly(12.682503013196977), 6)
        0.01
    """
    growth = 1 + annual_rate_percent / 100
    if growth < 0:
        # A negative base has no real twelfth root
        return math.nan
    return growth ** (1 / 12) - 1


def period_to_months(period_value: float, period_type: str = "months") -> int:
    """Convert a projection horizon to whole months, rounding half up.

    Example:
        >>> period_to_months(1.5, "years")
        18
        >>> period_to_months(-3, "months")
        0
    """
    period = max(0.0, period_value)
    if period_type == "years":
        return _round_half_up(period * 12)
    return _round_half_up(period)


def normalize_projection_inputs(inputs: ProjectionInputs) -> ProjectionParameters:
    """Turn simulator form values into build_compound_projection() arguments.

    Amounts are clamped at zero, the horizon is converted to months and the
    percent rate becomes a monthly fraction (annual rates are converted by
    compounding, not by dividing by twelve).
    """
    if inputs.rate_type == "annual":
        monthly_rate = convert_annual_rate_to_monthly(inputs.return_rate)
    else:
        monthly_rate = inputs.return_rate / 100

    return ProjectionParameters(
        initial_amount=max(0.0, inputs.initial_amount),
        monthly_contribution=max(0.0, inputs.monthly_contribution),
        period_months=period_to_months(inputs.period_value, inputs.period_type),
        monthly_rate=monthly_rate,
    )


def build_compound_projection(
    initial_amount: float,
    monthly_contribution: float,
    period_months: int,
    monthly_rate: float,
    max_months: Optional[int] = None,
) -> ProjectionResult:
    """Build the month-by-month balance trajectory.

    Args:
        initial_amount: Amount at month 0 (negative values count as 0)
        monthly_contribution: Amount added each month (negative counts as 0)
        period_months: Number of months to simulate (negative counts as 0)
        monthly_rate: Growth per month as a fraction; may be negative
        max_months: Optional cap on the number of simulated months

    Returns:
        ProjectionResult with period_months + 1 rows

    Example:
        >>> result = build_compound_projection(1000, 200, 1, 0.01)
        >>> [round(row.balance, 2) for row in result.rows]
        [1000, 1212.0]
        >>> round(result.interest, 2)
        12.0
    """
    initial = max(0, initial_amount)
    contribution = max(0, monthly_contribution)
    months = max(0, int(period_months))

    if max_months is not None and months > max_months:
        logger.warning(
            f"Projection of {months} months capped at {max_months} months"
        )
        months = max_months

    balance = initial
    invested = initial
    rows = [ProjectionRow(month=0, balance=balance, invested=invested)]

    for month in range(1, months + 1):
        balance = (balance + contribution) * (1 + monthly_rate)
        invested += contribution
        rows.append(ProjectionRow(month=month, balance=balance, invested=invested))

    total = rows[-1].balance
    logger.debug(
        f"Projected {months} months: invested {invested:.2f}, total {total:.2f}"
    )

    return ProjectionResult(
        rows=rows,
        invested_total=invested,
        total=total,
        interest=total - invested,
    )
