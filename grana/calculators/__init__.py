"""Calculator modules for the GranaApp finance manager."""

from grana.calculators.overtime_calculator import (
    NIGHT_BONUS_MULTIPLIER,
    OVERTIME_PERCENTAGES,
    AggregateOvertimeResult,
    OvertimePayResult,
    aggregate_overtime,
    calculate_overtime_batch,
    calculate_overtime_for_record,
    calculate_overtime_pay,
)
from grana.calculators.portfolio_calculator import (
    PortfolioTotals,
    PositionSummary,
    calculate_allocation,
    calculate_portfolio_totals,
    merge_positions,
    normalize_asset_symbol,
    summarize_position,
)
from grana.calculators.projection_calculator import (
    ProjectionParameters,
    ProjectionResult,
    ProjectionRow,
    build_compound_projection,
    convert_annual_rate_to_monthly,
    normalize_projection_inputs,
    period_to_months,
)
from grana.calculators.time_utils import (
    NightOverlap,
    calculate_elapsed_minutes,
    calculate_night_minutes,
    ensure_end_date,
    format_minutes_as_hours_and_minutes,
    iter_night_overlaps,
    to_local_wall_clock,
)

__all__ = [
    # overtime_calculator
    "NIGHT_BONUS_MULTIPLIER",
    "OVERTIME_PERCENTAGES",
    "AggregateOvertimeResult",
    "OvertimePayResult",
    "aggregate_overtime",
    "calculate_overtime_batch",
    "calculate_overtime_for_record",
    "calculate_overtime_pay",
    # portfolio_calculator
    "PortfolioTotals",
    "PositionSummary",
    "calculate_allocation",
    "calculate_portfolio_totals",
    "merge_positions",
    "normalize_asset_symbol",
    "summarize_position",
    # projection_calculator
    "ProjectionParameters",
    "ProjectionResult",
    "ProjectionRow",
    "build_compound_projection",
    "convert_annual_rate_to_monthly",
    "normalize_projection_inputs",
    "period_to_months",
    # time_utils
    "NightOverlap",
    "calculate_elapsed_minutes",
    "calculate_night_minutes",
    "ensure_end_date",
    "format_minutes_as_hours_and_minutes",
    "iter_night_overlaps",
    "to_local_wall_clock",
]
