"""Report generation with pandas DataFrames.

Turns calculator results into tabular reports that can be printed or
written to CSV:
- Projection trajectory (one row per month)
- Overtime report (one row per record with its recalculated breakdown)
- Portfolio positions
"""

import logging
from dataclasses import asdict
from pathlib import Path
from typing import Sequence, Union

import pandas as pd

from grana.calculators.overtime_calculator import OvertimePayResult
from grana.calculators.portfolio_calculator import PositionSummary
from grana.calculators.projection_calculator import ProjectionResult
from grana.models.overtime import OvertimeRecord

logger = logging.getLogger(__name__)

PROJECTION_COLUMNS = ["month", "invested", "balance", "interest"]
OVERTIME_COLUMNS = [
    "id",
    "start_time",
    "end_time",
    "hourly_rate",
    "overtime_percentage",
    "payment_date",
    "total_minutes",
    "night_minutes",
    "base_value",
    "night_extra",
    "total_value",
    "stored_total_value",
]


def projection_to_dataframe(result: ProjectionResult) -> pd.DataFrame:
    """Build the month-by-month trajectory table.

    The interest column is the balance minus the principal invested so far.
    """
    df = pd.DataFrame(
        [asdict(row) for row in result.rows], columns=["month", "balance", "invested"]
    )
    df["interest"] = df["balance"] - df["invested"]
    return df[PROJECTION_COLUMNS]


def overtime_to_dataframe(
    records: Sequence[OvertimeRecord], results: Sequence[OvertimePayResult]
) -> pd.DataFrame:
    """Build the overtime report, one row per record.

    Args:
        records: Stored records
        results: Recalculated breakdowns, in the same order as records

    Raises:
        ValueError: If records and results differ in length
    """
    if len(records) != len(results):
        raise ValueError(
            f"Got {len(records)} records but {len(results)} pay results"
        )

    rows = []
    for record, result in zip(records, results):
        row = {
            "id": record.id,
            "start_time": record.start_time,
            "end_time": record.end_time,
            "hourly_rate": record.hourly_rate,
            "overtime_percentage": record.overtime_percentage,
            "payment_date": record.payment_date,
            "stored_total_value": record.total_value,
        }
        row.update(asdict(result))
        rows.append(row)

    return pd.DataFrame(rows, columns=OVERTIME_COLUMNS)


def positions_to_dataframe(summaries: Sequence[PositionSummary]) -> pd.DataFrame:
    """Build the portfolio table, one row per position."""
    return pd.DataFrame([asdict(s) for s in summaries])


def write_csv(df: pd.DataFrame, path: Union[str, Path]) -> Path:
    """Write a report to CSV, creating parent directories as needed.

    Returns:
        The path written
    """
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_path, index=False)
    logger.info(f"Wrote {len(df)} rows to {output_path}")
    return output_path
