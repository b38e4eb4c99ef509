"""Report writers."""

from grana.writers.report_writer import (
    overtime_to_dataframe,
    positions_to_dataframe,
    projection_to_dataframe,
    write_csv,
)

__all__ = [
    "overtime_to_dataframe",
    "positions_to_dataframe",
    "projection_to_dataframe",
    "write_csv",
]
