"""Reader for CSV exports of the backend tables.

The finance data lives in a hosted backend; the calculators work on CSV
exports of its tables (``overtime_hours``, ``carteira`` and the
``vw_rentabilidade_carteira`` view). This module loads such exports with
pandas and validates each row into the matching model.

The backend stores shift timestamps in UTC. Overtime records are moved onto
the wall clock of the configured ``TIMEZONE`` so the nightly window lands
where the worker saw it.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Type, TypeVar, Union
from zoneinfo import ZoneInfo

import pandas as pd
from pydantic import ValidationError

from grana.calculators.time_utils import to_local_wall_clock
from grana.config.settings import get_config
from grana.models.base import BaseDataModel
from grana.models.overtime import OvertimeRecord
from grana.models.portfolio import PortfolioPosition, RentabilityRow
from grana.utils.logging_utils import LogContext

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseDataModel)

PathLike = Union[str, Path]


class RecordReader:
    """Reads exported backend tables into validated models.

    Rows that fail validation are skipped and logged, so one malformed row
    does not prevent the rest of the export from being used. The skipped
    rows of the last read are available in ``skipped_rows``.

    Example:
        >>> reader = RecordReader()
        >>> records = reader.read_overtime("overtime_hours.csv")
        >>> len(reader.skipped_rows)
        0
    """

    def __init__(self, delimiter: str = ",", timezone: Optional[str] = None):
        self.delimiter = delimiter
        self.timezone = ZoneInfo(timezone or get_config().timezone)
        self.skipped_rows: List[Dict[str, Any]] = []

    def _load_rows(self, path: PathLike) -> List[Dict[str, Any]]:
        """Load a CSV export as a list of row dictionaries.

        Every column is read as text and empty cells become None, leaving
        type conversion to the models.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        file_path = Path(path)
        if not file_path.exists():
            raise FileNotFoundError(f"Export file not found: {file_path}")

        df = pd.read_csv(file_path, dtype=str, sep=self.delimiter)
        df.columns = [str(column).strip() for column in df.columns]
        df = df.astype(object).where(pd.notna(df), None)

        return df.to_dict(orient="records")

    def _read_models(self, path: PathLike, model: Type[ModelT]) -> List[ModelT]:
        self.skipped_rows = []
        items: List[ModelT] = []

        with LogContext(source_file=str(path), model=model.__name__):
            rows = self._load_rows(path)
            logger.info(f"Loaded {len(rows)} rows from {path}")

            # Row numbers are 1-based and skip the header line
            for row_number, row in enumerate(rows, start=2):
                try:
                    items.append(model.model_validate(row))
                except ValidationError as e:
                    logger.warning(
                        f"Skipping row {row_number} of {path}: "
                        f"{e.error_count()} validation error(s)"
                    )
                    self.skipped_rows.append({"row": row_number, "errors": e.errors()})

            logger.info(
                f"Read {len(items)} {model.__name__} rows, "
                f"skipped {len(self.skipped_rows)}"
            )

        return items

    def read_overtime(self, path: PathLike) -> List[OvertimeRecord]:
        """Read an export of the overtime_hours table.

        Timestamps carrying an offset become naive wall-clock time in the
        reader's timezone. Naive timestamps are kept as they are.
        """
        records = self._read_models(path, OvertimeRecord)
        return [
            record.model_copy(
                update={
                    "start_time": to_local_wall_clock(record.start_time, self.timezone),
                    "end_time": to_local_wall_clock(record.end_time, self.timezone),
                }
            )
            for record in records
        ]

    def read_positions(self, path: PathLike) -> List[PortfolioPosition]:
        """Read an export of the carteira (portfolio positions) table."""
        return self._read_models(path, PortfolioPosition)

    def read_rentability(self, path: PathLike) -> List[RentabilityRow]:
        """Read an export of the portfolio rentability view."""
        return self._read_models(path, RentabilityRow)
