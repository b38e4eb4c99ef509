"""Overtime record model.

An ``OvertimeRecord`` mirrors one row of the ``overtime_hours`` table: a
worked shift, the pay parameters used for it and the total stored when it
was registered.
"""

import datetime as dt
from typing import Any, Optional, Union

from pydantic import Field, field_validator

from grana.models.base import BaseDataModel
from grana.utils.parsing import normalize_payment_date, parse_decimal_input


class OvertimeRecord(BaseDataModel):
    """Represents a single registered overtime shift.

    Attributes:
        id: Backend identifier (absent for records not yet stored)
        user_id: Owner of the record
        start_time: Shift start (date and time)
        end_time: Shift end, already advanced past midnight when needed
        hourly_rate: Base hourly rate in currency units
        overtime_percentage: Extra fraction paid on every hour (0.75 = +75%)
        payment_date: Date the overtime is paid
        total_value: Total stored with the record, rounded to cents

    Example:
        >>> record = OvertimeRecord(
        ...     start_time=dt.datetime(2024, 3, 1, 22, 0),
        ...     end_time=dt.datetime(2024, 3, 2, 6, 0),
        ...     hourly_rate="20,00",
        ...     overtime_percentage="0.5",
        ... )
        >>> record.hourly_rate
        20.0
    """

    id: Optional[Union[int, str]] = Field(None, description="Backend identifier")
    user_id: Optional[str] = Field(None, description="Owner of the record")
    start_time: dt.datetime = Field(..., description="Shift start")
    end_time: dt.datetime = Field(..., description="Shift end")
    hourly_rate: float = Field(..., description="Base hourly rate")
    overtime_percentage: float = Field(
        ..., description="Extra fraction paid on every hour"
    )
    payment_date: Optional[dt.date] = Field(None, description="Payment date")
    total_value: Optional[float] = Field(None, description="Stored total value")

    @field_validator("hourly_rate", "overtime_percentage", mode="before")
    @classmethod
    def parse_required_amount(cls, v: Any, info) -> float:
        """Parse amounts typed with comma or dot decimal marks.

        Raises:
            ValueError: If the value is missing or not a finite number
        """
        parsed = parse_decimal_input(v)
        if parsed is None:
            raise ValueError(f"{info.field_name} must be a finite number, got {v!r}")
        return parsed

    @field_validator("total_value", mode="before")
    @classmethod
    def parse_optional_amount(cls, v: Any) -> Optional[float]:
        """Stored totals may be missing or malformed; both read as None."""
        return parse_decimal_input(v)

    @field_validator("payment_date", mode="before")
    @classmethod
    def parse_payment_date(cls, v: Any) -> Optional[dt.date]:
        """Accept ``YYYY-MM-DD`` strings; blank values mean no payment date.

        Raises:
            ValueError: If a non-blank value is not a valid date
        """
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        parsed = normalize_payment_date(v)
        if parsed is None:
            raise ValueError(f"Invalid payment date: {v!r}")
        return parsed
