"""Compound-interest simulator form model."""

from typing import Any, Literal

from pydantic import Field, field_validator

from grana.models.base import BaseDataModel
from grana.utils.parsing import parse_number


class ProjectionInputs(BaseDataModel):
    """Raw inputs of the compound-interest simulator.

    Values are parsed leniently (currency symbols and percent signs are
    dropped) since they come straight from form fields. Normalization into
    monthly figures happens in
    :func:`grana.calculators.projection_calculator.normalize_projection_inputs`.

    Attributes:
        initial_amount: Amount invested at month 0
        monthly_contribution: Amount added every month
        period_value: Horizon, in months or years depending on period_type
        period_type: Unit of period_value
        return_rate: Growth rate in percent (0.8 means 0.8%)
        rate_type: Whether return_rate is monthly or annual

    Example:
        >>> inputs = ProjectionInputs(
        ...     initial_amount="1000",
        ...     monthly_contribution="200",
        ...     period_value="2",
        ...     period_type="years",
        ...     return_rate="10",
        ...     rate_type="annual",
        ... )
        >>> inputs.period_value
        2.0
    """

    initial_amount: float = Field(1000.0, description="Amount invested at month 0")
    monthly_contribution: float = Field(200.0, description="Monthly contribution")
    period_value: float = Field(24.0, description="Projection horizon")
    period_type: Literal["months", "years"] = Field(
        "months", description="Unit of period_value"
    )
    return_rate: float = Field(0.8, description="Growth rate in percent")
    rate_type: Literal["monthly", "annual"] = Field(
        "monthly", description="Period of return_rate"
    )

    @field_validator(
        "initial_amount",
        "monthly_contribution",
        "period_value",
        "return_rate",
        mode="before",
    )
    @classmethod
    def parse_form_number(cls, v: Any) -> float:
        """Unparseable form values read as zero."""
        return parse_number(v, 0.0)
