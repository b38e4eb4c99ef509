"""Data models for the GranaApp calculators.

This package contains Pydantic models for the backend records the
calculators consume:
- BaseDataModel: Base class with common configuration
- OvertimeRecord: Registered overtime shift
- ProjectionInputs: Compound-interest simulator form
- PortfolioPosition: Asset held in the portfolio
- RentabilityRow: Market data for a held asset
"""

from grana.models.base import BaseDataModel
from grana.models.overtime import OvertimeRecord
from grana.models.portfolio import PortfolioPosition, RentabilityRow
from grana.models.projection import ProjectionInputs

__all__ = [
    "BaseDataModel",
    "OvertimeRecord",
    "ProjectionInputs",
    "PortfolioPosition",
    "RentabilityRow",
]
