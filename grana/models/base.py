"""Base model for all backend record models.

Records come from the hosted backend (or CSV exports of its tables) with
Portuguese column names and extra bookkeeping columns such as ``created_at``.
"""

from pydantic import BaseModel, ConfigDict


class BaseDataModel(BaseModel):
    """Base class for all data models.

    Provides common configuration for:
    - Validation on assignment
    - Population by field name or by backend column alias
    - Ignoring backend columns the calculators do not use

    Example:
        >>> class Asset(BaseDataModel):
        ...     symbol: str = Field(alias="ativo_symbol")
        >>> Asset(ativo_symbol="PETR4").symbol
        'PETR4'
        >>> Asset(symbol="PETR4", created_at="2024-01-01").model_dump(by_alias=True)
        {'ativo_symbol': 'PETR4'}
    """

    model_config = ConfigDict(
        # Validate on assignment to catch errors early
        validate_assignment=True,
        # Accept both python names and backend column names
        populate_by_name=True,
        # Backend rows carry ids, timestamps and view-only columns
        extra="ignore",
        frozen=False,
    )
