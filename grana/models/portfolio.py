"""Portfolio data models.

This module defines the ``PortfolioPosition`` model (one row of the
``carteira`` table) and the ``RentabilityRow`` model (one row of the
``vw_rentabilidade_carteira`` view, filled by the quote refresh job).
Python attribute names are English; the backend column names are kept as
aliases so rows can be validated as they come.
"""

import datetime as dt
from typing import Any, Optional, Union

from pydantic import Field, field_validator

from grana.models.base import BaseDataModel
from grana.utils.parsing import parse_decimal_input


class PortfolioPosition(BaseDataModel):
    """Represents an asset held in the user's portfolio.

    Attributes:
        symbol: Ticker as typed by the user (e.g. "PETR4", "AAPL")
        quantity: Number of units held
        average_price: Weighted-average purchase price
        asset_type: Asset category (ação, cripto, etf, ...)
        origin: Where the asset was bought
        notes: Free-text notes
        currency: Quote currency, when known
        name: Display name, when known
        purchase_date: Date of the (last) purchase

    Example:
        >>> position = PortfolioPosition(
        ...     ativo_symbol="PETR4", quantidade="100", preco_medio="32,50"
        ... )
        >>> position.average_price
        32.5
    """

    id: Optional[Union[int, str]] = None
    user_id: Optional[str] = None
    symbol: str = Field(..., alias="ativo_symbol", description="Asset ticker")
    quantity: float = Field(0.0, alias="quantidade", description="Units held")
    average_price: float = Field(
        0.0, alias="preco_medio", description="Average purchase price"
    )
    asset_type: Optional[str] = Field(None, alias="tipo")
    origin: Optional[str] = Field(None, alias="origem")
    notes: Optional[str] = Field(None, alias="observacoes")
    currency: Optional[str] = Field(None, alias="moeda")
    name: Optional[str] = Field(None, alias="nome")
    purchase_date: Optional[dt.date] = Field(None, alias="data_compra")

    @field_validator("symbol")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        """Validate that the ticker is not empty or whitespace only.

        Raises:
            ValueError: If the value is empty or whitespace only
        """
        if not v or not v.strip():
            raise ValueError("ativo_symbol cannot be empty or whitespace")
        return v.strip()

    @field_validator("quantity", "average_price", mode="before")
    @classmethod
    def parse_amount(cls, v: Any, info) -> float:
        """Missing amounts count as zero; malformed ones are rejected."""
        if v is None:
            return 0.0
        parsed = parse_decimal_input(v)
        if parsed is None:
            raise ValueError(f"{info.field_name} must be a finite number, got {v!r}")
        return parsed


class RentabilityRow(BaseDataModel):
    """Latest market data computed for one asset of a user's portfolio.

    Every numeric column is optional: the view only has values once a quote
    has been fetched for the asset.
    """

    symbol: str = Field(..., alias="ativo_symbol")
    last_price: Optional[float] = Field(None, alias="ultimo_preco")
    total_profit: Optional[float] = Field(None, alias="lucro_total")
    rent_percent: Optional[float] = Field(None, alias="rentabilidade_percentual")
    daily_change: Optional[float] = Field(None, alias="variacao_diaria")
    currency: Optional[str] = Field(None, alias="moeda")
    name: Optional[str] = Field(None, alias="nome")
    updated_at: Optional[dt.datetime] = Field(None, alias="atualizado_em")

    @field_validator(
        "last_price", "total_profit", "rent_percent", "daily_change", mode="before"
    )
    @classmethod
    def parse_optional_amount(cls, v: Any) -> Optional[float]:
        return parse_decimal_input(v)
