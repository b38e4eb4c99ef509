"""Portfolio rentability calculations.

Combines the positions a user registered (quantity and average price) with
the latest market data for each asset and aggregates the portfolio:
- Invested and current totals per asset and overall
- Profit and rentability percentage
- Daily change weighted by each asset's current value
- Allocation of the current value per asset type
"""

import logging
import math
import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence

import pandas as pd

from grana.models.portfolio import PortfolioPosition, RentabilityRow

logger = logging.getLogger(__name__)

DEFAULT_CURRENCY = "BRL"

# Asset categories offered when registering a position
ASSET_TYPE_LABELS = {
    "ação": "Ação",
    "cripto": "Criptomoeda",
    "etf": "ETF",
    "moeda": "Moeda estrangeira",
    "outro": "Outro",
}
FALLBACK_ASSET_TYPE = "outro"

ALLOCATION_COLUMNS = ["asset_type", "label", "current_total", "share_percent"]

# Bare B3 tickers: four letters followed by one or two digits (PETR4, TAEE11)
_B3_TICKER = re.compile(r"^[A-Z]{4}\d{1,2}$")


def normalize_asset_symbol(value: Optional[str]) -> str:
    """Normalize a ticker to the form used for quotes.

    B3 tickers typed without an exchange suffix gain ``.SA``; anything else
    is only trimmed and upper-cased.

    Example:
        >>> normalize_asset_symbol(" petr4 ")
        'PETR4.SA'
        >>> normalize_asset_symbol("aapl")
        'AAPL'
        >>> normalize_asset_symbol("BTC-USD")
        'BTC-USD'
    """
    trimmed = (value or "").strip().upper()
    if not trimmed:
        return ""
    if "." not in trimmed and _B3_TICKER.match(trimmed):
        return f"{trimmed}.SA"
    return trimmed


@dataclass(frozen=True)
class PositionSummary:
    """Market view of a single position.

    Attributes:
        symbol: Normalized ticker
        raw_symbol: Ticker as stored with the position
        quantity: Units held
        average_price: Average purchase price
        invested_total: quantity × average_price
        current_price: Last quoted price (average price when never quoted)
        current_total: quantity × current_price
        profit: Profit reported by the market data, else current - invested
        rent_percent: Rentability in percent
        daily_change: Daily change in percent, when quoted
        currency: Quote currency
        name: Display name
        asset_type: Asset category
    """

    symbol: str
    raw_symbol: str
    quantity: float
    average_price: float
    invested_total: float
    current_price: float
    current_total: float
    profit: float
    rent_percent: float
    daily_change: Optional[float]
    currency: str
    name: str
    asset_type: Optional[str] = None


@dataclass(frozen=True)
class PortfolioTotals:
    """Aggregated figures for the whole portfolio."""

    total_invested: float
    total_current: float
    profit: float
    rentability_percent: float
    daily_change: float


def summarize_position(
    position: PortfolioPosition, rentability: Optional[RentabilityRow] = None
) -> PositionSummary:
    """Build the market view of one position.

    Values reported by the market data take precedence; missing ones are
    derived from the position itself.
    """
    symbol = normalize_asset_symbol(position.symbol) or position.symbol
    quantity = position.quantity
    average_price = position.average_price
    invested_total = quantity * average_price

    current_price = average_price
    if rentability is not None and rentability.last_price is not None:
        current_price = rentability.last_price
    current_total = quantity * current_price

    profit = current_total - invested_total
    if rentability is not None and rentability.total_profit is not None:
        profit = rentability.total_profit

    if rentability is not None and rentability.rent_percent is not None:
        rent_percent = rentability.rent_percent
    elif invested_total > 0:
        rent_percent = (current_total - invested_total) / invested_total * 100
    else:
        rent_percent = 0.0

    currency = (rentability.currency if rentability else None) or position.currency
    name = (rentability.name if rentability else None) or position.name or symbol

    return PositionSummary(
        symbol=symbol,
        raw_symbol=position.symbol,
        quantity=quantity,
        average_price=average_price,
        invested_total=invested_total,
        current_price=current_price,
        current_total=current_total,
        profit=profit,
        rent_percent=rent_percent,
        daily_change=rentability.daily_change if rentability else None,
        currency=currency or DEFAULT_CURRENCY,
        name=name,
        asset_type=position.asset_type,
    )


def merge_positions(
    positions: Iterable[PortfolioPosition],
    rentability: Iterable[RentabilityRow] = (),
) -> List[PositionSummary]:
    """Join positions with their market data, largest current value first.

    Market rows are matched by normalized symbol, so "PETR4" and "PETR4.SA"
    refer to the same asset.
    """
    rentability_by_symbol: Dict[str, RentabilityRow] = {
        normalize_asset_symbol(row.symbol): row for row in rentability
    }

    summaries = []
    for position in positions:
        market_row = rentability_by_symbol.get(normalize_asset_symbol(position.symbol))
        if market_row is None:
            logger.debug(f"No market data for {position.symbol}, using average price")
        summaries.append(summarize_position(position, market_row))

    summaries.sort(key=lambda summary: summary.current_total, reverse=True)
    return summaries


def calculate_portfolio_totals(summaries: Sequence[PositionSummary]) -> PortfolioTotals:
    """Aggregate position summaries into portfolio totals.

    The daily change is the average of each asset's daily change weighted by
    its current value. Assets without a finite daily change contribute zero.

    Example:
        >>> calculate_portfolio_totals([]).rentability_percent
        0.0
    """
    if not summaries:
        return PortfolioTotals(
            total_invested=0.0,
            total_current=0.0,
            profit=0.0,
            rentability_percent=0.0,
            daily_change=0.0,
        )

    invested = 0.0
    current = 0.0
    weighted_daily = 0.0

    for summary in summaries:
        invested += summary.invested_total
        current += summary.current_total
        change = summary.daily_change if summary.daily_change is not None else 0.0
        if math.isfinite(change):
            weighted_daily += change * summary.current_total

    profit = current - invested

    return PortfolioTotals(
        total_invested=invested,
        total_current=current,
        profit=profit,
        rentability_percent=profit / invested * 100 if invested > 0 else 0.0,
        daily_change=weighted_daily / current if current > 0 else 0.0,
    )


def calculate_allocation(summaries: Sequence[PositionSummary]) -> pd.DataFrame:
    """Total the current value of the portfolio per asset type.

    Positions without a type are counted as ``"outro"``. Types missing from
    ASSET_TYPE_LABELS are labelled with the type itself.

    Returns:
        DataFrame with columns asset_type, label, current_total and
        share_percent, largest current total first
    """
    if not summaries:
        return pd.DataFrame(columns=ALLOCATION_COLUMNS)

    frame = pd.DataFrame(
        {
            "asset_type": [s.asset_type or FALLBACK_ASSET_TYPE for s in summaries],
            "current_total": [s.current_total for s in summaries],
        }
    )

    allocation = (
        frame.groupby("asset_type", as_index=False, sort=False)["current_total"]
        .sum()
        .sort_values("current_total", ascending=False, kind="stable")
        .reset_index(drop=True)
    )
    allocation["label"] = [
        ASSET_TYPE_LABELS.get(asset_type, asset_type)
        for asset_type in allocation["asset_type"]
    ]

    total = allocation["current_total"].sum()
    allocation["share_percent"] = (
        allocation["current_total"] / total * 100 if total > 0 else 0.0
    )

    logger.debug(f"Allocated {len(summaries)} positions into {len(allocation)} types")
    return allocation[ALLOCATION_COLUMNS]
