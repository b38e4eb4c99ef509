"""Output formatting utilities for CLI."""

import math
from typing import List, Optional

import click

CURRENCY_SYMBOLS = {"BRL": "R$", "USD": "US$", "EUR": "€"}


def format_success(message: str) -> str:
    """Format a success message with green color."""
    return click.style(f"✓ {message}", fg="green", bold=True)


def format_error(message: str) -> str:
    """Format an error message with red color."""
    return click.style(f"✗ {message}", fg="red", bold=True)


def format_warning(message: str) -> str:
    """Format a warning message with yellow color."""
    return click.style(f"⚠ {message}", fg="yellow", bold=True)


def format_info(message: str) -> str:
    """Format an info message with blue color."""
    return click.style(f"ℹ {message}", fg="blue")


def _pt_br_number(value: float, decimals: int = 2) -> str:
    # "1,234.56" -> "1.234,56"
    formatted = f"{value:,.{decimals}f}"
    return formatted.replace(",", "_").replace(".", ",").replace("_", ".")


def format_currency(
    value: Optional[float],
    sign: str = "none",
    fallback: str = "—",
    currency: str = "BRL",
) -> str:
    """Format an amount in pt-BR style, e.g. ``R$ 1.234,56``.

    Args:
        value: Amount to format
        sign: "none" (absolute value), "negative" (prefix "- " on losses),
            "plusOrMinus" or "auto" (prefix "+ " or "- " on non-zero amounts)
        fallback: Text returned for missing or non-finite amounts
        currency: ISO currency code

    Returns:
        The formatted amount

    Example:
        >>> format_currency(1234.5)
        'R$ 1.234,50'
        >>> format_currency(-12, sign="negative")
        '- R$ 12,00'
    """
    if value is None:
        return fallback
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return fallback
    if not math.isfinite(numeric):
        return fallback

    symbol = CURRENCY_SYMBOLS.get(currency, currency)
    formatted = f"{symbol} {_pt_br_number(abs(numeric))}"

    if sign == "negative":
        return f"- {formatted}" if numeric < 0 else formatted

    if sign in ("plusOrMinus", "auto"):
        if numeric > 0:
            return f"+ {formatted}"
        if numeric < 0:
            return f"- {formatted}"

    return formatted


def format_percent(value: Optional[float], fallback: str = "—") -> str:
    """Format a percentage in pt-BR style, e.g. ``12,35%``.

    Example:
        >>> format_percent(12.3456)
        '12,35%'
    """
    if value is None or not math.isfinite(value):
        return fallback
    return f"{_pt_br_number(value)}%"


def format_table(headers: List[str], rows: List[List[str]], max_width: int = 80) -> str:
    """Format data as a plain-text table.

    Args:
        headers: List of column headers
        rows: List of data rows (each row is a list of cell values)
        max_width: Maximum width for each column (default: 80)

    Returns:
        Formatted table as a string
    """
    if not headers:
        return ""

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row[: len(widths)]):
            widths[i] = max(widths[i], len(str(cell)))
    widths = [min(w, max_width) for w in widths]

    def render(cells: List[str]) -> str:
        return "|" + "|".join(
            f" {str(cell)[:width]:<{width}} " for cell, width in zip(cells, widths)
        ) + "|"

    separator = "+" + "+".join("-" * (w + 2) for w in widths) + "+"

    lines = [separator, render(headers), separator]
    if rows:
        lines.extend(render(row) for row in rows)
        lines.append(separator)

    return "\n".join(lines)
