"""CLI utility functions."""

from grana.cli.utils.formatters import (
    format_currency,
    format_error,
    format_info,
    format_percent,
    format_success,
    format_table,
    format_warning,
)

__all__ = [
    "format_currency",
    "format_error",
    "format_info",
    "format_percent",
    "format_success",
    "format_table",
    "format_warning",
]
