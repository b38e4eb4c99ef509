"""Shared helpers: user input parsing and structured logging."""

from grana.utils.logging_utils import LogContext, get_log_context, log_function_call
from grana.utils.parsing import (
    ensure_finite_number,
    normalize_payment_date,
    parse_decimal_input,
    parse_number,
)

__all__ = [
    "LogContext",
    "get_log_context",
    "log_function_call",
    "ensure_finite_number",
    "normalize_payment_date",
    "parse_decimal_input",
    "parse_number",
]
