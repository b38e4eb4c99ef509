"""Parsing helpers for values typed by users in pt-BR forms.

Amounts arrive as free text ("1.234,56", "12,5", "R$ 200") and dates as
``YYYY-MM-DD`` strings. These helpers turn them into plain Python values,
returning ``None`` (or a fallback) instead of raising so callers can decide
how to report bad input.
"""

import datetime as dt
import math
import re
from decimal import Decimal
from typing import Any, Optional, Union

Number = Union[int, float, Decimal]

_WHITESPACE = re.compile(r"\s+")
_NON_NUMERIC = re.compile(r"[^0-9.\-]")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def _to_finite_float(text: str) -> Optional[float]:
    # float() accepts "1_000", "inf" and "nan"; none of those is a valid amount
    if "_" in text:
        return None
    try:
        numeric = float(text)
    except ValueError:
        return None
    return numeric if math.isfinite(numeric) else None


def parse_decimal_input(raw_value: Any) -> Optional[float]:
    """Parse a decimal amount accepting both comma and dot decimal marks.

    Args:
        raw_value: Number or text typed by the user

    Returns:
        The parsed value, or None when missing, blank or not a finite number

    Example:
        >>> parse_decimal_input("1.234,56")
        1234.56
        >>> parse_decimal_input("12,5")
        12.5
        >>> parse_decimal_input("abc") is None
        True

    Note:
        When both separators appear the dots are thousands separators and the
        comma is the decimal mark. A lone comma is always the decimal mark.
    """
    if raw_value is None:
        return None

    if _is_number(raw_value):
        numeric = float(raw_value)
        return numeric if math.isfinite(numeric) else None

    normalized = _WHITESPACE.sub("", str(raw_value).strip())

    if "," in normalized and "." in normalized:
        normalized = normalized.replace(".", "").replace(",", ".", 1)
    elif "," in normalized:
        normalized = normalized.replace(",", ".")

    if not normalized:
        return None

    return _to_finite_float(normalized)


def parse_number(raw_value: Any, fallback: float = 0.0) -> float:
    """Parse a number by discarding every character except digits, '.' and '-'.

    Used by the simulator form, where inputs may carry currency symbols or
    percent signs. Text with no digits at all reads as zero.

    Example:
        >>> parse_number("R$ 1000")
        1000.0
        >>> parse_number("0.8%")
        0.8
        >>> parse_number("1.2.3", fallback=5.0)
        5.0
    """
    if raw_value is None:
        return fallback

    if _is_number(raw_value):
        numeric = float(raw_value)
        return numeric if math.isfinite(numeric) else fallback

    cleaned = _NON_NUMERIC.sub("", str(raw_value))
    if not cleaned:
        return 0.0

    numeric = _to_finite_float(cleaned)
    return fallback if numeric is None else numeric


def ensure_finite_number(value: Any, fallback: float = 0.0) -> float:
    """Return ``value`` as a float when it is a finite number, else ``fallback``."""
    if _is_number(value) and math.isfinite(float(value)):
        return float(value)
    return fallback


def normalize_payment_date(raw_value: Any) -> Optional[dt.date]:
    """Parse a ``YYYY-MM-DD`` payment date.

    Args:
        raw_value: A date, datetime or ISO date string

    Returns:
        The date, or None when the value is empty, malformed or impossible

    Example:
        >>> normalize_payment_date("2024-03-05")
        datetime.date(2024, 3, 5)
        >>> normalize_payment_date("2024-13-01") is None
        True
    """
    if not raw_value:
        return None

    if isinstance(raw_value, dt.datetime):
        return raw_value.date()
    if isinstance(raw_value, dt.date):
        return raw_value

    segments = str(raw_value).strip().split("-")
    if len(segments) != 3:
        return None

    try:
        year, month, day = (int(segment) for segment in segments)
    except ValueError:
        return None

    if not (1 <= month <= 12 and 1 <= day <= 31):
        return None

    try:
        return dt.date(year, month, day)
    except ValueError:
        return None
