"""Time calculation utilities for overtime shifts.

This module provides the low-level pieces of the overtime pay calculation:
- Normalizing shifts whose end was typed earlier than the start
- Elapsed minutes between two timestamps
- Splitting a shift into the nightly 22:00-06:00 windows it touches
- Rendering minute counts as "Xh YYm"
- Moving exported UTC timestamps onto the local wall clock

Timestamps are ``dt.datetime`` values. Naive values are read as local
wall-clock time. Aware values keep their own tzinfo: the night window is
placed on their wall clock while durations are real elapsed time.
"""

import datetime as dt
import math
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

NIGHT_START = dt.time(22, 0)
NIGHT_END = dt.time(6, 0)

_ONE_DAY = dt.timedelta(days=1)


@dataclass(frozen=True)
class NightOverlap:
    """Overlap between a shift and one nightly premium window.

    Attributes:
        night_start: 22:00 of the calendar day the window belongs to
        night_end: 06:00 of the following day
        minutes: Minutes of the shift inside the window (0.0 if none)
    """

    night_start: dt.datetime
    night_end: dt.datetime
    minutes: float


def ensure_end_date(
    start: Optional[dt.datetime], end: Optional[dt.datetime]
) -> Tuple[Optional[dt.datetime], Optional[dt.datetime]]:
    """Move an end that is not after the start to the next calendar day.

    Night shifts are usually typed as clock times, e.g. 22:00 to 06:00 on
    the same date. The end is advanced by exactly one day; it is not searched
    forward until it lands after the start.

    Args:
        start: Shift start, or None
        end: Shift end, or None

    Returns:
        The (start, end) pair, with a new end object when it was advanced

    Example:
        >>> ensure_end_date(dt.datetime(2024, 3, 1, 22), dt.datetime(2024, 3, 1, 6))
        (datetime.datetime(2024, 3, 1, 22, 0), datetime.datetime(2024, 3, 2, 6, 0))
    """
    if start is None or end is None:
        return start, end
    if end > start:
        return start, end
    return start, end + _ONE_DAY


def _elapsed(start: dt.datetime, end: dt.datetime) -> dt.timedelta:
    # Aware datetimes sharing a tzinfo subtract on the wall clock, which is
    # off by an hour across DST changes; UTC gives the real elapsed time.
    if start.tzinfo is not None and end.tzinfo is not None:
        return end.astimezone(dt.timezone.utc) - start.astimezone(dt.timezone.utc)
    return end - start


def calculate_elapsed_minutes(start: dt.datetime, end: dt.datetime) -> float:
    """Calculate fractional minutes from start to end (negative if reversed).

    Example:
        >>> calculate_elapsed_minutes(dt.datetime(2024, 3, 1, 8), dt.datetime(2024, 3, 1, 17))
        540.0
        >>> calculate_elapsed_minutes(dt.datetime(2024, 3, 1, 8), dt.datetime(2024, 3, 1, 8, 0, 30))
        0.5
    """
    return _elapsed(start, end).total_seconds() / 60


def iter_night_overlaps(
    start: dt.datetime, end: dt.datetime
) -> Iterator[NightOverlap]:
    """Yield the shift's overlap with every nightly window it may touch.

    One item is produced per calendar day, from the day before ``start`` (its
    window covers 00:00-06:00 of the first day) through ``end``'s day. Each
    window is ``[day 22:00, next day 06:00)`` and is intersected with
    ``[start, end)``. Calling the function again restarts the walk.

    Args:
        start: Shift start
        end: Shift end (expected after start; see ensure_end_date)

    Yields:
        NightOverlap for each calendar day, including days with no overlap

    Example:
        >>> overlaps = iter_night_overlaps(
        ...     dt.datetime(2024, 3, 1, 20), dt.datetime(2024, 3, 2, 2)
        ... )
        >>> [o.minutes for o in overlaps]
        [0.0, 240.0, 0.0]
    """
    tz = start.tzinfo
    # Begin with the previous day's window so the 00:00-06:00 part of the
    # first day counts. Walking from start's own day, as the web app did,
    # drops it and gives a 01:00-05:00 shift no night minutes.
    day = start.date() - _ONE_DAY
    last_day = end.date()

    while day <= last_day:
        night_start = dt.datetime.combine(day, NIGHT_START, tzinfo=tz)
        night_end = dt.datetime.combine(day + _ONE_DAY, NIGHT_END, tzinfo=tz)

        interval_start = max(start, night_start)
        interval_end = min(end, night_end)

        minutes = 0.0
        if interval_end > interval_start:
            minutes = calculate_elapsed_minutes(interval_start, interval_end)

        yield NightOverlap(night_start=night_start, night_end=night_end, minutes=minutes)
        day += _ONE_DAY


def to_local_wall_clock(value: dt.datetime, tz: dt.tzinfo) -> dt.datetime:
    """Express an aware timestamp as naive wall-clock time in ``tz``.

    Naive values are already wall-clock time and are returned unchanged.

    Example:
        >>> to_local_wall_clock(
        ...     dt.datetime(2024, 3, 2, 1, tzinfo=dt.timezone.utc),
        ...     dt.timezone(dt.timedelta(hours=-3)),
        ... )
        datetime.datetime(2024, 3, 1, 22, 0)
    """
    if value.tzinfo is None:
        return value
    return value.astimezone(tz).replace(tzinfo=None)


def calculate_night_minutes(
    start: Optional[dt.datetime], end: Optional[dt.datetime]
) -> float:
    """Calculate how many minutes of a shift fall between 22:00 and 06:00.

    Args:
        start: Shift start, or None
        end: Shift end, or None

    Returns:
        Night minutes, not rounded; 0.0 when either bound is missing

    Example:
        >>> calculate_night_minutes(dt.datetime(2024, 3, 1, 22), dt.datetime(2024, 3, 2, 6))
        480.0
        >>> calculate_night_minutes(dt.datetime(2024, 3, 1, 8), dt.datetime(2024, 3, 1, 17))
        0.0
    """
    if start is None or end is None:
        return 0.0
    return sum((overlap.minutes for overlap in iter_night_overlaps(start, end)), 0.0)


def format_minutes_as_hours_and_minutes(minutes: Optional[float]) -> str:
    """Render a minute count as ``"{hours}h {minutes:02d}m"``.

    Negative, missing and non-finite values render as zero. Fractions are
    rounded half up to whole minutes.

    Example:
        >>> format_minutes_as_hours_and_minutes(125)
        '2h 05m'
        >>> format_minutes_as_hours_and_minutes(-5)
        '0h 00m'
        >>> format_minutes_as_hours_and_minutes(59.5)
        '1h 00m'
    """
    if minutes is None or not math.isfinite(minutes):
        minutes = 0
    total_minutes = max(0, math.floor(minutes + 0.5))
    hours, mins = divmod(total_minutes, 60)
    return f"{hours}h {mins:02d}m"
