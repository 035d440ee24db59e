"""Helpers for working with datetimes as chart values."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timedelta, timezone

SECONDS_PER_HOUR = 60 * 60
SECONDS_PER_DAY = 60 * 60 * 24

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_NANOS_PER_SECOND = 10**9


def _unix_nanos(t: datetime) -> int:
    # Naive datetimes are taken to be local time.
    aware = t if t.tzinfo is not None and t.utcoffset() is not None else t.astimezone()
    delta = aware - _EPOCH
    return (delta.days * SECONDS_PER_DAY + delta.seconds) * _NANOS_PER_SECOND + (
        delta.microseconds * 1000
    )


def time_millis(d: timedelta) -> float:
    """A duration as fractional milliseconds."""
    return d / timedelta(milliseconds=1)


def diff_hours(t1: datetime, t2: datetime) -> int:
    """Whole hours between two times, regardless of their order."""
    s1 = _unix_nanos(t1) // _NANOS_PER_SECOND
    s2 = _unix_nanos(t2) // _NANOS_PER_SECOND
    return abs(s1 - s2) // SECONDS_PER_HOUR


def time_min(*times: datetime) -> datetime | None:
    """The earliest of the given times, or None when there are none."""
    return min(times, default=None)


def time_max(*times: datetime) -> datetime | None:
    """The latest of the given times, or None when there are none."""
    return max(times, default=None)


def time_min_max(*times: datetime) -> tuple[datetime | None, datetime | None]:
    """The earliest and latest of the given times."""
    return time_min(*times), time_max(*times)


def time_to_float(t: datetime) -> float:
    """Nanoseconds since the Unix epoch, as a float."""
    return float(_unix_nanos(t))


def time_from_float(tf: float) -> datetime:
    """A naive local datetime from nanoseconds since the Unix epoch."""
    nanos = int(tf)
    utc = _EPOCH + timedelta(microseconds=nanos // 1000)
    return utc.astimezone().replace(tzinfo=None)


def days(count: int) -> list[datetime]:
    """Timestamps one day apart, from ``count`` days ago up to now."""
    now = datetime.now()
    return [now - timedelta(days=day) for day in range(count, -1, -1)]


def hours(start: datetime, total_hours: int) -> list[datetime]:
    """``total_hours`` times an hour apart, beginning at ``start``."""
    return [start + timedelta(hours=i) for i in range(total_hours)]


def hours_filled(
    xdata: Sequence[datetime], ydata: Sequence[float]
) -> tuple[list[datetime], list[float]]:
    """Spread values onto an hourly grid, filling missing hours with zero."""
    if not xdata:
        raise ValueError("hours_filled requires at least one time")
    start, end = time_min_max(*xdata)
    total = diff_hours(start, end)

    final_times = hours(start, total + 1)
    final_values = [0.0] * (total + 1)
    for x, y in zip(xdata, ydata):
        final_values[diff_hours(start, x)] = y
    return final_times, final_values