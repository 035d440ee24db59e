"""Value formatters: callables that turn axis values into label strings."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any, Protocol

from chartkit.timeutil import time_from_float

ValueFormatter = Callable[[Any], str]

DEFAULT_DATE_FORMAT = "%Y-%m-%d"
DEFAULT_DATE_HOUR_FORMAT = "%m-%d %I%p"
DEFAULT_DATE_MINUTE_FORMAT = "%m-%d %I:%M%p"
DEFAULT_FLOAT_FORMAT = "%.2f"
DEFAULT_PERCENT_VALUE_FORMAT = "%0.2f%%"


class ValueFormatterProvider(Protocol):
    """A series that supplies its own x and y formatters."""

    def get_value_formatters(self) -> tuple[ValueFormatter, ValueFormatter]: ...


def _is_number(v: Any) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def format_time(v: Any, date_format: str) -> str:
    """Format a datetime, or a nanosecond timestamp, with a strftime format."""
    if isinstance(v, datetime):
        return v.strftime(date_format)
    if _is_number(v):
        return time_from_float(v).strftime(date_format)
    return ""


def time_value_formatter(v: Any) -> str:
    return format_time(v, DEFAULT_DATE_FORMAT)


def time_hour_value_formatter(v: Any) -> str:
    return format_time(v, DEFAULT_DATE_HOUR_FORMAT)


def time_minute_value_formatter(v: Any) -> str:
    return format_time(v, DEFAULT_DATE_MINUTE_FORMAT)


def time_date_value_formatter(v: Any) -> str:
    return format_time(v, "%Y-%m-%d")


def time_value_formatter_with_format(date_format: str) -> ValueFormatter:
    """Return a time formatter that uses the given strftime format."""

    def formatter(v: Any) -> str:
        return format_time(v, date_format)

    return formatter


def int_value_formatter(v: Any) -> str:
    """Format a number as an integer, truncating any fraction."""
    if _is_number(v):
        return str(int(v))
    return ""


def float_value_formatter(v: Any) -> str:
    return float_value_formatter_with_format(v, DEFAULT_FLOAT_FORMAT)


def percent_value_formatter(v: Any) -> str:
    """Format a fraction as a percentage (the value is multiplied by 100)."""
    if isinstance(v, float):
        return float_value_formatter_with_format(v * 100.0, DEFAULT_PERCENT_VALUE_FORMAT)
    return ""


def float_value_formatter_with_format(v: Any, float_format: str) -> str:
    """Format a number with a printf-style float format."""
    if _is_number(v):
        return float_format % float(v)
    return ""


def k_value_formatter(k: float, vf: ValueFormatter) -> ValueFormatter:
    """Prefix another formatter's output with a sigma multiple."""

    def formatter(v: Any) -> str:
        return f"{k:.0f}σ {vf(v)}"

    return formatter


def exponential_value_formatter(v: Any) -> str:
    """Format a number in exponential notation, e.g. 1.52e+08."""
    return float_value_formatter_with_format(v, "%.2e")