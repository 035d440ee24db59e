"""A series of values plotted against timestamps."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from chartkit.formatters import ValueFormatter, float_value_formatter, time_value_formatter
from chartkit.style import Style
from chartkit.timeutil import time_to_float


@dataclass
class TimeSeries:
    """A line whose x values are datetimes."""

    name: str = ""
    style: Style = field(default_factory=Style)
    y_axis: int = 0
    x_values: list[datetime] = field(default_factory=list)
    y_values: list[float] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.x_values)

    def get_values(self, index: int) -> tuple[float, float]:
        """The x (as nanoseconds) and y values at ``index``."""
        return time_to_float(self.x_values[index]), self.y_values[index]

    def get_first_values(self) -> tuple[float, float]:
        return time_to_float(self.x_values[0]), self.y_values[0]

    def get_last_values(self) -> tuple[float, float]:
        return time_to_float(self.x_values[-1]), self.y_values[-1]

    def get_value_formatters(self) -> tuple[ValueFormatter, ValueFormatter]:
        return time_value_formatter, float_value_formatter

    def validate(self) -> None:
        """Raise ValueError when either set of values is missing."""
        if not self.x_values:
            raise ValueError("time series must have xvalues set")
        if not self.y_values:
            raise ValueError("time series must have yvalues set")