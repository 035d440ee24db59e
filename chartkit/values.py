"""Labelled chart values and the protocols of value providers."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol

from chartkit.color import Color
from chartkit.style import Style

SizeProvider = Callable[[Any, Any, int, float, float], float]
ColorProvider = Callable[[float, float, float], Color]
DotColorProvider = Callable[[Any, Any, int, float, float], Color]


class ValuesProvider(Protocol):
    def __len__(self) -> int: ...
    def get_values(self, index: int) -> tuple[float, float]: ...


class BoundedValuesProvider(Protocol):
    def __len__(self) -> int: ...
    def get_bounded_values(self, index: int) -> tuple[float, float, float]: ...


class FirstValuesProvider(Protocol):
    def get_first_values(self) -> tuple[float, float]: ...


class LastValuesProvider(Protocol):
    def get_last_values(self) -> tuple[float, float]: ...


class BoundedLastValuesProvider(Protocol):
    def get_bounded_last_values(self) -> tuple[float, float, float]: ...


class FullValuesProvider(ValuesProvider, LastValuesProvider, Protocol):
    pass


class FullBoundedValuesProvider(BoundedValuesProvider, BoundedLastValuesProvider, Protocol):
    pass


def _round_down(value: float, round_to: float) -> float:
    return math.floor(value / round_to) * round_to


def _normalize(values: list[float]) -> list[float]:
    total = sum(values)
    return [_round_down(v / total, 0.0001) for v in values]


@dataclass
class Value:
    """A single labelled value."""

    style: Style = field(default_factory=Style)
    label: str = ""
    value: float = 0.0


@dataclass
class Value2:
    """A labelled value on two axes."""

    style: Style = field(default_factory=Style)
    label: str = ""
    x_value: float = 0.0
    y_value: float = 0.0


class Values(list):
    """A list of :class:`Value` items."""

    def values(self) -> list[float]:
        """The raw numbers."""
        return [v.value for v in self]

    def values_normalized(self) -> list[float]:
        """Each number as a fraction of the total, rounded down to 4 places."""
        return _normalize(self.values())

    def normalize(self) -> list[Value]:
        """Positive values rescaled to fractions of the total."""
        total = sum(v.value for v in self)
        return [
            Value(style=v.style, label=v.label, value=_round_down(v.value / total, 0.0001))
            for v in self
            if v.value > 0
        ]