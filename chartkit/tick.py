"""Axis ticks and the generation of evenly spaced ticks for a range."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol

from chartkit.formatters import ValueFormatter, float_value_formatter
from chartkit.style import Style
from chartkit.text import MeasuringRenderer

DEFAULT_MINIMUM_TICK_HORIZONTAL_SPACING = 20
DEFAULT_MINIMUM_TICK_VERTICAL_SPACING = 20
DEFAULT_TICK_COUNT_SANITY_CHECK = 1 << 10


class Range(Protocol):
    """A value range mapped onto a pixel domain."""

    def get_min(self) -> float: ...
    def get_max(self) -> float: ...
    def get_domain(self) -> int: ...
    def is_descending(self) -> bool: ...


@dataclass
class Tick:
    """A labelled position on an axis."""

    value: float = 0.0
    label: str = ""


class TicksProvider(Protocol):
    """Something, typically a range, that supplies its own ticks."""

    def get_ticks(
        self, renderer: MeasuringRenderer, defaults: Style, vf: ValueFormatter
    ) -> list[Tick]: ...


class Ticks(list):
    """A list of :class:`Tick` items."""

    def __str__(self) -> str:
        return ", ".join(f"[{i}: {tick.label}]" for i, tick in enumerate(self))


def _round_to_for_delta(delta: float) -> float:
    cursor = 10.0**10
    while cursor > 0:
        if delta > cursor:
            return cursor / 10.0
        cursor /= 10.0
    return 0.0


def _round_up(value: float, round_to: float) -> float:
    if round_to < 0.000000000000001:
        return value
    return math.ceil(value / round_to) * round_to


def generate_continuous_ticks(
    renderer: MeasuringRenderer,
    ra: Range,
    is_vertical: bool,
    style: Style,
    vf: ValueFormatter | None,
) -> list[Tick]:
    """Ticks spaced so that their labels fit the range's pixel domain."""
    if vf is None:
        vf = float_value_formatter

    lo, hi = ra.get_min(), ra.get_max()
    descending = ra.is_descending()

    first = hi if descending else lo
    ticks = [Tick(first, vf(first))]

    style.text_options().write_to_renderer(renderer)
    label_box = renderer.measure_text(vf(lo))

    if is_vertical:
        tick_size = float(label_box.height() + DEFAULT_MINIMUM_TICK_VERTICAL_SPACING)
    else:
        tick_size = float(label_box.width() + DEFAULT_MINIMUM_TICK_HORIZONTAL_SPACING)

    domain_remainder = float(ra.get_domain()) - tick_size * 2
    intermediate_count = int(math.floor(domain_remainder / tick_size))

    range_delta = abs(hi - lo)
    tick_step = range_delta / intermediate_count if intermediate_count > 0 else 0.0

    round_to = _round_to_for_delta(range_delta) / 10
    intermediate_count = min(intermediate_count, DEFAULT_TICK_COUNT_SANITY_CHECK)

    for x in range(1, intermediate_count):
        offset = _round_up(tick_step * x, round_to)
        tick_value = hi - offset if descending else lo + offset
        ticks.append(Tick(tick_value, vf(tick_value)))

    last = lo if descending else hi
    ticks.append(Tick(last, vf(last)))
    return ticks