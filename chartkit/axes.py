"""Horizontal and vertical chart axes: tick selection and layout measurement."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Protocol

from chartkit.formatters import ValueFormatter, float_value_formatter
from chartkit.style import Box, Style, hidden
from chartkit.text import MeasuringRenderer
from chartkit.tick import Range, Tick, generate_continuous_ticks

DEFAULT_X_AXIS_MARGIN = 10
DEFAULT_Y_AXIS_MARGIN = 10

_MAX_INT32 = 2**31 - 1


class TickPosition(IntEnum):
    """Where the labels of an x axis sit relative to its ticks."""

    UNSET = 0
    BETWEEN_TICKS = 1
    UNDER_TICK = 2


class YAxisType(IntEnum):
    """Which side of the canvas a y axis is drawn on."""

    PRIMARY = 0
    SECONDARY = 1


class TranslatingRange(Range, Protocol):
    """A range that can map a value onto its pixel domain."""

    def translate(self, value: float) -> int: ...


def _measure_text(renderer: MeasuringRenderer, body: str, style: Style) -> Box:
    style.text_options().write_to_renderer(renderer)
    return renderer.measure_text(body)


def _axis_ticks(
    user_ticks: Sequence[Tick],
    renderer: MeasuringRenderer,
    ra: Range,
    tick_style: Style,
    defaults: Style,
    vf: ValueFormatter | None,
    is_vertical: bool,
) -> list[Tick]:
    if user_ticks:
        return list(user_ticks)
    provider = getattr(ra, "get_ticks", None)
    if callable(provider):
        return provider(renderer, defaults, vf)
    return generate_continuous_ticks(renderer, ra, is_vertical, tick_style, vf)


@dataclass
class XAxis:
    """The horizontal axis."""

    name: str = ""
    name_style: Style = field(default_factory=Style)

    style: Style = field(default_factory=Style)
    value_formatter: ValueFormatter | None = None
    range: Range | None = None

    tick_style: Style = field(default_factory=Style)
    ticks: list[Tick] = field(default_factory=list)
    tick_position: TickPosition = TickPosition.UNSET

    grid_lines: list[Any] = field(default_factory=list)
    grid_major_style: Style = field(default_factory=Style)
    grid_minor_style: Style = field(default_factory=Style)

    def get_value_formatter(self) -> ValueFormatter:
        return self.value_formatter or float_value_formatter

    def get_tick_position(self, *args: TickPosition) -> TickPosition:
        if self.tick_position == TickPosition.UNSET:
            return args[0] if args else TickPosition.UNDER_TICK
        return self.tick_position

    def get_ticks(
        self,
        renderer: MeasuringRenderer,
        ra: Range,
        defaults: Style,
        vf: ValueFormatter | None,
    ) -> list[Tick]:
        """User ticks first, then ticks the range supplies, then generated ones."""
        return _axis_ticks(
            self.ticks, renderer, ra, self.style.inherit_from(defaults), defaults, vf, False
        )

    def measure(
        self,
        renderer: MeasuringRenderer,
        canvas_box: Box,
        ra: TranslatingRange,
        defaults: Style,
        ticks: Sequence[Tick],
    ) -> Box:
        """The box the axis, its labels and its name occupy below the canvas."""
        tick_style = self.tick_style.inherit_from(self.style.inherit_from(defaults))
        position = self.get_tick_position()

        ltx = rtx = 0
        left, right, bottom = _MAX_INT32, 0, 0
        for index, tick in enumerate(ticks):
            tb = _measure_text(renderer, tick.label, tick_style.text_options())
            tx = canvas_box.left + ra.translate(tick.value)
            ty = canvas_box.bottom + DEFAULT_X_AXIS_MARGIN + tb.height()
            if position in (TickPosition.UNDER_TICK, TickPosition.UNSET):
                ltx = tx - (tb.width() >> 1)
                rtx = tx + (tb.width() >> 1)
            elif position == TickPosition.BETWEEN_TICKS and index > 0:
                ltx = ra.translate(ticks[index - 1].value)
                rtx = tx

            left = min(left, ltx)
            right = max(right, rtx)
            bottom = max(bottom, ty)

        if not self.name_style.hidden and self.name:
            tb = _measure_text(renderer, self.name, self.name_style.inherit_from(defaults))
            bottom += DEFAULT_X_AXIS_MARGIN + tb.height()

        return Box(top=canvas_box.bottom, left=left, right=right, bottom=bottom)


@dataclass
class YAxis:
    """A vertical axis; a chart may have a primary and a secondary one."""

    name: str = ""
    name_style: Style = field(default_factory=Style)

    style: Style = field(default_factory=Style)

    zero: Any = None

    axis_type: YAxisType = YAxisType.PRIMARY
    ascending: bool = False

    value_formatter: ValueFormatter | None = None
    range: Range | None = None

    tick_style: Style = field(default_factory=Style)
    ticks: list[Tick] = field(default_factory=list)

    grid_lines: list[Any] = field(default_factory=list)
    grid_major_style: Style = field(default_factory=Style)
    grid_minor_style: Style = field(default_factory=Style)

    def get_value_formatter(self) -> ValueFormatter:
        return self.value_formatter or float_value_formatter

    def get_ticks(
        self,
        renderer: MeasuringRenderer,
        ra: Range,
        defaults: Style,
        vf: ValueFormatter | None,
    ) -> list[Tick]:
        """User ticks first, then ticks the range supplies, then generated ones."""
        return _axis_ticks(
            self.ticks, renderer, ra, self.style.inherit_from(defaults), defaults, vf, True
        )

    def measure(
        self,
        renderer: MeasuringRenderer,
        canvas_box: Box,
        ra: TranslatingRange,
        defaults: Style,
        ticks: Sequence[Tick],
    ) -> Box:
        """The box the axis and its labels occupy beside the canvas."""
        if self.axis_type == YAxisType.PRIMARY:
            tx = canvas_box.right + DEFAULT_Y_AXIS_MARGIN
        else:
            tx = canvas_box.left - DEFAULT_Y_AXIS_MARGIN

        self.tick_style.inherit_from(self.style.inherit_from(defaults)).write_to_renderer(renderer)

        minx, maxx, miny, maxy = _MAX_INT32, 0, _MAX_INT32, 0
        max_text_height = 0
        for tick in ticks:
            ly = canvas_box.bottom - ra.translate(tick.value)
            tb = renderer.measure_text(tick.label)
            half_height = tb.height() >> 1
            max_text_height = max(tb.height(), max_text_height)

            if self.axis_type == YAxisType.PRIMARY:
                minx = canvas_box.right
                maxx = max(maxx, tx + tb.width())
            else:
                minx = min(minx, tx - tb.width())
                maxx = max(maxx, tx)

            miny = min(miny, ly - half_height)
            maxy = max(maxy, ly + half_height)

        if not self.name_style.hidden and self.name:
            maxx += DEFAULT_Y_AXIS_MARGIN + max_text_height

        return Box(top=miny, left=minx, right=maxx, bottom=maxy)


def hide_x_axis() -> XAxis:
    """An x axis that is not drawn."""
    return XAxis(style=hidden())


def hide_y_axis() -> YAxis:
    """A y axis that is not drawn."""
    return YAxis(style=hidden())