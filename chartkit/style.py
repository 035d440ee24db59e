"""Drawing styles, layout boxes and text alignment options."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Protocol

from chartkit.color import COLOR_TRANSPARENT, Color

DISABLED = -1

DEFAULT_STROKE_WIDTH = 0.0
DEFAULT_DOT_WIDTH = 0.0
DEFAULT_FONT_SIZE = 10.0
DEFAULT_LINE_SPACING = 5


class TextHorizontalAlign(IntEnum):
    """Horizontal placement of text within a box."""

    UNSET = 0
    LEFT = 1
    CENTER = 2
    RIGHT = 3


class TextVerticalAlign(IntEnum):
    """Vertical placement of text within a box."""

    UNSET = 0
    BASELINE = 1
    BOTTOM = 2
    MIDDLE = 3
    MIDDLE_BASELINE = 4
    TOP = 5


class TextWrap(IntEnum):
    """How text is split to fit a horizontal boundary."""

    UNSET = 0
    NONE = 1
    WORD = 2
    RUNE = 3


@dataclass
class Box:
    """A rectangle given by its edges in pixels."""

    top: int = 0
    left: int = 0
    right: int = 0
    bottom: int = 0

    def is_zero(self) -> bool:
        return self.top == 0 and self.left == 0 and self.right == 0 and self.bottom == 0

    def width(self) -> int:
        return abs(self.right - self.left)

    def height(self) -> int:
        return abs(self.bottom - self.top)

    def __str__(self) -> str:
        return f"box({self.top},{self.left},{self.right},{self.bottom})"


DEFAULT_BACKGROUND_PADDING = Box(top=5, left=5, right=5, bottom=5)


class Renderer(Protocol):
    """The drawing settings a style can push onto a renderer."""

    def set_class_name(self, name: str) -> None: ...
    def set_stroke_color(self, color: Color) -> None: ...
    def set_stroke_width(self, width: float) -> None: ...
    def set_stroke_dash_array(self, dash_array: Sequence[float] | None) -> None: ...
    def set_fill_color(self, color: Color) -> None: ...
    def set_font(self, font: Any) -> None: ...
    def set_font_color(self, color: Color) -> None: ...
    def set_font_size(self, size: float) -> None: ...
    def set_text_rotation(self, radians: float) -> None: ...
    def clear_text_rotation(self) -> None: ...


def _font_name(font: Any) -> str:
    return str(getattr(font, "name", font))


def _first(args: tuple, fallback: Any) -> Any:
    return args[0] if args else fallback


@dataclass
class Style:
    """A set of drawing options; zero values mean "unset"."""

    hidden: bool = False
    padding: Box = field(default_factory=Box)

    class_name: str = ""

    stroke_width: float = 0.0
    stroke_color: Color = COLOR_TRANSPARENT
    stroke_dash_array: Sequence[float] | None = None

    dot_color: Color = COLOR_TRANSPARENT
    dot_width: float = 0.0

    dot_width_provider: Callable[..., float] | None = None
    dot_color_provider: Callable[..., Color] | None = None

    fill_color: Color = COLOR_TRANSPARENT

    font_size: float = 0.0
    font_color: Color = COLOR_TRANSPARENT
    font: Any = None

    text_horizontal_align: TextHorizontalAlign = TextHorizontalAlign.UNSET
    text_vertical_align: TextVerticalAlign = TextVerticalAlign.UNSET
    text_wrap: TextWrap = TextWrap.UNSET
    text_line_spacing: int = 0
    text_rotation_degrees: float = 0.0

    def is_zero(self) -> bool:
        """True when none of the main options are set."""
        return (
            not self.hidden
            and self.stroke_color.is_zero()
            and self.stroke_width == 0
            and self.dot_color.is_zero()
            and self.dot_width == 0
            and self.fill_color.is_zero()
            and self.font_color.is_zero()
            and self.font_size == 0
            and self.font is None
            and self.class_name == ""
        )

    def __str__(self) -> str:
        if self.is_zero():
            return "{}"

        def color_entry(key: str, color: Color) -> str:
            return f'"{key}": {color}' if not color.is_zero() else f'"{key}": null'

        output = ['"hidden": true' if self.hidden else '"hidden": false']
        output.append(
            f'"class_name": {self.class_name}' if self.class_name else '"class_name": null'
        )
        output.append(
            f'"padding": {self.padding}' if not self.padding.is_zero() else '"padding": null'
        )
        output.append(
            f'"stroke_width": {self.stroke_width:0.2f}'
            if self.stroke_width >= 0
            else '"stroke_width": null'
        )
        output.append(color_entry("stroke_color", self.stroke_color))
        if self.stroke_dash_array:
            dashes = ", ".join(f"{v:.2f}" for v in self.stroke_dash_array)
            output.append(f'"stroke_dash_array": [{dashes}]')
        else:
            output.append('"stroke_dash_array": null')
        output.append(
            f'"dot_width": {self.dot_width:0.2f}' if self.dot_width >= 0 else '"dot_width": null'
        )
        output.append(color_entry("dot_color", self.dot_color))
        output.append(color_entry("fill_color", self.fill_color))
        output.append(
            f'"font_size": "{self.font_size:0.2f}pt"' if self.font_size != 0 else '"font_size": null'
        )
        output.append(color_entry("font_color", self.font_color))
        output.append(
            f'"font": "{_font_name(self.font)}"' if self.font is not None else '"font": null'
        )
        return "{" + ", ".join(output) + "}"

    def get_class_name(self, *args: str) -> str:
        return self.class_name or _first(args, "")

    def get_stroke_color(self, *args: Color) -> Color:
        return _first(args, COLOR_TRANSPARENT) if self.stroke_color.is_zero() else self.stroke_color

    def get_fill_color(self, *args: Color) -> Color:
        return _first(args, COLOR_TRANSPARENT) if self.fill_color.is_zero() else self.fill_color

    def get_dot_color(self, *args: Color) -> Color:
        return _first(args, COLOR_TRANSPARENT) if self.dot_color.is_zero() else self.dot_color

    def get_stroke_width(self, *args: float) -> float:
        return _first(args, DEFAULT_STROKE_WIDTH) if self.stroke_width == 0 else self.stroke_width

    def get_dot_width(self, *args: float) -> float:
        return _first(args, DEFAULT_DOT_WIDTH) if self.dot_width == 0 else self.dot_width

    def get_stroke_dash_array(self, *args: Sequence[float] | None) -> Sequence[float] | None:
        return self.stroke_dash_array if self.stroke_dash_array else _first(args, None)

    def get_font_size(self, *args: float) -> float:
        return _first(args, DEFAULT_FONT_SIZE) if self.font_size == 0 else self.font_size

    def get_font_color(self, *args: Color) -> Color:
        return _first(args, COLOR_TRANSPARENT) if self.font_color.is_zero() else self.font_color

    def get_font(self, *args: Any) -> Any:
        return _first(args, None) if self.font is None else self.font

    def get_padding(self, *args: Box) -> Box:
        return _first(args, Box()) if self.padding.is_zero() else self.padding

    def get_text_horizontal_align(self, *args: TextHorizontalAlign) -> TextHorizontalAlign:
        if self.text_horizontal_align == TextHorizontalAlign.UNSET:
            return _first(args, TextHorizontalAlign.UNSET)
        return self.text_horizontal_align

    def get_text_vertical_align(self, *args: TextVerticalAlign) -> TextVerticalAlign:
        if self.text_vertical_align == TextVerticalAlign.UNSET:
            return _first(args, TextVerticalAlign.UNSET)
        return self.text_vertical_align

    def get_text_wrap(self, *args: TextWrap) -> TextWrap:
        if self.text_wrap == TextWrap.UNSET:
            return _first(args, TextWrap.UNSET)
        return self.text_wrap

    def get_text_line_spacing(self, *args: int) -> int:
        return _first(args, DEFAULT_LINE_SPACING) if self.text_line_spacing == 0 else self.text_line_spacing

    def get_text_rotation_degrees(self, *args: float) -> float:
        if self.text_rotation_degrees == 0 and args:
            return args[0]
        return self.text_rotation_degrees

    def write_to_renderer(self, renderer: Renderer) -> None:
        """Push every drawing and text option onto a renderer."""
        self.write_drawing_options_to_renderer(renderer)
        renderer.set_font(self.get_font())
        renderer.set_font_color(self.get_font_color())
        renderer.set_font_size(self.get_font_size())

        renderer.clear_text_rotation()
        if self.get_text_rotation_degrees() != 0:
            renderer.set_text_rotation(math.radians(self.get_text_rotation_degrees()))

    def write_drawing_options_to_renderer(self, renderer: Renderer) -> None:
        """Push only the stroke and fill options onto a renderer."""
        renderer.set_class_name(self.get_class_name())
        renderer.set_stroke_color(self.get_stroke_color())
        renderer.set_stroke_width(self.get_stroke_width())
        renderer.set_stroke_dash_array(self.get_stroke_dash_array())
        renderer.set_fill_color(self.get_fill_color())

    def write_text_options_to_renderer(self, renderer: Renderer) -> None:
        """Push only the text options onto a renderer."""
        renderer.set_class_name(self.get_class_name())
        renderer.set_font(self.get_font())
        renderer.set_font_color(self.get_font_color())
        renderer.set_font_size(self.get_font_size())

    def inherit_from(self, defaults: Style) -> Style:
        """A new style taking each unset option from ``defaults``."""
        return Style(
            class_name=self.get_class_name(defaults.class_name),
            stroke_color=self.get_stroke_color(defaults.stroke_color),
            stroke_width=self.get_stroke_width(defaults.stroke_width),
            stroke_dash_array=self.get_stroke_dash_array(defaults.stroke_dash_array),
            dot_color=self.get_dot_color(defaults.dot_color),
            dot_width=self.get_dot_width(defaults.dot_width),
            dot_width_provider=self.dot_width_provider,
            dot_color_provider=self.dot_color_provider,
            fill_color=self.get_fill_color(defaults.fill_color),
            font_color=self.get_font_color(defaults.font_color),
            font_size=self.get_font_size(defaults.font_size),
            font=self.get_font(defaults.font),
            padding=self.get_padding(defaults.padding),
            text_horizontal_align=self.get_text_horizontal_align(defaults.text_horizontal_align),
            text_vertical_align=self.get_text_vertical_align(defaults.text_vertical_align),
            text_wrap=self.get_text_wrap(defaults.text_wrap),
            text_line_spacing=self.get_text_line_spacing(defaults.text_line_spacing),
            text_rotation_degrees=self.get_text_rotation_degrees(defaults.text_rotation_degrees),
        )

    def stroke_options(self) -> Style:
        """Just the stroke components."""
        return Style(
            class_name=self.class_name,
            stroke_dash_array=self.stroke_dash_array,
            stroke_color=self.stroke_color,
            stroke_width=self.stroke_width,
        )

    def fill_options(self) -> Style:
        """Just the fill components."""
        return Style(class_name=self.class_name, fill_color=self.fill_color)

    def dot_options(self) -> Style:
        """A style that draws dots in the dot color."""
        return Style(
            class_name=self.class_name,
            stroke_dash_array=None,
            fill_color=self.dot_color,
            stroke_color=self.dot_color,
            stroke_width=1.0,
        )

    def fill_and_stroke_options(self) -> Style:
        """The fill and stroke components."""
        return Style(
            class_name=self.class_name,
            stroke_dash_array=self.stroke_dash_array,
            fill_color=self.fill_color,
            stroke_color=self.stroke_color,
            stroke_width=self.stroke_width,
        )

    def text_options(self) -> Style:
        """Just the text components."""
        return Style(
            class_name=self.class_name,
            font_color=self.font_color,
            font_size=self.font_size,
            font=self.font,
            text_horizontal_align=self.text_horizontal_align,
            text_vertical_align=self.text_vertical_align,
            text_wrap=self.text_wrap,
            text_line_spacing=self.text_line_spacing,
            text_rotation_degrees=self.text_rotation_degrees,
        )

    def should_draw_stroke(self) -> bool:
        return not self.stroke_color.is_zero() and self.stroke_width > 0

    def should_draw_dot(self) -> bool:
        return (
            (not self.dot_color.is_zero() and self.dot_width > 0)
            or self.dot_color_provider is not None
            or self.dot_width_provider is not None
        )

    def should_draw_fill(self) -> bool:
        return not self.fill_color.is_zero()


def hidden() -> Style:
    """A style with ``hidden`` set."""
    return Style(hidden=True)


def shown() -> Style:
    """A style with ``hidden`` cleared; the default."""
    return Style(hidden=False)