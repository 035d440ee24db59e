"""A renderer that writes drawing commands as an SVG document."""

from __future__ import annotations

import io
import math
from collections.abc import Callable, Sequence
from typing import Any, Protocol, TextIO

from chartkit.color import Color
from chartkit.style import Box, Style

DEFAULT_DPI = 92.0

_PI = math.pi
_PI2 = math.pi / 2.0
_TWO_PI = 2.0 * math.pi


class Font(Protocol):
    """A font that can report its family name and measure a string in pixels."""

    name: str

    def measure(self, text: str, size: float, dpi: float) -> float: ...


def _points_to_pixels(dpi: float, points: float) -> float:
    return points * dpi / 72.0


def _radian_add(base: float, delta: float) -> float:
    value = base + delta
    if value > _TWO_PI:
        return math.fmod(value, _TWO_PI)
    if value < 0:
        return math.fmod(_TWO_PI + value, _TWO_PI)
    return value


def _rotate_box(box: Box, theta: float) -> Box:
    cx = (box.left + box.right) >> 1
    cy = (box.top + box.bottom) >> 1
    cos_t, sin_t = math.cos(theta), math.sin(theta)
    corners = [
        (box.left, box.top),
        (box.right, box.top),
        (box.right, box.bottom),
        (box.left, box.bottom),
    ]
    xs: list[int] = []
    ys: list[int] = []
    for x, y in corners:
        dx, dy = float(x - cx), float(y - cy)
        xs.append(int(dx * cos_t - dy * sin_t) + cx)
        ys.append(int(dx * sin_t + dy * cos_t) + cy)
    return Box(top=min(ys), left=min(xs), right=max(xs), bottom=max(ys))


class Canvas:
    """Writes SVG elements to a text stream."""

    def __init__(
        self, stream: TextIO, dpi: float = DEFAULT_DPI, css: str = "", nonce: str = ""
    ) -> None:
        self.stream = stream
        self.dpi = dpi
        self.css = css
        self.nonce = nonce
        self.text_theta: float | None = None
        self.width = 0
        self.height = 0

    def start(self, width: int, height: int) -> None:
        """Open the document, with an inline stylesheet when one is set."""
        self.width = width
        self.height = height
        self.stream.write(
            '<svg xmlns="http://www.w3.org/2000/svg" '
            'xmlns:xlink="http://www.w3.org/1999/xlink" '
            f'viewBox="0 0 {width} {height}">'
        )
        if self.css:
            self.stream.write('<style type="text/css"')
            if self.nonce:
                self.stream.write(f' nonce="{self.nonce}"')
            self.stream.write(f"><![CDATA[{self.css}]]></style>")

    def path(self, d: str, style: Style) -> None:
        dash = self._stroke_dash_array(style) if style.stroke_dash_array else ""
        self.stream.write(f'<path {dash} d="{d}" {self.style_as_svg(style)}/>')

    def text(self, x: int, y: int, body: str, style: Style) -> None:
        attrs = self.style_as_svg(style)
        if self.text_theta is None:
            self.stream.write(f'<text x="{x}" y="{y}" {attrs}>{body}</text>')
        else:
            degrees = math.degrees(self.text_theta)
            transform = f' transform="rotate({degrees:0.2f},{x},{y})"'
            self.stream.write(f'<text x="{x}" y="{y}" {attrs}{transform}>{body}</text>')

    def circle(self, x: int, y: int, r: int, style: Style) -> None:
        self.stream.write(f'<circle cx="{x}" cy="{y}" r="{r}" {self.style_as_svg(style)}/>')

    def end(self) -> None:
        self.stream.write("</svg>")

    @staticmethod
    def _stroke_dash_array(style: Style) -> str:
        if not style.stroke_dash_array:
            return ""
        values = ", ".join(f"{v:0.1f}" for v in style.stroke_dash_array)
        return f'stroke-dasharray="{values}"'

    @staticmethod
    def _font_face(style: Style) -> str:
        family = "sans-serif"
        font = style.get_font()
        if font is not None:
            name = getattr(font, "name", "")
            if name:
                family = f"'{name}',{family}"
        return f"font-family:{family}"

    def style_as_svg(self, style: Style) -> str:
        """The style as an SVG ``class`` or inline ``style`` attribute."""
        if style.class_name:
            classes = [style.class_name]
            if not style.stroke_color.is_zero():
                classes.append("stroke")
            if not style.fill_color.is_zero():
                classes.append("fill")
            if style.font_size != 0 or style.font is not None:
                classes.append("text")
            return f'class="{" ".join(classes)}"'

        pieces = []
        if style.stroke_width != 0:
            pieces.append(f"stroke-width:{int(style.stroke_width)}")
        else:
            pieces.append("stroke-width:0")

        if not style.stroke_color.is_zero():
            pieces.append(f"stroke:{style.stroke_color}")
        else:
            pieces.append("stroke:none")

        if not style.font_color.is_zero():
            pieces.append(f"fill:{style.font_color}")
        elif not style.fill_color.is_zero():
            pieces.append(f"fill:{style.fill_color}")
        else:
            pieces.append("fill:none")

        if style.font_size != 0:
            pieces.append(f"font-size:{_points_to_pixels(self.dpi, style.font_size):.1f}px")

        if style.font is not None:
            pieces.append(self._font_face(style))
        return f'style="{";".join(pieces)}"'


class SvgRenderer:
    """Collects drawing commands into an in-memory SVG document."""

    def __init__(self, width: int, height: int, css: str = "", nonce: str = "") -> None:
        self._buffer = io.StringIO()
        self.canvas = Canvas(self._buffer, css=css, nonce=nonce)
        self.canvas.start(width, height)
        self.style = Style()
        self._path: list[str] = []
        self._dpi = DEFAULT_DPI

    def reset_style(self) -> None:
        """Clear every style option except the font."""
        self.style = Style(font=self.style.font)

    def get_dpi(self) -> float:
        return self._dpi

    def set_dpi(self, dpi: float) -> None:
        self._dpi = dpi
        self.canvas.dpi = dpi

    def set_class_name(self, name: str) -> None:
        self.style.class_name = name

    def set_stroke_color(self, color: Color) -> None:
        self.style.stroke_color = color

    def set_fill_color(self, color: Color) -> None:
        self.style.fill_color = color

    def set_stroke_width(self, width: float) -> None:
        self.style.stroke_width = width

    def set_stroke_dash_array(self, dash_array: Sequence[float] | None) -> None:
        self.style.stroke_dash_array = dash_array

    def move_to(self, x: int, y: int) -> None:
        self._path.append(f"M {x} {y}")

    def line_to(self, x: int, y: int) -> None:
        self._path.append(f"L {x} {y}")

    def quad_curve_to(self, cx: int, cy: int, x: int, y: int) -> None:
        self._path.append(f"Q{cx},{cy} {x},{y}")

    def arc_to(
        self, cx: int, cy: int, rx: float, ry: float, start_angle: float, delta: float
    ) -> None:
        """Add an elliptical arc, joining it to the current path."""
        start_angle = _radian_add(start_angle, _PI2)
        end_angle = _radian_add(start_angle, delta)

        start_x = cx + int(rx * math.sin(start_angle))
        start_y = cy - int(ry * math.cos(start_angle))
        self._path.append(f"{'L' if self._path else 'M'} {start_x} {start_y}")

        end_x = cx + int(rx * math.sin(end_angle))
        end_y = cy - int(ry * math.cos(end_angle))
        large_arc = 1 if delta > _PI else 0
        degrees = math.degrees(delta)
        self._path.append(
            f"A {int(rx)} {int(ry)} {degrees:0.2f} {large_arc} 1 {end_x} {end_y}"
        )

    def close(self) -> None:
        self._path.append("Z")

    def stroke(self) -> None:
        self._draw_path()

    def fill(self) -> None:
        self._draw_path()

    def fill_stroke(self) -> None:
        self._draw_path()

    def _draw_path(self) -> None:
        self.canvas.path("\n".join(self._path), self.style.fill_and_stroke_options())
        self._path = []

    def circle(self, radius: float, x: int, y: int) -> None:
        self.canvas.circle(x, y, int(radius), self.style.fill_and_stroke_options())

    def set_font(self, font: Any) -> None:
        self.style.font = font

    def set_font_color(self, color: Color) -> None:
        self.style.font_color = color

    def set_font_size(self, size: float) -> None:
        self.style.font_size = size

    def text(self, body: str, x: int, y: int) -> None:
        self.canvas.text(x, y, body, self.style.text_options())

    def measure_text(self, body: str) -> Box:
        """The box ``body`` occupies with the current font; empty without a font."""
        font = self.style.get_font()
        if font is None:
            return Box()
        width = math.ceil(font.measure(body, self.style.font_size, self._dpi))
        box = Box(
            right=width,
            bottom=int(_points_to_pixels(self._dpi, self.style.font_size)),
        )
        if self.canvas.text_theta is None:
            return box
        return _rotate_box(box, self.canvas.text_theta)

    def set_text_rotation(self, radians: float) -> None:
        self.canvas.text_theta = radians

    def clear_text_rotation(self) -> None:
        self.canvas.text_theta = None

    def save(self, stream: Any) -> None:
        """Close the document and write it to a text or binary stream."""
        self.canvas.end()
        data = self._buffer.getvalue()
        try:
            stream.write(data)
        except TypeError:
            stream.write(data.encode("utf-8"))


def svg(width: int, height: int) -> SvgRenderer:
    """A new SVG renderer for a canvas of the given size."""
    return SvgRenderer(width, height)


def svg_with_css(css: str, nonce: str = "") -> Callable[[int, int], SvgRenderer]:
    """A renderer factory whose documents embed ``css`` (with an optional CSP nonce)."""

    def factory(width: int, height: int) -> SvgRenderer:
        return SvgRenderer(width, height, css=css, nonce=nonce)

    return factory