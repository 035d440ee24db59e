import io
import math
from dataclasses import dataclass

from chartkit.color import COLOR_BLACK, COLOR_WHITE
from chartkit.style import DEFAULT_BACKGROUND_PADDING, Style
from chartkit.svg import DEFAULT_DPI, Canvas, SvgRenderer, svg, svg_with_css


@dataclass
class FakeFont:
    advance: float = 7.0
    name: str = "Fake"

    def measure(self, text, size, dpi):
        return len(text) * self.advance


def saved(renderer):
    out = io.StringIO()
    renderer.save(out)
    return out.getvalue()


def test_renderer_path():
    r = svg(100, 100)
    r.move_to(0, 0)
    r.line_to(100, 100)
    r.line_to(0, 100)
    r.close()
    r.fill_stroke()
    raw = saved(r)
    assert raw.startswith("<svg")
    assert raw.endswith("</svg>")
    assert 'viewBox="0 0 100 100"' in raw
    assert (
        '<path  d="M 0 0\nL 100 100\nL 0 100\nZ" '
        'style="stroke-width:0;stroke:none;fill:none"/>'
    ) in raw


def test_renderer_save_to_binary_stream():
    r = svg(10, 10)
    out = io.BytesIO()
    r.save(out)
    assert out.getvalue().endswith(b"</svg>")


def test_renderer_measure_text():
    r = svg(100, 100)
    r.set_dpi(DEFAULT_DPI)
    r.set_font(FakeFont())
    r.set_font_size(12.0)
    tb = r.measure_text("Ljp")
    assert tb.width() == 21
    assert tb.height() == 15


def test_renderer_measure_text_without_font_is_empty():
    r = svg(100, 100)
    assert r.measure_text("hello").is_zero()


def test_renderer_measure_text_rotated_swaps_extent():
    r = svg(100, 100)
    r.set_font(FakeFont())
    r.set_font_size(12.0)
    r.set_text_rotation(math.pi / 2)
    tb = r.measure_text("Ljp")
    assert abs(tb.width() - 15) <= 1
    assert abs(tb.height() - 21) <= 1


def test_canvas_style_svg():
    style = Style(
        stroke_color=COLOR_WHITE,
        stroke_width=5.0,
        fill_color=COLOR_WHITE,
        font_color=COLOR_WHITE,
        font=FakeFont(),
        padding=DEFAULT_BACKGROUND_PADDING,
    )
    canvas = Canvas(io.StringIO(), dpi=DEFAULT_DPI)
    text = canvas.style_as_svg(style)
    assert text.startswith('style="')
    assert "stroke:rgba(255,255,255,1.0)" in text
    assert "stroke-width:5" in text
    assert "fill:rgba(255,255,255,1.0)" in text
    assert "font-family:'Fake',sans-serif" in text
    assert text.endswith('"')


def test_canvas_style_svg_font_size():
    canvas = Canvas(io.StringIO(), dpi=72.0)
    assert canvas.style_as_svg(Style(font_size=10.0)) == (
        'style="stroke-width:0;stroke:none;fill:none;font-size:10.0px"'
    )


def test_canvas_class_svg():
    canvas = Canvas(io.StringIO())
    assert canvas.style_as_svg(Style(class_name="test-class")) == 'class="test-class"'
    assert (
        canvas.style_as_svg(Style(class_name="c", stroke_color=COLOR_BLACK, font_size=3))
        == 'class="c stroke text"'
    )


def test_canvas_custom_inline_stylesheet():
    out = io.StringIO()
    canvas = Canvas(out, css=".background { fill: red }")
    canvas.start(200, 200)
    assert (
        '<style type="text/css"><![CDATA[.background { fill: red }]]></style>'
        in out.getvalue()
    )


def test_canvas_custom_inline_stylesheet_with_nonce():
    out = io.StringIO()
    canvas = Canvas(out, css=".background { fill: red }", nonce="RAND0MSTRING")
    canvas.start(200, 200)
    assert (
        '<style type="text/css" nonce="RAND0MSTRING">'
        "<![CDATA[.background { fill: red }]]></style>"
    ) in out.getvalue()


def test_svg_with_css_factory():
    factory = svg_with_css(".bg{}", "abc")
    raw = saved(factory(10, 10))
    assert '<style type="text/css" nonce="abc"><![CDATA[.bg{}]]></style>' in raw


def test_arc_to():
    r = svg(100, 100)
    r.arc_to(50, 50, 10, 10, 0, math.pi / 2)
    r.stroke()
    assert 'd="M 60 50\nA 10 10 90.00 0 1 50 60"' in saved(r)


def test_quad_curve_to():
    r = svg(100, 100)
    r.move_to(0, 0)
    r.quad_curve_to(1, 2, 3, 4)
    r.stroke()
    assert 'd="M 0 0\nQ1,2 3,4"' in saved(r)


def test_path_is_cleared_after_drawing():
    r = svg(100, 100)
    r.move_to(1, 1)
    r.fill()
    r.move_to(2, 2)
    r.fill()
    raw = saved(r)
    assert 'd="M 1 1"' in raw
    assert 'd="M 2 2"' in raw
    assert 'd="M 1 1\nM 2 2"' not in raw


def test_dash_array():
    r = svg(10, 10)
    r.set_stroke_dash_array([5.0, 2.5])
    r.move_to(0, 0)
    r.stroke()
    assert '<path stroke-dasharray="5.0, 2.5" d="M 0 0"' in saved(r)


def test_circle():
    r = svg(100, 100)
    r.circle(5.7, 10, 20)
    assert (
        '<circle cx="10" cy="20" r="5" style="stroke-width:0;stroke:none;fill:none"/>'
        in saved(r)
    )


def test_text_and_rotation():
    r = svg(100, 100)
    r.set_font_color(COLOR_BLACK)
    r.text("hi", 1, 2)
    r.set_text_rotation(math.pi / 2)
    r.text("yo", 3, 4)
    r.clear_text_rotation()
    raw = saved(r)
    assert (
        '<text x="1" y="2" style="stroke-width:0;stroke:none;fill:rgba(0,0,0,1.0)">hi</text>'
        in raw
    )
    assert 'transform="rotate(90.00,3,4)">yo</text>' in raw


def test_reset_style_keeps_font():
    r = SvgRenderer(10, 10)
    font = FakeFont()
    r.set_font(font)
    r.set_stroke_width(3.0)
    r.set_class_name("x")
    r.reset_style()
    assert r.style.font is font
    assert r.style.stroke_width == 0.0
    assert r.style.class_name == ""


def test_set_dpi_updates_canvas():
    r = SvgRenderer(10, 10)
    r.set_dpi(144.0)
    assert r.get_dpi() == 144.0
    assert r.canvas.dpi == 144.0