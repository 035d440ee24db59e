# chartkit

Building blocks for drawing charts: styles that inherit from one another,
value formatters, continuous tick generation, x and y axis measurement,
time helpers, a viridis colour map, a growable float queue and a renderer
that writes SVG.

It has no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Formatting values

Formatters are plain callables that turn a value into a label string and
return `""` for values they do not handle.

```python
from chartkit.formatters import (
    exponential_value_formatter,
    float_value_formatter,
    float_value_formatter_with_format,
    int_value_formatter,
    percent_value_formatter,
)

float_value_formatter(1234)                       # "1234.00"
float_value_formatter_with_format(123.456, "%.3f")  # "123.456"
exponential_value_formatter(123.456)              # "1.23e+02"
int_value_formatter(3.9)                          # "3"
percent_value_formatter(0.25)                     # "25.00%"
```

The time formatters (`time_value_formatter`, `time_hour_value_formatter`,
`time_minute_value_formatter`, `time_date_value_formatter` and
`time_value_formatter_with_format(fmt)`) accept a `datetime` or a number of
nanoseconds since the Unix epoch, and format it with a `strftime` format.
`k_value_formatter(k, vf)` prefixes another formatter's output with `"<k>σ "`.

## Styles

A `Style` is a dataclass whose zero values mean "unset". The `get_*`
methods return the set value, or the first argument given, or a built-in
default. `inherit_from` builds a new style that takes each unset option
from another style.

```python
from chartkit.color import Color
from chartkit.style import Style

base = Style(stroke_color=Color(255, 255, 255, 255), stroke_width=5.0)
final = Style().inherit_from(base)
final.get_stroke_width()   # 5.0
Style().get_font_size()    # 10.0
```

`stroke_options()`, `fill_options()`, `dot_options()`,
`fill_and_stroke_options()` and `text_options()` return styles holding only
those components. `write_to_renderer` pushes a style's options onto a
renderer. `hidden()` and `shown()` return styles with `hidden` set and
cleared. The module also holds `Box` and the `TextHorizontalAlign`,
`TextVerticalAlign` and `TextWrap` enums.

## Drawing SVG

```python
import io
from chartkit.color import Color
from chartkit.svg import svg

renderer = svg(100, 100)
renderer.set_stroke_color(Color(0, 0, 0, 255))
renderer.set_stroke_width(2)
renderer.move_to(0, 0)
renderer.line_to(100, 100)
renderer.line_to(0, 100)
renderer.close()
renderer.fill_stroke()

out = io.StringIO()
renderer.save(out)
print(out.getvalue())   # "<svg ...><path ... /></svg>"
```

`svg_with_css(css, nonce)` returns a factory whose documents start with an
inline `<style>` element, carrying a CSP nonce when one is given.
`save` accepts a text or a binary stream. A style with a `class_name` is
written as a `class` attribute; otherwise as an inline `style` attribute.

### Fonts and text measurement

No fonts are bundled. `SvgRenderer.measure_text` uses whatever object was
passed to `set_font`, which must have a `name` and a
`measure(text, size, dpi)` method returning a width in pixels. Without a
font, `measure_text` returns an empty `Box`.

```python
class MonoFont:
    name = "Mono"

    def measure(self, text, size, dpi):
        return len(text) * size * dpi / 72 * 0.6

renderer = svg(200, 100)
renderer.set_font(MonoFont())
renderer.set_font_size(12)
box = renderer.measure_text("hello")
box.width(), box.height()
```

## Text wrapping

`chartkit.text` has `wrap_fit`, `wrap_fit_word`, `wrap_fit_rune`, `trim` and
`measure_lines`. They measure with the renderer's current font, so they need
a renderer with a font set as above.

## Ticks and axes

`generate_continuous_ticks(renderer, ra, is_vertical, style, vf)` spaces
ticks so that their labels fit the range's pixel domain. The range is any
object with `get_min()`, `get_max()`, `get_domain()` and `is_descending()`;
the axes also need `translate(value)`, mapping a value to a pixel offset.

```python
from chartkit.axes import XAxis, YAxis, YAxisType
from chartkit.style import Box, Style

class LinearRange:
    def __init__(self, lo, hi, domain):
        self.lo, self.hi, self.domain = lo, hi, domain
    def get_min(self): return self.lo
    def get_max(self): return self.hi
    def get_domain(self): return self.domain
    def is_descending(self): return False
    def translate(self, value):
        return int((value - self.lo) / (self.hi - self.lo) * self.domain)

ra = LinearRange(0.0, 10.0, 256)
defaults = Style(font=MonoFont(), font_size=10.0)
ticks = XAxis().get_ticks(renderer, ra, defaults, None)
XAxis().measure(renderer, Box(0, 0, 256, 256), ra, defaults, ticks)
YAxis(axis_type=YAxisType.SECONDARY).measure(renderer, Box(0, 0, 256, 256), ra, defaults, ticks)
```

`get_ticks` uses the axis's own `ticks` if it has any, then the range's
`get_ticks` method if it has one, and otherwise generates them.
`hide_x_axis()` and `hide_y_axis()` return axes with a hidden style.
`Ticks` is a list of `Tick` with a readable `str`.

## Other modules

- `chartkit.value_buffer` – `ValueBuffer`, a FIFO of floats in a ring array
  that grows as needed (`enqueue`, `dequeue`, `peek`, `peek_back`,
  `set_capacity`, `trim_excess`, `to_list`, iteration and indexing).
  `dequeue`, `peek` and `peek_back` return `0.0` when it is empty.
- `chartkit.timeutil` – `time_to_float` / `time_from_float` (nanoseconds since
  the epoch; naive datetimes are local time), `diff_hours`, `time_min`,
  `time_max`, `time_min_max`, `time_millis`, `days`, `hours` and
  `hours_filled`, which spreads values onto an hourly grid with zeros between.
- `chartkit.color` – `Color` (RGBA, all zeros meaning unset) and
  `viridis(v, vmin, vmax)`, which picks one of 256 viridis colours.
- `chartkit.time_series` – `TimeSeries`, with `get_values`,
  `get_first_values`, `get_last_values`, `get_value_formatters` and
  `validate`, which raises `ValueError` when either set of values is empty.
- `chartkit.values` – `Value`, `Value2` and `Values`, a list of `Value` with
  `values()`, `values_normalized()` and `normalize()` (fractions of the total
  rounded down to four places).

## What it does not do

- There is no chart object that lays out series, axes and legends together,
  and no range classes; supply your own range objects as shown above.
- Axes measure their extent and choose ticks but do not draw themselves, and
  series do not render.
- Only SVG output is available; there is no raster (PNG) renderer.
- No font files or font parsing are included.
- There is no command-line program.