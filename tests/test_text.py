from dataclasses import dataclass

from chartkit.style import Style, TextWrap
from chartkit.svg import SvgRenderer
from chartkit.text import measure_lines, trim, wrap_fit, wrap_fit_rune, wrap_fit_word


@dataclass
class FakeFont:
    advance: float = 10.0
    name: str = "Fake"

    def measure(self, text, size, dpi):
        return len(text) * self.advance


def make_style(**kwargs):
    return Style(font=FakeFont(), font_size=24, **kwargs)


def test_wrap_fit_word_basic():
    r = SvgRenderer(1024, 1024)
    style = make_style()
    output = wrap_fit_word(r, "this is a test string", 100, style)
    assert output == ["this is", "a test", "string"]
    for line in output:
        style.write_to_renderer(r)
        assert r.measure_text(line).width() < 100


def test_wrap_fit_word_single_word():
    r = SvgRenderer(1024, 1024)
    assert wrap_fit_word(r, "foo", 100, make_style()) == ["foo"]


def test_wrap_fit_word_newlines():
    r = SvgRenderer(1024, 1024)
    output = wrap_fit_word(r, "this\nis\na\ntest\nstring", 100, make_style())
    assert output == ["this", "is", "a", "test", "string"]


def test_wrap_fit_word_newlines_and_long_lines():
    r = SvgRenderer(1024, 1024)
    output = wrap_fit_word(
        r, "this\nis\na\ntest\nstring that is very long", 100, make_style()
    )
    assert output == ["this", "is", "a", "test", "string", "that is", "very long"]


def test_wrap_fit_rune_joins_remainder_onto_last_line():
    r = SvgRenderer(1024, 1024)
    output = wrap_fit_rune(r, "abcdefghij", 50, make_style())
    assert output == ["abcd", "efghij"]


def test_wrap_fit_rune_short_value():
    r = SvgRenderer(1024, 1024)
    assert wrap_fit_rune(r, "abc", 150, make_style()) == ["abc"]


def test_wrap_fit_rune_newline_then_remainder():
    r = SvgRenderer(1024, 1024)
    assert wrap_fit_rune(r, "ab\ncd", 150, make_style()) == ["abcd"]


def test_wrap_fit_dispatch():
    r = SvgRenderer(1024, 1024)
    value = "this is a test string"
    assert wrap_fit(r, value, 100, make_style(text_wrap=TextWrap.NONE)) == [value]
    assert wrap_fit(r, value, 100, make_style()) == [value]
    assert wrap_fit(r, value, 100, make_style(text_wrap=TextWrap.WORD)) == [
        "this is",
        "a test",
        "string",
    ]
    assert wrap_fit(r, "abcdefghij", 50, make_style(text_wrap=TextWrap.RUNE)) == [
        "abcd",
        "efghij",
    ]


def test_trim():
    assert trim(" \t hello world\r\n") == "hello world"
    assert trim("   ") == ""


def test_measure_lines():
    r = SvgRenderer(100, 100)
    style = Style(font=FakeFont(), font_size=12.0)
    box = measure_lines(r, ["ab", "abcd"], style)
    assert box.right == 40
    assert box.bottom == 15 + 5 + 15


def test_measure_lines_empty():
    r = SvgRenderer(100, 100)
    box = measure_lines(r, [], Style(font=FakeFont(), font_size=12.0))
    assert box.is_zero()