"""Fitting and measuring text against a renderer's font metrics."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from chartkit.style import Box, Renderer, Style, TextWrap


class MeasuringRenderer(Renderer, Protocol):
    """A renderer that can also measure text with its current font."""

    def measure_text(self, body: str) -> Box: ...


def wrap_fit(renderer: MeasuringRenderer, value: str, width: int, style: Style) -> list[str]:
    """Split ``value`` into lines according to the style's wrap mode."""
    if style.text_wrap == TextWrap.RUNE:
        return wrap_fit_rune(renderer, value, width, style)
    if style.text_wrap == TextWrap.WORD:
        return wrap_fit_word(renderer, value, width, style)
    return [value]


def wrap_fit_word(renderer: MeasuringRenderer, value: str, width: int, style: Style) -> list[str]:
    """Split ``value`` on whitespace so that each line is narrower than ``width``."""
    style.write_to_renderer(renderer)

    output: list[str] = []
    line = ""
    word = ""
    for c in value:
        if c == "\n":
            output.append(trim(line + word))
            line = ""
            word = ""
            continue

        if renderer.measure_text(line + word + c).width() >= width:
            output.append(trim(line))
            line = word
            word = c
            continue

        if c in (" ", "\t"):
            line = line + word + c
            word = ""
            continue
        word += c

    output.append(trim(line + word))
    return output


def wrap_fit_rune(renderer: MeasuringRenderer, value: str, width: int, style: Style) -> list[str]:
    """Split ``value`` at whichever character would overflow ``width``.

    Whatever is left at the end is joined onto the last line produced.
    """
    style.write_to_renderer(renderer)

    output: list[str] = []
    line = ""
    for c in value:
        if c == "\n":
            output.append(line)
            line = ""
            continue

        if renderer.measure_text(line + c).width() >= width:
            output.append(line)
            line = c
            continue
        line += c

    if not output:
        return [line]
    output[-1] += line
    return output


def trim(value: str) -> str:
    """Strip spaces, tabs and line breaks from both ends."""
    return value.strip(" \t\n\r")


def measure_lines(renderer: MeasuringRenderer, lines: Sequence[str], style: Style) -> Box:
    """The box that the given lines occupy when stacked with line spacing."""
    style.write_text_options_to_renderer(renderer)
    output = Box()
    last = len(lines) - 1
    for index, line in enumerate(lines):
        line_box = renderer.measure_text(line)
        output.right = max(line_box.right, output.right)
        output.bottom += line_box.height()
        if index < last:
            output.bottom += style.get_text_line_spacing()
    return output