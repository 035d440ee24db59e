"""Chart building blocks: styles, formatters, ticks, axis measurement, time helpers and an SVG renderer."""

__version__ = "0.1.0"