from .config import MarkupConfig
from .errors import MarkupError, UnknownColorName, UnknownModifierName
from .style import AnsiColor, Color, Modifier, RgbColor, Style, parse_color
from .text import (Line, Span, SpanParser, StyleStack, Text, parse_spans,
                   strip_tags)

__all__ = [
    "AnsiColor",
    "Color",
    "Line",
    "MarkupConfig",
    "MarkupError",
    "Modifier",
    "RgbColor",
    "Span",
    "SpanParser",
    "Style",
    "StyleStack",
    "Text",
    "UnknownColorName",
    "UnknownModifierName",
    "parse_color",
    "parse_spans",
    "strip_tags",
]
