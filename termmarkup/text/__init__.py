from .parser import SpanParser, StyleStack, parse_spans, strip_tags
from .span import Line, Span, Text

__all__ = [
    "Line",
    "Span",
    "SpanParser",
    "StyleStack",
    "Text",
    "parse_spans",
    "strip_tags",
]
