from .color import AnsiColor, Color, RgbColor, parse_color
from .modifier import Modifier
from .style import Style

__all__ = [
    "AnsiColor",
    "Color",
    "Modifier",
    "RgbColor",
    "Style",
    "parse_color",
]
