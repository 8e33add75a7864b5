from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from typing_extensions import Self

from ..errors import UnknownColorName


class AnsiColor(Enum):
    """The 16 named terminal colors, plus the terminal default."""

    RESET = "reset"
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    GRAY = "gray"
    DARKGRAY = "darkgray"
    LIGHTRED = "lightred"
    LIGHTGREEN = "lightgreen"
    LIGHTYELLOW = "lightyellow"
    LIGHTBLUE = "lightblue"
    LIGHTMAGENTA = "lightmagenta"
    LIGHTCYAN = "lightcyan"
    WHITE = "white"

    @classmethod
    def from_name(cls, name: str) -> Self:
        try:
            return cls(name.lower())
        except ValueError:
            raise UnknownColorName(name) from None

    def debug_name(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class RgbColor:
    r: int
    g: int
    b: int

    HEX_PATTERN = re.compile(r"#(?:[0-9a-f]{3}|[0-9a-f]{6})", re.IGNORECASE)

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel}")

    @classmethod
    def of(cls, r: int, g: int, b: int) -> Self:
        return cls(r, g, b)

    @classmethod
    def from_hex(cls, hex: str) -> Self:
        """Parse `#RGB` or `#RRGGBB`.

        The short form expands each digit, so `#ccc` is `#cccccc`.
        """
        if not cls.HEX_PATTERN.fullmatch(hex):
            raise UnknownColorName(hex)
        digits = hex[1:]
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        return cls(int(digits[0:2], 16), int(digits[2:4], 16),
                   int(digits[4:6], 16))

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def debug_name(self) -> str:
        return f"RGB({self.r}, {self.g}, {self.b})"


Color = AnsiColor | RgbColor


def parse_color(value: str,
                aliases: Mapping[str, str] | None = None) -> Color:
    """Resolve a tag attribute value to a color.

    `#`-prefixed values are hex, anything else a color name.
    """
    resolved = aliases.get(value.lower(), value) if aliases else value
    try:
        if resolved.startswith("#"):
            return RgbColor.from_hex(resolved)
        return AnsiColor.from_name(resolved)
    except UnknownColorName:
        raise UnknownColorName(value) from None
