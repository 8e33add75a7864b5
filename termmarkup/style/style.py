from __future__ import annotations

from dataclasses import dataclass, replace

from .color import Color
from .modifier import Modifier


@dataclass(frozen=True)
class Style:
    """Style of a span of text.

    Unset colors (`None`) inherit from the outer style when patched.
    Modifiers are tracked in two sets so that an overlay can switch off a
    modifier turned on by the outer style, which is different from never
    having turned it on.

    Attributes:
        fg: foreground color.
        bg: background color.
        add_modifiers: modifiers switched on.
        sub_modifiers: modifiers switched off.
    """

    fg: Color | None = None
    bg: Color | None = None
    add_modifiers: Modifier = Modifier.NONE
    sub_modifiers: Modifier = Modifier.NONE

    @classmethod
    def default(cls) -> Style:
        return cls()

    def with_fg(self, color: Color) -> Style:
        return replace(self, fg=color)

    def with_bg(self, color: Color) -> Style:
        return replace(self, bg=color)

    def add_modifier(self, modifier: Modifier) -> Style:
        return replace(self,
                       add_modifiers=self.add_modifiers | modifier,
                       sub_modifiers=self.sub_modifiers & ~modifier)

    def remove_modifier(self, modifier: Modifier) -> Style:
        return replace(self,
                       add_modifiers=self.add_modifiers & ~modifier,
                       sub_modifiers=self.sub_modifiers | modifier)

    def has_modifier(self, modifier: Modifier) -> bool:
        return modifier in self.add_modifiers and not (modifier
                                                       & self.sub_modifiers)

    def patch(self, other: Style) -> Style:
        """Layer `other` over this style.

        Colors set in `other` win; for modifiers the overlay's add/remove
        wins per bit.
        """
        return Style(
            fg=other.fg if other.fg is not None else self.fg,
            bg=other.bg if other.bg is not None else self.bg,
            add_modifiers=(self.add_modifiers & ~other.sub_modifiers)
            | other.add_modifiers,
            sub_modifiers=(self.sub_modifiers & ~other.add_modifiers)
            | other.sub_modifiers,
        )

    def __str__(self) -> str:
        parts = []
        if self.fg is not None:
            parts.append(f"fg={self.fg.debug_name()}")
        if self.bg is not None:
            parts.append(f"bg={self.bg.debug_name()}")
        parts.extend(f"+{name}" for name in self.add_modifiers.names())
        parts.extend(f"-{name}" for name in self.sub_modifiers.names())
        return f"Style({', '.join(parts)})"
