from enum import Flag, auto

from typing_extensions import Self

from ..errors import UnknownModifierName


class Modifier(Flag):
    NONE = 0
    BOLD = auto()
    DIM = auto()
    ITALIC = auto()
    UNDERLINED = auto()
    SLOWBLINK = auto()
    RAPIDBLINK = auto()
    REVERSED = auto()
    HIDDEN = auto()
    CROSSEDOUT = auto()

    @classmethod
    def from_name(cls, name: str) -> Self:
        modifier = cls.__members__.get(name.upper())
        # NONE is the empty set, not a modifier
        if not modifier:
            raise UnknownModifierName(name)
        return modifier

    def names(self) -> list[str]:
        return [m.name.lower() for m in type(self) if m and m in self]
