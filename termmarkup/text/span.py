from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from ..style import Style


@dataclass(frozen=True, slots=True)
class Span:
    content: str
    style: Style = field(default_factory=Style.default)

    @classmethod
    def styled(cls, content: str, style: Style) -> Span:
        return cls(content, style)

    @classmethod
    def raw(cls, content: str) -> Span:
        return cls(content, Style.default())

    def __str__(self) -> str:
        return f"{self.content!r} {self.style}"


@dataclass(slots=True)
class Line:
    spans: list[Span] = field(default_factory=list)

    @classmethod
    def parse(cls, markup: str) -> Line:
        from .parser import parse_spans
        return cls(parse_spans(markup))

    @property
    def content(self) -> str:
        return "".join(span.content for span in self.spans)

    def __iter__(self) -> Iterator[Span]:
        return iter(self.spans)

    def __len__(self) -> int:
        return len(self.spans)


@dataclass(slots=True)
class Text:
    """Multiline styled text.

    Spans are split at newlines, the style carrying over to the piece on the
    next line.
    """

    lines: list[Line] = field(default_factory=list)

    @classmethod
    def parse(cls, markup: str) -> Text:
        from .parser import parse_spans
        return cls.from_spans(parse_spans(markup))

    @classmethod
    def from_spans(cls, spans: Iterable[Span]) -> Text:
        lines: list[Line] = []
        current: Line | None = None
        for span in spans:
            for i, piece in enumerate(span.content.split("\n")):
                if i > 0 or current is None:
                    current = Line()
                    lines.append(current)
                if piece:
                    current.spans.append(Span(piece, span.style))
        return cls(lines)

    @property
    def content(self) -> str:
        return "\n".join(line.content for line in self.lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)
