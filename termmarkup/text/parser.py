import re

from ..config import MarkupConfig
from ..log import escape_tag, logger_wrapper
from ..style import Color, Modifier, Style, parse_color
from .span import Span

logger = logger_wrapper("SpanParser")


class StyleStack:
    """Resolved styles of the currently open tags.

    Every entry is already patched onto the entry below it, so the top is
    the complete style of the text that follows.
    """

    def __init__(self) -> None:
        self.stack: list[Style] = []

    def __len__(self) -> int:
        return len(self.stack)

    def push(self, style: Style) -> Style:
        if self.stack:
            style = self.stack[-1].patch(style)
        self.stack.append(style)
        return style

    def pop(self) -> Style | None:
        # extra closers are absorbed
        if not self.stack:
            return None
        return self.stack.pop()

    def current(self) -> Style:
        if not self.stack:
            return Style.default()
        return self.stack[-1]


class SpanParser:
    """Parse console markup into styled spans.

    Tags look like `<fg=green;bg=#ccc;options=bold,~italic>` and are
    closed by `</>` (anything after the slash is ignored). Nested tags
    inherit the style of the outer tag. A tag preceded by a backslash is
    kept as text, with `\\<` and `\\>` turned back into `<` and `>`.

    Only unknown colors and modifiers are errors, any other malformed
    markup is kept as text or ignored.
    """

    # stands for a backslash, restored when a span is created
    SENTINEL = "\0"

    OPEN_TAG = r"[a-z](?:[^\\<>]++|\\.)*+"
    CLOSE_TAG = r"[a-z][^<>]*+"

    # group 1: open tag attributes
    TAG_PATTERN = re.compile(rf"<(?:({OPEN_TAG})|/(?:{CLOSE_TAG})?)>",
                             re.IGNORECASE)

    UNESCAPE_TABLE = {SENTINEL: "\\", "\\<": "<", "\\>": ">"}
    UNESCAPE_PATTERN = re.compile(r"\0|\\[<>]")

    ESCAPE_PATTERN = re.compile(r"[<>]")

    def __init__(self, config: MarkupConfig | None = None) -> None:
        self.config = config or MarkupConfig()

    @classmethod
    def escape(cls, text: str) -> str:
        """Escape text so that it parses back to itself.

        Backslashes are kept as they are, only one directly before `<` or
        `>` is consumed by unescaping.
        """
        return cls.ESCAPE_PATTERN.sub(lambda m: "\\" + m.group(0), text)

    @classmethod
    def unescape(cls, text: str) -> str:
        return cls.UNESCAPE_PATTERN.sub(
            lambda m: cls.UNESCAPE_TABLE[m.group(0)], text)

    def scan_tags(self, markup: str) -> list[re.Match[str]]:
        """Find all unescaped tags, in order.

        A match is only attempted at a `<` not preceded by a backslash. An
        attempt stops at the next such `<`, so the scan stays linear.
        """
        tags: list[re.Match[str]] = []
        pos = markup.find("<")
        while pos != -1:
            if pos > 0 and markup[pos - 1] == "\\":
                self._debug("trace", f"Escaped '<' at {pos}")
                pos = markup.find("<", pos + 1)
                continue
            match = self.TAG_PATTERN.match(markup, pos)
            if match is None:
                pos = markup.find("<", pos + 1)
                continue
            tags.append(match)
            pos = markup.find("<", match.end())
        return tags

    def parse(self, markup: str) -> list[Span]:
        spans: list[Span] = []
        offset = 0
        stack = StyleStack()
        for match in self.scan_tags(markup):
            pos = match.start()
            if pos > offset:
                spans.append(self._create_span(markup[offset:pos], stack))
            offset = match.end()

            attributes = match.group(1)
            if attributes is not None:
                stack.push(self.create_style_from_tag(attributes))
            elif stack.pop() is None:
                self._debug("debug", f"Unmatched closing tag at {pos}: "
                            f"{match[0]}")

        if offset < len(markup):
            spans.append(self._create_span(markup[offset:], stack))
        return spans

    def create_style_from_tag(self, tag: str) -> Style:
        """Build the own style of an opening tag, without inheritance."""
        style = Style.default()
        for attribute in tag.split(";"):
            key, _, rest = attribute.partition("=")
            value = rest.split("=", 1)[0]
            if not key or not value.strip():
                self._debug("debug", f"Skipped attribute: {attribute!r}")
                continue
            style = self._update_style(style, key, value)
        return style

    def _update_style(self, style: Style, key: str, value: str) -> Style:
        match key:
            case "fg":
                return style.with_fg(self._parse_color(value))
            case "bg":
                return style.with_bg(self._parse_color(value))
            case "options":
                for option in value.split(","):
                    if option.startswith("~"):
                        style = style.remove_modifier(
                            Modifier.from_name(option[1:]))
                    else:
                        style = style.add_modifier(Modifier.from_name(option))
                return style
            case _:
                self._debug("debug", f"Ignored attribute: {key}={value}")
                return style

    def _parse_color(self, value: str) -> Color:
        return parse_color(value, self.config.color_aliases)

    def _create_span(self, text: str, stack: StyleStack) -> Span:
        return Span.styled(self.unescape(text), stack.current())

    def _debug(self, level: str, message: str) -> None:
        if self.config.debug:
            getattr(logger, level)(escape_tag(message))


_default_parser = SpanParser()


def parse_spans(markup: str, config: MarkupConfig | None = None) -> list[Span]:
    parser = _default_parser if config is None else SpanParser(config)
    return parser.parse(markup)


def strip_tags(markup: str) -> str:
    """Plain text of the markup, tags removed and escapes resolved."""
    return "".join(span.content for span in parse_spans(markup))
