import pytest

from termmarkup import (AnsiColor, Modifier, RgbColor, Style,
                        UnknownColorName, UnknownModifierName, parse_color)


def test_color_from_name():
    testcases = [
        ("green", AnsiColor.GREEN),
        ("Green", AnsiColor.GREEN),
        ("LIGHTBLUE", AnsiColor.LIGHTBLUE),
        ("darkgray", AnsiColor.DARKGRAY),
        ("reset", AnsiColor.RESET),
    ]
    for name, expected in testcases:
        assert AnsiColor.from_name(name) is expected
        assert parse_color(name) is expected


def test_color_from_unknown_name():
    for name in ["foo", "", "light blue", "#"]:
        with pytest.raises(UnknownColorName) as exc_info:
            parse_color(name)
        assert exc_info.value.name == name


def test_color_from_hex():
    testcases = [
        ("#ff0000", RgbColor(255, 0, 0)),
        ("#FF8000", RgbColor(255, 128, 0)),
        ("#ccc", RgbColor(204, 204, 204)),
        ("#0a1", RgbColor(0, 170, 17)),
    ]
    for hex, expected in testcases:
        assert RgbColor.from_hex(hex) == expected
        assert parse_color(hex) == expected
    assert RgbColor.of(1, 2, 3).to_hex() == "#010203"
    assert RgbColor.from_hex("#ccc").debug_name() == "RGB(204, 204, 204)"


def test_color_from_bad_hex():
    for hex in ["#", "#12", "#1234", "#gggggg", "ff0000", "#ff00001"]:
        with pytest.raises(UnknownColorName):
            RgbColor.from_hex(hex)


def test_rgb_channel_range():
    with pytest.raises(ValueError):
        RgbColor(256, 0, 0)


def test_modifier_from_name():
    assert Modifier.from_name("bold") is Modifier.BOLD
    assert Modifier.from_name("Italic") is Modifier.ITALIC
    assert Modifier.from_name("crossedout") is Modifier.CROSSEDOUT
    with pytest.raises(UnknownModifierName, match="blink"):
        Modifier.from_name("blink")
    # the empty flag set is not a modifier name
    for name in ["none", "NONE"]:
        with pytest.raises(UnknownModifierName):
            Modifier.from_name(name)
    assert (Modifier.BOLD | Modifier.DIM).names() == ["bold", "dim"]


def test_style_builders_do_not_mutate():
    base = Style.default()
    styled = base.with_fg(AnsiColor.RED).with_bg(AnsiColor.BLUE)
    assert base == Style()
    assert styled.fg is AnsiColor.RED
    assert styled.bg is AnsiColor.BLUE


def test_add_remove_modifier():
    style = Style.default().add_modifier(Modifier.BOLD)
    assert style.add_modifiers == Modifier.BOLD
    assert style.has_modifier(Modifier.BOLD)

    style = style.remove_modifier(Modifier.BOLD)
    assert style.add_modifiers == Modifier.NONE
    assert style.sub_modifiers == Modifier.BOLD
    assert not style.has_modifier(Modifier.BOLD)

    style = style.add_modifier(Modifier.BOLD)
    assert style.sub_modifiers == Modifier.NONE


def test_patch_colors():
    base = Style(fg=AnsiColor.GREEN, bg=AnsiColor.BLUE)
    assert base.patch(Style()) == base
    assert Style().patch(base) == base
    assert base.patch(Style(fg=AnsiColor.RED)) == Style(fg=AnsiColor.RED,
                                                        bg=AnsiColor.BLUE)


def test_patch_modifiers():
    bold_italic = Style(add_modifiers=Modifier.BOLD | Modifier.ITALIC)
    not_bold = Style(sub_modifiers=Modifier.BOLD)

    patched = bold_italic.patch(not_bold)
    assert patched.add_modifiers == Modifier.ITALIC
    assert patched.sub_modifiers == Modifier.BOLD

    # directional: the overlay decides
    patched = not_bold.patch(bold_italic)
    assert patched.add_modifiers == Modifier.BOLD | Modifier.ITALIC
    assert patched.sub_modifiers == Modifier.NONE

    again = patched.patch(not_bold).patch(Style(add_modifiers=Modifier.BOLD))
    assert again.has_modifier(Modifier.BOLD)


def test_style_str():
    style = Style(fg=AnsiColor.GREEN,
                  bg=RgbColor(0, 0, 0),
                  add_modifiers=Modifier.BOLD,
                  sub_modifiers=Modifier.ITALIC)
    assert str(style) == "Style(fg=Green, bg=RGB(0, 0, 0), +bold, -italic)"
