import dataclasses

import pytest

from aafgui.theme import LayoutMode, Theme, default_theme


def test_default_paddings_match_source():
    theme = default_theme()
    assert theme.window_padding == 10.0
    assert theme.button_padding == theme.window_padding
    assert theme.textbox_padding == theme.window_padding


def test_default_corner_radius():
    assert default_theme().corner_radius == 15.0


def test_default_colors_are_opaque_rgba():
    theme = default_theme()
    colors = [
        getattr(theme, f.name)
        for f in dataclasses.fields(Theme)
        if f.name.endswith("_color")
    ]
    assert len(colors) == 8
    for color in colors:
        assert len(color) == 4
        assert color[3] == 255
        assert all(0 <= channel <= 255 for channel in color)


def test_default_text_and_focus_colors():
    theme = default_theme()
    assert theme.text_color == (0, 0, 0, 255)
    assert theme.textbox_border_focus_color == (0, 0, 255, 255)
    assert theme.textbox_border_color == theme.button_pressed_color


def test_theme_is_immutable():
    theme = default_theme()
    with pytest.raises(dataclasses.FrozenInstanceError):
        theme.corner_radius = 3.0
    assert theme.corner_radius == 15.0


def test_replace_produces_custom_theme_without_touching_default():
    custom = dataclasses.replace(default_theme(), window_padding=4.0)
    assert custom.window_padding == 4.0
    assert default_theme().window_padding == 10.0
    assert default_theme() == default_theme()


def test_layout_modes_are_distinct():
    assert LayoutMode(LayoutMode.COLUMNAR.value) is LayoutMode.COLUMNAR
    assert LayoutMode(LayoutMode.ROW.value) is LayoutMode.ROW
    assert LayoutMode.COLUMNAR.value != LayoutMode.ROW.value
    assert {mode.name for mode in LayoutMode} == {"COLUMNAR", "ROW"}