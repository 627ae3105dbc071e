"""Colours, paddings and layout modes used by the GUI."""

from __future__ import annotations

import enum
from dataclasses import dataclass

Color = tuple[int, int, int, int]


class LayoutMode(enum.Enum):
    """How automatically placed elements are arranged."""

    COLUMNAR = enum.auto()
    ROW = enum.auto()


@dataclass(frozen=True)
class Theme:
    """Visual settings shared by every element of a GUI context."""

    background_color: Color
    text_color: Color
    button_color: Color
    button_hover_color: Color
    button_pressed_color: Color
    textbox_background_color: Color
    textbox_border_color: Color
    textbox_border_focus_color: Color
    corner_radius: float
    window_padding: float
    button_padding: float
    textbox_padding: float


def default_theme() -> Theme:
    """Return the stock light theme."""
    return Theme(
        background_color=(255, 255, 255, 255),
        text_color=(0, 0, 0, 255),
        button_color=(255, 255, 255, 255),
        button_hover_color=(200, 200, 200, 255),
        button_pressed_color=(150, 150, 150, 255),
        textbox_background_color=(255, 255, 255, 255),
        textbox_border_color=(150, 150, 150, 255),
        textbox_border_focus_color=(0, 0, 255, 255),
        corner_radius=15.0,
        window_padding=10.0,
        button_padding=10.0,
        textbox_padding=10.0,
    )