"""Element store, layout, input handling and drawing for one GUI."""

from __future__ import annotations

import os
from typing import Optional

import pygame

from aafgui.elements import Button, Element, ElementEvent, InputState, Label
from aafgui.text_input import TextInput
from aafgui.theme import LayoutMode, Theme, default_theme

_TEXT_SIZE = 20
_CURSOR_LENGTH = 20
_LINE_GAP = 2


class GuiContext:
    """Holds the elements of a GUI together with its font, theme and focus."""

    def __init__(
        self,
        theme: Optional[Theme] = None,
        layout_mode: LayoutMode = LayoutMode.COLUMNAR,
    ) -> None:
        pygame.font.init()
        self.elements: list[Element] = []
        self.font_size: float = 20.0
        self.focus: Optional[Element] = None
        self.theme = theme if theme is not None else default_theme()
        self.layout_mode = layout_mode
        self._font_path: Optional[str] = None
        self._fonts: dict[int, pygame.font.Font] = {}

    def set_font(self, path: str | os.PathLike[str], size: int) -> None:
        """Load the font at ``path`` and make ``size`` the default text size."""
        font_path = os.fspath(path)
        font = pygame.font.Font(font_path, int(size))
        self._font_path = font_path
        self._fonts = {int(size): font}
        self.font_size = float(size)

    def _font(self, size: float) -> pygame.font.Font:
        key = max(1, round(size))
        font = self._fonts.get(key)
        if font is None:
            font = pygame.font.Font(self._font_path, key)
            self._fonts[key] = font
        return font

    def measure(self, text: str, size: float) -> tuple[float, float]:
        """Return the width and height of ``text`` drawn at ``size``."""
        font = self._font(size)
        lines = text.split("\n")
        width = max(font.size(line)[0] for line in lines)
        return float(width), float(len(lines) * font.get_linesize())

    def _add(self, element: Element) -> Element:
        self.elements.append(element)
        self.calculate_layout()
        return element

    def label(self, text: str, x: float, y: float) -> Label:
        """Add a label and return it."""
        w, h = self.measure(text, self.font_size)
        label = Label(x=x, y=y, w=w, h=h, text=text)
        self._add(label)
        return label

    def button(self, text: str, x: float, y: float) -> Button:
        """Add a button and return it."""
        w, h = self.measure(text, _TEXT_SIZE)
        pad = self.theme.button_padding
        button = Button(x=x, y=y, w=w + pad * 2, h=h + pad * 2, text=text)
        self._add(button)
        return button

    def text_input(
        self, text: str, multiline: bool, x: float, y: float, w: float, h: float
    ) -> TextInput:
        """Add a text input of inner size ``w`` by ``h`` and return it."""
        pad = self.theme.textbox_padding
        field = TextInput(
            x=x, y=y, w=w + pad * 2, h=h + pad * 2, text=text, multiline=multiline
        )
        self._add(field)
        return field

    def calculate_layout(self) -> None:
        """Place every element after the one before it."""
        pad = self.theme.window_padding
        previous: Optional[Element] = None
        for element in self.elements:
            if previous is None:
                element.x, element.y = pad, pad
            elif self.layout_mode is LayoutMode.COLUMNAR:
                element.x = previous.x
                element.y = previous.y + previous.h + pad
            elif self.layout_mode is LayoutMode.ROW:
                element.x = previous.x + previous.w + pad
                element.y = previous.y
            else:
                element.x, element.y = pad, pad
            previous = element

    def update(self, state: InputState, frame_time: float) -> None:
        """Record mouse events on elements, move focus and feed keys to it."""
        for element in self.elements:
            if isinstance(element, Button):
                w, h = self.measure(element.text, self.font_size)
                pad = self.theme.button_padding
                element.w, element.h = w + pad * 2, h + pad * 2
                if element.contains(state.mouse_pos):
                    element.event |= ElementEvent.HOVER
                    if state.mouse_pressed:
                        element.event |= ElementEvent.CLICK
            elif isinstance(element, TextInput):
                w, h = self.measure(element.text, self.font_size)
                pad = self.theme.textbox_padding
                element.w, element.h = w + pad * 2, h + pad * 2
                if element.contains(state.mouse_pos):
                    element.event |= ElementEvent.HOVER
                    if state.mouse_pressed:
                        element.event |= ElementEvent.CLICK
                        self.focus = element
                elif state.mouse_pressed and self.focus is element:
                    self.focus = None

        if isinstance(self.focus, TextInput):
            self.focus.apply_input(state, frame_time)

    def reset_events(self) -> None:
        """Clear the events of every element."""
        for element in self.elements:
            element.event = ElementEvent.NONE

    def draw(self, surface: pygame.Surface) -> None:
        """Draw every element onto ``surface``."""
        for element in self.elements:
            if isinstance(element, Label):
                self._draw_label(surface, element)
            elif isinstance(element, Button):
                self._draw_button(surface, element)
            elif isinstance(element, TextInput):
                self._draw_text_input(surface, element)

    def _draw_text(
        self, surface: pygame.Surface, text: str, x: float, y: float
    ) -> None:
        font = self._font(_TEXT_SIZE)
        color = self.theme.text_color[:3]
        for line in text.split("\n"):
            if line:
                surface.blit(font.render(line, True, color), (round(x), round(y)))
            y += font.get_linesize()

    def _rect(self, element: Element) -> pygame.Rect:
        return pygame.Rect(
            round(element.x), round(element.y), round(element.w), round(element.h)
        )

    def _radius(self) -> int:
        return max(0, int(self.theme.corner_radius / 2))

    def _draw_label(self, surface: pygame.Surface, label: Label) -> None:
        self._draw_text(surface, label.text, label.x, label.y)

    def _draw_button(self, surface: pygame.Surface, button: Button) -> None:
        theme = self.theme
        rect = self._rect(button)
        radius = self._radius()
        if button.event & ElementEvent.HOVER:
            if button.event & ElementEvent.CLICK:
                fill = theme.button_pressed_color
            else:
                fill = theme.button_hover_color
        else:
            fill = theme.button_color
        pygame.draw.rect(surface, fill, rect, border_radius=radius)
        pygame.draw.rect(
            surface, theme.button_pressed_color, rect, width=2, border_radius=radius
        )
        pad = theme.button_padding
        self._draw_text(surface, button.text, button.x + pad, button.y + pad)

    def _draw_text_input(self, surface: pygame.Surface, field: TextInput) -> None:
        theme = self.theme
        rect = self._rect(field)
        radius = self._radius()
        focused = field is self.focus
        pygame.draw.rect(
            surface, theme.textbox_background_color, rect, border_radius=radius
        )
        border = (
            theme.textbox_border_focus_color if focused else theme.textbox_border_color
        )
        pygame.draw.rect(surface, border, rect, width=2, border_radius=radius)
        pad = theme.textbox_padding
        self._draw_text(surface, field.text, field.x + pad, field.y + pad)

        if focused and field.cursor_visible:
            line_index, line = field.cursor_line()
            cx = field.x + pad + self.measure(line, self.font_size)[0]
            cy = field.y + pad + line_index * (self.font_size + _LINE_GAP)
            pygame.draw.line(
                surface,
                theme.text_color[:3],
                (cx, cy),
                (cx, cy + _CURSOR_LENGTH),
                2,
            )