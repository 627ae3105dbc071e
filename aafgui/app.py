"""Window and frame loop around a GUI context."""

from __future__ import annotations

import logging
import os
from typing import Optional

import pygame

from aafgui.elements import InputState, Key
from aafgui.gui import GuiContext

logger = logging.getLogger(__name__)

BACKGROUND = (245, 245, 245)

_KEYS = {
    pygame.K_BACKSPACE: Key.BACKSPACE,
    pygame.K_RETURN: Key.ENTER,
    pygame.K_KP_ENTER: Key.ENTER,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
}


class App:
    """A resizable window that updates and draws a GUI once per frame."""

    def __init__(
        self, width: int = 1280, height: int = 720, title: str = "", fps: int = 60
    ) -> None:
        os.environ.setdefault("SDL_VIDEO_WINDOW_POS", "100,100")
        pygame.display.init()
        pygame.font.init()
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(title)
        pygame.key.set_repeat(400, 30)
        self.clock = pygame.time.Clock()
        self.fps = fps
        self.accumulator = 0.0
        self.update_rate = 1.0 / fps
        self.should_close = False
        self.gui = GuiContext()
        self._frame_time = 0.0
        self._quit_requested = False
        self._mouse_pos: tuple[float, float] = tuple(
            float(v) for v in pygame.mouse.get_pos()
        )
        logger.info("AAF context initialized successfully.")

    def __enter__(self) -> "App":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def set_window_title(self, title: str) -> None:
        """Set the window caption."""
        if not isinstance(title, str):
            raise TypeError("window title must be a string")
        pygame.display.set_caption(title)

    def _gather_input(self) -> tuple[InputState, bool]:
        pressed = False
        resized = False
        keys: set[Key] = set()
        chars: list[str] = []
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit_requested = True
            elif event.type in (pygame.VIDEORESIZE, pygame.WINDOWRESIZED):
                resized = True
            elif event.type == pygame.MOUSEMOTION:
                self._mouse_pos = tuple(float(v) for v in event.pos)
            elif event.type == pygame.MOUSEBUTTONDOWN:
                self._mouse_pos = tuple(float(v) for v in event.pos)
                if event.button == 1:
                    pressed = True
            elif event.type == pygame.KEYDOWN:
                key = _KEYS.get(event.key)
                if key is not None:
                    keys.add(key)
            elif event.type == pygame.TEXTINPUT:
                chars.append(event.text)
        state = InputState(
            mouse_pos=self._mouse_pos,
            mouse_pressed=pressed,
            keys=frozenset(keys),
            chars="".join(chars),
        )
        return state, resized

    def begin(self) -> None:
        """Start a frame: read input, update the GUI at a fixed rate, clear the screen."""
        state, resized = self._gather_input()
        if resized:
            self.gui.calculate_layout()
        self.accumulator += self._frame_time
        if self.accumulator >= self.update_rate:
            self.accumulator -= self.update_rate
            self.gui.update(state, self._frame_time)
        self.screen = pygame.display.get_surface()
        self.screen.fill(BACKGROUND)

    def end(self) -> None:
        """Finish a frame: draw the GUI, show it and clear this frame's events."""
        self.gui.draw(self.screen)
        pygame.display.flip()
        self.gui.reset_events()
        self._frame_time = self.clock.tick(self.fps) / 1000.0
        if self._quit_requested:
            self.should_close = True

    def close(self) -> None:
        """Close the window."""
        pygame.display.quit()