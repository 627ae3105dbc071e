"""Editable text field."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from aafgui.elements import Element, ElementType, InputState, Key


@dataclass(eq=False)
class TextInput(Element):
    """A text box with a blinking cursor.

    Edits made at the cursor drop whatever followed the cursor, so after
    any edit the cursor sits at the end of the text.
    """

    kind: ClassVar[ElementType] = ElementType.TEXT_INPUT

    text: str = ""
    multiline: bool = False
    cursor: int = field(init=False)
    cursor_anim_step: float = field(init=False, default=0.0)

    def __post_init__(self) -> None:
        self.cursor = len(self.text)

    @property
    def cursor_visible(self) -> bool:
        """Whether the cursor is shown in the current blink phase."""
        return self.cursor_anim_step > 0.5

    def backspace(self) -> None:
        """Remove the character before the cursor and everything after it."""
        if self.cursor == 0:
            return
        self.cursor -= 1
        self.text = self.text[: self.cursor]

    def enter(self) -> None:
        """Break the line at the cursor; single-line inputs ignore this."""
        if not self.multiline:
            return
        self.text = self.text[: self.cursor] + "\n"
        self.cursor += 1

    def move_left(self) -> None:
        """Move the cursor one character left."""
        if self.cursor > 0:
            self.cursor -= 1

    def move_right(self) -> None:
        """Move the cursor one character right."""
        if self.cursor < len(self.text):
            self.cursor += 1

    def insert(self, text: str) -> None:
        """Type ``text`` at the cursor."""
        if not text:
            return
        self.text = self.text[: self.cursor] + text
        self.cursor += len(text)

    def cursor_line(self) -> tuple[int, str]:
        """Return the cursor's line index and the text of that line."""
        before = self.text[: self.cursor]
        line_index = before.count("\n")
        line_start = before.rfind("\n") + 1
        line_end = self.text.find("\n", line_start)
        if line_end == -1:
            line_end = len(self.text)
        return line_index, self.text[line_start:line_end]

    def tick(self, frame_time: float) -> None:
        """Advance the cursor blink by ``frame_time`` seconds."""
        self.cursor_anim_step += frame_time
        if self.cursor_anim_step >= 1.0:
            self.cursor_anim_step = 0.0

    def apply_input(self, state: InputState, frame_time: float) -> None:
        """Apply one frame of keyboard input; one editing key wins over typed text."""
        self.tick(frame_time)
        if Key.BACKSPACE in state.keys:
            self.backspace()
        elif Key.ENTER in state.keys:
            self.enter()
        elif Key.LEFT in state.keys:
            self.move_left()
        elif Key.RIGHT in state.keys:
            self.move_right()
        else:
            self.insert(state.chars)