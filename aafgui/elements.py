"""GUI element kinds, per-frame events and input snapshots."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import ClassVar


class ElementType(enum.Enum):
    """The kind of a GUI element."""

    LABEL = enum.auto()
    BUTTON = enum.auto()
    TEXT_INPUT = enum.auto()


class ElementEvent(enum.IntFlag):
    """Events raised on an element during the current frame."""

    NONE = 0
    CLICK = 1 << 1
    HOVER = 1 << 2
    SUBMIT = 1 << 3


class Key(enum.Enum):
    """Editing keys the GUI reacts to."""

    BACKSPACE = enum.auto()
    ENTER = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()


@dataclass(frozen=True)
class InputState:
    """Input gathered for one frame.

    ``keys`` holds the editing keys pressed or auto-repeated this frame and
    ``chars`` the typed text, in order.
    """

    mouse_pos: tuple[float, float] = (0.0, 0.0)
    mouse_pressed: bool = False
    keys: frozenset[Key] = field(default_factory=frozenset)
    chars: str = ""


@dataclass(eq=False)
class Element:
    """A rectangle on screen that collects events each frame."""

    kind: ClassVar[ElementType]

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0
    event: ElementEvent = ElementEvent.NONE

    def contains(self, point: tuple[float, float]) -> bool:
        """Whether ``point`` lies inside the element; right and bottom edges excluded."""
        px, py = point
        return self.x <= px < self.x + self.w and self.y <= py < self.y + self.h


@dataclass(eq=False)
class Label(Element):
    """Static text."""

    kind: ClassVar[ElementType] = ElementType.LABEL

    text: str = ""


@dataclass(eq=False)
class Button(Element):
    """Clickable text with a rounded background."""

    kind: ClassVar[ElementType] = ElementType.BUTTON

    text: str = ""