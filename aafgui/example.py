"""Demo window with a label, a button and a text box."""

from __future__ import annotations

import argparse
from typing import NamedTuple, Optional, Sequence

from aafgui.app import App
from aafgui.elements import Button, ElementEvent, Label
from aafgui.text_input import TextInput

TITLE = "Hello, AAF!"
CLICKED_TEXT = "Made you click!"


class Demo(NamedTuple):
    """The elements of the demo window."""

    label: Label
    button: Button
    text_input: TextInput


def build_demo(app: App, font_path: Optional[str] = None) -> Demo:
    """Set up the demo elements on ``app``."""
    app.set_window_title(TITLE)
    if font_path is not None:
        app.gui.set_font(font_path, 20)
    label = app.gui.label(TITLE, -1, -1)
    button = app.gui.button("Click Me!", -1, -1)
    text_input = app.gui.text_input("Type here... ÆØÅ", True, -1, -1, 200, 500)
    return Demo(label, button, text_input)


def _react(demo: Demo) -> None:
    if demo.button.event & ElementEvent.CLICK:
        demo.label.text = CLICKED_TEXT


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demo window until it is closed."""
    parser = argparse.ArgumentParser(description="Show the demo GUI window.")
    parser.add_argument("--font", default=None, help="TrueType font file to use")
    parser.add_argument(
        "--max-frames", type=int, default=None, help="stop after this many frames"
    )
    args = parser.parse_args(argv)

    with App() as app:
        demo = build_demo(app, args.font)
        frames = 0
        while not app.should_close:
            app.begin()
            _react(demo)
            app.end()
            frames += 1
            if args.max_frames is not None and frames >= args.max_frames:
                break
    return 0