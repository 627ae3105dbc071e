# aafgui

A small GUI toolkit built on pygame. You create an `App`, add labels,
buttons and text inputs to its GUI context, and run a frame loop with
`begin()` and `end()`. Elements are laid out automatically, one below the
other by default, or side by side in row mode.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Quick start

```python
from aafgui.app import App
from aafgui.elements import ElementEvent

with App() as app:
    app.set_window_title("Hello!")

    gui = app.gui
    label = gui.label("Hello!", -1, -1)
    button = gui.button("Click Me!", -1, -1)
    text_box = gui.text_input("Type here...", True, -1, -1, 200, 500)

    while not app.should_close:
        app.begin()
        if button.event & ElementEvent.CLICK:
            label.text = "Made you click!"
        app.end()
```

`App(width=1280, height=720, title="", fps=60)` opens a resizable window.
It can be used as a context manager; leaving the block calls `close()`.
`set_window_title()` raises `TypeError` for anything that is not a string.

## The frame loop

`App.begin()` reads pygame's events, recalculates the layout when the
window was resized, and updates the GUI at a fixed rate of one update per
`1 / fps` seconds of elapsed time. An update measures buttons and text
inputs again, sets `ElementEvent.HOVER` on elements under the mouse and
`ElementEvent.CLICK` on those clicked with the left button, and gives
keyboard focus to a clicked text input (a click elsewhere takes it away).
Keyboard input is then passed to the focused text input.

`App.end()` draws every element, shows the frame, clears the event flags,
and sets `should_close` once the window has been asked to close. Check
`element.event` between the two calls.

## Elements

Modules:

- `aafgui.elements` – `Element` (position `x`, `y`, size `w`, `h`, and
  `event`), `Label`, `Button`, `ElementType`, `ElementEvent`, `Key` and
  `InputState`, a snapshot of one frame's mouse position, left click,
  editing keys and typed text.
- `aafgui.text_input` – `TextInput`, an editable field with a cursor.
- `aafgui.gui` – `GuiContext`, which holds the elements, theme, font and
  focus.
- `aafgui.theme` – `Theme`, `default_theme()` and `LayoutMode`.
- `aafgui.app` – `App`, the window and frame loop.
- `aafgui.example` – the demo below.

`GuiContext` methods:

- `label(text, x, y)` – add static text.
- `button(text, x, y)` – add a rounded button.
- `text_input(text, multiline, x, y, w, h)` – add a text field whose inner
  size is `w` by `h` plus the theme's padding.
- `set_font(path, size)` – load a font file for all text and make `size`
  the default text size. Without it, pygame's default font is used.
- `measure(text, size)` – width and height of `text`, line by line.
- `calculate_layout()` – place the first element at the window padding
  and every following one below (`LayoutMode.COLUMNAR`) or beside
  (`LayoutMode.ROW`) the one before it. Adding an element does this too, so
  the `x` and `y` given when adding are overwritten.
- `update(state, frame_time)`, `reset_events()` and `draw(surface)` – the
  steps `App` runs each frame; they can be driven directly with an
  `InputState` of your own.

`TextInput` reacts to one editing key per update: Backspace, Enter, Left
or Right; if none was pressed, the typed text is inserted. Enter adds a
newline only when `multiline` is true. Every edit keeps the text up to the
cursor and drops what followed it, so after an edit the cursor is at the
end of the text. The same operations are available as `backspace()`,
`enter()`, `move_left()`, `move_right()` and `insert(text)`;
`cursor_line()` returns the cursor's line number and that line's text, and
the cursor blinks once a second.

## Demo

A demo window with a label, a button and a text input is included. Clicking
the button changes the label's text.

```
aafgui-demo
aafgui-demo --font path/to/font.ttf --max-frames 600
```

`--font` loads a font file at size 20; `--max-frames` stops after that many
frames. `build_demo(app, font_path)` sets up the same elements on an `App`
of your own.

## Limitations

`ElementEvent.SUBMIT` exists but is never set, and text inputs have no
selection, clipboard, scrolling, Up/Down or Delete keys.