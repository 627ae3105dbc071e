"""A small pygame GUI toolkit with labels, buttons, text inputs and a frame loop."""

__version__ = "0.1.0"
__all__ = ["app", "elements", "example", "gui", "text_input", "theme"]