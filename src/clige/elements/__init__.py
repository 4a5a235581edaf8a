"""View elements composited onto a canvas."""

from typing import Union

from clige.elements.canvas import Canvas, CanvasConfig
from clige.elements.text import Text, TextConfig

View = Union[Text, Canvas]


def as_text(view: View) -> Text:
    """Return ``view`` if it is a Text, else raise TypeError."""
    if not isinstance(view, Text):
        raise TypeError(f"View is not a text object: {type(view).__name__}")
    return view


def as_canvas(view: View) -> Canvas:
    """Return ``view`` if it is a Canvas, else raise TypeError."""
    if not isinstance(view, Canvas):
        raise TypeError(f"View is not a canvas object: {type(view).__name__}")
    return view


__all__ = ["Canvas", "CanvasConfig", "Text", "TextConfig", "View", "as_text", "as_canvas"]
