"""Renderers for outputting grids and canvases."""

from clige.render.terminal import TerminalRenderer, draw
from clige.render.text import TextRenderer

__all__ = ["TerminalRenderer", "TextRenderer", "draw"]
