"""
clige: retained-mode character grid rendering for terminals

Keep a grid of styled cells, compose text runs and nested canvases over it,
and repaint it with the fewest styling escape codes.

Quick Start:
    >>> import clige
    >>> size = clige.TerminalSize(rows=24, cols=80)
    >>> canvas = clige.Canvas.create(clige.CanvasConfig(20, 5, border=True), size)
    >>> canvas.append(clige.Text.from_str("Hello, world", width=18))
    >>> clige.draw(canvas)

Features:
    - Styled cells with 16-color, 256-color and truecolor foregrounds/backgrounds
    - Canvases with box-drawing borders that can be toggled and restyled
    - Wrapping text views and nested canvases composited in append order
    - Output that only re-emits SGR codes when the style changes
    - Image import as half-block truecolor cells
"""

__version__ = "0.1.0"

# Core types
from clige.core.color import Color, ColorMode
from clige.core.errors import (
    ChildNotFoundError,
    CligeError,
    DegenerateWrapWidthError,
    DimensionError,
    OutOfBoundsError,
    TerminalSizeError,
)
from clige.core.grid import Grid, GridView
from clige.core.pixel import Pixel
from clige.core.style import Style

# Views
from clige.elements import Canvas, CanvasConfig, Text, TextConfig, View

# Output
from clige.render.terminal import TerminalRenderer, draw
from clige.terminal import Terminal, TerminalSize

__all__ = [
    # Version
    "__version__",
    # Core types
    "Color",
    "ColorMode",
    "Grid",
    "GridView",
    "Pixel",
    "Style",
    # Errors
    "CligeError",
    "ChildNotFoundError",
    "DegenerateWrapWidthError",
    "DimensionError",
    "OutOfBoundsError",
    "TerminalSizeError",
    # Views
    "Canvas",
    "CanvasConfig",
    "Text",
    "TextConfig",
    "View",
    # Output
    "TerminalRenderer",
    "Terminal",
    "TerminalSize",
    "draw",
]
