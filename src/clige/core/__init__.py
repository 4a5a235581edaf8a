"""Core value types: colors, styles, pixels and the cell grid."""

from clige.core.color import Color, ColorMode
from clige.core.grid import Grid, GridView
from clige.core.pixel import DEFAULT_PIXEL, Pixel
from clige.core.style import Style

__all__ = ["Color", "ColorMode", "Grid", "GridView", "Pixel", "DEFAULT_PIXEL", "Style"]
