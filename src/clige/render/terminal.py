"""Render a grid to terminal escape sequences and draw canvases."""

from __future__ import annotations

import logging

from clige.core.constants import RESET
from clige.core.grid import Grid, GridView
from clige.core.style import Style
from clige.elements.canvas import Canvas
from clige.terminal import Terminal, cursor_to

logger = logging.getLogger(__name__)


class TerminalRenderer:
    """
    Render a Grid (or GridView) to ANSI escape sequences for terminal display.

    Optimizes output by only emitting SGR codes when the style changes. The
    terminal is assumed to start in the default style.

    With ``origin`` set, every row is preceded by an absolute cursor move to
    the origin column instead of being separated by a newline.
    """

    def __init__(
        self,
        reset_at_end: bool = False,
        origin: tuple[int, int] | None = None,
    ):
        self.reset_at_end = reset_at_end
        self.origin = origin

    def render(self, grid: Grid | GridView) -> str:
        """Render grid to ANSI string."""
        lines: list[str] = []
        last = Style()

        for y, row in enumerate(grid.rows()):
            line_parts: list[str] = []
            if self.origin is not None:
                ox, oy = self.origin
                line_parts.append(cursor_to(ox, oy + y))

            for pixel in row:
                if pixel.style != last:
                    line_parts.append(pixel.style.format(last))
                    last = pixel.style
                line_parts.append(pixel.symbol)

            lines.append(''.join(line_parts))

        result = ('\n' if self.origin is None else '').join(lines)

        if self.reset_at_end:
            result += RESET

        return result


def draw(canvas: Canvas, terminal: Terminal | None = None) -> str:
    """
    Repaint ``canvas`` at its anchor.

    Clears the active region, composites the children, serializes the whole
    backing grid (border included) and writes it in one go. Returns what
    was written.
    """
    terminal = terminal or Terminal()

    canvas.reset()
    canvas.render()

    if canvas.x == 0:
        renderer = TerminalRenderer(reset_at_end=True)
        output = cursor_to(canvas.x, canvas.y) + renderer.render(canvas.grid)
    else:
        renderer = TerminalRenderer(reset_at_end=True, origin=(canvas.x, canvas.y))
        output = renderer.render(canvas.grid)

    terminal.write(output)
    terminal.flush()
    logger.debug("Drew %dx%d canvas, %d bytes", canvas.width, canvas.height, len(output))
    return output
