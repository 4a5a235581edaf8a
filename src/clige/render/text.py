"""Serialize a grid as plain text, dropping all styling."""

from clige.core.grid import Grid, GridView


class TextRenderer:
    """Plain-text snapshots of a grid, one line per row."""

    def __init__(self, preserve_whitespace: bool = False):
        self.preserve_whitespace = preserve_whitespace

    def render(self, grid: Grid | GridView) -> str:
        lines = ["".join(pixel.symbol for pixel in row) for row in grid.rows()]
        if self.preserve_whitespace:
            return "\n".join(lines)
        # Trailing blanks on each line and blank lines at the bottom are noise
        return "\n".join(line.rstrip() for line in lines).rstrip("\n")
