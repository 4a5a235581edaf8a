"""Grid - fixed-size 2D arena of pixels, and windows onto it."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator

from clige.core.errors import OutOfBoundsError
from clige.core.pixel import DEFAULT_PIXEL, Pixel


class _Surface(ABC):
    """
    Bounds-checked cell access shared by Grid and GridView.

    Subclasses map an (x, y) inside their own extent to an index into the
    owning grid's flat pixel list.
    """

    width: int
    height: int

    @abstractmethod
    def _store(self) -> list[Pixel]:
        """The flat pixel list of the owning grid."""

    @abstractmethod
    def _index(self, x: int, y: int) -> int:
        """Flat index of (x, y) in the owning grid."""

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Pixel | None:
        """Get the pixel at (x, y), or None when out of bounds."""
        if not self.contains(x, y):
            return None
        return self._store()[self._index(x, y)]

    def set(self, x: int, y: int, pixel: Pixel) -> None:
        """Replace the pixel at (x, y)."""
        if not self.contains(x, y):
            raise OutOfBoundsError(x, y, self.width, self.height)
        self._store()[self._index(x, y)] = pixel

    def __getitem__(self, pos: tuple[int, int]) -> Pixel:
        """Get pixel using indexing: grid[x, y]."""
        x, y = pos
        pixel = self.get(x, y)
        if pixel is None:
            raise OutOfBoundsError(x, y, self.width, self.height)
        return pixel

    def __setitem__(self, pos: tuple[int, int], pixel: Pixel) -> None:
        """Set pixel using indexing: grid[x, y] = pixel."""
        x, y = pos
        self.set(x, y, pixel)

    def fill(self, pixel: Pixel = DEFAULT_PIXEL) -> None:
        """Set every cell to ``pixel``."""
        store = self._store()
        for y in range(self.height):
            start = self._index(0, y)
            store[start:start + self.width] = [pixel] * self.width

    def row(self, y: int) -> list[Pixel]:
        if not 0 <= y < self.height:
            raise OutOfBoundsError(0, y, self.width, self.height)
        start = self._index(0, y)
        return self._store()[start:start + self.width]

    def rows(self) -> Iterator[list[Pixel]]:
        """Iterate over rows (each a fresh list)."""
        for y in range(self.height):
            yield self.row(y)

    def cells(self) -> Iterator[tuple[int, int, Pixel]]:
        """Iterate over all cells as (x, y, pixel) tuples."""
        for y, row in enumerate(self.rows()):
            for x, pixel in enumerate(row):
                yield x, y, pixel


class Grid(_Surface):
    """
    A fixed-size grid of pixels stored row-major in one flat list.

    The grid is the only owner of cell storage. Sub-regions are exposed as
    GridView windows which address the same list by offset, so a write
    through either is visible through both.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {width}x{height}")
        self.width = width
        self.height = height
        self._pixels: list[Pixel] = [DEFAULT_PIXEL] * (width * height)

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self._pixels == other._pixels
        )

    def _store(self) -> list[Pixel]:
        return self._pixels

    def _index(self, x: int, y: int) -> int:
        return y * self.width + x

    def resize(self, width: int, height: int) -> None:
        """
        Resize the grid.

        This **discards all content**: every cell is reset to the default
        pixel. Existing views are no longer valid afterwards.
        """
        if width < 0 or height < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = [DEFAULT_PIXEL] * (width * height)

    def view(self, left: int, top: int, width: int, height: int) -> GridView:
        """A window of ``width`` x ``height`` cells starting at (left, top)."""
        return GridView(self, left, top, width, height)


class GridView(_Surface):
    """
    A rectangular window onto a Grid.

    Holds only offsets into the grid's storage; it never copies cells.
    Coordinates passed to a view are relative to its top-left corner.
    """

    def __init__(self, grid: Grid, left: int, top: int, width: int, height: int) -> None:
        if left < 0 or top < 0 or width < 0 or height < 0:
            raise ValueError("GridView offsets and dimensions must be non-negative")
        if left + width > grid.width or top + height > grid.height:
            raise ValueError(
                f"GridView {width}x{height}+{left}+{top} does not fit "
                f"grid {grid.width}x{grid.height}"
            )
        self.grid = grid
        self.left = left
        self.top = top
        self.width = width
        self.height = height

    def __repr__(self) -> str:
        return (
            f"GridView(left={self.left}, top={self.top}, "
            f"width={self.width}, height={self.height})"
        )

    def _store(self) -> list[Pixel]:
        return self.grid._pixels

    def _index(self, x: int, y: int) -> int:
        return (self.top + y) * self.grid.width + self.left + x
