"""Canvas - a bordered region of the terminal holding child views."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Iterator

from clige.core.constants import BOX
from clige.core.errors import ChildNotFoundError, DimensionError
from clige.core.grid import Grid, GridView
from clige.core.pixel import DEFAULT_PIXEL, Pixel
from clige.core.style import Style
from clige.elements.text import Text
from clige.terminal import Terminal, TerminalSize

if TYPE_CHECKING:
    from clige.elements import View

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CanvasConfig:
    """Every option a Canvas accepts, given once at construction."""
    width: int
    height: int
    position: tuple[int, int] = (0, 0)
    border: bool = False
    border_style: Style = field(default_factory=Style)


class Canvas:
    """
    A fixed-size backing grid with an optional border and child views.

    The grid holds every cell, border included. ``view`` is the active
    region: the same cells minus the border ring when a border is shown.
    Children are composited into the active region on ``render`` in the
    order they were appended, later children painting over earlier ones.

    ``x``/``y`` are the screen anchor for a top-level canvas, or the offset
    within the parent's active region for a nested one.

    The canvas caches its active view over ``grid``, so the grid must not be
    resized behind it.
    """

    def __init__(self, config: CanvasConfig, terminal: TerminalSize) -> None:
        if config.width < 0 or config.height < 0:
            raise DimensionError(
                f"Canvas dimensions must be non-negative, got {config.width}x{config.height}"
            )
        if config.width > terminal.cols:
            raise DimensionError(
                f"Width {config.width} exceeds the terminal width {terminal.cols}"
            )
        if config.height > terminal.rows:
            raise DimensionError(
                f"Height {config.height} exceeds the terminal height {terminal.rows}"
            )
        if config.border:
            self._check_border_fits(config.width, config.height)

        self.width = config.width
        self.height = config.height
        self.x, self.y = config.position
        self.border = config.border
        self.border_style = config.border_style
        self.grid = Grid(self.width, self.height)
        self.children: list[View] = []
        self._active = self._active_view()
        self._paint_border()
        logger.debug(
            "Created %dx%d canvas at (%d, %d), border=%s",
            self.width, self.height, self.x, self.y, self.border,
        )

    @classmethod
    def create(cls, config: CanvasConfig, terminal: TerminalSize) -> Canvas:
        return cls(config, terminal)

    @classmethod
    def fullscreen(cls, border: bool = False, border_style: Style | None = None) -> Canvas:
        """A canvas the size of the current terminal."""
        size = Terminal.size()
        config = CanvasConfig(
            width=size.cols,
            height=size.rows,
            border=border,
            border_style=border_style or Style(),
        )
        return cls(config, size)

    @staticmethod
    def _check_border_fits(width: int, height: int) -> None:
        if width < 2 or height < 2:
            raise DimensionError(
                f"A bordered canvas needs at least 2x2 cells, got {width}x{height}"
            )

    def __repr__(self) -> str:
        return (
            f"Canvas(width={self.width}, height={self.height}, x={self.x}, "
            f"y={self.y}, border={self.border}, children={len(self.children)})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Canvas):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self.x == other.x
            and self.y == other.y
            and self.border == other.border
            and self.border_style == other.border_style
            and self.grid == other.grid
            and self.children == other.children
        )

    __hash__ = None  # type: ignore[assignment]

    # Active region

    def _active_view(self) -> GridView:
        if self.border:
            return self.grid.view(1, 1, self.width - 2, self.height - 2)
        return self.grid.view(0, 0, self.width, self.height)

    @property
    def view(self) -> GridView:
        """
        The writable portion of the canvas.

        Writes through the view land in the backing grid. The view only
        differs in size from the grid when a border is shown.
        """
        return self._active

    @property
    def active_width(self) -> int:
        return self._active.width

    @property
    def active_height(self) -> int:
        return self._active.height

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y

    def reset(self) -> None:
        """Fill the active region with blank cells; the border is kept."""
        self._active.fill(DEFAULT_PIXEL)

    # Border

    def _paint_border(self) -> None:
        w, h = self.width, self.height
        if w == 0 or h == 0:
            return

        if not self.border:
            for col in range(w):
                self.grid.set(col, 0, DEFAULT_PIXEL)
                self.grid.set(col, h - 1, DEFAULT_PIXEL)
            for row in range(1, h - 1):
                self.grid.set(0, row, DEFAULT_PIXEL)
                self.grid.set(w - 1, row, DEFAULT_PIXEL)
            return

        style = self.border_style
        horizontal = Pixel(BOX["horizontal"], style)
        vertical = Pixel(BOX["vertical"], style)
        for col in range(1, w - 1):
            self.grid.set(col, 0, horizontal)
            self.grid.set(col, h - 1, horizontal)
        for row in range(1, h - 1):
            self.grid.set(0, row, vertical)
            self.grid.set(w - 1, row, vertical)
        self.grid.set(0, 0, Pixel(BOX["top_left"], style))
        self.grid.set(w - 1, 0, Pixel(BOX["top_right"], style))
        self.grid.set(0, h - 1, Pixel(BOX["bottom_left"], style))
        self.grid.set(w - 1, h - 1, Pixel(BOX["bottom_right"], style))

    def toggle_border(self) -> None:
        """
        Show or hide the border.

        Hiding it blanks the edge cells and grows the active region by one
        cell on each side; showing it paints the edge and shrinks it again.
        Interior cells are not touched.
        """
        if not self.border:
            self._check_border_fits(self.width, self.height)
        self.border = not self.border
        self._paint_border()
        self._active = self._active_view()
        logger.debug("Border %s", "shown" if self.border else "hidden")

    def update_border_style(self, style: Style) -> None:
        """Repaint the border in ``style``; geometry is unchanged."""
        self.border_style = style
        if self.border:
            self._paint_border()

    # Children

    def append(self, child: View) -> None:
        if child is self or (isinstance(child, Canvas) and child._contains(self)):
            raise ValueError("A canvas cannot be nested inside itself")
        self.children.append(child)

    def _contains(self, target: Canvas) -> bool:
        """Whether ``target`` is a nested canvas anywhere below this one (by identity)."""
        pending = [c for c in self.children if isinstance(c, Canvas)]
        while pending:
            canvas = pending.pop()
            if canvas is target:
                return True
            pending.extend(c for c in canvas.children if isinstance(c, Canvas))
        return False

    def extend(self, children: Iterable[View]) -> None:
        for child in children:
            self.append(child)

    def index(self, child: View) -> int:
        for i, candidate in enumerate(self.children):
            if candidate is child or candidate == child:
                return i
        raise ChildNotFoundError(f"{child!r} is not a child of this canvas")

    def remove(self, child: View) -> View:
        """Remove the first child equal to ``child`` and return it."""
        return self.children.pop(self.index(child))

    def get(self, index: int) -> View:
        try:
            return self.children[index]
        except IndexError:
            raise ChildNotFoundError(
                f"No child at index {index}; canvas has {len(self.children)}"
            ) from None

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[View]:
        return iter(self.children)

    # Compositing

    def render(self) -> None:
        """
        Composite every child into the active region.

        Cells that would land outside the active region are clipped.
        Nested canvases are rendered first and copied in whole, border
        included.
        """
        for child in self.children:
            if isinstance(child, Text):
                self._blit(child.rows, child.x, child.y)
            elif isinstance(child, Canvas):
                child.reset()
                child.render()
                self._blit(child.grid.rows(), child.x, child.y)
            else:
                raise TypeError(f"Unsupported child view: {type(child).__name__}")

    def _blit(self, rows: Iterable[list[Pixel]], x: int, y: int) -> None:
        active = self._active
        clipped = 0
        for dy, row in enumerate(rows):
            for dx, pixel in enumerate(row):
                if active.contains(x + dx, y + dy):
                    active.set(x + dx, y + dy, pixel)
                else:
                    clipped += 1
        if clipped:
            logger.debug("Clipped %d cells of child at (%d, %d)", clipped, x, y)

    # Output

    def to_ansi(self) -> str:
        """Serialize the backing grid to an ANSI string."""
        from clige.render.terminal import TerminalRenderer
        return TerminalRenderer().render(self.grid)

    def to_text(self) -> str:
        """Serialize the backing grid without styling."""
        from clige.render.text import TextRenderer
        return TextRenderer(preserve_whitespace=True).render(self.grid)
