"""Text - a wrapped run of pixels anchored inside a canvas."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from clige.core.errors import DegenerateWrapWidthError
from clige.core.pixel import Pixel
from clige.core.style import Style


@dataclass(frozen=True)
class TextConfig:
    """Every option a Text accepts, given once at construction."""
    content: Sequence[Pixel] = ()
    wrap_width: int = 80
    position: tuple[int, int] = (0, 0)


def wrap(pixels: Sequence[Pixel], width: int) -> tuple[int, list[list[Pixel]]]:
    """
    Chunk ``pixels`` into rows of ``width``.

    The width is clamped to the content length, so short content forms a
    single row exactly as long as itself. Returns (effective_width, rows).
    """
    if width < 1:
        raise DegenerateWrapWidthError(width)
    effective = min(width, len(pixels))
    if effective == 0:
        return 0, []
    rows = [list(pixels[i:i + effective]) for i in range(0, len(pixels), effective)]
    return effective, rows


@dataclass
class Text:
    """
    A line-wrapping run of pixels.

    ``pixels`` is the logical content; ``rows`` is the wrapped presentation
    derived from it and is rebuilt whenever content or width changes.
    ``x``/``y`` anchor the text in its parent's active region.
    """
    pixels: list[Pixel] = field(default_factory=list)
    width: int = 80
    x: int = 0
    y: int = 0
    _rows: list[list[Pixel]] = field(default_factory=list, init=False, repr=False, compare=False)
    _effective_width: int = field(default=0, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.pixels = list(self.pixels)
        self._redraw()

    @classmethod
    def from_config(cls, config: TextConfig) -> Text:
        x, y = config.position
        return cls(list(config.content), config.wrap_width, x, y)

    @classmethod
    def from_str(
        cls,
        text: str,
        width: int | None = None,
        style: Style | None = None,
        position: tuple[int, int] = (0, 0),
    ) -> Text:
        """Build a Text from a plain string; width defaults to one row."""
        pixels = Pixel.colored(style or Style(), text)
        x, y = position
        return cls(pixels, width if width is not None else max(len(pixels), 1), x, y)

    def _redraw(self) -> None:
        self._effective_width, self._rows = wrap(self.pixels, self.width)

    @property
    def rows(self) -> list[list[Pixel]]:
        return self._rows

    @property
    def height(self) -> int:
        return len(self._rows)

    @property
    def effective_width(self) -> int:
        return self._effective_width

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y

    def update(self, pixels: Sequence[Pixel]) -> None:
        """Replace the content and re-wrap at the current width."""
        self.pixels = list(pixels)
        self._redraw()

    def resize(self, width: int) -> int:
        """Re-wrap at ``width``; returns the width actually used."""
        if width < 1:
            raise DegenerateWrapWidthError(width)
        self.width = width
        self._redraw()
        return self._effective_width

    def move_to(self, x: int, y: int) -> None:
        """Move the anchor; the wrapped rows are untouched."""
        self.x = x
        self.y = y

    def __str__(self) -> str:
        return "".join(pixel.symbol for pixel in self.pixels)
