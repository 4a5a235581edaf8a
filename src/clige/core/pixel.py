from __future__ import annotations

from dataclasses import dataclass, field

from clige.core.constants import FILL
from clige.core.style import Style


@dataclass(frozen=True, slots=True)
class Pixel:
    """A single glyph cell: one printable character and its style."""
    symbol: str = FILL
    style: Style = field(default_factory=Style)

    def __post_init__(self) -> None:
        # A cell occupies one column; newlines or control codes would break the grid shape
        if len(self.symbol) != 1 or not self.symbol.isprintable():
            raise ValueError(f"Pixel symbol must be one printable character, got {self.symbol!r}")

    @classmethod
    def from_char(cls, char: str) -> Pixel:
        return cls(char)

    @classmethod
    def colored(cls, style: Style, text: str) -> list[Pixel]:
        """One pixel per character of ``text``, all sharing ``style``."""
        return [cls(char, style) for char in text]

    def format(self, prev: Style) -> str:
        """Escape fragment (if the style changed) followed by the symbol."""
        return f"{self.style.format(prev)}{self.symbol}"

    def is_default(self) -> bool:
        return self.symbol == FILL and self.style.is_default()


DEFAULT_PIXEL = Pixel()
