"""Color representation for terminal output."""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from clige.core.constants import SYSTEM_COLORS

# SGR base codes per channel: (normal 0-7, bright 8-15, extended prefix)
_FG_BASES = (30, 90, "38")
_BG_BASES = (40, 100, "48")


class ColorMode(Enum):
    """How a color value is encoded in SGR parameters."""
    SYSTEM = "16"           # Named system colors (SGR 30-37, 90-97 and background)
    EXTENDED_256 = "256"    # xterm palette index (SGR 38;5;n, 48;5;n)
    TRUE_COLOR = "rgb"      # 24-bit (SGR 38;2;r;g;b, 48;2;r;g;b)


@dataclass(frozen=True)
class Color:
    """
    A terminal color value.

    Colors carry no channel of their own; a Style decides whether a color
    is used as foreground or background.
    """
    mode: ColorMode
    value: int | tuple[int, int, int]

    BLACK: ClassVar["Color"]
    RED: ClassVar["Color"]
    GREEN: ClassVar["Color"]
    YELLOW: ClassVar["Color"]
    BLUE: ClassVar["Color"]
    MAGENTA: ClassVar["Color"]
    CYAN: ClassVar["Color"]
    WHITE: ClassVar["Color"]

    @classmethod
    def system(cls, name: str) -> "Color":
        """Look up a named system color ("red", "bright_blue", ...)."""
        key = name.strip().lower().replace(" ", "_").replace("-", "_")
        try:
            return cls(ColorMode.SYSTEM, SYSTEM_COLORS[key])
        except KeyError:
            raise ValueError(f"Unknown system color: {name!r}") from None

    @classmethod
    def from_sgr(cls, code: int) -> "Color":
        """Decode a foreground or background SGR code into a system color."""
        for base, offset in ((30, 0), (40, 0), (90, 8), (100, 8)):
            if base <= code < base + 8:
                return cls(ColorMode.SYSTEM, code - base + offset)
        raise ValueError(f"Not a system color SGR code: {code}")

    @classmethod
    def xterm(cls, index: int) -> "Color":
        """A color from the xterm 256-color palette."""
        if index not in range(256):
            raise ValueError(f"xterm palette index must be 0-255, got {index}")
        return cls(ColorMode.EXTENDED_256, index)

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> "Color":
        """A 24-bit color."""
        if any(c not in range(256) for c in (r, g, b)):
            raise ValueError(f"RGB components must be 0-255, got ({r}, {g}, {b})")
        return cls(ColorMode.TRUE_COLOR, (r, g, b))

    def _sgr(self, bases: tuple[int, int, str]) -> str:
        normal, bright, extended = bases
        if self.mode is ColorMode.SYSTEM:
            index = int(self.value)  # type: ignore[arg-type]
            return str(normal + index if index < 8 else bright + index - 8)
        if self.mode is ColorMode.EXTENDED_256:
            return f"{extended};5;{self.value}"
        r, g, b = self.value  # type: ignore[misc]
        return f"{extended};2;{r};{g};{b}"

    def to_sgr_fg(self) -> str:
        """SGR parameters selecting this color as foreground."""
        return self._sgr(_FG_BASES)

    def to_sgr_bg(self) -> str:
        """SGR parameters selecting this color as background."""
        return self._sgr(_BG_BASES)


for _name in ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white"):
    setattr(Color, _name.upper(), Color.system(_name))
del _name
