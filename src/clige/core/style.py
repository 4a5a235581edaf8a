"""Style - foreground/background attributes of a cell."""

from dataclasses import dataclass

from clige.core.color import Color
from clige.core.constants import BG_DEFAULT, CSI, FG_DEFAULT


@dataclass(frozen=True, slots=True)
class Style:
    """
    An immutable pair of optional foreground/background colors.

    ``None`` on a channel means the terminal default. Two styles are equal
    when both channels are equal, which is what style-run detection relies on.
    """
    foreground: Color | None = None
    background: Color | None = None

    @classmethod
    def fg(cls, color: Color) -> "Style":
        return cls(foreground=color)

    @classmethod
    def bg(cls, color: Color) -> "Style":
        return cls(background=color)

    @classmethod
    def solid(cls, color: Color) -> "Style":
        """Same color on both channels (renders as a filled block)."""
        return cls(foreground=color, background=color)

    def is_default(self) -> bool:
        return self.foreground is None and self.background is None

    def sgr_parts(self, prev: "Style") -> list[str]:
        """SGR parameter groups for the channels that differ from ``prev``."""
        parts: list[str] = []
        if self.foreground != prev.foreground:
            if self.foreground is None:
                parts.append(FG_DEFAULT)
            else:
                parts.append(self.foreground.to_sgr_fg())
        if self.background != prev.background:
            if self.background is None:
                parts.append(BG_DEFAULT)
            else:
                parts.append(self.background.to_sgr_bg())
        return parts

    def format(self, prev: "Style") -> str:
        """
        Escape sequence that switches the terminal from ``prev`` to this style.

        Only changed channels are emitted; the result is empty when the
        styles are equal.
        """
        parts = self.sgr_parts(prev)
        if not parts:
            return ""
        return f"{CSI}{';'.join(parts)}m"
