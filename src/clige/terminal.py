"""Low-level terminal operations."""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, TextIO

from clige.core.constants import (
    CLEAR,
    CSI,
    CURSOR_HIDE,
    CURSOR_SHOW,
    HOME,
    RESET,
)
from clige.core.errors import TerminalSizeError


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


def cursor_to(x: int, y: int) -> str:
    """Absolute cursor move to a 0-based (x, y); the sequence itself is 1-based."""
    return f"{CSI}{y + 1};{x + 1}H"


class Terminal:
    """Writes escape sequences and text to an output stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    @staticmethod
    def size() -> TerminalSize:
        """Get current terminal dimensions."""
        try:
            size = os.get_terminal_size()
        except OSError as exc:
            raise TerminalSizeError(f"cannot determine terminal size: {exc}") from exc
        return TerminalSize(size.lines, size.columns)

    def write(self, text: str) -> None:
        self.stream.write(text)

    def flush(self) -> None:
        self.stream.flush()

    def clear(self) -> None:
        """Clear screen and move cursor to home."""
        self.write(CLEAR + HOME)
        self.flush()

    def reset(self) -> None:
        """Reset all terminal attributes."""
        self.write(RESET)
        self.flush()

    def hide_cursor(self) -> None:
        self.write(CURSOR_HIDE)
        self.flush()

    def show_cursor(self) -> None:
        self.write(CURSOR_SHOW)
        self.flush()

    def move_to(self, x: int, y: int) -> None:
        """Move cursor to a 0-based column/row."""
        self.write(cursor_to(x, y))

    @contextmanager
    def hidden_cursor(self) -> Iterator[None]:
        """Hide the cursor for the duration of the block, restoring style and cursor after."""
        self.hide_cursor()
        try:
            yield
        finally:
            self.reset()
            self.show_cursor()

    @contextmanager
    def alternate_screen(self) -> Iterator[None]:
        """Use alternate screen buffer (preserves scrollback)."""
        self.write(f"{CSI}?1049h")
        self.flush()
        try:
            yield
        finally:
            self.write(f"{CSI}?1049l")
            self.flush()
