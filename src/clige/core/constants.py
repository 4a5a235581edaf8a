"""Shared constants for terminal output."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"
CLEAR = f"{CSI}2J"
HOME = f"{CSI}H"

# Cursor visibility
CURSOR_HIDE = f"{CSI}?25l"
CURSOR_SHOW = f"{CSI}?25h"

# SGR fragments emitted when a channel returns to the terminal default
FG_DEFAULT = "22;24;39"
BG_DEFAULT = "49"

# Character written into empty cells
FILL = " "

# Box drawing characters used for canvas borders
BOX = {
    "top_left": "\u250C",      # ┌
    "top_right": "\u2510",     # ┐
    "bottom_left": "\u2514",   # └
    "bottom_right": "\u2518",  # ┘
    "horizontal": "\u2500",    # ─
    "vertical": "\u2502",      # │
}

# Half blocks used for image import (two vertical pixels per cell)
UPPER_HALF = "\u2580"  # ▀
LOWER_HALF = "\u2584"  # ▄

# The eight system colors (SGR 30-37 fg, 40-47 bg), bright variants follow at 8-15
SYSTEM_COLORS = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
    "bright_black": 8,
    "bright_red": 9,
    "bright_green": 10,
    "bright_yellow": 11,
    "bright_blue": 12,
    "bright_magenta": 13,
    "bright_cyan": 14,
    "bright_white": 15,
}
