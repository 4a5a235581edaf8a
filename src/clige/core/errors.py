"""Exceptions raised by the rendering core."""


class CligeError(Exception):
    """Base class for every error raised by clige."""


class DimensionError(CligeError, ValueError):
    """A requested canvas size is impossible or does not fit the terminal."""


class OutOfBoundsError(CligeError, IndexError):
    """A coordinate lies outside a grid."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        self.x = x
        self.y = y
        super().__init__(
            f"({x}, {y}) out of bounds; expected 0 <= x < {width} and 0 <= y < {height}"
        )


class ChildNotFoundError(CligeError, LookupError):
    """A view is not among a canvas's children."""


class DegenerateWrapWidthError(CligeError, ValueError):
    """Text was asked to wrap at a width smaller than one cell."""

    def __init__(self, width: int) -> None:
        self.width = width
        super().__init__(f"wrap width must be at least 1, got {width}")


class TerminalSizeError(CligeError, OSError):
    """The size of the controlling terminal could not be determined."""
