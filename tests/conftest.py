"""Shared fixtures for the test suite."""

import io

import pytest

from clige.terminal import Terminal, TerminalSize


@pytest.fixture
def term_size() -> TerminalSize:
    """A fixed terminal size so canvases never depend on the real terminal."""
    return TerminalSize(rows=24, cols=80)


@pytest.fixture
def stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def terminal(stream: io.StringIO) -> Terminal:
    """Terminal writing into an in-memory stream."""
    return Terminal(stream)
