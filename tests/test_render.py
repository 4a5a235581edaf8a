"""Tests for serialization and drawing."""

import io
import os

import pytest

from clige.core.color import Color
from clige.core.errors import TerminalSizeError
from clige.core.grid import Grid
from clige.core.pixel import Pixel
from clige.core.style import Style
from clige.elements import Canvas, CanvasConfig, Text
from clige.render.terminal import TerminalRenderer, draw
from clige.render.text import TextRenderer
from clige.terminal import Terminal, TerminalSize, cursor_to

RED = Style.fg(Color.RED)


class TestTerminalRenderer:
    """Tests for style-run compressed output."""

    def test_style_runs_are_compressed(self, term_size: TerminalSize) -> None:
        canvas = Canvas.create(CanvasConfig(width=3, height=1), term_size)
        canvas.view.set(0, 0, Pixel("A"))
        canvas.view.set(1, 0, Pixel("B", RED))
        canvas.view.set(2, 0, Pixel("C", RED))
        assert TerminalRenderer().render(canvas.grid) == "A\x1b[31mBC"
        assert canvas.to_ansi() == "A\x1b[31mBC"

    def test_uniform_grid_emits_one_fragment(self) -> None:
        grid = Grid(4, 3)
        grid.fill(Pixel("x", Style.fg(Color.GREEN)))
        output = TerminalRenderer().render(grid)
        assert output.count("\x1b[") == 1
        assert output == "\x1b[32m" + "\n".join(["xxxx"] * 3)

    def test_default_grid_has_no_escapes(self) -> None:
        assert TerminalRenderer().render(Grid(3, 2)) == "   \n   "

    def test_return_to_default_style(self) -> None:
        grid = Grid(2, 1)
        grid.set(0, 0, Pixel("A", RED))
        grid.set(1, 0, Pixel("B"))
        assert TerminalRenderer().render(grid) == "\x1b[31mA\x1b[22;24;39mB"

    def test_style_carries_across_rows(self) -> None:
        grid = Grid(1, 2)
        grid.fill(Pixel("#", RED))
        grid.set(0, 1, Pixel("#", Style(Color.RED, Color.BLUE)))
        assert TerminalRenderer().render(grid) == "\x1b[31m#\n\x1b[44m#"

    def test_reset_at_end(self) -> None:
        output = TerminalRenderer(reset_at_end=True).render(Grid(1, 1))
        assert output == " \x1b[0m"

    def test_origin_positions_every_row(self) -> None:
        grid = Grid(2, 2)
        grid.set(0, 0, Pixel("a"))
        grid.set(1, 0, Pixel("b"))
        grid.set(0, 1, Pixel("c"))
        grid.set(1, 1, Pixel("d"))
        output = TerminalRenderer(origin=(2, 3)).render(grid)
        assert output == "\x1b[4;3Hab\x1b[5;3Hcd"

    def test_render_view(self) -> None:
        grid = Grid(3, 3)
        grid.set(1, 1, Pixel("m"))
        assert TerminalRenderer().render(grid.view(1, 1, 1, 1)) == "m"


class TestTextRenderer:
    """Tests for plain text output."""

    def test_strips_styles(self) -> None:
        grid = Grid(3, 1)
        grid.set(0, 0, Pixel("a", RED))
        assert TextRenderer().render(grid) == "a"

    def test_preserve_whitespace(self) -> None:
        grid = Grid(2, 2)
        assert TextRenderer(preserve_whitespace=True).render(grid) == "  \n  "
        assert TextRenderer().render(grid) == ""


class TestDraw:
    """Tests for the full repaint."""

    def test_draw_at_origin(self, term_size: TerminalSize, terminal: Terminal, stream: io.StringIO) -> None:
        canvas = Canvas.create(CanvasConfig(width=3, height=1), term_size)
        canvas.append(Text.from_str("hi"))
        output = draw(canvas, terminal)
        assert output == "\x1b[1;1Hhi \x1b[0m"
        assert stream.getvalue() == output

    def test_draw_with_border(self, term_size: TerminalSize, terminal: Terminal) -> None:
        style = Style.fg(Color.CYAN)
        canvas = Canvas.create(CanvasConfig(width=4, height=3, border=True, border_style=style), term_size)
        canvas.append(Text.from_str("ok"))
        output = draw(canvas, terminal)
        assert output == "\x1b[1;1H\x1b[36m┌──┐\n│\x1b[22;24;39mok\x1b[36m│\n└──┘\x1b[0m"

    def test_draw_offset_canvas(self, term_size: TerminalSize, terminal: Terminal) -> None:
        canvas = Canvas.create(CanvasConfig(width=2, height=2, position=(2, 1)), term_size)
        canvas.append(Text.from_str("ab"))
        output = draw(canvas, terminal)
        assert output == "\x1b[2;3Hab\x1b[3;3H  \x1b[0m"

    def test_draw_clears_stale_content(self, term_size: TerminalSize, terminal: Terminal) -> None:
        canvas = Canvas.create(CanvasConfig(width=4, height=1), term_size)
        label = Text.from_str("ab")
        canvas.append(label)
        draw(canvas, terminal)
        label.move_to(2, 0)
        output = draw(canvas, terminal)
        assert output == "\x1b[1;1H  ab\x1b[0m"

    def test_draw_after_remove(self, term_size: TerminalSize, terminal: Terminal) -> None:
        canvas = Canvas.create(CanvasConfig(width=2, height=1), term_size)
        label = Text.from_str("ab")
        canvas.append(label)
        draw(canvas, terminal)
        canvas.remove(label)
        assert draw(canvas, terminal) == "\x1b[1;1H  \x1b[0m"


class TestTerminal:
    """Tests for the terminal wrapper."""

    def test_cursor_to_is_one_based(self) -> None:
        assert cursor_to(0, 0) == "\x1b[1;1H"
        assert cursor_to(4, 9) == "\x1b[10;5H"

    def test_cursor_visibility(self, terminal: Terminal, stream: io.StringIO) -> None:
        terminal.hide_cursor()
        terminal.show_cursor()
        assert stream.getvalue() == "\x1b[?25l\x1b[?25h"

    def test_clear(self, terminal: Terminal, stream: io.StringIO) -> None:
        terminal.clear()
        assert stream.getvalue() == "\x1b[2J\x1b[H"

    def test_hidden_cursor_restores(self, terminal: Terminal, stream: io.StringIO) -> None:
        with terminal.hidden_cursor():
            terminal.write("x")
        assert stream.getvalue() == "\x1b[?25lx\x1b[0m\x1b[?25h"

    def test_hidden_cursor_restores_on_error(self, terminal: Terminal, stream: io.StringIO) -> None:
        with pytest.raises(RuntimeError):
            with terminal.hidden_cursor():
                raise RuntimeError("boom")
        assert stream.getvalue().endswith("\x1b[?25h")

    def test_size(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("clige.terminal.os.get_terminal_size", lambda: os.terminal_size((100, 40)))
        assert Terminal.size() == TerminalSize(rows=40, cols=100)

    def test_size_without_terminal(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def no_terminal() -> None:
            raise OSError("Inappropriate ioctl for device")

        monkeypatch.setattr("clige.terminal.os.get_terminal_size", no_terminal)
        with pytest.raises(TerminalSizeError):
            Terminal.size()
