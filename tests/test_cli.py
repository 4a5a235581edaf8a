"""Tests for the command line interface."""

from pathlib import Path

import pytest
from PIL import Image
from typer.testing import CliRunner

from clige.cli.app import build_demo, create_app
from clige.core.errors import TerminalSizeError
from clige.elements import Canvas
from clige.terminal import Terminal, TerminalSize

runner = CliRunner()


@pytest.fixture
def app():
    return create_app()


class TestSize:
    def test_reports_size(self, app, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(Terminal, "size", staticmethod(lambda: TerminalSize(rows=10, cols=20)))
        result = runner.invoke(app, ["size"])
        assert result.exit_code == 0
        assert "20x10" in result.output

    def test_no_terminal(self, app, monkeypatch: pytest.MonkeyPatch) -> None:
        def no_terminal() -> TerminalSize:
            raise TerminalSizeError("no tty")

        monkeypatch.setattr(Terminal, "size", staticmethod(no_terminal))
        result = runner.invoke(app, ["size"])
        assert result.exit_code == 1


class TestDemo:
    def test_build_demo_scene(self) -> None:
        canvas, label = build_demo(TerminalSize(rows=10, cols=30), 30, 10, True)
        assert (canvas.active_width, canvas.active_height) == (28, 8)
        assert label in canvas.children
        assert any(isinstance(child, Canvas) for child in canvas.children)

    def test_runs_frames(self, app) -> None:
        result = runner.invoke(
            app, ["demo", "--frames", "2", "--fps", "1000", "--width", "30", "--height", "10"]
        )
        assert result.exit_code == 0
        assert "\x1b[?25l" in result.output
        assert "\x1b[?25h" in result.output
        assert "clige" in result.output
        assert result.output.count("\x1b[1;1H") == 2

    def test_too_small_for_border(self, app) -> None:
        result = runner.invoke(app, ["demo", "--frames", "1", "--width", "1", "--height", "1"])
        assert result.exit_code == 1

    def test_without_border(self, app) -> None:
        result = runner.invoke(
            app, ["demo", "--frames", "1", "--width", "10", "--height", "3", "--no-border"]
        )
        assert result.exit_code == 0
        assert "┌" not in result.output


class TestImage:
    def test_renders_image(self, app, tmp_path: Path) -> None:
        path = tmp_path / "dot.png"
        Image.new("RGB", (4, 4), (255, 255, 0)).save(path)
        result = runner.invoke(app, ["image", str(path), "--width", "6", "--height", "6", "--border"])
        assert result.exit_code == 0
        assert "▀" in result.output
        assert "┌" in result.output

    def test_not_an_image(self, app, tmp_path: Path) -> None:
        path = tmp_path / "notes.txt"
        path.write_text("not an image")
        result = runner.invoke(app, ["image", str(path), "--width", "6", "--height", "6"])
        assert result.exit_code == 1
