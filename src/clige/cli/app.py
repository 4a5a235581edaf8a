"""Typer CLI application."""

import logging
import time
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from clige.core.color import Color
from clige.core.errors import CligeError
from clige.core.pixel import Pixel
from clige.core.style import Style
from clige.elements import Canvas, CanvasConfig, Text, TextConfig
from clige.render.terminal import draw
from clige.terminal import Terminal, TerminalSize


def _resolve_size(width: Optional[int], height: Optional[int]) -> TerminalSize:
    """Explicit --width/--height act as the terminal bounds; otherwise ask the terminal."""
    if width is not None and height is not None:
        return TerminalSize(rows=height, cols=width)
    return Terminal.size()


def _gradient(length: int) -> list[Pixel]:
    """A grayscale ramp through the 24 xterm gray levels."""
    return [
        Pixel("\u2588", Style.fg(Color.xterm(232 + (i * 24) // max(length, 1))))
        for i in range(length)
    ]


def build_demo(size: TerminalSize, width: int, height: int, border: bool) -> tuple[Canvas, Text]:
    """The demo scene: a title, a gray ramp, a nested panel and a moving label."""
    canvas = Canvas.create(
        CanvasConfig(width=width, height=height, border=border, border_style=Style.fg(Color.CYAN)),
        size,
    )
    canvas.append(Text.from_str("clige", style=Style.fg(Color.YELLOW), position=(1, 0)))
    canvas.append(Text.from_config(TextConfig(
        content=_gradient(canvas.active_width),
        wrap_width=max(canvas.active_width, 1),
        position=(0, 1),
    )))

    panel_width = min(24, canvas.active_width)
    panel_height = min(5, max(canvas.active_height - 3, 0))
    if panel_width >= 2 and panel_height >= 2:
        panel = Canvas.create(
            CanvasConfig(
                width=panel_width,
                height=panel_height,
                position=(0, 3),
                border=True,
                border_style=Style.fg(Color.MAGENTA),
            ),
            size,
        )
        panel.append(Text.from_str(
            "A nested canvas wraps its own text.",
            width=max(panel.active_width, 1),
            style=Style.fg(Color.GREEN),
        ))
        canvas.append(panel)

    label = Text.from_str("<>", style=Style(Color.BLACK, Color.YELLOW), position=(0, 2))
    canvas.append(label)
    return canvas, label


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="clige",
        help="Retained-mode character grid rendering for the terminal.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console(stderr=True)

    @app.callback()
    def main(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output to stderr")] = False,
    ) -> None:
        if verbose:
            logging.basicConfig(
                level=logging.DEBUG,
                format="%(asctime)s %(name)s %(levelname)s %(message)s",
            )

    @app.command()
    def size() -> None:
        """Show the detected terminal size."""
        try:
            term = Terminal.size()
        except CligeError as exc:
            console.print(f"[red]{exc}[/]")
            raise typer.Exit(1)
        typer.echo(f"{term.cols}x{term.rows}")

    @app.command()
    def demo(
        frames: Annotated[int, typer.Option("--frames", "-n", min=1, help="Frames to draw")] = 60,
        fps: Annotated[float, typer.Option("--fps", min=0.1, help="Frames per second")] = 12.0,
        width: Annotated[Optional[int], typer.Option("--width", "-w", min=1, help="Canvas width")] = None,
        height: Annotated[Optional[int], typer.Option("--height", min=1, help="Canvas height")] = None,
        border: Annotated[bool, typer.Option("--border/--no-border", help="Draw a border")] = True,
    ) -> None:
        """Animate a small scene of text and nested canvases."""
        try:
            term_size = _resolve_size(width, height)
            canvas, label = build_demo(
                term_size,
                width or term_size.cols,
                height or term_size.rows,
                border,
            )
        except CligeError as exc:
            console.print(f"[red]{exc}[/]")
            raise typer.Exit(1)

        terminal = Terminal()
        frame_time = 1.0 / fps
        span = max(canvas.active_width - label.effective_width, 1)
        try:
            with terminal.hidden_cursor():
                for frame in range(frames):
                    start = time.monotonic()
                    label.move_to(frame % span, label.y)
                    draw(canvas, terminal)
                    remaining = frame_time - (time.monotonic() - start)
                    if remaining > 0 and frame < frames - 1:
                        time.sleep(remaining)
        except KeyboardInterrupt:
            pass
        terminal.write("\n")
        terminal.flush()

    @app.command()
    def image(
        path: Annotated[Path, typer.Argument(help="Image file to show", exists=True, dir_okay=False)],
        width: Annotated[Optional[int], typer.Option("--width", "-w", min=1, help="Width in cells")] = None,
        height: Annotated[Optional[int], typer.Option("--height", min=1, help="Maximum height in cells")] = None,
        border: Annotated[bool, typer.Option("--border/--no-border", help="Frame the image")] = False,
    ) -> None:
        """Render an image file with half-block truecolor cells."""
        from clige.imaging import load_text

        try:
            term_size = _resolve_size(width, height)
            inset = 2 if border else 0
            max_width = (width or term_size.cols) - inset
            max_height = (height or term_size.rows) - inset
            if max_width < 1 or max_height < 1:
                console.print("[red]Not enough room to show the image[/]")
                raise typer.Exit(1)
            text = load_text(path, max_width, max_height=max_height)
            canvas = Canvas.create(
                CanvasConfig(
                    width=max(text.effective_width, 1) + inset,
                    height=max(text.height, 1) + inset,
                    border=border,
                ),
                term_size,
            )
        except (CligeError, OSError) as exc:
            console.print(f"[red]{exc}[/]")
            raise typer.Exit(1)

        canvas.append(text)
        terminal = Terminal()
        draw(canvas, terminal)
        terminal.write("\n")
        terminal.flush()

    return app
