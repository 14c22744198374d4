"""CLI for canvas-turtle - render turtle programs and demos.

Usage:
    python -m canvas_turtle.cli render program.py -o drawing.png
    python -m canvas_turtle.cli render program.py -o drawing.svg
    python -m canvas_turtle.cli demo star -o star.png
    python -m canvas_turtle.cli demos
    python -m canvas_turtle.cli config
"""

from enum import Enum
from pathlib import Path as FilePath
from typing import TYPE_CHECKING, cast

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from canvas_turtle.config import settings

if TYPE_CHECKING:
    from canvas_turtle.surface import RecordingSurface

app = typer.Typer(
    name="canvas-turtle",
    help="Render turtle graphics programs to PNG or SVG",
    add_completion=False,
)
console = Console()


class OutputFormat(str, Enum):
    PNG = "png"
    SVG = "svg"


def _resolve_format(output: FilePath, fmt: OutputFormat | None) -> OutputFormat:
    """Pick the output format from the flag or the file extension."""
    if fmt is not None:
        return fmt
    if output.suffix.lower() == ".svg":
        return OutputFormat.SVG
    return OutputFormat.PNG


def _write_output(
    surface: "RecordingSurface", output: FilePath, fmt: OutputFormat, background: str
) -> None:
    """Write a RecordingSurface's ops to a PNG or SVG file."""
    from canvas_turtle.canvas import render_ops_to_svg
    from canvas_turtle.rendering import RenderOptions, render_ops

    output.parent.mkdir(parents=True, exist_ok=True)
    if fmt == OutputFormat.SVG:
        svg = render_ops_to_svg(surface.ops, surface.width, surface.height, background)
        output.write_text(svg, encoding="utf-8")
    else:
        options = RenderOptions(
            width=surface.width,
            height=surface.height,
            background_color=background,
            output_format="bytes",
            optimize_png=True,
        )
        png = cast(bytes, render_ops(surface.ops, options))
        output.write_bytes(png)


def _save_or_exit(
    surface: "RecordingSurface", output: FilePath, fmt: OutputFormat, background: str
) -> None:
    # Pillow parses colors only when rasterizing
    try:
        _write_output(surface, output, fmt, background)
    except ValueError as e:
        console.print(f"[red]Could not write {output}: {e}[/red]")
        raise typer.Exit(1) from e


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level"),
) -> None:
    """Render turtle graphics programs to PNG or SVG."""
    from canvas_turtle.logging_config import setup_cli_logging

    setup_cli_logging(verbose=verbose)


@app.command("render")
def render(
    script: FilePath = typer.Argument(
        ..., exists=True, dir_okay=False, help="Turtle program (.py)"
    ),
    output: FilePath = typer.Option(FilePath("drawing.png"), "--output", "-o", help="Output file"),
    width: int = typer.Option(settings.canvas_width, "--width", "-w", min=1, help="Canvas width"),
    height: int = typer.Option(
        settings.canvas_height, "--height", "-h", min=1, help="Canvas height"
    ),
    fmt: OutputFormat | None = typer.Option(
        None, "--format", "-f", help="png or svg (default: from extension)"
    ),
    background: str = typer.Option(
        settings.background, "--background", "-b", help="Background color"
    ),
) -> None:
    """Run a turtle program and save what it drew.

    The program can use make_turtle(), forward(), right(), ... directly
    without importing anything.

    Examples:
        canvas-turtle render square.py
        canvas-turtle render flower.py -o flower.svg -w 800 -h 800
    """
    from canvas_turtle.script import run_script
    from canvas_turtle.surface import RecordingSurface

    surface = RecordingSurface(width, height)
    try:
        result = run_script(script, surface)
    except Exception as e:
        console.print(f"[red]{script} failed: {e}[/red]")
        raise typer.Exit(1) from e

    if result.turtle is None:
        console.print(f"[yellow]{script} never called make_turtle()[/yellow]")

    out_format = _resolve_format(output, fmt)
    _save_or_exit(surface, output, out_format, background)
    console.print(f"[green]Wrote {len(surface.ops)} op(s) to {output}[/green]")


@app.command("demo")
def demo(
    name: str = typer.Argument(..., help="Demo name (see `canvas-turtle demos`)"),
    output: FilePath | None = typer.Option(
        None, "--output", "-o", help="Output file (default: NAME.png)"
    ),
    width: int = typer.Option(settings.canvas_width, "--width", "-w", min=1, help="Canvas width"),
    height: int = typer.Option(
        settings.canvas_height, "--height", "-h", min=1, help="Canvas height"
    ),
    fmt: OutputFormat | None = typer.Option(
        None, "--format", "-f", help="png or svg (default: from extension)"
    ),
    background: str = typer.Option(
        settings.background, "--background", "-b", help="Background color"
    ),
) -> None:
    """Draw one of the built-in demos."""
    from canvas_turtle.demos import get_demo
    from canvas_turtle.registry import SurfaceRegistry
    from canvas_turtle.surface import RecordingSurface
    from canvas_turtle.turtle import Turtle
    from canvas_turtle.types import TurtleConfig

    try:
        draw = get_demo(name)
    except KeyError as e:
        console.print(f"[red]Unknown demo {name!r}[/red]")
        raise typer.Exit(1) from e

    registry = SurfaceRegistry()
    surface = RecordingSurface(width, height)
    registry.register("demo", surface)
    draw(Turtle(TurtleConfig(canvas="demo"), registry=registry))

    output = output or FilePath(f"{name}.png")
    _save_or_exit(surface, output, _resolve_format(output, fmt), background)
    console.print(f"[green]Wrote {len(surface.ops)} op(s) to {output}[/green]")


@app.command("demos")
def demos_list() -> None:
    """List the built-in demos."""
    from canvas_turtle.demos import DEMOS

    table = Table(title="Demos", box=box.ROUNDED)
    table.add_column("Name", style="cyan")
    table.add_column("Description")

    for demo_name, func in DEMOS.items():
        summary = (func.__doc__ or "").strip().splitlines()
        table.add_row(demo_name, summary[0] if summary else "")

    console.print(table)


@app.command("config")
def config_show() -> None:
    """Show the effective settings."""
    table = Table(title="Settings", box=box.ROUNDED)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Env var", style="dim")

    prefix = settings.model_config.get("env_prefix", "")
    for key, value in settings.model_dump().items():
        table.add_row(key, str(value), f"{prefix}{key}".upper())

    console.print(table)


# Entry point
if __name__ == "__main__":
    app()
