"""Tests for running turtle programs from files."""

from pathlib import Path

import pytest

from canvas_turtle import commands, user_input
from canvas_turtle.rendering import ImageSurface
from canvas_turtle.script import run_script, script_globals
from canvas_turtle.surface import RecordingSurface

SQUARE = """
make_turtle()
set_pen_color("black")
repeat(4, lambda: (forward(100), right(90)))
"""


def _write(tmp_path: Path, source: str) -> Path:
    path = tmp_path / "program.py"
    path.write_text(source, encoding="utf-8")
    return path


class TestRunScript:
    def test_draws_on_surface(self, tmp_path: Path) -> None:
        surface = RecordingSurface(300, 300)
        result = run_script(_write(tmp_path, SQUARE), surface)
        assert result.surface is surface
        assert len(surface.strokes) == 4
        assert surface.strokes[0].color == "black"
        assert result.turtle is not None
        assert result.turtle.width == 300

    def test_image_surface(self, tmp_path: Path) -> None:
        surface = ImageSurface(300, 300)
        run_script(_write(tmp_path, SQUARE), surface)
        # Left edge of the square, drawn from the center upwards
        assert surface.to_image().getpixel((150, 100)) == (0, 0, 0, 255)

    def test_custom_canvas_name(self, tmp_path: Path) -> None:
        source = 'make_turtle({"canvas": "board"})\nforward(10)\n'
        surface = RecordingSurface()
        run_script(_write(tmp_path, source), surface, canvas_name="board")
        assert len(surface.strokes) == 1

    def test_prompts_available(self, tmp_path: Path) -> None:
        source = (
            "make_turtle()\nsides = input_int('Sides?')\n"
            "repeat(sides, lambda: (forward(10), right(360 / sides)))\n"
        )
        user_input.set_prompt_function(lambda text: "6")
        surface = RecordingSurface()
        run_script(_write(tmp_path, source), surface)
        assert len(surface.strokes) == 6

    def test_math_and_random_available(self, tmp_path: Path) -> None:
        source = "make_turtle()\nrandom.seed(1)\nforward(math.sqrt(16))\n"
        result = run_script(_write(tmp_path, source), RecordingSurface())
        assert result.turtle.get_pos() == (0, 4)

    def test_no_make_turtle(self, tmp_path: Path) -> None:
        surface = RecordingSurface()
        result = run_script(_write(tmp_path, "forward(10)\n"), surface)
        assert result.turtle is None
        assert surface.ops == []

    def test_errors_propagate(self, tmp_path: Path) -> None:
        with pytest.raises(ZeroDivisionError):
            run_script(_write(tmp_path, "make_turtle()\n1 / 0\n"), RecordingSurface())

    def test_unknown_surface_propagates(self, tmp_path: Path) -> None:
        from canvas_turtle.registry import SurfaceNotFoundError

        with pytest.raises(SurfaceNotFoundError):
            run_script(_write(tmp_path, "make_turtle({'canvas': 'other'})\n"), RecordingSurface())

    def test_restores_global_turtle(self, tmp_path: Path, turtle) -> None:
        commands.set_turtle(turtle)
        run_script(_write(tmp_path, SQUARE), RecordingSurface())
        assert commands.get_turtle() is turtle

    def test_restores_global_turtle_on_error(self, tmp_path: Path) -> None:
        with pytest.raises(RuntimeError):
            run_script(_write(tmp_path, "make_turtle()\nraise RuntimeError\n"), RecordingSurface())
        assert commands.get_turtle() is None


def test_script_globals(registry) -> None:
    namespace = script_globals(registry)
    for name in (
        "make_turtle", "forward", "repeat", "input_int", "input_float", "input_string", "math",
    ):
        assert name in namespace
