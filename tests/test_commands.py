"""Tests for the global command API."""

from unittest.mock import MagicMock

import pytest

from canvas_turtle import commands
from canvas_turtle.registry import SurfaceNotFoundError, SurfaceRegistry
from canvas_turtle.surface import RecordingSurface
from canvas_turtle.types import TurtleConfig


class TestWithoutTurtle:
    """Every command is a silent no-op until make_turtle is called."""

    def test_commands_do_nothing(self) -> None:
        commands.forward(10)
        commands.back(10)
        commands.right(90)
        commands.left(90)
        commands.set_heading(45)
        commands.start_path()
        commands.fill_path()
        commands.set_fill_color("red")
        commands.set_pen_color("red")
        commands.pen_up()
        commands.pen_down()
        commands.set_line_width(3)
        commands.dot()
        commands.set_pos(1, 2)
        commands.set_random_pos(0, 1, 0, 1)
        assert commands.get_turtle() is None

    def test_queries_return_none(self) -> None:
        assert commands.towards(1, 1) is None
        assert commands.get_pos() is None


class TestWithTurtle:
    @pytest.fixture
    def surface(self, registry: SurfaceRegistry) -> RecordingSurface:
        surface = RecordingSurface(500, 500)
        registry.register("canvas", surface)
        commands.make_turtle(TurtleConfig(canvas="canvas"), registry=registry)
        return surface

    def test_make_turtle_binds(self, surface: RecordingSurface) -> None:
        turtle = commands.get_turtle()
        assert turtle is not None
        assert turtle.surface is surface

    def test_square(self, surface: RecordingSurface) -> None:
        commands.repeat(4, lambda: (commands.forward(100), commands.right(90)))
        assert len(surface.strokes) == 4
        assert commands.get_pos() == pytest.approx((0, 0), abs=1e-9)

    def test_back(self, surface: RecordingSurface) -> None:
        commands.back(40)
        assert commands.get_pos() == (0, -40)

    def test_style_and_fill(self, surface: RecordingSurface) -> None:
        commands.set_fill_color("orange")
        commands.pen_up()
        commands.start_path()
        commands.forward(10)
        commands.left(90)
        commands.forward(10)
        commands.fill_path()
        commands.pen_down()
        commands.set_pen_color("black")
        commands.set_line_width(2)
        commands.dot(4)

        assert surface.strokes == []
        assert surface.fills[0].color == "orange"
        assert surface.dots[0].color == "black"
        assert commands.get_turtle().line_width == 2

    def test_towards_and_heading(self, surface: RecordingSurface) -> None:
        commands.set_pos(0, 0)
        commands.set_heading(commands.towards(-100, -100))
        assert commands.get_turtle().heading == pytest.approx(-135)

    def test_set_random_pos(self, surface: RecordingSurface) -> None:
        commands.set_random_pos(5, 6, 7, 8)
        x, y = commands.get_pos()
        assert 5 <= x <= 6
        assert 7 <= y <= 8

    def test_dict_config(self, registry: SurfaceRegistry, surface: RecordingSurface) -> None:
        on_key = MagicMock()
        commands.make_turtle({"canvas": "canvas", "key_pressed": on_key}, registry=registry)
        registry.keyboard.key_down("k")
        on_key.assert_called_once_with("k")

    def test_make_turtle_replaces(
        self, registry: SurfaceRegistry, surface: RecordingSurface
    ) -> None:
        first = commands.get_turtle()
        second = commands.make_turtle(TurtleConfig(canvas="canvas"), registry=registry)
        assert second is not first
        assert commands.get_turtle() is second

    def test_reset(self, surface: RecordingSurface) -> None:
        commands.reset()
        commands.forward(10)
        assert surface.ops == []


def test_make_turtle_unknown_surface(registry: SurfaceRegistry) -> None:
    with pytest.raises(SurfaceNotFoundError):
        commands.make_turtle(TurtleConfig(canvas="missing"), registry=registry)
    assert commands.get_turtle() is None


class TestRepeat:
    def test_calls_count_times(self) -> None:
        callback = MagicMock()
        commands.repeat(3, callback)
        assert callback.call_count == 3

    def test_zero_and_negative(self) -> None:
        callback = MagicMock()
        commands.repeat(0, callback)
        commands.repeat(-2, callback)
        callback.assert_not_called()
