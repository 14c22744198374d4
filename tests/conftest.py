"""Shared fixtures."""

import pytest

from canvas_turtle import commands, user_input
from canvas_turtle.registry import SurfaceRegistry
from canvas_turtle.surface import RecordingSurface
from canvas_turtle.turtle import Turtle
from canvas_turtle.types import TurtleConfig


@pytest.fixture
def registry() -> SurfaceRegistry:
    return SurfaceRegistry()


@pytest.fixture
def surface(registry: SurfaceRegistry) -> RecordingSurface:
    """A 500x500 recording surface registered as "canvas"."""
    surface = RecordingSurface(500, 500)
    registry.register("canvas", surface)
    return surface


@pytest.fixture
def turtle(registry: SurfaceRegistry, surface: RecordingSurface) -> Turtle:
    return Turtle(TurtleConfig(canvas="canvas"), registry=registry)


@pytest.fixture(autouse=True)
def _reset_globals():
    """Unbind the global turtle and prompt function around every test."""
    commands.reset()
    user_input.set_prompt_function(None)
    yield
    commands.reset()
    user_input.set_prompt_function(None)
