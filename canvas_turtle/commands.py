"""Global turtle commands for beginner programs.

``make_turtle`` binds the current turtle; every other command forwards to
it and silently does nothing until one has been made.

    from canvas_turtle.commands import *

    make_turtle()
    repeat(4, lambda: (forward(100), right(90)))
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from canvas_turtle.registry import SurfaceRegistry
from canvas_turtle.turtle import Turtle
from canvas_turtle.types import XY, TurtleConfig

logger = logging.getLogger(__name__)

# Global turtle - set by make_turtle
_turtle: Turtle | None = None


def make_turtle(
    config: TurtleConfig | dict[str, Any] | None = None,
    *,
    registry: SurfaceRegistry | None = None,
) -> Turtle:
    """Create a turtle and make it the target of the global commands."""
    global _turtle
    if isinstance(config, dict):
        config = TurtleConfig(**config)
    if _turtle is not None:
        logger.debug("Replacing the current global turtle")
    _turtle = Turtle(config, registry=registry)
    return _turtle


def get_turtle() -> Turtle | None:
    """Get the current turtle, if any."""
    return _turtle


def set_turtle(turtle: Turtle | None) -> None:
    """Bind an existing turtle, or None to unbind."""
    global _turtle
    _turtle = turtle


def reset() -> None:
    """Forget the current turtle."""
    set_turtle(None)


def forward(pixels: float) -> None:
    if _turtle is not None:
        _turtle.forward(pixels)


def back(pixels: float) -> None:
    if _turtle is not None:
        _turtle.forward(-pixels)


def right(angle: float) -> None:
    if _turtle is not None:
        _turtle.right(angle)


def left(angle: float) -> None:
    if _turtle is not None:
        _turtle.left(angle)


def set_heading(angle: float) -> None:
    if _turtle is not None:
        _turtle.set_heading(angle)


def towards(x: float, y: float) -> float | None:
    if _turtle is not None:
        return _turtle.towards(x, y)
    return None


def start_path() -> None:
    if _turtle is not None:
        _turtle.start_path()


def fill_path() -> None:
    if _turtle is not None:
        _turtle.fill_path()


def set_fill_color(color: str) -> None:
    if _turtle is not None:
        _turtle.set_fill_color(color)


def set_pen_color(color: str) -> None:
    if _turtle is not None:
        _turtle.set_pen_color(color)


def pen_up() -> None:
    if _turtle is not None:
        _turtle.pen_up()


def pen_down() -> None:
    if _turtle is not None:
        _turtle.pen_down()


def set_line_width(width: float) -> None:
    if _turtle is not None:
        _turtle.set_line_width(width)


def dot(radius: float | None = None) -> None:
    if _turtle is not None:
        _turtle.dot(radius)


def set_pos(x: float, y: float) -> None:
    if _turtle is not None:
        _turtle.set_pos(x, y)


def get_pos() -> XY | None:
    if _turtle is not None:
        return _turtle.get_pos()
    return None


def set_random_pos(x_min: float, x_max: float, y_min: float, y_max: float) -> None:
    if _turtle is not None:
        _turtle.set_random_pos(x_min, x_max, y_min, y_max)


def repeat(count: int, callback: Callable[[], Any]) -> None:
    """Call ``callback`` ``count`` times."""
    for _ in range(count):
        callback()


__all__ = [
    "back",
    "dot",
    "fill_path",
    "forward",
    "get_pos",
    "get_turtle",
    "left",
    "make_turtle",
    "pen_down",
    "pen_up",
    "repeat",
    "right",
    "set_fill_color",
    "set_heading",
    "set_line_width",
    "set_pen_color",
    "set_pos",
    "set_random_pos",
    "start_path",
    "towards",
]
