"""Turtle construction options."""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, Field

KeyCallback = Callable[[str], Any]
PointerCallback = Callable[[float, float], Any]


def _default_canvas() -> str:
    from canvas_turtle.config import settings

    return settings.default_canvas


class TurtleConfig(BaseModel):
    """Options for creating a turtle.

    All callbacks are optional; an unset callback is never invoked.
    Pointer callbacks receive user coordinates (origin at the center, y up).
    """

    canvas: str = Field(default_factory=_default_canvas)  # Registered surface name
    key_pressed: KeyCallback | None = None
    mouse_clicked: PointerCallback | None = None
    mouse_moved: PointerCallback | None = None
    pointer_scale: float | None = None  # None = use settings.pointer_scale
