"""Type definitions for canvas_turtle.

This package contains all type definitions organized into focused modules:
- geometry: Point and the XY tuple alias
- paths: DrawPath built by the turtle
- ops: Draw operations recorded by surfaces
- events: Keyboard and pointer input events
- config: TurtleConfig
"""

from canvas_turtle.types.config import KeyCallback, PointerCallback, TurtleConfig
from canvas_turtle.types.events import EventType, InputEvent, KeyEvent, PointerEvent
from canvas_turtle.types.geometry import XY, Point
from canvas_turtle.types.ops import DotOp, DrawOp, FillOp, StrokeOp
from canvas_turtle.types.paths import DrawPath

__all__ = [
    # Geometry
    "XY",
    "Point",
    # Paths
    "DrawPath",
    # Ops
    "DotOp",
    "DrawOp",
    "FillOp",
    "StrokeOp",
    # Events
    "EventType",
    "InputEvent",
    "KeyEvent",
    "PointerEvent",
    # Config
    "KeyCallback",
    "PointerCallback",
    "TurtleConfig",
]
