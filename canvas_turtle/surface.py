"""Rendering surface interface and an in-memory recording surface."""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from canvas_turtle.events import EventSource
from canvas_turtle.types import DotOp, DrawOp, DrawPath, FillOp, Point, StrokeOp

logger = logging.getLogger(__name__)


@runtime_checkable
class Surface(Protocol):
    """What a turtle needs from the thing it draws on.

    Coordinates are surface pixels, origin top-left, y down.
    """

    width: int
    height: int
    events: EventSource

    def stroke(self, path: DrawPath, color: str, line_width: float) -> None: ...

    def fill(self, path: DrawPath, color: str) -> None: ...

    def fill_circle(self, center: Point, radius: float, color: str) -> None: ...


class RecordingSurface:
    """Surface that keeps every call as a draw op.

    Useful headless: ops can be inspected, replayed to PNG with
    ``canvas_turtle.rendering.render_ops`` or to SVG with
    ``canvas_turtle.canvas.render_ops_to_svg``.
    """

    def __init__(self, width: int = 500, height: int = 500) -> None:
        self.width = width
        self.height = height
        self.events = EventSource()
        self.ops: list[DrawOp] = []

    def stroke(self, path: DrawPath, color: str, line_width: float) -> None:
        self.ops.append(
            StrokeOp(
                points=list(path.points),
                closed=path.closed,
                color=color,
                line_width=line_width,
            )
        )

    def fill(self, path: DrawPath, color: str) -> None:
        self.ops.append(FillOp(points=list(path.points), color=color))

    def fill_circle(self, center: Point, radius: float, color: str) -> None:
        self.ops.append(DotOp(center=center, radius=radius, color=color))

    def clear(self) -> None:
        logger.debug(f"Clearing {len(self.ops)} recorded op(s)")
        self.ops.clear()

    @property
    def strokes(self) -> list[StrokeOp]:
        return [op for op in self.ops if isinstance(op, StrokeOp)]

    @property
    def fills(self) -> list[FillOp]:
        return [op for op in self.ops if isinstance(op, FillOp)]

    @property
    def dots(self) -> list[DotOp]:
        return [op for op in self.ops if isinstance(op, DotOp)]
