"""The turtle: a pen with a position and a heading.

Position is kept in surface pixels (origin top-left, y down). Everything a
program passes in or gets back is in user coordinates (origin at the
surface center, y up); conversion happens at the method boundary.
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from canvas_turtle.config import settings
from canvas_turtle.coordinates import advance, heading_towards, to_host, to_user
from canvas_turtle.events import pointer_to_user
from canvas_turtle.registry import SurfaceRegistry, default_registry
from canvas_turtle.rendering import color_to_rgba
from canvas_turtle.types import XY, DrawPath, KeyEvent, Point, PointerEvent, TurtleConfig

if TYPE_CHECKING:
    from canvas_turtle.surface import Surface
    from canvas_turtle.types import KeyCallback, PointerCallback

logger = logging.getLogger(__name__)


class Turtle:
    """Drawing agent bound to one surface.

    Example:
        >>> from canvas_turtle.registry import SurfaceRegistry
        >>> from canvas_turtle.surface import RecordingSurface
        >>> registry = SurfaceRegistry()
        >>> _ = registry.register("canvas", RecordingSurface(500, 500))
        >>> t = Turtle(registry=registry)
        >>> t.forward(100)
        >>> t.get_pos()
        (0.0, 100.0)
    """

    def __init__(
        self,
        config: TurtleConfig | None = None,
        *,
        registry: SurfaceRegistry | None = None,
        rng: random.Random | None = None,
    ) -> None:
        config = config or TurtleConfig()
        registry = registry if registry is not None else default_registry

        # Unknown names raise SurfaceNotFoundError to the caller
        self.surface: Surface = registry.get(config.canvas)
        self.width = self.surface.width
        self.height = self.surface.height
        self.x = self.width / 2
        self.y = self.height / 2
        self.heading = 0.0

        self.pen_is_down = True
        self.pen_color = settings.pen_color
        self.fill_color = settings.fill_color
        self.line_width = settings.line_width
        self.stroke_path = DrawPath.starting_at(self.x, self.y)
        self.path_to_fill: DrawPath | None = None

        self.pointer_scale = (
            config.pointer_scale if config.pointer_scale is not None else settings.pointer_scale
        )
        self._registry = registry
        self._rng = rng or random.Random()

        self.on_key_pressed(config.key_pressed)
        self.on_mouse_clicked(config.mouse_clicked)
        self.on_mouse_moved(config.mouse_moved)

        logger.debug(f"Turtle created on {config.canvas!r} ({self.width}x{self.height})")

    # =========================================================================
    # Input events
    # =========================================================================

    def on_key_pressed(self, callback: KeyCallback | None) -> None:
        """Call ``callback(key)`` on every key-down in the window.

        A ``None`` callback registers nothing.
        """
        if callback is None:
            return

        def listener(event: KeyEvent) -> None:
            callback(event.key)

        self._registry.keyboard.add_listener("keydown", listener)

    def on_mouse_clicked(self, callback: PointerCallback | None) -> None:
        """Call ``callback(x, y)`` with user coordinates on every click on the surface."""
        if callback is None:
            return
        self.surface.events.add_listener("click", self._pointer_listener(callback))

    def on_mouse_moved(self, callback: PointerCallback | None) -> None:
        """Call ``callback(x, y)`` with user coordinates on every pointer move over the surface."""
        if callback is None:
            return
        self.surface.events.add_listener("mousemove", self._pointer_listener(callback))

    def _pointer_listener(self, callback: PointerCallback):
        def listener(event: PointerEvent) -> None:
            callback(*pointer_to_user(event, self.width, self.height, self.pointer_scale))

        return listener

    # =========================================================================
    # Motion
    # =========================================================================

    def forward(self, pixels: float) -> None:
        """Move along the heading, drawing a segment if the pen is down."""
        old_x, old_y = self.x, self.y
        self.x, self.y = advance(old_x, old_y, self.heading, pixels)

        self.stroke_path = DrawPath.starting_at(old_x, old_y)
        self.stroke_path.line_to(self.x, self.y)
        if self.path_to_fill is not None:
            self.path_to_fill.line_to(self.x, self.y)

        if self.pen_is_down:
            self.surface.stroke(self.stroke_path, self.pen_color, self.line_width)

    def back(self, pixels: float) -> None:
        self.forward(-pixels)

    def left(self, angle: float) -> None:
        self.heading -= angle

    def right(self, angle: float) -> None:
        self.heading += angle

    def set_heading(self, angle: float) -> None:
        self.heading = angle

    def towards(self, x: float, y: float) -> float:
        """Heading that would point at the user-coordinate target.

        See ``canvas_turtle.coordinates.heading_towards`` for how targets on
        the turtle's own vertical or horizontal line come out.
        """
        target_x, target_y = to_host(x, y, self.width, self.height)
        return heading_towards(self.x, self.y, target_x, target_y)

    # =========================================================================
    # Pen and style
    # =========================================================================

    def pen_up(self) -> None:
        self.pen_is_down = False

    def pen_down(self) -> None:
        self.pen_is_down = True

    def set_fill_color(self, color: str) -> None:
        """Raises ValueError for a color Pillow cannot parse."""
        color_to_rgba(color)
        self.fill_color = color

    def set_pen_color(self, color: str) -> None:
        """Raises ValueError for a color Pillow cannot parse."""
        color_to_rgba(color)
        self.pen_color = color

    def set_line_width(self, width: float) -> None:
        if width <= 0:
            raise ValueError(f"Line width must be positive, got {width}")
        self.line_width = width

    def dot(self, radius: float | None = None) -> None:
        """Fill a circle at the current position in the pen color."""
        if radius is None:
            radius = settings.dot_radius
        self.surface.fill_circle(Point(x=self.x, y=self.y), radius, self.pen_color)

    # =========================================================================
    # Filled shapes
    # =========================================================================

    def start_path(self) -> None:
        """Start collecting a polygon at the current position.

        Every later ``forward``/``back`` adds its end point, pen up or down.
        An unfinished previous path is dropped.
        """
        if self.path_to_fill is not None:
            logger.debug(f"Discarding fill path with {len(self.path_to_fill)} vertices")
        self.path_to_fill = DrawPath.starting_at(self.x, self.y)

    def fill_path(self) -> None:
        """Close the collected polygon and fill it with the fill color.

        Does nothing if ``start_path`` was never called. The path stays active,
        so further moves keep extending it.
        """
        if self.path_to_fill is None:
            return
        self.path_to_fill.close_path()
        self.surface.fill(self.path_to_fill, self.fill_color)

    # =========================================================================
    # Position
    # =========================================================================

    def set_pos(self, x: float, y: float) -> None:
        """Jump to a user-coordinate position without drawing."""
        self.x, self.y = to_host(x, y, self.width, self.height)

    def get_pos(self) -> XY:
        return to_user(self.x, self.y, self.width, self.height)

    def set_random_pos(self, x_min: float, x_max: float, y_min: float, y_max: float) -> None:
        """Jump to a uniformly random point in the user-coordinate rectangle."""
        x = x_min + self._rng.random() * (x_max - x_min)
        y = y_min + self._rng.random() * (y_max - y_min)
        self.set_pos(x, y)
