"""Path model built up by the turtle and handed to surfaces."""

from pydantic import BaseModel

from canvas_turtle.types.geometry import XY, Point


class DrawPath(BaseModel):
    """A single open or closed polyline.

    Mirrors the move-to/line-to/close-path construction of a 2D canvas path.
    Calling ``move_to`` starts the path over at the given point.
    """

    points: list[Point] = []
    closed: bool = False

    @classmethod
    def starting_at(cls, x: float, y: float) -> "DrawPath":
        path = cls()
        path.move_to(x, y)
        return path

    def move_to(self, x: float, y: float) -> None:
        self.points = [Point(x=x, y=y)]
        self.closed = False

    def line_to(self, x: float, y: float) -> None:
        self.points.append(Point(x=x, y=y))

    def close_path(self) -> None:
        self.closed = True

    def to_tuples(self) -> list[XY]:
        """Convert to list of (x, y) tuples for PIL drawing."""
        return [p.as_tuple() for p in self.points]

    def __len__(self) -> int:
        return len(self.points)
