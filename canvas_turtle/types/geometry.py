"""Core geometry types."""

from pydantic import BaseModel

XY = tuple[float, float]


class Point(BaseModel):
    """A 2D point."""

    x: float
    y: float

    def as_tuple(self) -> XY:
        return self.x, self.y
