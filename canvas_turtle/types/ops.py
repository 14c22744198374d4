"""Draw operations issued against a surface."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from canvas_turtle.types.geometry import Point


class StrokeOp(BaseModel):
    """An outline drawn along a path."""

    op: Literal["stroke"] = "stroke"
    points: list[Point]
    closed: bool = False
    color: str
    line_width: float


class FillOp(BaseModel):
    """A filled polygon."""

    op: Literal["fill"] = "fill"
    points: list[Point]
    color: str


class DotOp(BaseModel):
    """A filled circle."""

    op: Literal["dot"] = "dot"
    center: Point
    radius: float
    color: str


DrawOp = Annotated[StrokeOp | FillOp | DotOp, Field(discriminator="op")]
