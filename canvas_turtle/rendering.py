"""Raster rendering with Pillow.

Two entry points share the same drawing primitives:
- ``ImageSurface`` rasterizes turtle output as it happens
- ``render_ops`` replays ops captured by a ``RecordingSurface``
"""

from __future__ import annotations

import base64
import io
import logging
from dataclasses import dataclass
from pathlib import Path as FilePath
from typing import Literal

from PIL import Image, ImageColor, ImageDraw

from canvas_turtle.events import EventSource
from canvas_turtle.types import XY, DotOp, DrawOp, DrawPath, FillOp, Point, StrokeOp

logger = logging.getLogger(__name__)


def color_to_rgba(color: str | tuple[int, int, int, int]) -> tuple[int, int, int, int]:
    """Convert a CSS-style color string to an RGBA tuple.

    Accepts anything ``PIL.ImageColor`` understands: ``#00F``, ``#0000ff``,
    ``#0000ff80``, ``blue``, ``rgb(0, 0, 255)``, ``hsl(240, 100%, 50%)``.
    """
    if isinstance(color, tuple):
        return color
    rgb = ImageColor.getrgb(color)
    if len(rgb) == 4:
        return rgb  # type: ignore[return-value]
    r, g, b = rgb[:3]
    return (r, g, b, 255)


def image_to_base64(img: Image.Image) -> str:
    """Convert PIL Image to base64 PNG string."""
    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return base64.standard_b64encode(buffer.getvalue()).decode("utf-8")


def _stroke_width(line_width: float) -> int:
    return max(1, round(line_width))


def _draw_stroke(
    draw: ImageDraw.ImageDraw, points: list[XY], closed: bool, color: str, line_width: float
) -> None:
    if len(points) < 2:
        return
    if closed:
        points = [*points, points[0]]
    draw.line(points, fill=color_to_rgba(color), width=_stroke_width(line_width), joint="curve")


def _draw_fill(draw: ImageDraw.ImageDraw, points: list[XY], color: str) -> None:
    # Fewer than three vertices enclose no area
    if len(points) < 3:
        return
    draw.polygon(points, fill=color_to_rgba(color))


def _draw_dot(draw: ImageDraw.ImageDraw, center: XY, radius: float, color: str) -> None:
    if radius <= 0:
        return
    cx, cy = center
    draw.ellipse([cx - radius, cy - radius, cx + radius, cy + radius], fill=color_to_rgba(color))


def draw_op(draw: ImageDraw.ImageDraw, op: DrawOp) -> None:
    """Rasterize a single recorded op."""
    match op:
        case StrokeOp():
            points = [p.as_tuple() for p in op.points]
            _draw_stroke(draw, points, op.closed, op.color, op.line_width)
        case FillOp():
            _draw_fill(draw, [p.as_tuple() for p in op.points], op.color)
        case DotOp():
            _draw_dot(draw, op.center.as_tuple(), op.radius, op.color)


class ImageSurface:
    """Surface backed by an RGBA Pillow image.

    Each call is drawn immediately with alpha blending, so the image always
    reflects everything drawn so far.
    """

    def __init__(self, width: int = 500, height: int = 500, background: str = "#FFFFFF") -> None:
        self.width = width
        self.height = height
        self.background = background
        self.events = EventSource()
        self._image = Image.new("RGBA", (width, height), color_to_rgba(background))
        self._draw = ImageDraw.Draw(self._image, "RGBA")

    def stroke(self, path: DrawPath, color: str, line_width: float) -> None:
        _draw_stroke(self._draw, path.to_tuples(), path.closed, color, line_width)

    def fill(self, path: DrawPath, color: str) -> None:
        _draw_fill(self._draw, path.to_tuples(), color)

    def fill_circle(self, center: Point, radius: float, color: str) -> None:
        _draw_dot(self._draw, center.as_tuple(), radius, color)

    def clear(self) -> None:
        """Repaint the background."""
        self._image = Image.new("RGBA", (self.width, self.height), color_to_rgba(self.background))
        self._draw = ImageDraw.Draw(self._image, "RGBA")

    def to_image(self) -> Image.Image:
        """Return a copy of the current image."""
        return self._image.copy()

    def to_png(self, optimize: bool = False) -> bytes:
        buffer = io.BytesIO()
        self._image.save(buffer, format="PNG", optimize=optimize)
        return buffer.getvalue()

    def to_base64(self) -> str:
        return image_to_base64(self._image)

    def save(self, path: str | FilePath) -> None:
        """Save to a file, format chosen from the extension."""
        img = self._image
        if FilePath(path).suffix.lower() in (".jpg", ".jpeg", ".bmp"):
            img = img.convert("RGB")
        img.save(path)
        logger.info(f"Saved {self.width}x{self.height} image to {path}")


@dataclass(frozen=True)
class RenderOptions:
    """Configuration for replaying ops to an image.

    Attributes:
        width: Output image width in pixels
        height: Output image height in pixels
        background_color: Background color as CSS string or RGBA tuple
        scale: Multiplier applied to every coordinate and size
        output_format: Return type - "image" (PIL), "bytes", or "base64"
        optimize_png: Enable PNG optimization (slower but smaller)
    """

    width: int = 500
    height: int = 500
    background_color: str | tuple[int, int, int, int] = "#FFFFFF"
    scale: float = 1.0
    output_format: Literal["image", "bytes", "base64"] = "bytes"
    optimize_png: bool = False


def _scale_op(op: DrawOp, scale: float) -> DrawOp:
    if scale == 1.0:
        return op
    match op:
        case StrokeOp():
            points = [Point(x=p.x * scale, y=p.y * scale) for p in op.points]
            return op.model_copy(update={"points": points, "line_width": op.line_width * scale})
        case FillOp():
            points = [Point(x=p.x * scale, y=p.y * scale) for p in op.points]
            return op.model_copy(update={"points": points})
        case DotOp():
            center = Point(x=op.center.x * scale, y=op.center.y * scale)
            return op.model_copy(update={"center": center, "radius": op.radius * scale})
    return op


def render_ops(
    ops: list[DrawOp],
    options: RenderOptions | None = None,
) -> Image.Image | bytes | str:
    """Replay draw ops into an image.

    Args:
        ops: Ops in the order they were issued
        options: Render configuration (uses defaults if None)

    Returns:
        PIL Image, PNG bytes, or base64 string depending on options.output_format
    """
    if options is None:
        options = RenderOptions()

    background = color_to_rgba(options.background_color)
    img = Image.new("RGBA", (options.width, options.height), background)
    draw = ImageDraw.Draw(img, "RGBA")

    for op in ops:
        draw_op(draw, _scale_op(op, options.scale))

    logger.debug(f"Rendered {len(ops)} op(s) at {options.width}x{options.height}")

    if options.output_format == "image":
        return img

    buffer = io.BytesIO()
    img.save(buffer, format="PNG", optimize=options.optimize_png)
    png_bytes = buffer.getvalue()

    if options.output_format == "base64":
        return base64.standard_b64encode(png_bytes).decode("utf-8")

    return png_bytes
