"""SVG output for recorded drawings.

Pure functions for path conversion - no state access.
"""

from xml.sax.saxutils import quoteattr

from canvas_turtle.types import DotOp, DrawOp, DrawPath, FillOp, Point, StrokeOp


def _fmt(value: float) -> str:
    """Format a coordinate without trailing zeros."""
    return f"{value:.3f}".rstrip("0").rstrip(".") or "0"


def points_to_svg_d(points: list[Point], closed: bool = False) -> str:
    """Convert a point list to an SVG path 'd' attribute."""
    if not points:
        return ""

    d_parts = [f"M {_fmt(points[0].x)} {_fmt(points[0].y)}"]
    for p in points[1:]:
        d_parts.append(f"L {_fmt(p.x)} {_fmt(p.y)}")
    if closed:
        d_parts.append("Z")
    return " ".join(d_parts)


def render_path_to_svg_d(path: DrawPath) -> str:
    """Convert a DrawPath to an SVG path 'd' attribute."""
    return points_to_svg_d(path.points, path.closed)


def render_op_to_svg(op: DrawOp) -> str:
    """Convert one draw op to an SVG element string."""
    match op:
        case StrokeOp():
            d = points_to_svg_d(op.points, op.closed)
            if not d:
                return ""
            return (
                f'<path d="{d}" fill="none" stroke={quoteattr(op.color)} '
                f'stroke-width="{_fmt(op.line_width)}" '
                'stroke-linecap="round" stroke-linejoin="round"/>'
            )
        case FillOp():
            if len(op.points) < 3:
                return ""
            d = points_to_svg_d(op.points, closed=True)
            return f'<path d="{d}" fill={quoteattr(op.color)} stroke="none"/>'
        case DotOp():
            if op.radius <= 0:
                return ""
            return (
                f'<circle cx="{_fmt(op.center.x)}" cy="{_fmt(op.center.y)}" '
                f'r="{_fmt(op.radius)}" fill={quoteattr(op.color)}/>'
            )
    return ""


def render_ops_to_svg(
    ops: list[DrawOp],
    width: int = 500,
    height: int = 500,
    background: str | None = "#FFFFFF",
) -> str:
    """Render recorded ops to a standalone SVG document.

    Args:
        ops: Ops in the order they were issued (later ops paint on top)
        width: Document width in pixels
        height: Document height in pixels
        background: Background fill, or None for transparent

    Returns:
        SVG document as a string.
    """
    lines = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">'
    ]
    if background:
        lines.append(f'<rect width="100%" height="100%" fill={quoteattr(background)}/>')
    for op in ops:
        element = render_op_to_svg(op)
        if element:
            lines.append(element)
    lines.append("</svg>")
    return "\n".join(lines) + "\n"
