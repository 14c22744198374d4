"""Pure functions for turtle coordinate math.

User coordinates put the origin at the surface center with y pointing up.
Host coordinates are surface pixels with the origin at the top-left corner
and y pointing down. Headings are degrees, 0 pointing up and increasing
clockwise. No side effects or I/O.
"""

import math

from canvas_turtle.types import XY


def to_host(x: float, y: float, width: float, height: float) -> XY:
    """Convert user coordinates to host-surface coordinates."""
    return width / 2 + x, height / 2 - y


def to_user(x: float, y: float, width: float, height: float) -> XY:
    """Convert host-surface coordinates to user coordinates."""
    return x - width / 2, height / 2 - y


def advance(x: float, y: float, heading: float, distance: float) -> XY:
    """Return the host position reached by moving ``distance`` along ``heading``."""
    radians = 2 * math.pi * heading / 360
    return x + math.sin(radians) * distance, y - math.cos(radians) * distance


def _divide(numerator: float, denominator: float) -> float:
    """Float division that yields inf/nan instead of raising on zero."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        # x - x is always +0.0, so the sign comes from the numerator alone
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def heading_towards(x: float, y: float, target_x: float, target_y: float) -> float:
    """Heading from (x, y) to the target, both in host coordinates.

    The result is the arctangent of the slope shifted by +/-90 degrees on
    which side of the turtle the target lies. Targets straight above come
    out as 180, straight below as 0, straight left as 90, and the turtle's
    own position as NaN. Programs written against this behavior rely on it,
    so it is not normalized.
    """
    angle = 180 * math.atan(_divide(y - target_y, x - target_x)) / math.pi
    if (target_x < x and target_y < y) or (target_x < x and target_y > y):
        return -90 + angle
    return 90 + angle
