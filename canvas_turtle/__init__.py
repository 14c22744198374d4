"""Turtle graphics on pluggable drawing surfaces.

A turtle keeps a position and heading, draws as it moves, fills polygons,
and forwards keyboard and pointer input to user callbacks.
"""

from .registry import SurfaceNotFoundError, SurfaceRegistry, default_registry
from .rendering import ImageSurface, RenderOptions, render_ops
from .surface import RecordingSurface, Surface
from .turtle import Turtle
from .types import TurtleConfig

__all__ = [
    "ImageSurface",
    "RecordingSurface",
    "RenderOptions",
    "Surface",
    "SurfaceNotFoundError",
    "SurfaceRegistry",
    "Turtle",
    "TurtleConfig",
    "default_registry",
    "render_ops",
]
