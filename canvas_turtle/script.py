"""Run turtle programs from Python files."""

from __future__ import annotations

import logging
import math
import random
import runpy
from dataclasses import dataclass
from functools import partial
from pathlib import Path as FilePath
from typing import Any

from canvas_turtle import commands, user_input
from canvas_turtle.config import settings
from canvas_turtle.registry import SurfaceRegistry
from canvas_turtle.surface import Surface
from canvas_turtle.turtle import Turtle

logger = logging.getLogger(__name__)


@dataclass
class ScriptResult:
    """What a program left behind."""

    surface: Surface
    turtle: Turtle | None
    registry: SurfaceRegistry


def script_globals(registry: SurfaceRegistry) -> dict[str, Any]:
    """Globals a turtle program starts with.

    Every command from ``canvas_turtle.commands`` plus the prompt helpers,
    ``math`` and ``random``. ``make_turtle`` looks surfaces up in ``registry``.
    """
    namespace: dict[str, Any] = {name: getattr(commands, name) for name in commands.__all__}
    namespace["make_turtle"] = partial(commands.make_turtle, registry=registry)
    namespace["input_int"] = user_input.input_int
    namespace["input_float"] = user_input.input_float
    namespace["input_string"] = user_input.input_string
    namespace["math"] = math
    namespace["random"] = random
    return namespace


def run_script(
    path: str | FilePath,
    surface: Surface,
    *,
    canvas_name: str | None = None,
) -> ScriptResult:
    """Execute a turtle program against ``surface``.

    The surface is registered under ``canvas_name`` (default: the configured
    canvas name) in a fresh registry, so ``make_turtle()`` with no arguments
    finds it. Exceptions raised by the program propagate unchanged. The
    previously bound global turtle is restored afterwards.

    Returns:
        The surface, the turtle the program made (if any) and the registry
    """
    path = FilePath(path)
    registry = SurfaceRegistry()
    registry.register(canvas_name or settings.default_canvas, surface)

    previous = commands.get_turtle()
    commands.reset()
    logger.info(f"Running turtle program {path}")
    try:
        runpy.run_path(str(path), init_globals=script_globals(registry), run_name="__main__")
        turtle = commands.get_turtle()
    finally:
        commands.set_turtle(previous)

    if turtle is None:
        logger.warning(f"{path} never called make_turtle()")
    return ScriptResult(surface=surface, turtle=turtle, registry=registry)
