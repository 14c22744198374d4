"""Named surface registry.

Stands in for a host page: surfaces are looked up by name, and keyboard
events arrive on a single window-level event source shared by all of them.
"""

import logging

from canvas_turtle.events import EventSource
from canvas_turtle.surface import Surface

logger = logging.getLogger(__name__)


class SurfaceNotFoundError(LookupError):
    """No surface is registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No surface registered under {name!r}")
        self.name = name


class SurfaceRegistry:
    """Surfaces by name plus the shared keyboard event source."""

    def __init__(self) -> None:
        self._surfaces: dict[str, Surface] = {}
        self.keyboard = EventSource()

    def register(self, name: str, surface: Surface) -> Surface:
        """Register a surface, replacing any previous one with the same name."""
        if name in self._surfaces:
            logger.warning(f"Replacing surface {name!r}")
        self._surfaces[name] = surface
        logger.debug(f"Registered surface {name!r} ({surface.width}x{surface.height})")
        return surface

    def unregister(self, name: str) -> None:
        self._surfaces.pop(name, None)

    def get(self, name: str) -> Surface:
        """Look up a surface.

        Raises:
            SurfaceNotFoundError: if the name is unknown
        """
        try:
            return self._surfaces[name]
        except KeyError:
            raise SurfaceNotFoundError(name) from None

    def names(self) -> list[str]:
        return sorted(self._surfaces)

    def __contains__(self, name: object) -> bool:
        return name in self._surfaces


default_registry = SurfaceRegistry()
