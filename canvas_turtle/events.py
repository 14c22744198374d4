"""Synchronous input event dispatch.

A host (test harness, GUI shell, script runner) pushes keyboard and pointer
events into an ``EventSource``; listeners run immediately, in registration
order, on the caller's thread.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable
from typing import Any

from canvas_turtle.coordinates import to_user
from canvas_turtle.types import XY, EventType, InputEvent, KeyEvent, PointerEvent

logger = logging.getLogger(__name__)

Listener = Callable[[Any], None]


class EventSource:
    """Listener registry for one event target (a window or a surface)."""

    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = defaultdict(list)

    def add_listener(self, event_type: EventType, listener: Listener) -> None:
        self._listeners[event_type].append(listener)

    def remove_listener(self, event_type: EventType, listener: Listener) -> None:
        """Remove a listener; unknown listeners are ignored."""
        listeners = self._listeners.get(event_type, [])
        if listener in listeners:
            listeners.remove(listener)

    def listener_count(self, event_type: EventType) -> int:
        return len(self._listeners.get(event_type, []))

    def dispatch(self, event: InputEvent) -> int:
        """Deliver an event to every listener of its type.

        Returns:
            Number of listeners invoked
        """
        listeners = list(self._listeners.get(event.type, []))
        logger.debug(f"Dispatching {event.type} to {len(listeners)} listener(s)")
        for listener in listeners:
            listener(event)
        return len(listeners)

    # Convenience for hosts that don't build event models themselves

    def key_down(self, key: str) -> int:
        return self.dispatch(KeyEvent(key=key))

    def click(self, offset_x: float, offset_y: float) -> int:
        return self.dispatch(PointerEvent(type="click", offset_x=offset_x, offset_y=offset_y))

    def move(self, offset_x: float, offset_y: float) -> int:
        return self.dispatch(PointerEvent(type="mousemove", offset_x=offset_x, offset_y=offset_y))


def pointer_to_user(event: PointerEvent, width: float, height: float, scale: float) -> XY:
    """Map a pointer offset to user coordinates.

    Offsets are first multiplied by ``scale`` (the display's backing-store
    pixel ratio) so they land in surface pixels.
    """
    return to_user(scale * event.offset_x, scale * event.offset_y, width, height)
