"""Input event types delivered by a host event source."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

EventType = Literal["keydown", "click", "mousemove"]


class KeyEvent(BaseModel):
    """A key went down."""

    type: Literal["keydown"] = "keydown"
    key: str  # Key identifier, e.g. "a", "ArrowUp", "Enter"


class PointerEvent(BaseModel):
    """A click or pointer move, in raw surface pixel offsets."""

    type: Literal["click", "mousemove"]
    offset_x: float
    offset_y: float


InputEvent = Annotated[KeyEvent | PointerEvent, Field(discriminator="type")]
