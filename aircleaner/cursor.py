"""The custom mouse cursor and screen-to-world conversion."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .geometry import Vec2


class CursorEvent(enum.Enum):
    """Pointer interactions with a draggable object."""

    OUT = "out"
    OVER = "over"
    PRESSED = "pressed"
    RELEASED = "released"


@dataclass(frozen=True)
class CursorIcon:
    """A cursor image and the pixel within it that points."""

    image: str
    hotspot: tuple[int, int]


HAND_POINT = CursorIcon("ui/hand_point.png", (8, 6))
HAND_OPEN = CursorIcon("ui/hand_open.png", (16, 16))
HAND_CLOSED = CursorIcon("ui/hand_closed.png", (16, 16))


@dataclass
class CursorState:
    """Which cursor is shown, and whether something is being dragged."""

    is_dragging: bool = False
    icon: CursorIcon = field(default=HAND_POINT)

    def handle(self, event: CursorEvent) -> CursorIcon | None:
        """React to ``event``; return the new icon, or None if it stays the same."""
        match event, self.is_dragging:
            case CursorEvent.OVER, False:
                icon = HAND_OPEN
            case CursorEvent.PRESSED, False:
                self.is_dragging = True
                icon = HAND_CLOSED
            case CursorEvent.RELEASED, True:
                self.is_dragging = False
                icon = HAND_OPEN
            case CursorEvent.OUT, False:
                icon = HAND_POINT
            case _:
                return None
        self.icon = icon
        return icon


def screen_to_world(
    screen_pos: tuple[float, float], window_size: tuple[float, float]
) -> Vec2:
    """World position under a window pixel, for a camera centred on the origin.

    Window coordinates grow rightwards and downwards; world y grows upwards.
    """
    x, y = screen_pos
    width, height = window_size
    return Vec2(x - width / 2.0, height / 2.0 - y)