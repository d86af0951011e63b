"""
Screen-space geometry and pointer input

- ClientRect: a measured bounding box (container or grid element)
- PixelRect: where the dragged/resized element should be drawn
- PointerEvent: tagged mouse/touch event
- GestureData: everything one drag/resize frame needs from the UI
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


@dataclass(frozen=True)
class ClientRect:
    """Axis-aligned bounding box in screen pixels"""
    top: float
    left: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ClientRect":
        return cls(
            top=float(data["top"]),
            left=float(data["left"]),
            width=float(data["width"]),
            height=float(data["height"]),
        )


@dataclass(frozen=True)
class PixelRect:
    """
    Rendered rectangle of the manipulated element

    Relative to the grid container. Continuous, unlike the item's grid cell.
    """
    top: float
    left: float
    width: float
    height: float

    def to_dict(self) -> Dict[str, float]:
        return {
            "top": self.top,
            "left": self.left,
            "width": self.width,
            "height": self.height,
        }


@dataclass(frozen=True)
class ClientPoint:
    """Normalized pointer position (client coordinates)"""
    client_x: float
    client_y: float


class PointerKind(Enum):
    """Input device that produced an event"""
    MOUSE = "mouse"
    TOUCH = "touch"


@dataclass(frozen=True)
class PointerEvent:
    """
    Pointer event as captured by the UI

    For touch events the coordinates are the first touch point's.
    """
    kind: PointerKind
    client_x: float
    client_y: float

    @classmethod
    def mouse(cls, client_x: float, client_y: float) -> "PointerEvent":
        return cls(PointerKind.MOUSE, client_x, client_y)

    @classmethod
    def touch(cls, client_x: float, client_y: float) -> "PointerEvent":
        return cls(PointerKind.TOUCH, client_x, client_y)


@dataclass(frozen=True)
class GestureData:
    """
    One drag/resize frame

    Rectangles are captured at gesture start; pointer_drag_event is the
    latest move event.
    """
    pointer_down_event: Any    # PointerEvent | ClientPoint | browser-style mapping
    pointer_drag_event: Any
    container_rect: ClientRect
    dragged_element_rect: ClientRect
