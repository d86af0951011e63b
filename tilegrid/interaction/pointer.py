"""
Pointer event normalisation

Resolves whatever the UI hands over (a PointerEvent, a ClientPoint, or a
browser-style event mapping) into one ClientPoint. Nothing past this module
needs to know which device produced the coordinates.
"""

from typing import Any, Mapping, Sequence

from tilegrid.errors import InvalidGestureError
from tilegrid.models.geometry import ClientPoint, PointerEvent
from tilegrid.utils.guards import require_finite


def client_point(event: Any) -> ClientPoint:
    """
    Client coordinates of a pointer event

    Mapping form: `{"clientX", "clientY"}` for mouse events, or
    `{"touches": [...]}` / `{"changedTouches": [...]}` for touch events
    (first point wins; `touches` is empty on touchend, hence the fallback).

    Raises:
        InvalidGestureError: unsupported event shape or touch event without points
    """
    if isinstance(event, ClientPoint):
        point = event
    elif isinstance(event, PointerEvent):
        point = ClientPoint(event.client_x, event.client_y)
    elif isinstance(event, Mapping):
        point = _from_mapping(event)
    else:
        raise InvalidGestureError(f"Unsupported pointer event: {event!r}")

    require_finite("client_x", point.client_x)
    require_finite("client_y", point.client_y)
    return point


def _from_mapping(event: Mapping) -> ClientPoint:
    if "clientX" in event and "clientY" in event:
        return ClientPoint(float(event["clientX"]), float(event["clientY"]))

    for key in ("touches", "changedTouches"):
        touches = event.get(key)
        if isinstance(touches, Sequence) and len(touches) > 0:
            first = touches[0]
            return ClientPoint(float(first["clientX"]), float(first["clientY"]))

    raise InvalidGestureError(f"Pointer event has no client coordinates: {dict(event)!r}")
