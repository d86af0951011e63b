"""
Pointer interaction

Includes:
- coords: pixel to grid-unit mapping
- pointer: mouse/touch event normalisation
- gestures: drag and resize frames
- diff: layout change classification
"""

from tilegrid.interaction.coords import round_half_up, x_to_col, y_to_row
from tilegrid.interaction.pointer import client_point
from tilegrid.interaction.gestures import GestureResult, on_drag, on_resize
from tilegrid.interaction.diff import layout_diff

__all__ = [
    "round_half_up",
    "x_to_col",
    "y_to_row",
    "client_point",
    "GestureResult",
    "on_drag",
    "on_resize",
    "layout_diff",
]
