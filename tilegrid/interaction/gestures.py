"""
Drag / resize orchestration

Turns one gesture frame (pointer-down event, latest pointer event, cached
container and element rectangles) into a new layout plus the pixel rectangle
the manipulated element should be drawn at.

The grid position is discrete; the pixel rectangle follows the pointer
continuously, so dragging stays smooth while collisions resolve per cell.
"""

import logging
from dataclasses import dataclass
from typing import Union

from tilegrid.config.schema import GridConfig
from tilegrid.interaction.coords import x_to_col, y_to_row
from tilegrid.interaction.pointer import client_point
from tilegrid.layout_engine.compactor import compact
from tilegrid.layout_engine.mover import move_element
from tilegrid.models.geometry import GestureData, PixelRect
from tilegrid.models.item import CompactType, Layout
from tilegrid.utils.guards import require_positive

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GestureResult:
    """Output of one drag/resize frame"""
    layout: Layout
    dragged_item_rect: PixelRect


def on_drag(
    item_id: str,
    config: GridConfig,
    compact_type: Union[CompactType, str, None],
    gesture: GestureData,
) -> GestureResult:
    """
    Layout and element rectangle for one drag frame

    Args:
        item_id: id of the dragged item
        config: current grid config (cols, row height, layout)
        compact_type: compaction applied after the move
        gesture: pointer events and cached rectangles

    Returns:
        GestureResult(layout, dragged_item_rect)

    Raises:
        ItemNotFoundError: item_id not in config.layout
        InvalidGridConfigError: non-positive cols, row height or container width
    """
    compact_type = CompactType.parse(compact_type)
    container = gesture.container_rect
    element = gesture.dragged_element_rect
    _check_geometry(config, container.width)

    item = config.find_item(item_id)
    if item.static:
        return _static_result(config, compact_type, gesture)

    start = client_point(gesture.pointer_down_event)
    current = client_point(gesture.pointer_drag_event)

    # grab point inside the element
    offset_x = start.client_x - element.left
    offset_y = start.client_y - element.top

    # element top-left, relative to the container
    grid_rel_x = current.client_x - container.left - offset_x
    grid_rel_y = current.client_y - container.top - offset_y

    x = x_to_col(grid_rel_x, config.cols, container.width)
    y = y_to_row(grid_rel_y, config.row_height)

    # move_element does not keep items inside the grid on its own
    x = max(0, x)
    y = max(0, y)
    if x + item.w > config.cols:
        x = max(0, config.cols - item.w)

    layout = move_element(
        config.layout,
        item_id,
        x,
        y,
        cols=config.cols,
        compact_type=compact_type,
        is_user_action=True,
        prevent_collision=False,
    )
    layout = compact(layout, compact_type, config.cols)

    logger.debug("on_drag: %s -> cell (%d, %d), px (%.1f, %.1f)", item_id, x, y, grid_rel_x, grid_rel_y)

    return GestureResult(
        layout=layout,
        dragged_item_rect=PixelRect(
            top=grid_rel_y,
            left=grid_rel_x,
            width=element.width,
            height=element.height,
        ),
    )


def on_resize(
    item_id: str,
    config: GridConfig,
    compact_type: Union[CompactType, str, None],
    gesture: GestureData,
) -> GestureResult:
    """
    Layout and element rectangle for one resize frame

    Only w/h of the item change; its origin stays put, so there is no move
    resolution, only compaction.

    Raises:
        ItemNotFoundError: item_id not in config.layout
        InvalidGridConfigError: non-positive cols, row height or container width
    """
    compact_type = CompactType.parse(compact_type)
    container = gesture.container_rect
    element = gesture.dragged_element_rect
    _check_geometry(config, container.width)

    item = config.find_item(item_id)
    if item.static:
        return _static_result(config, compact_type, gesture)

    start = client_point(gesture.pointer_down_event)
    current = client_point(gesture.pointer_drag_event)

    # distance between the grab point and the element's right/bottom edge
    resize_offset_x = element.width - (start.client_x - element.left)
    resize_offset_y = element.height - (start.client_y - element.top)

    width = current.client_x - element.left + resize_offset_x
    height = current.client_y - element.top + resize_offset_y

    w = x_to_col(width, config.cols, container.width)
    h = y_to_row(height, config.row_height)

    w, h = item.clamp_size(w, h)
    w = max(1, w)
    h = max(1, h)
    if item.x + w > config.cols:
        w = max(1, config.cols - item.x)

    resized = item.resized_to(w, h)
    layout = [resized if other.id == item_id else other for other in config.layout]
    layout = compact(layout, compact_type, config.cols)

    logger.debug("on_resize: %s -> %dx%d, px %.1fx%.1f", item_id, w, h, width, height)

    return GestureResult(
        layout=layout,
        dragged_item_rect=PixelRect(
            top=element.top - container.top,
            left=element.left - container.left,
            width=width,
            height=height,
        ),
    )


def _check_geometry(config: GridConfig, container_width: float) -> None:
    require_positive("cols", config.cols)
    require_positive("row_height", config.row_height)
    require_positive("container_width", container_width)


def _static_result(
    config: GridConfig,
    compact_type: CompactType,
    gesture: GestureData,
) -> GestureResult:
    """Static items do not follow the pointer; they stay where they are drawn"""
    container = gesture.container_rect
    element = gesture.dragged_element_rect
    return GestureResult(
        layout=compact(config.layout, compact_type, config.cols),
        dragged_item_rect=PixelRect(
            top=element.top - container.top,
            left=element.left - container.left,
            width=element.width,
            height=element.height,
        ),
    )
