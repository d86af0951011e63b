"""
Compaction (gravity)

Implements:
- compact: greedy single-pass compaction toward the top or left edge
- compact_item: place one item against the already-placed set
- correct_bounds: pull items back inside the column range
"""

import logging
from dataclasses import replace
from typing import Dict, List, Union

from tilegrid.errors import UnresolvableLayoutError
from tilegrid.layout_engine.collisions import (
    bottom,
    get_first_collision,
    get_statics,
    sort_layout_items,
)
from tilegrid.models.item import CompactType, GridItem, Layout
from tilegrid.utils.guards import require_positive

logger = logging.getLogger(__name__)


def compact(
    layout: Layout,
    compact_type: Union[CompactType, str, None],
    cols: int,
) -> Layout:
    """
    Compact a layout

    Static items are placed first and never move. The rest are processed in
    `sort_layout_items` order; each one floats toward the gravity edge until
    the next step would hit an already-placed item, then joins the placed set.

    Args:
        layout: input layout (not modified)
        compact_type: gravity axis; NONE only resolves collisions
        cols: column count

    Returns:
        New layout, same order and ids as the input
    """
    compact_type = CompactType.parse(compact_type)
    require_positive("cols", cols)

    placed: List[GridItem] = get_statics(layout)
    positions: Dict[str, int] = {item.id: i for i, item in enumerate(layout)}
    out: List[GridItem] = list(layout)

    for item in sort_layout_items(layout, compact_type):
        if not item.static:
            item = compact_item(placed, item, compact_type, cols)
            placed.append(item)
        out[positions[item.id]] = item

    logger.debug(
        "compact: %d items, type=%s, cols=%d, bottom=%d",
        len(out), compact_type.value, cols, bottom(out),
    )
    return out


def compact_item(
    placed: Layout,
    item: GridItem,
    compact_type: CompactType,
    cols: int,
) -> GridItem:
    """
    Place one item against the placed set

    1. float toward the gravity edge one cell at a time
    2. push past any placed item still overlapping (input overlaps, statics)

    Raises:
        UnresolvableLayoutError: push loop exceeded its bound
    """
    x = max(0, item.x)
    y = max(0, item.y)

    if compact_type == CompactType.VERTICAL:
        # nothing placed below bottom(), so jumping there is free
        y = min(bottom(placed), y)
        while y > 0 and get_first_collision(placed, item.moved_to(x, y - 1)) is None:
            y -= 1

    candidate = item.moved_to(x, y)
    if compact_type == CompactType.HORIZONTAL:
        candidate = _float_left(placed, candidate)

    # y only grows or x jumps to a collider edge; one row holds at most len(placed) edges
    limit = (len(placed) + 1) * (bottom(placed) + 2)
    steps = 0

    collider = get_first_collision(placed, candidate)
    while collider is not None:
        steps += 1
        if steps > limit:
            raise UnresolvableLayoutError(item.id, steps - 1)

        if compact_type == CompactType.HORIZONTAL:
            x = collider.x + collider.w
            if x + candidate.w > cols:
                # wrap to the next row
                candidate = candidate.moved_to(max(0, cols - candidate.w), candidate.y + 1)
            else:
                candidate = candidate.moved_to(x, candidate.y)
            # a wrapped item starts from the right edge and has to settle again
            candidate = _float_left(placed, candidate)
        else:
            candidate = candidate.moved_to(candidate.x, collider.y + collider.h)

        collider = get_first_collision(placed, candidate)

    return candidate


def _float_left(placed: Layout, item: GridItem) -> GridItem:
    """Slide left while the next column is free"""
    x = item.x
    while x > 0 and get_first_collision(placed, item.moved_to(x - 1, item.y)) is None:
        x -= 1
    return item.moved_to(x, item.y)


def correct_bounds(layout: Layout, cols: int) -> Layout:
    """
    Bring items back inside the columns

    - w > cols is clamped to cols
    - x + w > cols shifts the item left
    - negative x/y are raised to 0
    - a static item overlapping an earlier static item moves down until free

    Non-static overlaps are left for `compact` to resolve.
    """
    require_positive("cols", cols)

    statics: List[GridItem] = []
    out: List[GridItem] = []

    for item in layout:
        w = min(item.w, cols)
        x = item.x
        if x + w > cols:
            x = cols - w
        x = max(0, x)
        y = max(0, item.y)
        fixed = replace(item, x=x, y=y, w=w)

        if fixed.static:
            while get_first_collision(statics, fixed) is not None:
                fixed = fixed.moved_to(fixed.x, fixed.y + 1)
            statics.append(fixed)

        if not fixed.same_geometry(item):
            logger.debug(
                "correct_bounds: %s (%d,%d,%d) -> (%d,%d,%d)",
                item.id, item.x, item.y, item.w, fixed.x, fixed.y, fixed.w,
            )
        out.append(fixed)

    return out
