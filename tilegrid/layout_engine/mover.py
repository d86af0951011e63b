"""
Move resolver

Places one item at a requested cell and displaces everything it runs into.
Displacement is propagated with an explicit work queue instead of recursion,
so long push chains cannot exhaust the call stack.
"""

import logging
from collections import deque
from typing import Deque, List, Optional, Union

from tilegrid.errors import UnresolvableLayoutError
from tilegrid.layout_engine.collisions import collides, index_of, sort_layout_items
from tilegrid.models.item import CompactType, GridItem, Layout
from tilegrid.utils.guards import require_positive

logger = logging.getLogger(__name__)


def move_element(
    layout: Layout,
    item_id: str,
    x: int,
    y: int,
    *,
    cols: int,
    compact_type: Union[CompactType, str, None] = CompactType.VERTICAL,
    is_user_action: bool = True,
    prevent_collision: bool = False,
) -> Layout:
    """
    Move one item and push colliding items out of its way

    Args:
        layout: input layout (not modified)
        item_id: id of the item to move
        x, y: requested top-left cell
        cols: column count; x is lowered so the item stays inside
        compact_type: selects the push axis (x for HORIZONTAL, y otherwise)
        is_user_action: let direct colliders jump in front of the moved item
            when it travels toward the origin and there is room
        prevent_collision: cancel the move instead of pushing

    Returns:
        New layout in input order. Not compacted.

    Raises:
        ItemNotFoundError: unknown item_id
        UnresolvableLayoutError: displacement exceeded its iteration bound
    """
    compact_type = CompactType.parse(compact_type)
    require_positive("cols", cols)

    items: List[GridItem] = list(layout)
    anchor_idx = index_of(items, item_id)
    original = items[anchor_idx]

    if original.static:
        logger.debug("move_element: %s is static, not moved", item_id)
        return items

    x = max(0, x)
    y = max(0, y)
    if x + original.w > cols:
        x = max(0, cols - original.w)

    if (x, y) == (original.x, original.y):
        return items

    moved = original.moved_to(x, y)
    items[anchor_idx] = moved

    if prevent_collision and any(collides(other, moved) for other in items):
        logger.debug("move_element: %s blocked at (%d, %d)", item_id, x, y)
        return list(layout)

    horizontal = compact_type == CompactType.HORIZONTAL
    if horizontal:
        toward_origin = x <= original.x
    else:
        toward_origin = y <= original.y

    _resolve_collisions(
        items,
        anchor_idx,
        horizontal=horizontal,
        compact_type=compact_type,
        reverse=toward_origin,
        allow_swap=is_user_action and toward_origin,
    )

    displaced = sum(1 for a, b in zip(layout, items) if not a.same_geometry(b)) - 1
    logger.debug(
        "move_element: %s (%d, %d) -> (%d, %d), displaced %d",
        item_id, original.x, original.y, items[anchor_idx].x, items[anchor_idx].y,
        max(0, displaced),
    )
    return items


def _resolve_collisions(
    items: List[GridItem],
    anchor_idx: int,
    *,
    horizontal: bool,
    compact_type: CompactType,
    reverse: bool,
    allow_swap: bool,
) -> None:
    """
    Work-queue collision propagation, in place on `items`

    Every pop takes a pusher and walks its colliders:
    - static collider, or the anchor itself: the pusher yields and moves
      past the collider
    - anything else: the collider moves to the pusher's far edge
    Moved items are queued again. All moves go away from the origin, except
    the one-time swap of a direct collider into free space in front of the
    anchor.
    """
    n = len(items)
    limit = 2 * (n + 1) ** 2
    positions = {item.id: i for i, item in enumerate(items)}
    anchor_id = items[anchor_idx].id

    queue: Deque[int] = deque([anchor_idx])
    pops = 0

    while queue:
        pops += 1
        if pops > limit:
            raise UnresolvableLayoutError(anchor_id, pops - 1)

        pusher_idx = queue.popleft()
        pusher = items[pusher_idx]

        order = sort_layout_items(items, compact_type)
        if reverse:
            order.reverse()

        for candidate in order:
            other_idx = positions[candidate.id]
            other = items[other_idx]
            if not collides(other, pusher):
                continue

            if other.static or (other_idx == anchor_idx and pusher_idx != anchor_idx):
                # fixed in place: the pusher has to get out of the way
                pusher = _past(pusher, other, horizontal)
                items[pusher_idx] = pusher
                queue.append(pusher_idx)
                break

            if allow_swap and pusher_idx == anchor_idx:
                swapped = _in_front(other, pusher, horizontal, items)
                if swapped is not None:
                    items[other_idx] = swapped
                    continue

            items[other_idx] = _past(other, pusher, horizontal)
            queue.append(other_idx)


def _past(item: GridItem, blocker: GridItem, horizontal: bool) -> GridItem:
    """Item moved to the far edge of blocker along the push axis"""
    if horizontal:
        return item.moved_to(blocker.x + blocker.w, item.y)
    return item.moved_to(item.x, blocker.y + blocker.h)


def _in_front(
    item: GridItem,
    anchor: GridItem,
    horizontal: bool,
    items: List[GridItem],
) -> Optional[GridItem]:
    """Item placed just before the anchor on the push axis, if that spot is free"""
    if horizontal:
        target = item.moved_to(anchor.x - item.w, item.y)
        if target.x < 0:
            return None
    else:
        target = item.moved_to(item.x, anchor.y - item.h)
        if target.y < 0:
            return None

    if any(collides(other, target) for other in items):
        return None
    return target
