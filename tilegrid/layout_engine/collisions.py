"""
Collision primitives

Overlap tests and layout queries shared by the compactor and the move
resolver. All functions are read-only over the layout.
"""

from typing import List, Optional

from tilegrid.errors import ItemNotFoundError
from tilegrid.models.item import CompactType, GridItem, Layout


def collides(a: GridItem, b: GridItem) -> bool:
    """
    Whether two items overlap

    Ranges are half-open: [x, x+w) and [y, y+h). An item never collides
    with itself (same id).
    """
    if a.id == b.id:
        return False
    if a.x + a.w <= b.x:
        return False  # a is left of b
    if a.x >= b.x + b.w:
        return False  # a is right of b
    if a.y + a.h <= b.y:
        return False  # a is above b
    if a.y >= b.y + b.h:
        return False  # a is below b
    return True


def get_first_collision(layout: Layout, item: GridItem) -> Optional[GridItem]:
    """First item in layout order that collides with `item`"""
    for other in layout:
        if collides(other, item):
            return other
    return None


def get_all_collisions(layout: Layout, item: GridItem) -> List[GridItem]:
    """All items colliding with `item`, in layout order"""
    return [other for other in layout if collides(other, item)]


def get_statics(layout: Layout) -> List[GridItem]:
    return [item for item in layout if item.static]


def bottom(layout: Layout) -> int:
    """Lowest occupied row edge (max y + h); 0 for an empty layout"""
    max_y = 0
    for item in layout:
        max_y = max(max_y, item.y + item.h)
    return max_y


def right_edge(layout: Layout) -> int:
    """Rightmost occupied column edge (max x + w); 0 for an empty layout"""
    max_x = 0
    for item in layout:
        max_x = max(max_x, item.x + item.w)
    return max_x


def sort_layout_items(layout: Layout, compact_type: CompactType) -> Layout:
    """
    Processing order for compaction and collision handling

    VERTICAL: row then column, (y, x).
    HORIZONTAL: column then row, (x, y).
    NONE: input order.

    `sorted` is stable, so items with equal keys keep their input order.
    """
    if compact_type == CompactType.HORIZONTAL:
        return sorted(layout, key=lambda item: (item.x, item.y))
    if compact_type == CompactType.VERTICAL:
        return sorted(layout, key=lambda item: (item.y, item.x))
    return list(layout)


def index_of(layout: Layout, item_id: str) -> int:
    """
    Position of an item id in the layout

    Raises:
        ItemNotFoundError: id not present
    """
    for i, item in enumerate(layout):
        if item.id == item_id:
            return i
    raise ItemNotFoundError(item_id)
