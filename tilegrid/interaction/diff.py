"""
Layout diff
"""

from typing import Dict

from tilegrid.models.changes import LayoutChange, LayoutDiff, LayoutDiffEntry
from tilegrid.models.item import GridItem, Layout


def layout_diff(layout_a: Layout, layout_b: Layout) -> LayoutDiff:
    """
    Per-id change between two snapshots

    Only ids present in both layouts are compared. Unchanged items are
    omitted; there is no add/remove classification.

    Returns:
        {item_id: LayoutDiffEntry}, empty when nothing moved or resized
    """
    by_id: Dict[str, GridItem] = {item.id: item for item in layout_b}
    diff: LayoutDiff = {}

    for item_a in layout_a:
        item_b = by_id.get(item_a.id)
        if item_b is None:
            continue

        pos_changed = item_a.x != item_b.x or item_a.y != item_b.y
        size_changed = item_a.w != item_b.w or item_a.h != item_b.h

        if pos_changed and size_changed:
            diff[item_b.id] = LayoutDiffEntry(LayoutChange.MOVE_AND_RESIZE)
        elif pos_changed:
            diff[item_b.id] = LayoutDiffEntry(LayoutChange.MOVE)
        elif size_changed:
            diff[item_b.id] = LayoutDiffEntry(LayoutChange.RESIZE)

    return diff
