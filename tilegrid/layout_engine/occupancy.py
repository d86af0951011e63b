"""
Occupancy matrix and structural validation

A layout rasterised to a cell-coverage count matrix. Cells covered more than
once are overlaps, which makes the no-overlap invariant a single numpy check.
"""

import logging
from collections import Counter
from itertools import combinations
from typing import List, Optional, Tuple

import numpy as np

from tilegrid.errors import LayoutValidationError
from tilegrid.layout_engine.collisions import bottom, collides, right_edge
from tilegrid.models.item import Layout

logger = logging.getLogger(__name__)


def occupancy_grid(layout: Layout, cols: Optional[int] = None) -> np.ndarray:
    """
    Cell coverage counts

    Args:
        layout: items with non-negative positions
        cols: minimum matrix width (items past it widen the matrix)

    Returns:
        int array of shape (rows, columns); 0 empty, 1 covered, >1 overlap
    """
    width = max(cols or 0, right_edge(layout))
    grid = np.zeros((bottom(layout), width), dtype=np.int32)
    for item in layout:
        if item.x < 0 or item.y < 0:
            raise LayoutValidationError([f"{item.id}: negative position ({item.x}, {item.y})"])
        grid[item.y:item.y + item.h, item.x:item.x + item.w] += 1
    return grid


def has_overlaps(layout: Layout) -> bool:
    if not layout:
        return False
    return bool((occupancy_grid(layout) > 1).any())


def find_overlaps(layout: Layout) -> List[Tuple[str, str]]:
    """Colliding id pairs, in layout order"""
    return [(a.id, b.id) for a, b in combinations(layout, 2) if collides(a, b)]


def validate_layout(layout: Layout, cols: Optional[int] = None) -> None:
    """
    Check the structural invariants of a layout

    - ids unique
    - x >= 0, y >= 0, w >= 1, h >= 1
    - no overlaps
    - x + w <= cols (when cols is given)

    Raises:
        LayoutValidationError: lists every violation found
    """
    violations: List[str] = []

    duplicates = [item_id for item_id, count in Counter(i.id for i in layout).items() if count > 1]
    for item_id in duplicates:
        violations.append(f"duplicate id: {item_id}")

    for item in layout:
        if item.x < 0 or item.y < 0:
            violations.append(f"{item.id}: negative position ({item.x}, {item.y})")
        if item.w < 1 or item.h < 1:
            violations.append(f"{item.id}: size below 1 ({item.w}x{item.h})")
        if cols is not None and item.x + item.w > cols:
            violations.append(f"{item.id}: overflows {cols} columns (x={item.x}, w={item.w})")

    # the matrix check is cheap; only list pairs when it finds something
    rasterisable = all(i.x >= 0 and i.y >= 0 and i.w >= 1 and i.h >= 1 for i in layout)
    if not rasterisable or has_overlaps(layout):
        for a, b in find_overlaps(layout):
            violations.append(f"overlap: {a} and {b}")

    if violations:
        logger.debug("validate_layout: %d violations", len(violations))
        raise LayoutValidationError(violations)
