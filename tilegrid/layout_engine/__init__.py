"""
Layout engine

Includes:
- collisions: overlap test and layout queries
- compactor: gravity compaction and bounds correction
- mover: move resolver with collision propagation
- occupancy: coverage matrix and layout validation
"""

from tilegrid.layout_engine.collisions import (
    bottom,
    collides,
    get_all_collisions,
    get_first_collision,
    get_statics,
    sort_layout_items,
)
from tilegrid.layout_engine.compactor import compact, compact_item, correct_bounds
from tilegrid.layout_engine.mover import move_element
from tilegrid.layout_engine.occupancy import (
    find_overlaps,
    has_overlaps,
    occupancy_grid,
    validate_layout,
)

__all__ = [
    # Collisions
    "bottom",
    "collides",
    "get_all_collisions",
    "get_first_collision",
    "get_statics",
    "sort_layout_items",
    # Compaction
    "compact",
    "compact_item",
    "correct_bounds",
    # Move
    "move_element",
    # Occupancy
    "find_overlaps",
    "has_overlaps",
    "occupancy_grid",
    "validate_layout",
]
