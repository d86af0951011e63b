"""
Data models

Includes:
- item: grid items, compaction type, layout alias
- geometry: screen rectangles, pointer events, gesture payload
- changes: layout diff classification
"""

from tilegrid.models.item import CompactType, GridItem, Layout
from tilegrid.models.geometry import (
    ClientPoint,
    ClientRect,
    GestureData,
    PixelRect,
    PointerEvent,
    PointerKind,
)
from tilegrid.models.changes import LayoutChange, LayoutDiff, LayoutDiffEntry

__all__ = [
    # Items
    "CompactType",
    "GridItem",
    "Layout",
    # Geometry
    "ClientPoint",
    "ClientRect",
    "GestureData",
    "PixelRect",
    "PointerEvent",
    "PointerKind",
    # Changes
    "LayoutChange",
    "LayoutDiff",
    "LayoutDiffEntry",
]
