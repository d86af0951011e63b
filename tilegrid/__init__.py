"""
tilegrid: fixed-column grid layout engine

Core modules:
- models: grid items, geometry, change types
- layout_engine: collisions, compaction, move resolution, occupancy
- interaction: pixel mapping, pointer input, drag/resize frames, diff
- config: grid config schema, loading and validation
- runtime: gesture sessions and replay
"""

from tilegrid.errors import (
    InvalidGestureError,
    InvalidGridConfigError,
    ItemNotFoundError,
    LayoutValidationError,
    TileGridError,
    UnresolvableLayoutError,
)
from tilegrid.models import (
    ClientRect,
    CompactType,
    GestureData,
    GridItem,
    LayoutChange,
    LayoutDiffEntry,
    PixelRect,
    PointerEvent,
    PointerKind,
)
from tilegrid.layout_engine import compact, correct_bounds, move_element, validate_layout
from tilegrid.interaction import GestureResult, layout_diff, on_drag, on_resize, x_to_col, y_to_row
from tilegrid.config import GridConfig, load_config

__version__ = "1.0.0"

__all__ = [
    # Errors
    "InvalidGestureError",
    "InvalidGridConfigError",
    "ItemNotFoundError",
    "LayoutValidationError",
    "TileGridError",
    "UnresolvableLayoutError",
    # Models
    "ClientRect",
    "CompactType",
    "GestureData",
    "GridItem",
    "LayoutChange",
    "LayoutDiffEntry",
    "PixelRect",
    "PointerEvent",
    "PointerKind",
    # Engine
    "compact",
    "correct_bounds",
    "move_element",
    "validate_layout",
    # Interaction
    "GestureResult",
    "layout_diff",
    "on_drag",
    "on_resize",
    "x_to_col",
    "y_to_row",
    # Config
    "GridConfig",
    "load_config",
]
