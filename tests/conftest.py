"""
Shared pytest fixtures for tilegrid tests.
"""
from pathlib import Path

import pytest

from tilegrid.config.schema import GridConfig
from tilegrid.models.geometry import ClientRect, GestureData, PointerEvent
from tilegrid.models.item import CompactType, GridItem


CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"


@pytest.fixture
def config_dir():
    """Directory holding the example YAML files."""
    return CONFIG_DIR


@pytest.fixture
def three_items():
    """A(0,0,2,1) and B(2,0,2,1) side by side, C(0,1,4,2) below them."""
    return [
        GridItem("a", 0, 0, 2, 1),
        GridItem("b", 2, 0, 2, 1),
        GridItem("c", 0, 1, 4, 2),
    ]


@pytest.fixture
def grid_config(three_items):
    """12 columns of 100px (1200px container), 30px rows."""
    return GridConfig(cols=12, row_height=30, layout=three_items, compact_type=CompactType.VERTICAL)


@pytest.fixture
def container_rect():
    return ClientRect(top=0, left=0, width=1200, height=600)


@pytest.fixture
def element_a():
    """Rendered rectangle of item "a" in the 1200px container."""
    return ClientRect(top=0, left=0, width=200, height=30)


@pytest.fixture
def gesture(container_rect, element_a):
    """Build a GestureData for item "a" from pointer-down and pointer-move positions."""
    def _make(down, move):
        return GestureData(
            pointer_down_event=down if not isinstance(down, tuple) else PointerEvent.mouse(*down),
            pointer_drag_event=move if not isinstance(move, tuple) else PointerEvent.mouse(*move),
            container_rect=container_rect,
            dragged_element_rect=element_a,
        )
    return _make


def by_id(layout):
    return {item.id: item for item in layout}


@pytest.fixture
def positions():
    """Map a layout to {id: (x, y, w, h)}."""
    def _positions(layout):
        return {item.id: (item.x, item.y, item.w, item.h) for item in by_id(layout).values()}
    return _positions
