"""
Grid configuration snapshot
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

from tilegrid.errors import ItemNotFoundError
from tilegrid.models.item import CompactType, GridItem, Layout


@dataclass(frozen=True)
class GridConfig:
    """
    Immutable input of one gesture frame

    Every computation returns a new layout; `with_layout` builds the
    snapshot for the next frame.
    """
    cols: int
    row_height: float
    layout: Layout = field(default_factory=list)
    compact_type: CompactType = CompactType.VERTICAL

    def find_item(self, item_id: str) -> GridItem:
        """
        Look up an item by id

        Raises:
            ItemNotFoundError: id not in the layout
        """
        for item in self.layout:
            if item.id == item_id:
                return item
        raise ItemNotFoundError(item_id)

    def get_item(self, item_id: str) -> Optional[GridItem]:
        """Same as find_item, but None for unknown ids"""
        for item in self.layout:
            if item.id == item_id:
                return item
        return None

    @property
    def item_ids(self) -> List[str]:
        return [item.id for item in self.layout]

    def with_layout(self, layout: Layout) -> "GridConfig":
        return replace(self, layout=list(layout))

    def to_dict(self) -> Dict[str, Any]:
        """Plain mapping form, the inverse of loader.parse_config"""
        return {
            "cols": self.cols,
            "row_height": self.row_height,
            "compact_type": self.compact_type.value,
            "layout": [item.to_dict() for item in self.layout],
        }
