"""
Layout change classification
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class LayoutChange(Enum):
    """What changed for one item between two layout snapshots"""
    MOVE = "move"
    RESIZE = "resize"
    MOVE_AND_RESIZE = "moveresize"


@dataclass(frozen=True)
class LayoutDiffEntry:
    """Diff value for one item id"""
    change: LayoutChange

    def to_dict(self) -> Dict[str, str]:
        return {"change": self.change.value}


# item id -> entry; unchanged ids are absent
LayoutDiff = Dict[str, LayoutDiffEntry]
