"""
Grid item model

A grid item is one rectangle on the column/row lattice. Items are frozen;
every transformation builds a new item with `dataclasses.replace`.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class CompactType(Enum):
    """Gravity axis used by compaction"""
    VERTICAL = "vertical"      # items float up
    HORIZONTAL = "horizontal"  # items float left
    NONE = "none"              # no gravity, collisions are still resolved

    @classmethod
    def parse(cls, value: Any) -> "CompactType":
        """
        Parse a compaction type from config input

        Accepts an enum member, its value, its name, or None (NONE).
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.NONE
        text = str(value).strip().lower()
        for member in cls:
            if text in (member.value, member.name.lower()):
                return member
        raise ValueError(f"Unknown compact type: {value!r}")


@dataclass(frozen=True)
class GridItem:
    """
    One layout item in grid units

    x/y is the top-left cell, w/h the span. `static` items never move and
    block displacement of other items.
    """
    id: str
    x: int
    y: int
    w: int
    h: int

    static: bool = False

    # resize bounds
    min_w: int = 1
    max_w: Optional[int] = None
    min_h: int = 1
    max_h: Optional[int] = None

    @property
    def right(self) -> int:
        """First column to the right of the item"""
        return self.x + self.w

    @property
    def bottom(self) -> int:
        """First row below the item"""
        return self.y + self.h

    def moved_to(self, x: int, y: int) -> "GridItem":
        return replace(self, x=x, y=y)

    def resized_to(self, w: int, h: int) -> "GridItem":
        return replace(self, w=w, h=h)

    def clamp_size(self, w: int, h: int) -> Tuple[int, int]:
        """Clamp a size to the item's own min/max bounds"""
        w = max(self.min_w, w)
        h = max(self.min_h, h)
        if self.max_w is not None:
            w = min(self.max_w, w)
        if self.max_h is not None:
            h = min(self.max_h, h)
        return w, h

    def same_geometry(self, other: "GridItem") -> bool:
        return (self.x, self.y, self.w, self.h) == (other.x, other.y, other.w, other.h)

    def to_dict(self) -> Dict[str, Any]:
        """Plain mapping form (the shape used by config files and the UI)"""
        d: Dict[str, Any] = {
            "id": self.id,
            "x": self.x,
            "y": self.y,
            "w": self.w,
            "h": self.h,
        }
        # optional fields only when set
        if self.static:
            d["static"] = True
        if self.min_w != 1:
            d["min_w"] = self.min_w
        if self.max_w is not None:
            d["max_w"] = self.max_w
        if self.min_h != 1:
            d["min_h"] = self.min_h
        if self.max_h is not None:
            d["max_h"] = self.max_h
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GridItem":
        """
        Build an item from a mapping

        `i` is accepted as an alias for `id`; camelCase size bounds
        (`minW`, `maxH`, ...) are accepted as well.
        """
        item_id = data.get("id", data.get("i"))
        if item_id is None:
            raise ValueError(f"Grid item has no id: {data!r}")

        def _opt(snake: str, camel: str) -> Any:
            return data.get(snake, data.get(camel))

        min_w = _opt("min_w", "minW")
        min_h = _opt("min_h", "minH")
        max_w = _opt("max_w", "maxW")
        max_h = _opt("max_h", "maxH")

        return cls(
            id=str(item_id),
            x=int(data.get("x", 0)),
            y=int(data.get("y", 0)),
            w=int(data.get("w", 1)),
            h=int(data.get("h", 1)),
            static=bool(data.get("static", False)),
            min_w=int(min_w) if min_w is not None else 1,
            max_w=int(max_w) if max_w is not None else None,
            min_h=int(min_h) if min_h is not None else 1,
            max_h=int(max_h) if max_h is not None else None,
        )


# Ordered sequence of items; ids unique
Layout = List[GridItem]
