"""
Tabular layout reports
"""

from typing import Optional

import pandas as pd

from tilegrid.models.changes import LayoutDiff
from tilegrid.models.item import Layout

COLUMNS = ["x", "y", "w", "h", "static", "change"]


def layout_table(layout: Layout, diff: Optional[LayoutDiff] = None) -> pd.DataFrame:
    """
    One row per item, indexed by id

    The `change` column holds the diff classification ("" when unchanged
    or when no diff is given).
    """
    diff = diff or {}
    rows = [
        {
            "id": item.id,
            "x": item.x,
            "y": item.y,
            "w": item.w,
            "h": item.h,
            "static": item.static,
            "change": diff[item.id].change.value if item.id in diff else "",
        }
        for item in layout
    ]
    if not rows:
        return pd.DataFrame(columns=COLUMNS).rename_axis("id")
    return pd.DataFrame(rows).set_index("id")[COLUMNS]
