"""
Config loader
"""

import hashlib
import inspect
import json
from pathlib import Path
from typing import Any, Dict, List

import yaml

from tilegrid.config.schema import GridConfig
from tilegrid.models.item import CompactType, GridItem, Layout
from tilegrid.utils.types import LayoutHash

# GridItem fields plus the aliases GridItem.from_dict accepts
ITEM_KEYS = frozenset(inspect.signature(GridItem).parameters) | {"i", "minW", "maxW", "minH", "maxH"}


def load_config(config_path: str) -> GridConfig:
    """
    Load a grid config from a YAML file

    Args:
        config_path: path to the YAML file

    Returns:
        GridConfig instance
    """
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    return parse_config(data or {})


def parse_config(data: Dict[str, Any]) -> GridConfig:
    """
    Parse a config mapping

    Keys: cols, row_height (or rowHeight), compact_type (or compactType),
    layout (list of item mappings).
    """
    if "cols" not in data:
        raise ValueError("Grid config needs 'cols'")

    row_height = data.get("row_height", data.get("rowHeight"))
    if row_height is None:
        raise ValueError("Grid config needs 'row_height'")

    compact_type = data.get("compact_type", data.get("compactType", CompactType.VERTICAL.value))

    return GridConfig(
        cols=int(data["cols"]),
        row_height=float(row_height),
        layout=parse_layout(data.get("layout") or []),
        compact_type=CompactType.parse(compact_type),
    )


def parse_layout(items: List[Dict[str, Any]]) -> Layout:
    """Parse a list of item mappings, ignoring keys GridItem does not know"""
    layout = []
    for raw in items:
        layout.append(GridItem.from_dict(_filter_item_keys(raw)))
    return layout


def _filter_item_keys(data: Dict[str, Any]) -> Dict[str, Any]:
    """Drop keys that are neither GridItem fields nor accepted aliases"""
    return {k: v for k, v in data.items() if k in ITEM_KEYS}


def compute_layout_hash(config: GridConfig) -> LayoutHash:
    """
    Hash of a config snapshot

    Used in log lines to tell snapshots apart.

    Returns:
        First 8 hex chars of the SHA256 of the canonical JSON form
    """
    config_str = json.dumps(config.to_dict(), sort_keys=True, default=str)
    hash_obj = hashlib.sha256(config_str.encode())
    return LayoutHash(hash_obj.hexdigest()[:8])
