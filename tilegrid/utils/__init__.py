"""
Utilities
"""

from tilegrid.utils.types import LayoutHash
from tilegrid.utils.guards import require_finite, require_positive

__all__ = [
    "LayoutHash",
    "require_finite",
    "require_positive",
]
