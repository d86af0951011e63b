"""
Type definitions
"""

from typing import NewType

# Layout hash: first 8 hex chars of the SHA256 of a config's canonical JSON
LayoutHash = NewType("LayoutHash", str)
