"""
Exception types

Every failure here is a caller contract violation. Overlaps and out-of-bounds
items are resolved by the engine and never raised.
"""

from typing import List, Optional


class TileGridError(Exception):
    """Base class for all tilegrid errors"""


class ItemNotFoundError(TileGridError, KeyError):
    """An item id was looked up that is not part of the layout"""

    def __init__(self, item_id: str):
        self.item_id = item_id
        super().__init__(f"Item not found in layout: {item_id!r}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]


class InvalidGridConfigError(TileGridError, ValueError):
    """Degenerate grid geometry (cols, row height or container size)"""


class UnresolvableLayoutError(TileGridError, RuntimeError):
    """
    A collision loop hit its iteration bound

    Only reachable if the displacement rules stop moving items strictly away
    from the origin; the bound turns that into a loud failure instead of a hang.
    """

    def __init__(self, item_id: Optional[str], iterations: int):
        self.item_id = item_id
        self.iterations = iterations
        super().__init__(
            f"Layout could not be resolved for item {item_id!r} "
            f"after {iterations} iterations"
        )


class LayoutValidationError(TileGridError, ValueError):
    """A layout breaks one of the structural invariants"""

    def __init__(self, violations: List[str]):
        self.violations = violations
        super().__init__(f"Layout validation failed: {violations}")


class InvalidGestureError(TileGridError, ValueError):
    """Pointer input or gesture lifecycle misuse"""
