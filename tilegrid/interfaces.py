"""
Boundary interfaces

The UI side of a gesture implements these; the core only calls them.
"""

from abc import ABC, abstractmethod
from typing import Callable

from tilegrid.interaction.gestures import GestureResult


class ILayoutRenderer(ABC):
    """
    Rendering callback

    Implementations:
    - a UI adapter that repositions grid elements
    - CallbackRenderer: wraps a plain function
    """

    @abstractmethod
    def render(self, result: GestureResult) -> None:
        """Draw one computed frame (layout + dragged element rectangle)"""
        pass


class CallbackRenderer(ILayoutRenderer):
    """Adapter for a plain `fn(result)` callback"""

    def __init__(self, callback: Callable[[GestureResult], None]):
        self._callback = callback

    def render(self, result: GestureResult) -> None:
        self._callback(result)
