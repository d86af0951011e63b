"""
Gesture session

Drives one pointer-down -> move* -> pointer-up gesture over the pure core.
Every frame is computed from the config captured at pointer-down, so frames
may arrive late or be skipped without corrupting the layout.
"""

import logging
from enum import Enum
from typing import Any, Callable, Optional, Union

from tilegrid.config.loader import compute_layout_hash
from tilegrid.config.schema import GridConfig
from tilegrid.errors import InvalidGestureError
from tilegrid.interaction.diff import layout_diff
from tilegrid.interaction.gestures import GestureResult, on_drag, on_resize
from tilegrid.interfaces import CallbackRenderer, ILayoutRenderer
from tilegrid.layout_engine.compactor import compact
from tilegrid.models.changes import LayoutDiff
from tilegrid.models.geometry import ClientRect, GestureData
from tilegrid.models.item import CompactType

logger = logging.getLogger(__name__)


class GestureKind(Enum):
    """Gesture type"""
    DRAG = "drag"
    RESIZE = "resize"

    @classmethod
    def parse(cls, value: Any) -> "GestureKind":
        """Accepts an enum member, its value or its name, case-insensitively"""
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for member in cls:
            if text in (member.value, member.name.lower()):
                return member
        raise InvalidGestureError(f"Unknown gesture kind: {value!r}")


class GestureSession:
    """
    One drag or resize gesture

    Holds the starting config, the pointer-down event and the cached
    rectangles; `update` computes a frame per pointer move and `finish`
    produces the config the caller keeps afterwards.
    """

    def __init__(
        self,
        config: GridConfig,
        item_id: str,
        kind: Union[GestureKind, str],
        pointer_down_event: Any,
        container_rect: ClientRect,
        element_rect: ClientRect,
        renderer: Optional[Union[ILayoutRenderer, Callable[[GestureResult], None]]] = None,
        live_compact_type: Optional[CompactType] = None,
    ):
        """
        Start a gesture

        Args:
            config: grid config at pointer-down
            item_id: id of the dragged/resized item
            kind: DRAG or RESIZE
            pointer_down_event: the event that started the gesture
            container_rect: grid container rectangle
            element_rect: manipulated element rectangle
            renderer: called with every frame (optional)
            live_compact_type: compaction while the pointer is down
                (defaults to config.compact_type; NONE avoids snapping mid-drag)

        Raises:
            ItemNotFoundError: item_id not in config.layout
            InvalidGestureError: unknown gesture kind
        """
        config.find_item(item_id)

        self.config = config
        self.item_id = item_id
        self.kind = GestureKind.parse(kind)
        self.pointer_down_event = pointer_down_event
        self.container_rect = container_rect
        self.element_rect = element_rect
        self.live_compact_type = (
            config.compact_type if live_compact_type is None else CompactType.parse(live_compact_type)
        )

        if renderer is not None and not isinstance(renderer, ILayoutRenderer):
            renderer = CallbackRenderer(renderer)
        self.renderer: Optional[ILayoutRenderer] = renderer

        self.layout_hash = compute_layout_hash(config)

        self._last_result: Optional[GestureResult] = None
        self._final_config: Optional[GridConfig] = None
        self._diff: LayoutDiff = {}
        self._frame_count = 0

        logger.debug(
            "Gesture %s started on %s (layout %s, live compaction %s)",
            self.kind.value, item_id, self.layout_hash, self.live_compact_type.value,
        )

    def update(self, pointer_event: Any) -> GestureResult:
        """
        Compute one frame for the latest pointer position

        Raises:
            InvalidGestureError: the gesture already finished
        """
        if self.is_finished:
            raise InvalidGestureError(f"Gesture on {self.item_id} already finished")

        gesture = GestureData(
            pointer_down_event=self.pointer_down_event,
            pointer_drag_event=pointer_event,
            container_rect=self.container_rect,
            dragged_element_rect=self.element_rect,
        )

        handler = on_drag if self.kind == GestureKind.DRAG else on_resize
        result = handler(self.item_id, self.config, self.live_compact_type, gesture)

        self._last_result = result
        self._frame_count += 1

        if self.renderer is not None:
            self.renderer.render(result)

        return result

    def finish(self) -> GridConfig:
        """
        End the gesture

        The last frame's layout is compacted with the config's own
        compaction type, so a drag run with NONE settles on release.

        Returns:
            Config for the next gesture

        Raises:
            InvalidGestureError: the gesture already finished
        """
        if self.is_finished:
            raise InvalidGestureError(f"Gesture on {self.item_id} already finished")

        layout = self._last_result.layout if self._last_result is not None else self.config.layout
        layout = compact(layout, self.config.compact_type, self.config.cols)

        self._final_config = self.config.with_layout(layout)
        self._diff = layout_diff(self.config.layout, layout)

        logger.info(
            "Gesture %s on %s finished: %d frames, %d items changed (layout %s -> %s)",
            self.kind.value, self.item_id, self._frame_count, len(self._diff),
            self.layout_hash, compute_layout_hash(self._final_config),
        )
        return self._final_config

    def diff(self) -> LayoutDiff:
        """Changes between the starting layout and the finished one (empty before finish)"""
        return dict(self._diff)

    @property
    def is_finished(self) -> bool:
        return self._final_config is not None

    @property
    def frame_count(self) -> int:
        """Frames computed so far"""
        return self._frame_count

    @property
    def last_result(self) -> Optional[GestureResult]:
        return self._last_result

    @property
    def final_config(self) -> Optional[GridConfig]:
        """Config returned by finish(), None while the gesture is live"""
        return self._final_config
