"""
Gesture replay

Feeds a recorded gesture (pointer-down event, rectangles, pointer frames)
through a GestureSession. Used by run_replay.py and for reproducing layout
reports offline.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import yaml

from tilegrid.config.schema import GridConfig
from tilegrid.interaction.gestures import GestureResult
from tilegrid.models.geometry import ClientRect
from tilegrid.models.item import CompactType
from tilegrid.runtime.gesture_session import GestureKind, GestureSession


@dataclass
class GestureScript:
    """Recorded gesture"""
    item_id: str
    kind: GestureKind
    pointer_down: Dict[str, Any]
    container_rect: ClientRect
    element_rect: ClientRect
    frames: List[Dict[str, Any]] = field(default_factory=list)
    live_compact_type: Optional[CompactType] = None


def load_gesture_script(script_path: str) -> GestureScript:
    """
    Load a gesture script from YAML

    Expected keys: item, kind (drag|resize), pointer_down, container,
    element, frames; optional live_compact_type.
    """
    path = Path(script_path)

    if not path.exists():
        raise FileNotFoundError(f"Gesture script not found: {script_path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    return parse_gesture_script(data or {})


def parse_gesture_script(data: Dict[str, Any]) -> GestureScript:
    for key in ("item", "pointer_down", "container", "element"):
        if key not in data:
            raise ValueError(f"Gesture script needs {key!r}")

    live = data.get("live_compact_type")

    return GestureScript(
        item_id=str(data["item"]),
        kind=GestureKind.parse(data.get("kind", GestureKind.DRAG)),
        pointer_down=data["pointer_down"],
        container_rect=ClientRect.from_dict(data["container"]),
        element_rect=ClientRect.from_dict(data["element"]),
        frames=list(data.get("frames") or []),
        live_compact_type=CompactType.parse(live) if live is not None else None,
    )


def replay(
    config: GridConfig,
    script: GestureScript,
    on_frame: Optional[Callable[[GestureResult], None]] = None,
) -> GestureSession:
    """
    Run every frame of a script, then finish the gesture

    Returns:
        The finished session; `final_config` and `diff()` hold the outcome
    """
    session = GestureSession(
        config=config,
        item_id=script.item_id,
        kind=script.kind,
        pointer_down_event=script.pointer_down,
        container_rect=script.container_rect,
        element_rect=script.element_rect,
        renderer=on_frame,
        live_compact_type=script.live_compact_type,
    )

    for frame in script.frames:
        session.update(frame)

    session.finish()
    return session
