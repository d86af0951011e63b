"""
Runtime

Includes:
- gesture_session: per-gesture frame driver
- replay: recorded gesture playback
- report: tabular layout output
"""

from tilegrid.runtime.gesture_session import GestureKind, GestureSession
from tilegrid.runtime.replay import GestureScript, load_gesture_script, parse_gesture_script, replay
from tilegrid.runtime.report import layout_table

__all__ = [
    "GestureKind",
    "GestureSession",
    "GestureScript",
    "load_gesture_script",
    "parse_gesture_script",
    "replay",
    "layout_table",
]
