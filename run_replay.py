#!/usr/bin/env python3
"""
tilegrid - Gesture Replay Runner

Replays a recorded drag/resize gesture against a grid config and prints the
layout after every frame and the final diff.

Usage:
    python run_replay.py config/example_layout.yaml config/example_drag.yaml
    python run_replay.py config/example_layout.yaml config/example_resize.yaml --live-compact none -v
"""

import argparse
import logging
import os
import sys

import yaml
from dotenv import load_dotenv

from tilegrid.config.loader import load_config
from tilegrid.config.validator import ConfigValidationError, ConfigValidator
from tilegrid.errors import TileGridError
from tilegrid.interaction.gestures import GestureResult
from tilegrid.models.item import CompactType
from tilegrid.runtime.replay import load_gesture_script, replay
from tilegrid.runtime.report import layout_table


def main():
    """Main entry point."""
    # TILEGRID_LOG_LEVEL may come from a .env file
    load_dotenv()

    parser = argparse.ArgumentParser(description="tilegrid gesture replay")
    parser.add_argument("config", help="Grid config YAML")
    parser.add_argument("gesture", help="Gesture script YAML")
    parser.add_argument(
        "--live-compact",
        type=str,
        default=None,
        choices=[c.value for c in CompactType],
        help="Compaction while the pointer is down (default: script, then config)",
    )
    parser.add_argument("--quiet", action="store_true", help="Only print the final layout")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args()

    level = logging.DEBUG if args.verbose else os.getenv("TILEGRID_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        config = load_config(args.config)
        ConfigValidator().validate_or_raise(config)
        script = load_gesture_script(args.gesture)
    except (FileNotFoundError, KeyError, ValueError, yaml.YAMLError) as e:
        # ConfigValidationError is a ValueError too
        kind = "invalid config" if isinstance(e, ConfigValidationError) else "cannot load input"
        print(f"\n[ERROR] {kind}: {e}")
        sys.exit(1)

    if args.live_compact is not None:
        script.live_compact_type = CompactType.parse(args.live_compact)

    print(f"\n{'=' * 60}")
    print(f"Replay: {script.kind.value} {script.item_id} ({len(script.frames)} frames)")
    print(f"Grid: {config.cols} cols, row height {config.row_height}, {config.compact_type.value}")
    print(f"{'=' * 60}")

    frame_no = 0

    def print_frame(result: GestureResult) -> None:
        nonlocal frame_no
        frame_no += 1
        if args.quiet:
            return
        rect = result.dragged_item_rect
        print(f"\n[FRAME {frame_no}] element at top={rect.top:.1f} left={rect.left:.1f} "
              f"size={rect.width:.1f}x{rect.height:.1f}")
        print(layout_table(result.layout).to_string())

    try:
        session = replay(config, script, on_frame=print_frame)
    except TileGridError as e:
        print(f"\n[ERROR] {e}")
        sys.exit(1)

    print(f"\n[FINAL] {len(session.diff())} items changed")
    print(layout_table(session.final_config.layout, session.diff()).to_string())


if __name__ == "__main__":
    main()
