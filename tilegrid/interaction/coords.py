"""
Screen pixels to grid units

Linear scale and round. Rounding is round-half-up (toward +inf), the same
as a browser's Math.round, so 2.5 -> 3 and -2.5 -> -2.
"""

import math

from tilegrid.utils.guards import require_finite, require_positive


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def x_to_col(screen_x: float, cols: int, container_width: float) -> int:
    """
    Horizontal pixel offset to a column count

    Also used for widths: a pixel width maps to a span the same way.
    """
    require_finite("screen_x", screen_x)
    require_positive("cols", cols)
    require_positive("container_width", container_width)
    return round_half_up(screen_x * cols / container_width)


def y_to_row(screen_y: float, row_height: float) -> int:
    """Vertical pixel offset (or height) to a row count"""
    require_finite("screen_y", screen_y)
    require_positive("row_height", row_height)
    return round_half_up(screen_y / row_height)
