"""Level bounds and level sequences for stat charts.

Stat tables are defined on a fixed grid of levels (5..200 in steps of 5). The
helpers here clamp and round caller-supplied levels onto that grid. Out of
range input is clamped silently; nothing here raises.
"""

from __future__ import annotations

import math

MIN_LEVEL = 5
MAX_LEVEL = 200
LEVEL_STEP = 5


def _round_up_to_step(level: int) -> int:
    """Round a level up to the next multiple of LEVEL_STEP."""

    return math.ceil(level / LEVEL_STEP) * LEVEL_STEP


def clamp_level_range(start: int, end: int) -> tuple[int, int]:
    """Clamp a level range into the supported bounds and onto the level grid.

    Args:
        start: Requested first level.
        end: Requested last level.

    Returns:
        `(start, end)` with `start >= MIN_LEVEL`, `end <= MAX_LEVEL`, both
        rounded up to a multiple of LEVEL_STEP. When the result has
        `start > end` the range is empty.
    """

    start = max(start, MIN_LEVEL)
    end = min(end, MAX_LEVEL)
    return _round_up_to_step(start), _round_up_to_step(end)


def level_sequence(start: int, end: int) -> tuple[int, ...]:
    """Return the levels `start, start + 5, ...` up to and including `end`."""

    return tuple(range(start, end + 1, LEVEL_STEP))


def snap_level(level: int) -> int:
    """Snap a single level onto the nearest defined level.

    Uses the same policy as `clamp_level_range`: clamp into
    `[MIN_LEVEL, MAX_LEVEL]`, then round up to a multiple of LEVEL_STEP.
    """

    level = min(max(level, MIN_LEVEL), MAX_LEVEL)
    return _round_up_to_step(level)
