"""Color lookups for stat and class datasets.

Line charts color datasets by stat, shifting the stat's base color per class so
the same stat stays distinguishable across classes. Radar charts color
datasets by class with no shift.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .errors import NotFoundError, UnknownStatError
from .stats import is_stat_name

CHANNEL_MIN = 0
CHANNEL_MAX = 255


@dataclass(frozen=True, slots=True)
class RGB:
    """An RGB color with integer channels in 0..255."""

    red: int
    green: int
    blue: int

    def rgba(self, alpha: float) -> str:
        """Format the color as a CSS `rgba(...)` string."""

        return f"rgba({self.red}, {self.green}, {self.blue}, {alpha:g})"


ColorTable = Mapping[str, RGB]


def _saturate(value: float) -> int:
    """Round a channel value and clamp it into the valid channel range."""

    return min(max(round(value), CHANNEL_MIN), CHANNEL_MAX)


def shift_color(color: RGB, modifier: float) -> RGB:
    """Shift every channel of `color` by `modifier`, saturating at 0 and 255."""

    return RGB(
        red=_saturate(color.red + modifier),
        green=_saturate(color.green + modifier),
        blue=_saturate(color.blue + modifier),
    )


def class_modifier(class_index: int, class_count: int) -> float:
    """Return the color shift for the `class_index`-th of `class_count` classes."""

    return class_index * 100 / class_count


def resolve_stat_color(stat_name: str, color_table: ColorTable, modifier: float = 0) -> RGB:
    """Resolve the display color for a stat.

    Args:
        stat_name: Enumerated stat name.
        color_table: Mapping of stat name to base color.
        modifier: Channel shift applied to the base color; 0 leaves it unchanged.

    Returns:
        The shifted RGB color.

    Raises:
        UnknownStatError: When `stat_name` is not an enumerated stat.
        NotFoundError: When the color table has no entry for the stat.
    """

    if not is_stat_name(stat_name):
        raise UnknownStatError(stat_name)
    base = color_table.get(stat_name)
    if base is None:
        raise NotFoundError(kind="stat color", key=stat_name)
    if not modifier:
        return base
    return shift_color(base, modifier)


def resolve_class_color(class_id: str, color_table: ColorTable) -> RGB:
    """Resolve the fixed base color for a class.

    Raises:
        NotFoundError: When the color table has no entry for `class_id`.
    """

    color = color_table.get(class_id)
    if color is None:
        raise NotFoundError(kind="class color", key=class_id)
    return color
