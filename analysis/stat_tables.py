"""Lookups against the static per-class, per-level stat tables."""

from __future__ import annotations

from collections.abc import Iterable

from .errors import NotFoundError, RangeMismatchError, UnknownStatError
from .stats import ClassDataset, ClassLevelTable, StatSnapshot, is_stat_name


def class_table(class_id: str, dataset: ClassDataset) -> ClassLevelTable:
    """Return the full level table for a character class.

    Args:
        class_id: Character class identifier (e.g. `"HUmar"`).
        dataset: Mapping of class identifier to its level table.

    Returns:
        The class's ClassLevelTable.

    Raises:
        NotFoundError: When `class_id` has no entry in `dataset`.
    """

    table = dataset.get(class_id)  # type: ignore[call-overload]
    if table is None:
        raise NotFoundError(kind="character class", key=class_id)
    return table


def table_in_range(table: ClassLevelTable, start: int, end: int) -> ClassLevelTable:
    """Return the entries of `table` with `start <= level <= end`, in order."""

    return tuple(entry for entry in table if start <= entry.level <= end)


def stats_at_level(table: ClassLevelTable, level: int) -> StatSnapshot:
    """Return the stat snapshot for exactly `level`.

    Raises:
        RangeMismatchError: When the table has no entry for `level`.
    """

    for entry in table:
        if entry.level == level:
            return entry.stats
    raise RangeMismatchError(level=level)


def stat_series(table: ClassLevelTable, stat: str, levels: Iterable[int]) -> tuple[float, ...]:
    """Extract one stat's values at each of `levels`, in the given order.

    Args:
        table: Level table (may already be filtered to a range).
        stat: Stat name to extract.
        levels: Levels to read, typically a `level_sequence`.

    Returns:
        One value per level.

    Raises:
        UnknownStatError: When `stat` is not an enumerated stat name.
        RangeMismatchError: When a level is missing from the table. A gap is
            never filled in, since misaligned data would shift every later
            point on the chart.
    """

    if not is_stat_name(stat):
        raise UnknownStatError(stat)
    by_level = {entry.level: entry.stats for entry in table}
    values: list[float] = []
    for level in levels:
        snapshot = by_level.get(level)
        if snapshot is None:
            raise RangeMismatchError(level=level)
        values.append(snapshot[stat])  # type: ignore[index]
    return tuple(values)
