"""Radar chart assembly: relative stat profile at a single level.

Each selected class is drawn as a percentage of the highest value any class
has for that stat at the level. The maximum is taken across every class in the
dataset, not only the selected ones, so a class's shape does not change when
other classes are added to or removed from the selection.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence

from analysis.colors import ColorTable, resolve_class_color
from analysis.errors import UnknownStatError
from analysis.levels import snap_level
from analysis.stat_tables import class_table, stats_at_level
from analysis.stats import ClassDataset, StatName, StatSnapshot, is_stat_name

from .builder import build_chart_spec
from .schema import ChartSpec, Dataset, RadialScale

logger = logging.getLogger(__name__)

DEFAULT_RADAR_TITLE = "Class stats"
RADAR_SCALE = RadialScale(minimum=0, maximum=100, step=10)


def maximum_stats(snapshots: Iterable[StatSnapshot], stat_names: Sequence[str]) -> dict[str, float]:
    """Return the per-stat maximum over `snapshots`, starting from 0."""

    maxima: dict[str, float] = {stat: 0 for stat in stat_names}
    for snapshot in snapshots:
        for stat in stat_names:
            maxima[stat] = max(snapshot[stat], maxima[stat])  # type: ignore[index]
    return maxima


def percentage_stats(
    snapshot: StatSnapshot,
    maxima: Mapping[str, float],
    stat_names: Sequence[str],
) -> tuple[float, ...]:
    """Return `100 * value / max` for each stat, in `stat_names` order.

    A stat whose maximum is 0 yields 0.
    """

    percentages: list[float] = []
    for stat in stat_names:
        maximum = maxima[stat]
        if maximum == 0:
            percentages.append(0.0)
            continue
        percentages.append(100 * snapshot[stat] / maximum)  # type: ignore[index]
    return tuple(percentages)


def assemble_radar_chart(
    selected_classes: Sequence[str],
    dataset: ClassDataset,
    color_table: ColorTable,
    level: int,
    stat_names: Sequence[str] = tuple(StatName),
    title: str = DEFAULT_RADAR_TITLE,
) -> ChartSpec:
    """Assemble a radar chart with one dataset per selected class.

    Args:
        selected_classes: Character class identifiers to draw.
        dataset: Static class level tables (all classes feed the maximum).
        color_table: Base color per class.
        level: Level to compare at; snapped onto the defined level grid.
        stat_names: Stats to plot, in axis order.
        title: Chart title.

    Returns:
        A `"radar"` ChartSpec labelled by stat name with a 0..100 scale.

    Raises:
        NotFoundError: For an unknown class or a class with no color.
        UnknownStatError: For an unknown stat name.
        RangeMismatchError: When a class table lacks the snapped level.
    """

    for stat in stat_names:
        if not is_stat_name(stat):
            raise UnknownStatError(stat)

    level = snap_level(level)
    all_snapshots = [stats_at_level(table, level) for table in dataset.values()]
    maxima = maximum_stats(all_snapshots, stat_names)

    datasets: list[Dataset] = []
    for class_id in selected_classes:
        snapshot = stats_at_level(class_table(class_id, dataset), level)
        datasets.append(
            Dataset(
                label=str(class_id),
                data=percentage_stats(snapshot, maxima, stat_names),
                color=resolve_class_color(class_id, color_table),
                fill=True,
            )
        )

    logger.debug("Assembled radar chart: %d dataset(s) at level %d.", len(datasets), level)
    return build_chart_spec("radar", stat_names, datasets, title, scale=RADAR_SCALE)
