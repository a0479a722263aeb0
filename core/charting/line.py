"""Line graph assembly: stat growth across a level range."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from analysis.colors import ColorTable, class_modifier, resolve_stat_color
from analysis.levels import clamp_level_range, level_sequence
from analysis.stat_tables import class_table, stat_series, table_in_range
from analysis.stats import ClassDataset

from .builder import build_chart_spec
from .schema import ChartSpec, Dataset

logger = logging.getLogger(__name__)

DEFAULT_LINE_TITLE = "Character stat growth"


def assemble_line_chart(
    selected_classes: Sequence[str],
    selected_stats: Sequence[str],
    title: str,
    dataset: ClassDataset,
    color_table: ColorTable,
    start: int,
    end: int,
) -> ChartSpec:
    """Assemble a line chart with one dataset per (class, stat) pair.

    Datasets are ordered by class first, then by stat, following the order of
    `selected_classes` and `selected_stats`. Empty selections produce a chart
    with no datasets.

    Args:
        selected_classes: Character class identifiers.
        selected_stats: Stat names.
        title: Chart title.
        dataset: Static class level tables.
        color_table: Base color per stat.
        start: Requested first level (clamped and rounded).
        end: Requested last level (clamped and rounded).

    Returns:
        A `"line"` ChartSpec labelled by level.

    Raises:
        NotFoundError: For an unknown class (or a stat missing a color).
        UnknownStatError: For an unknown stat name.
        RangeMismatchError: When a class table lacks a level in range.
    """

    start, end = clamp_level_range(start, end)
    levels = level_sequence(start, end)

    datasets: list[Dataset] = []
    class_count = len(selected_classes)
    for class_index, class_id in enumerate(selected_classes):
        table = table_in_range(class_table(class_id, dataset), start, end)
        modifier = class_modifier(class_index, class_count)
        for stat in selected_stats:
            color = resolve_stat_color(stat, color_table, modifier)
            datasets.append(
                Dataset(
                    label=f"{class_id}({stat})",
                    data=stat_series(table, stat, levels),
                    color=color,
                    fill=False,
                )
            )

    logger.debug(
        "Assembled line chart: %d dataset(s) over levels %d..%d.", len(datasets), start, end
    )
    return build_chart_spec("line", levels, datasets, title)
