"""Service-layer functions for the core app.

Services in `core` connect validated selections to the static tables loaded by
`gamedata` and the pure chart assemblers.
"""

from __future__ import annotations

from analysis.stats import StatName
from core.charting.line import assemble_line_chart
from core.charting.radar import assemble_radar_chart
from core.charting.render import ChartJsConfig, chartjs_config
from core.charting.schema import ChartSpec, LineChartSelection, RadarChartSelection
from gamedata.static_data import class_dataset, color_tables


def build_line_chart(selection: LineChartSelection) -> ChartSpec:
    """Assemble a line chart from the shipped stat and color tables."""

    return assemble_line_chart(
        selection.classes,
        selection.stats,
        selection.title,
        class_dataset(),
        color_tables().stat_colors,
        selection.start_level,
        selection.end_level,
    )


def build_radar_chart(selection: RadarChartSelection) -> ChartSpec:
    """Assemble a radar chart over every stat from the shipped tables."""

    return assemble_radar_chart(
        selection.classes,
        class_dataset(),
        color_tables().class_colors,
        selection.level,
        tuple(StatName),
        title=selection.title,
    )


def line_chart_payload(selection: LineChartSelection) -> ChartJsConfig:
    """Return the Chart.js config for a line chart selection."""

    return chartjs_config(build_line_chart(selection))


def radar_chart_payload(selection: RadarChartSelection) -> ChartJsConfig:
    """Return the Chart.js config for a radar chart selection."""

    return chartjs_config(build_radar_chart(selection))
