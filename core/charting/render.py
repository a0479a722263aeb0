"""Render ChartSpec values into Chart.js config payloads."""

from __future__ import annotations

from typing import NotRequired, TypedDict

from .schema import ChartSpec, Dataset, RadialScale


class ChartJsDataset(TypedDict):
    """A Chart.js dataset payload."""

    label: str
    data: list[float]
    fill: bool
    backgroundColor: str
    borderColor: str
    pointBorderColor: str
    pointBackgroundColor: str


class ChartJsData(TypedDict):
    """Chart.js `data` block (labels + datasets)."""

    labels: list[str]
    datasets: list[ChartJsDataset]


class ChartJsTicks(TypedDict):
    """Fixed tick settings for the radar scale."""

    beginAtZero: bool
    min: float
    max: float
    stepSize: float


class ChartJsScale(TypedDict):
    """Chart.js radial `scale` block."""

    ticks: ChartJsTicks


class ChartJsOptions(TypedDict):
    """Chart.js `options` block."""

    title: dict[str, object]
    legend: dict[str, object]
    scale: NotRequired[ChartJsScale]


class ChartJsConfig(TypedDict):
    """The full Chart.js config passed to `new Chart(canvas, config)`."""

    type: str
    data: ChartJsData
    options: ChartJsOptions


def chartjs_config(spec: ChartSpec) -> ChartJsConfig:
    """Convert a ChartSpec into a JSON-serializable Chart.js config.

    Args:
        spec: Assembled chart.

    Returns:
        ChartJsConfig with `type`, `data`, and `options` keys.
    """

    options: ChartJsOptions = {
        "title": {"display": True, "text": spec.title},
        "legend": {"position": "top"},
    }
    if spec.scale is not None:
        options["scale"] = _scale(spec.scale)
    return {
        "type": spec.chart_type,
        "data": {
            "labels": list(spec.labels),
            "datasets": [_dataset(dataset) for dataset in spec.datasets],
        },
        "options": options,
    }


def _dataset(dataset: Dataset) -> ChartJsDataset:
    """Build a Chart.js dataset dict with the three-alpha color scheme."""

    return {
        "label": dataset.label,
        "data": list(dataset.data),
        "fill": dataset.fill,
        "backgroundColor": dataset.background_color,
        "borderColor": dataset.border_color,
        "pointBorderColor": dataset.point_color,
        "pointBackgroundColor": dataset.point_color,
    }


def _scale(scale: RadialScale) -> ChartJsScale:
    """Build the radial scale block from a RadialScale."""

    return {
        "ticks": {
            "beginAtZero": True,
            "min": scale.minimum,
            "max": scale.maximum,
            "stepSize": scale.step,
        }
    }
