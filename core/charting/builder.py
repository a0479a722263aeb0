"""Chart Object Builder: wraps labels and datasets into a ChartSpec."""

from __future__ import annotations

from collections.abc import Iterable

from analysis.errors import UnsupportedChartTypeError

from .schema import CHART_TYPES, ChartSpec, Dataset, RadialScale


def build_chart_spec(
    chart_type: str,
    labels: Iterable[object],
    datasets: Iterable[Dataset],
    title: str,
    scale: RadialScale | None = None,
) -> ChartSpec:
    """Build a ChartSpec value.

    Args:
        chart_type: `"line"` or `"radar"`.
        labels: Axis labels; each is converted with `str()`.
        datasets: Series in display order.
        title: Chart title.
        scale: Optional fixed radial scale.

    Returns:
        A new, immutable ChartSpec.

    Raises:
        UnsupportedChartTypeError: When `chart_type` is not line or radar.
    """

    if chart_type not in CHART_TYPES:
        raise UnsupportedChartTypeError(f"Unsupported chart type: {chart_type!r}.")
    return ChartSpec(
        chart_type=chart_type,  # type: ignore[arg-type]
        labels=tuple(str(label) for label in labels),
        datasets=tuple(datasets),
        title=title,
        scale=scale,
    )
