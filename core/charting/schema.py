"""Schema types for assembled stat charts.

Assemblers return a `ChartSpec` value rather than a Chart.js dict. This keeps
the assembly logic independent of the charting library; `render.py` converts a
ChartSpec into the Chart.js payload.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from analysis.colors import RGB

ChartType = Literal["line", "radar"]

CHART_TYPES: frozenset[str] = frozenset({"line", "radar"})

FILL_ALPHA = 0.5
BORDER_ALPHA = 0.75
POINT_ALPHA = 1.0


@dataclass(frozen=True, slots=True)
class Dataset:
    """A single chart series.

    Args:
        label: Legend label, e.g. `"HUmar(ATP)"` or `"HUmar"`.
        data: One value per chart label.
        color: Base color; fill/border/point colors derive from it.
        fill: Whether the area under the series is filled.
    """

    label: str
    data: tuple[float, ...]
    color: RGB
    fill: bool = False

    @property
    def background_color(self) -> str:
        return self.color.rgba(FILL_ALPHA)

    @property
    def border_color(self) -> str:
        return self.color.rgba(BORDER_ALPHA)

    @property
    def point_color(self) -> str:
        return self.color.rgba(POINT_ALPHA)


@dataclass(frozen=True, slots=True)
class RadialScale:
    """Fixed display scale for radar charts."""

    minimum: float = 0
    maximum: float = 100
    step: float = 10


@dataclass(frozen=True, slots=True)
class ChartSpec:
    """An assembled chart, ready to be rendered.

    Args:
        chart_type: `"line"` or `"radar"`.
        labels: Axis labels (levels for line charts, stat names for radar).
        datasets: Series in display order.
        title: Chart title.
        scale: Optional fixed radial scale (radar charts only).
    """

    chart_type: ChartType
    labels: tuple[str, ...]
    datasets: tuple[Dataset, ...]
    title: str
    scale: RadialScale | None = None


@dataclass(frozen=True, slots=True)
class LineChartSelection:
    """Validated selections for a line chart.

    Args:
        classes: Character class identifiers, in selection order.
        stats: Stat names, in selection order.
        start_level: First level of the range.
        end_level: Last level of the range.
        title: Chart title.
    """

    classes: tuple[str, ...]
    stats: tuple[str, ...]
    start_level: int
    end_level: int
    title: str


@dataclass(frozen=True, slots=True)
class RadarChartSelection:
    """Validated selections for a radar chart.

    Args:
        classes: Character class identifiers, in selection order.
        level: Level to compare classes at.
        title: Chart title.
    """

    classes: tuple[str, ...]
    level: int
    title: str
