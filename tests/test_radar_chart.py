"""Tests for radar chart assembly and normalization."""

from __future__ import annotations

import math
from types import MappingProxyType

import pytest

from analysis.colors import RGB
from analysis.errors import NotFoundError, UnknownStatError
from analysis.stats import CharacterClass, LevelStats, StatName
from core.charting.radar import assemble_radar_chart, maximum_stats, percentage_stats

pytestmark = pytest.mark.unit

ALL_STATS = tuple(StatName)


def test_radar_chart_shape(small_dataset, class_colors) -> None:
    """Label by stat, one filled dataset per selected class, fixed scale."""

    spec = assemble_radar_chart(["HUcast", "FOmar"], small_dataset, class_colors, 30, ALL_STATS)

    assert spec.chart_type == "radar"
    assert spec.title == "Class stats"
    assert spec.labels == ("ATP", "DFP", "MST", "ATA", "EVP", "HP", "TP")
    assert [d.label for d in spec.datasets] == ["HUcast", "FOmar"]
    assert all(d.fill for d in spec.datasets)
    assert spec.datasets[0].color == RGB(220, 50, 50)
    assert spec.scale is not None
    assert (spec.scale.minimum, spec.scale.maximum, spec.scale.step) == (0, 100, 10)


def test_radar_percentages_against_cross_class_maximum(small_dataset, class_colors) -> None:
    """Normalize every stat against the highest value of any class at the level."""

    spec = assemble_radar_chart(["HUcast"], small_dataset, class_colors, 30, ALL_STATS)

    atp, dfp, mst, ata, evp, hp, tp = spec.datasets[0].data
    assert atp == 100
    assert dfp == pytest.approx(100 * 50 / 55)
    assert mst == 0
    assert ata == pytest.approx(100 * 20 / 30)
    assert evp == 0
    assert hp == 100
    assert tp == 0


def test_radar_maximum_ignores_selection(small_dataset, class_colors) -> None:
    """Unselected classes still contribute to the normalization maximum."""

    spec = assemble_radar_chart(["RAmar"], small_dataset, class_colors, 30, [StatName.ATP])

    assert spec.datasets[0].data == (80.0,)


def test_radar_percentages_stay_within_bounds(small_dataset, class_colors) -> None:
    """Every percentage is within 0..100 and the leader of each stat hits 100."""

    classes = ["HUcast", "RAmar", "FOmar"]
    for level in (5, 10, 15, 20, 25, 30):
        spec = assemble_radar_chart(classes, small_dataset, class_colors, level, ALL_STATS)
        for dataset in spec.datasets:
            assert all(0 <= value <= 100 for value in dataset.data)
        for index, stat in enumerate(ALL_STATS):
            column = [dataset.data[index] for dataset in spec.datasets]
            if stat is StatName.EVP:
                assert column == [0, 0, 0]
            else:
                assert max(column) == 100


def test_radar_zero_maximum_yields_zero(small_dataset, class_colors) -> None:
    """A stat that is 0 for every class is 0%, never NaN."""

    spec = assemble_radar_chart(["HUcast", "RAmar", "FOmar"], small_dataset, class_colors, 5, ["EVP"])

    for dataset in spec.datasets:
        assert dataset.data == (0.0,)
        assert not math.isnan(dataset.data[0])


def test_radar_level_is_snapped_onto_the_grid(small_dataset, class_colors) -> None:
    """Off-grid levels use the same clamping policy as line charts."""

    snapped = assemble_radar_chart(["FOmar"], small_dataset, class_colors, 23, ALL_STATS)
    exact = assemble_radar_chart(["FOmar"], small_dataset, class_colors, 25, ALL_STATS)
    low = assemble_radar_chart(["FOmar"], small_dataset, class_colors, -3, ALL_STATS)
    first = assemble_radar_chart(["FOmar"], small_dataset, class_colors, 5, ALL_STATS)

    assert snapped == exact
    assert low == first


def test_radar_unknown_class_raises(small_dataset, class_colors) -> None:
    """Raise NotFoundError for classes missing from the dataset."""

    with pytest.raises(NotFoundError):
        assemble_radar_chart(["HUmar"], small_dataset, class_colors, 10, ALL_STATS)


def test_radar_unknown_stat_raises(small_dataset, class_colors) -> None:
    """Raise UnknownStatError for names outside the stat enumeration."""

    with pytest.raises(UnknownStatError):
        assemble_radar_chart(["HUcast"], small_dataset, class_colors, 10, ["ATP", "LCK"])


def test_radar_assembly_is_idempotent(small_dataset, class_colors) -> None:
    """Identical inputs produce equal ChartSpecs."""

    args = (["HUcast", "RAmar"], small_dataset, class_colors, 20, ALL_STATS)
    assert assemble_radar_chart(*args) == assemble_radar_chart(*args)


def test_maximum_and_percentage_helpers() -> None:
    """Compute per-stat maxima and zero-guarded percentages."""

    low = MappingProxyType({StatName.ATP: 50, StatName.MST: 0})
    high = MappingProxyType({StatName.ATP: 200, StatName.MST: 0})
    maxima = maximum_stats([low, high], ["ATP", "MST"])

    assert maxima == {"ATP": 200, "MST": 0}
    assert percentage_stats(low, maxima, ["MST", "ATP"]) == (0.0, 25.0)


def test_radar_uses_every_class_in_dataset(class_colors) -> None:
    """A single-class dataset normalizes that class to 100 on every non-zero stat."""

    stats = MappingProxyType({stat: 10 for stat in StatName})
    dataset = MappingProxyType({CharacterClass.RAmar: (LevelStats(level=5, stats=stats),)})

    spec = assemble_radar_chart(["RAmar"], dataset, class_colors, 5, ALL_STATS)
    assert spec.datasets[0].data == (100.0,) * len(ALL_STATS)
