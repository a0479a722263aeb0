"""Pytest fixtures shared across the stat chart tests."""

from __future__ import annotations

from collections.abc import Sequence
from types import MappingProxyType

import pytest

from analysis.colors import RGB
from analysis.stats import CharacterClass, ClassDataset, LevelStats, StatName


def _table(levels: Sequence[int], **growth: tuple[int, int]) -> tuple[LevelStats, ...]:
    """Build a level table where each stat grows linearly from `base` by `step` per level."""

    entries = []
    for index, level in enumerate(levels):
        stats = {}
        for stat in StatName:
            base, step = growth.get(stat.value, (0, 0))
            stats[stat] = base + step * index
        entries.append(LevelStats(level=level, stats=MappingProxyType(stats)))
    return tuple(entries)


@pytest.fixture
def small_dataset() -> ClassDataset:
    """Return a three-class dataset covering levels 5..30.

    HUcast has no MST/TP (androids), FOmar leads MST/TP, HUcast leads ATP/HP.
    EVP is 0 for every class.
    """

    levels = (5, 10, 15, 20, 25, 30)
    return MappingProxyType(
        {
            CharacterClass.HUcast: _table(
                levels, ATP=(100, 10), DFP=(40, 2), ATA=(15, 1), HP=(120, 12)
            ),
            CharacterClass.RAmar: _table(
                levels, ATP=(80, 8), DFP=(45, 2), MST=(30, 3), ATA=(20, 2), HP=(100, 10), TP=(40, 4)
            ),
            CharacterClass.FOmar: _table(
                levels, ATP=(50, 5), DFP=(35, 2), MST=(90, 9), ATA=(12, 1), HP=(70, 7), TP=(95, 10)
            ),
        }
    )


@pytest.fixture
def stat_colors():
    """Return a stat color table covering every stat."""

    return MappingProxyType(
        {
            StatName.ATP: RGB(200, 40, 40),
            StatName.DFP: RGB(40, 90, 200),
            StatName.MST: RGB(140, 60, 190),
            StatName.ATA: RGB(210, 130, 20),
            StatName.EVP: RGB(30, 150, 80),
            StatName.HP: RGB(190, 30, 250),
            StatName.TP: RGB(20, 150, 170),
        }
    )


@pytest.fixture
def class_colors():
    """Return a class color table for the classes in `small_dataset`."""

    return MappingProxyType(
        {
            CharacterClass.HUcast: RGB(220, 50, 50),
            CharacterClass.RAmar: RGB(40, 160, 70),
            CharacterClass.FOmar: RGB(50, 90, 210),
        }
    )


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    - `unit`: pure, fast tests over in-memory inputs.
    - `integration`: tests touching Django views, commands, or the shipped data files.

    Each test must have exactly one of these markers.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
