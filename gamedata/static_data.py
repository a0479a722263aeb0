"""Static class stat tables and color tables.

The stat tables ship as JSON (`data/class_stats.json`) and the color tables as
YAML (`data/colors.yaml`). Both are parsed into read-only mappings of frozen
values, validated once, and shared process-wide. Nothing rewrites them after
load, so concurrent chart assembly needs no locking.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml
from django.conf import settings

from analysis.colors import CHANNEL_MAX, CHANNEL_MIN, RGB, ColorTable
from analysis.errors import DatasetError
from analysis.levels import LEVEL_STEP, MAX_LEVEL, MIN_LEVEL
from analysis.stats import CharacterClass, ClassDataset, LevelStats, StatName, is_character_class

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_CLASS_STATS_PATH = DATA_DIR / "class_stats.json"
DEFAULT_COLORS_PATH = DATA_DIR / "colors.yaml"


@dataclass(frozen=True, slots=True)
class ColorTables:
    """Static color tables.

    Args:
        stat_colors: Base color per stat (line graphs).
        class_colors: Base color per class (radar charts).
    """

    stat_colors: ColorTable
    class_colors: ColorTable


def parse_class_dataset(payload: Mapping[str, Any]) -> ClassDataset:
    """Validate a decoded stat table payload and freeze it.

    Args:
        payload: Decoded JSON of the form
            `{"classes": {<class>: [{"level": int, "stats": {<stat>: number}}]}}`.

    Returns:
        Read-only mapping of CharacterClass to its ClassLevelTable.

    Raises:
        DatasetError: When a class or stat is unknown, a stat is missing, a
            table is not sorted ascending, tables disagree on levels, or the
            payload is not shaped as documented.
    """

    if not isinstance(payload, Mapping):
        raise DatasetError("Stat data must be a mapping with a 'classes' key.")
    classes = payload.get("classes")
    if not isinstance(classes, Mapping) or not classes:
        raise DatasetError("Stat data must contain a non-empty 'classes' mapping.")

    tables: dict[CharacterClass, tuple[LevelStats, ...]] = {}
    expected_levels: tuple[int, ...] | None = None
    for raw_class, raw_entries in classes.items():
        if not is_character_class(raw_class):
            raise DatasetError(f"Unknown character class in stat data: {raw_class!r}.")
        class_id = CharacterClass(raw_class)
        if not isinstance(raw_entries, (list, tuple)):
            raise DatasetError(f"Levels for {class_id} must be a list of entries.")
        table = tuple(_parse_level_entry(class_id, entry) for entry in raw_entries)
        levels = tuple(entry.level for entry in table)
        if list(levels) != sorted(set(levels)):
            raise DatasetError(f"Levels for {class_id} must be unique and ascending.")
        if expected_levels is None:
            expected_levels = levels
        elif levels != expected_levels:
            raise DatasetError(f"Levels for {class_id} do not match the other classes.")
        tables[class_id] = table

    return MappingProxyType(tables)


def _parse_level_entry(class_id: CharacterClass, entry: Mapping[str, Any]) -> LevelStats:
    """Parse one `{"level", "stats"}` entry."""

    if not isinstance(entry, Mapping):
        raise DatasetError(f"Level entry for {class_id} must be a mapping: {entry!r}.")
    level = entry.get("level")
    if not isinstance(level, int) or isinstance(level, bool):
        raise DatasetError(f"Invalid level for {class_id}: {level!r}.")
    if level < MIN_LEVEL or level > MAX_LEVEL or level % LEVEL_STEP:
        raise DatasetError(f"Level {level} for {class_id} is off the level grid.")

    raw_stats = entry.get("stats")
    if not isinstance(raw_stats, Mapping):
        raise DatasetError(f"Stats for {class_id} at level {level} must be a mapping.")
    unknown = sorted(str(key) for key in raw_stats if key not in StatName.__members__)
    if unknown:
        raise DatasetError(f"Unknown stat(s) for {class_id} at level {level}: {', '.join(unknown)}.")
    missing = [stat.value for stat in StatName if stat.value not in raw_stats]
    if missing:
        raise DatasetError(f"Missing stat(s) for {class_id} at level {level}: {', '.join(missing)}.")

    stats = {StatName(key): value for key, value in raw_stats.items()}
    for stat, value in stats.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise DatasetError(f"Non-numeric {stat} for {class_id} at level {level}: {value!r}.")
    return LevelStats(level=level, stats=MappingProxyType(stats))


def parse_color_tables(payload: Mapping[str, Any]) -> ColorTables:
    """Validate a decoded color payload and freeze it.

    Raises:
        DatasetError: When a table is missing, has an unknown key, contains a
            channel outside 0..255, or the payload is not a mapping.
    """

    if not isinstance(payload, Mapping):
        raise DatasetError("Color data must be a mapping of color tables.")
    return ColorTables(
        stat_colors=_parse_color_table(payload.get("stat_colors"), name="stat_colors", members=StatName),
        class_colors=_parse_color_table(payload.get("class_colors"), name="class_colors", members=CharacterClass),
    )


def _parse_color_table(raw: object, *, name: str, members: type[StatName] | type[CharacterClass]) -> ColorTable:
    """Parse one `{key: [r, g, b]}` table keyed by an enumerated identifier."""

    if not isinstance(raw, Mapping):
        raise DatasetError(f"Color data must contain a '{name}' mapping.")
    table: dict[str, RGB] = {}
    for key, channels in raw.items():
        if key not in members.__members__:
            raise DatasetError(f"Unknown key in {name}: {key!r}.")
        if (
            not isinstance(channels, (list, tuple))
            or len(channels) != 3
            or not all(isinstance(c, int) and CHANNEL_MIN <= c <= CHANNEL_MAX for c in channels)
        ):
            raise DatasetError(f"Invalid color for {key!r} in {name}: {channels!r}.")
        red, green, blue = channels
        table[members(key)] = RGB(red=red, green=green, blue=blue)
    return MappingProxyType(table)


def load_class_dataset(path: Path | str) -> ClassDataset:
    """Load and validate the stat tables from a JSON file."""

    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    dataset = parse_class_dataset(payload)
    levels = [entry.level for entry in next(iter(dataset.values()))]
    logger.info(
        "Loaded stat tables for %d class(es), levels %d..%d, from %s.",
        len(dataset),
        levels[0] if levels else 0,
        levels[-1] if levels else 0,
        path,
    )
    return dataset


def load_color_tables(path: Path | str) -> ColorTables:
    """Load and validate the stat and class color tables from a YAML file."""

    payload = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    tables = parse_color_tables(payload)
    logger.info(
        "Loaded %d stat color(s) and %d class color(s) from %s.",
        len(tables.stat_colors),
        len(tables.class_colors),
        path,
    )
    return tables


@lru_cache(maxsize=1)
def class_dataset() -> ClassDataset:
    """Return the process-wide stat tables, loading them on first use."""

    return load_class_dataset(getattr(settings, "STAT_GROWTH_CLASS_STATS_PATH", DEFAULT_CLASS_STATS_PATH))


@lru_cache(maxsize=1)
def color_tables() -> ColorTables:
    """Return the process-wide color tables, loading them on first use."""

    return load_color_tables(getattr(settings, "STAT_GROWTH_COLORS_PATH", DEFAULT_COLORS_PATH))
