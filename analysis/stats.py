"""Enumerated identifiers and table types for per-level class stats.

Identifiers are `StrEnum` members, so plain strings such as `"HUcast"` compare
and hash equal to their members and can be used directly as lookup keys.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum


class StatName(StrEnum):
    """Character stats, in display order."""

    ATP = "ATP"
    DFP = "DFP"
    MST = "MST"
    ATA = "ATA"
    EVP = "EVP"
    HP = "HP"
    TP = "TP"


class CharacterClass(StrEnum):
    """Playable character classes, in selection order."""

    HUcast = "HUcast"
    HUmar = "HUmar"
    HUcaseal = "HUcaseal"
    HUnewearl = "HUnewearl"
    RAmar = "RAmar"
    RAmarl = "RAmarl"
    RAcast = "RAcast"
    RAcaseal = "RAcaseal"
    FOmar = "FOmar"
    FOmarl = "FOmarl"
    FOnewm = "FOnewm"
    FOnewearl = "FOnewearl"


StatSnapshot = Mapping[StatName, float]


@dataclass(frozen=True, slots=True)
class LevelStats:
    """Stats for a single class at a single level.

    Args:
        level: Character level (a multiple of the level step).
        stats: Read-only mapping of stat name to value.
    """

    level: int
    stats: StatSnapshot


ClassLevelTable = tuple[LevelStats, ...]
ClassDataset = Mapping[CharacterClass, ClassLevelTable]


def is_stat_name(value: object) -> bool:
    """Return True when `value` is one of the enumerated stat names."""

    return isinstance(value, str) and value in StatName.__members__


def is_character_class(value: object) -> bool:
    """Return True when `value` is one of the enumerated class identifiers."""

    return isinstance(value, str) and value in CharacterClass.__members__
