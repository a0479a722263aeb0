"""Pure analysis package for statGrowth.

This package contains deterministic, testable computations over the static
class stat tables. It must not import Django or perform any I/O.
"""

from .errors import (
    DatasetError,
    NotFoundError,
    RangeMismatchError,
    StatChartError,
    UnknownStatError,
    UnsupportedChartTypeError,
)
from .stats import CharacterClass, StatName

__all__ = [
    "CharacterClass",
    "DatasetError",
    "NotFoundError",
    "RangeMismatchError",
    "StatChartError",
    "StatName",
    "UnknownStatError",
    "UnsupportedChartTypeError",
]
