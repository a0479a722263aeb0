"""Errors raised by the stat chart core.

Every error here is a programmer-input error: the caller passed an identifier
outside the enumerated domain, or the static tables violate their contract.
None of them are retried or suppressed by the core.
"""

from __future__ import annotations


class StatChartError(ValueError):
    """Base class for stat chart errors."""


class NotFoundError(StatChartError):
    """Raised when a class identifier (or color entry) is not present."""

    def __init__(self, *, kind: str, key: object) -> None:
        """Initialize the error.

        Args:
            kind: Human-readable name of the table that was searched.
            key: Identifier that was looked up.
        """

        super().__init__(f"Unknown {kind}: {key!r}.")
        self.kind = kind
        self.key = key


class UnknownStatError(StatChartError):
    """Raised when a stat name is not one of the enumerated stats."""

    def __init__(self, stat_name: object) -> None:
        super().__init__(f"Unknown stat: {stat_name!r}.")
        self.stat_name = stat_name


class RangeMismatchError(StatChartError):
    """Raised when a class table has no entry for a requested level."""

    def __init__(self, *, level: int) -> None:
        super().__init__(f"Stat table has no entry for level {level}.")
        self.level = level


class UnsupportedChartTypeError(StatChartError):
    """Raised when a chart type other than line/radar is requested."""


class DatasetError(StatChartError):
    """Raised when static stat or color data fails validation on load."""
