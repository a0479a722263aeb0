"""Forms for the stat chart selections.

The chart assemblers trust their input; these forms are where user selections
are checked and turned into typed selection objects.
"""

from __future__ import annotations

from django import forms

from analysis.levels import MAX_LEVEL, MIN_LEVEL
from analysis.stats import CharacterClass, StatName
from core.charting.line import DEFAULT_LINE_TITLE
from core.charting.radar import DEFAULT_RADAR_TITLE
from core.charting.schema import LineChartSelection, RadarChartSelection

CLASS_CHOICES = tuple((member.value, member.value) for member in CharacterClass)
STAT_CHOICES = tuple((member.value, member.value) for member in StatName)

SELECT_CLASS_MESSAGE = "Please select at least one class."
SELECT_STAT_MESSAGE = "Please select at least one stat."
START_LEVEL_MESSAGE = "Please enter a valid start level."
END_LEVEL_MESSAGE = "Please enter a valid end level."
LEVEL_ORDER_MESSAGE = "Start level should be lower than end level."


def _in_class_order(values: object) -> tuple[CharacterClass, ...]:
    """Return selected classes in enumeration order, regardless of submit order."""

    selected = {str(value) for value in (values or ())}  # type: ignore[union-attr]
    return tuple(member for member in CharacterClass if member.value in selected)


def _in_stat_order(values: object) -> tuple[StatName, ...]:
    """Return selected stats in enumeration order, regardless of submit order."""

    selected = {str(value) for value in (values or ())}  # type: ignore[union-attr]
    return tuple(member for member in StatName if member.value in selected)


class ChartSelectionForm(forms.Form):
    """Shared behavior for chart selection forms."""

    def error_messages(self) -> list[str]:
        """Return every validation message as a flat list, in field order."""

        messages: list[str] = []
        for errors in self.errors.values():
            for message in errors:
                if message not in messages:
                    messages.append(message)
        return messages


class LineChartForm(ChartSelectionForm):
    """Validate line graph selections (classes, stats, level range)."""

    classes = forms.MultipleChoiceField(
        required=True,
        choices=CLASS_CHOICES,
        label="Classes",
        error_messages={"required": SELECT_CLASS_MESSAGE},
    )
    stats = forms.MultipleChoiceField(
        required=True,
        choices=STAT_CHOICES,
        label="Stats",
        error_messages={"required": SELECT_STAT_MESSAGE},
    )
    start_level = forms.IntegerField(
        required=True,
        label="Start level",
        error_messages={"required": START_LEVEL_MESSAGE, "invalid": START_LEVEL_MESSAGE},
    )
    end_level = forms.IntegerField(
        required=True,
        label="End level",
        error_messages={"required": END_LEVEL_MESSAGE, "invalid": END_LEVEL_MESSAGE},
    )
    title = forms.CharField(required=False, max_length=200, label="Title")

    def clean(self) -> dict[str, object]:
        """Clamp the level bounds and require a non-empty range."""

        cleaned = super().clean()
        start = cleaned.get("start_level")
        end = cleaned.get("end_level")
        if start is not None:
            start = max(int(start), MIN_LEVEL)
            cleaned["start_level"] = start
        if end is not None:
            end = min(int(end), MAX_LEVEL)
            cleaned["end_level"] = end
        if start is not None and end is not None and start >= end:
            self.add_error(None, LEVEL_ORDER_MESSAGE)
        return cleaned

    def selection(self) -> LineChartSelection:
        """Return a typed selection for assembling a line chart.

        Raises:
            ValueError: If the form is invalid.
        """

        if not self.is_valid():
            raise ValueError("LineChartForm must be valid before building selections.")

        return LineChartSelection(
            classes=_in_class_order(self.cleaned_data.get("classes")),
            stats=_in_stat_order(self.cleaned_data.get("stats")),
            start_level=int(self.cleaned_data["start_level"]),
            end_level=int(self.cleaned_data["end_level"]),
            title=(self.cleaned_data.get("title") or "").strip() or DEFAULT_LINE_TITLE,
        )


class RadarChartForm(ChartSelectionForm):
    """Validate radar chart selections (classes, single level).

    A missing, non-numeric, or out-of-range level falls back to the maximum
    level instead of failing validation.
    """

    classes = forms.MultipleChoiceField(
        required=True,
        choices=CLASS_CHOICES,
        label="Classes",
        error_messages={"required": SELECT_CLASS_MESSAGE},
    )
    level = forms.CharField(required=False, label="Level")
    title = forms.CharField(required=False, max_length=200, label="Title")

    def clean_level(self) -> int:
        raw = (self.cleaned_data.get("level") or "").strip()
        try:
            level = int(raw, 10)
        except ValueError:
            return MAX_LEVEL
        if level < MIN_LEVEL or level > MAX_LEVEL:
            return MAX_LEVEL
        return level

    def selection(self) -> RadarChartSelection:
        """Return a typed selection for assembling a radar chart.

        Raises:
            ValueError: If the form is invalid.
        """

        if not self.is_valid():
            raise ValueError("RadarChartForm must be valid before building selections.")

        return RadarChartSelection(
            classes=_in_class_order(self.cleaned_data.get("classes")),
            level=int(self.cleaned_data["level"]),
            title=(self.cleaned_data.get("title") or "").strip() or DEFAULT_RADAR_TITLE,
        )
