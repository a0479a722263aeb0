"""Tests for chart selection forms."""

from __future__ import annotations

import pytest

from analysis.stats import CharacterClass, StatName
from core.forms import (
    LEVEL_ORDER_MESSAGE,
    SELECT_CLASS_MESSAGE,
    SELECT_STAT_MESSAGE,
    START_LEVEL_MESSAGE,
    LineChartForm,
    RadarChartForm,
)

pytestmark = pytest.mark.integration


def test_line_form_returns_selection_in_enumeration_order() -> None:
    """Selections come back in class/stat order regardless of submit order."""

    form = LineChartForm(
        data={"classes": ["RAmar", "HUcast"], "stats": ["HP", "ATP"], "start_level": "5", "end_level": "20"}
    )
    assert form.is_valid(), form.errors

    selection = form.selection()
    assert selection.classes == (CharacterClass.HUcast, CharacterClass.RAmar)
    assert selection.stats == (StatName.ATP, StatName.HP)
    assert (selection.start_level, selection.end_level) == (5, 20)
    assert selection.title == "Character stat growth"


def test_line_form_clamps_levels_before_comparing() -> None:
    """Levels below 5 and above 200 are clamped, not rejected."""

    form = LineChartForm(
        data={"classes": ["HUmar"], "stats": ["ATP"], "start_level": "1", "end_level": "999", "title": " Mine "}
    )
    assert form.is_valid(), form.errors
    selection = form.selection()
    assert (selection.start_level, selection.end_level) == (5, 200)
    assert selection.title == "Mine"


def test_line_form_requires_start_below_end() -> None:
    """Reject ranges whose (clamped) start is not below the end."""

    form = LineChartForm(data={"classes": ["HUmar"], "stats": ["ATP"], "start_level": "1", "end_level": "5"})
    assert not form.is_valid()
    assert form.error_messages() == [LEVEL_ORDER_MESSAGE]


def test_line_form_reports_every_missing_selection() -> None:
    """Collect all messages for an empty submission."""

    form = LineChartForm(data={"start_level": "abc", "end_level": "20"})
    assert not form.is_valid()
    assert form.error_messages() == [SELECT_CLASS_MESSAGE, SELECT_STAT_MESSAGE, START_LEVEL_MESSAGE]


def test_line_form_selection_requires_valid_form() -> None:
    with pytest.raises(ValueError):
        LineChartForm(data={}).selection()


def test_radar_form_defaults_level_to_maximum() -> None:
    """Missing, non-numeric, and out-of-range levels fall back to 200."""

    for raw_level in ("", "abc", "0", "4", "201"):
        form = RadarChartForm(data={"classes": ["FOmarl"], "level": raw_level})
        assert form.is_valid(), form.errors
        assert form.selection().level == 200


def test_radar_form_keeps_valid_level() -> None:
    form = RadarChartForm(data={"classes": ["FOmarl", "HUcast"], "level": "75"})
    assert form.is_valid(), form.errors
    selection = form.selection()
    assert selection.level == 75
    assert selection.classes == (CharacterClass.HUcast, CharacterClass.FOmarl)
    assert selection.title == "Class stats"


def test_radar_form_requires_a_class() -> None:
    form = RadarChartForm(data={"level": "50"})
    assert not form.is_valid()
    assert form.error_messages() == [SELECT_CLASS_MESSAGE]


def test_forms_reject_unknown_identifiers() -> None:
    """Only enumerated classes and stats are accepted."""

    form = LineChartForm(data={"classes": ["HUbot"], "stats": ["LCK"], "start_level": "5", "end_level": "20"})
    assert not form.is_valid()
    assert set(form.errors) == {"classes", "stats"}
