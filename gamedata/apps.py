"""Django app configuration for GameData."""

from __future__ import annotations

from django.apps import AppConfig


class GameDataConfig(AppConfig):
    """AppConfig for the static class stat and color tables."""

    name = "gamedata"

    def ready(self) -> None:
        """Load the static tables once at startup."""

        from gamedata.static_data import class_dataset, color_tables

        class_dataset()
        color_tables()
