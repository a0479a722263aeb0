"""URL configuration for core views."""

from __future__ import annotations

from django.urls import path

from core import views

app_name = "core"

urlpatterns = [
    path("api/charts/line/", views.line_chart_api, name="line_chart_api"),
    path("api/charts/radar/", views.radar_chart_api, name="radar_chart_api"),
]
