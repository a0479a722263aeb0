"""JSON endpoints for the stat charts.

Each endpoint validates its selection with a form, assembles the chart, and
returns the Chart.js config. Invalid selections return HTTP 400 with the form
messages. Errors raised by the assemblers are not caught here.
"""

from __future__ import annotations

import logging

from django.http import HttpRequest, JsonResponse
from django.views.decorators.http import require_GET

from core.forms import ChartSelectionForm, LineChartForm, RadarChartForm
from core.services import line_chart_payload, radar_chart_payload

logger = logging.getLogger(__name__)


def _invalid(form: ChartSelectionForm) -> JsonResponse:
    """Return the 400 response for an invalid selection form."""

    errors = form.error_messages()
    logger.info("Rejected chart selection: %s", "; ".join(errors))
    return JsonResponse({"ok": False, "errors": errors}, status=400)


@require_GET
def line_chart_api(request: HttpRequest) -> JsonResponse:
    """Return the line graph config for the selected classes, stats, and range."""

    form = LineChartForm(request.GET)
    if not form.is_valid():
        return _invalid(form)
    return JsonResponse({"ok": True, "chart": line_chart_payload(form.selection())})


@require_GET
def radar_chart_api(request: HttpRequest) -> JsonResponse:
    """Return the radar chart config for the selected classes at one level."""

    form = RadarChartForm(request.GET)
    if not form.is_valid():
        return _invalid(form)
    return JsonResponse({"ok": True, "chart": radar_chart_payload(form.selection())})
