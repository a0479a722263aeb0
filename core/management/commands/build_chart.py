"""Print the Chart.js config for a line or radar chart selection."""

from __future__ import annotations

import json

from django.core.management.base import BaseCommand, CommandError
from django.http import QueryDict

from core.forms import CLASS_CHOICES, STAT_CHOICES, LineChartForm, RadarChartForm
from core.services import line_chart_payload, radar_chart_payload


class Command(BaseCommand):
    """Assemble a chart from the shipped stat tables and print it as JSON."""

    help = "Assemble a line or radar chart from the static stat tables and print the Chart.js config."

    def add_arguments(self, parser) -> None:
        """Add command arguments."""

        parser.add_argument("chart_type", choices=("line", "radar"), help="Chart to assemble.")
        parser.add_argument(
            "--classes",
            nargs="+",
            default=[],
            metavar="CLASS",
            help=f"Character classes ({', '.join(value for value, _ in CLASS_CHOICES)}).",
        )
        parser.add_argument(
            "--stats",
            nargs="+",
            default=[],
            metavar="STAT",
            help=f"Stats for line charts ({', '.join(value for value, _ in STAT_CHOICES)}).",
        )
        parser.add_argument("--start", type=int, default=None, help="First level (line charts).")
        parser.add_argument("--end", type=int, default=None, help="Last level (line charts).")
        parser.add_argument("--level", type=int, default=None, help="Level to compare at (radar charts).")
        parser.add_argument("--title", default="", help="Optional chart title.")
        parser.add_argument("--indent", type=int, default=None, help="Optional JSON indentation.")

    def handle(self, *args, **options) -> str | None:
        """Run the command."""

        chart_type: str = options["chart_type"]
        data = QueryDict(mutable=True)
        data.setlist("classes", list(options["classes"]))
        data["title"] = options["title"]

        if chart_type == "line":
            data.setlist("stats", list(options["stats"]))
            for key, option in (("start_level", "start"), ("end_level", "end")):
                if options[option] is not None:
                    data[key] = str(options[option])
            form = LineChartForm(data)
            if not form.is_valid():
                raise CommandError(" ".join(form.error_messages()))
            payload = line_chart_payload(form.selection())
        else:
            if options["level"] is not None:
                data["level"] = str(options["level"])
            form = RadarChartForm(data)
            if not form.is_valid():
                raise CommandError(" ".join(form.error_messages()))
            payload = radar_chart_payload(form.selection())

        self.stdout.write(json.dumps(payload, indent=options["indent"]))
        return None
