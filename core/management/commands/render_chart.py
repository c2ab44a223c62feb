"""Render chart data for a CSV/JSON sheet and print it as JSON."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from django.core.management.base import BaseCommand, CommandError

from analysis.dataset import AxisSelection, Dataset, default_axis_selection, extract_fields
from analysis.engine import build_chart
from analysis.errors import ChartValidationError
from analysis.kinds import ChartKind
from core.charting.render import render_payload
from core.charting.schema import ChartRequest
from core.charting.snapshot_codec import decode_chart_request, encode_chart_request
from core.parsers.tabular import TabularParseError, load_records


class Command(BaseCommand):
    """Build chart data for a sheet export without going through the web UI."""

    help = "Render Chart.js or 3D scene data for a .csv/.json sheet and print it as JSON."

    def add_arguments(self, parser) -> None:
        """Add command arguments."""

        parser.add_argument("path", help="Path to a .csv or .json sheet export.")
        parser.add_argument(
            "--config",
            default=None,
            help="YAML chart request (chart_type, x_axis, y_axis, z_axis, dark, file_name).",
        )
        parser.add_argument("--type", dest="chart_type", default=None, help="Chart kind, e.g. bar or 3d-bar.")
        parser.add_argument("--x", dest="x_axis", default=None, help="Column for the X axis.")
        parser.add_argument("--y", dest="y_axis", default=None, help="Column for the Y axis.")
        parser.add_argument("--z", dest="z_axis", default=None, help="Column for the Z axis (3D kinds only).")
        parser.add_argument("--dark", action="store_true", help="Use the dark theme.")
        parser.add_argument(
            "--list-fields",
            action="store_true",
            help="Print the sheet's column names and exit.",
        )

    def handle(self, *args, **options) -> str | None:
        """Run the command."""

        path = Path(options["path"])
        if not path.exists():
            raise CommandError(f"File not found: {path}")

        try:
            dataset = Dataset.from_records(load_records(path))
        except TabularParseError as exc:
            raise CommandError(str(exc)) from exc

        fields = extract_fields(dataset)
        if options["list_fields"]:
            self.stdout.write(json.dumps({"fields": list(fields), "row_count": len(dataset)}))
            return None

        chart_request = self._chart_request(options, fields=fields, file_name=path.name)
        result = build_chart(dataset, chart_request.selection, chart_request.chart_type, theme=chart_request.theme)
        if isinstance(result, ChartValidationError):
            raise CommandError(f"{result.kind}: {result.message}")

        output = {
            "request": encode_chart_request(chart_request),
            "chart": render_payload(result, row_count=len(dataset)),
        }
        self.stdout.write(json.dumps(output, indent=2))
        return None

    def _chart_request(self, options: dict[str, Any], *, fields: tuple[str, ...], file_name: str) -> ChartRequest:
        """Merge the YAML request file, CLI overrides, and column defaults."""

        payload: dict[str, Any] = {}
        if options["config"]:
            config_path = Path(options["config"])
            try:
                loaded = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
            except (OSError, yaml.YAMLError) as exc:
                raise CommandError(f"Could not read chart request {config_path}: {exc}") from exc
            if not isinstance(loaded, dict):
                raise CommandError(f"Chart request {config_path} must be a YAML mapping.")
            payload.update(loaded)

        for key in ("chart_type", "x_axis", "y_axis", "z_axis"):
            if options[key] is not None:
                payload[key] = options[key]
        if options["dark"]:
            payload["dark"] = True
        payload.setdefault("file_name", file_name)

        try:
            kind = ChartKind.parse(str(payload.get("chart_type") or ChartKind.bar.value))
        except ValueError as exc:
            raise CommandError(f"Unsupported chart type: {payload.get('chart_type')!r}.") from exc
        payload["chart_type"] = kind.value

        defaults = default_axis_selection(fields, kind)
        payload.setdefault("x_axis", defaults.x)
        payload.setdefault("y_axis", defaults.y)
        payload.setdefault("z_axis", defaults.z)

        request = decode_chart_request(payload)
        for column in _selected_columns(request.selection):
            if column not in fields:
                raise CommandError(f"Unknown column {column!r}; available: {', '.join(fields) or '(none)'}.")
        return request


def _selected_columns(selection: AxisSelection) -> tuple[str, ...]:
    return tuple(column for column in (selection.x, selection.y, selection.z) if column is not None)
