"""JSON views exposing the chart engine to a rendering front end."""

from __future__ import annotations

import json
import logging
from typing import Any

from django.conf import settings
from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST

from analysis.dataset import Dataset, extract_fields
from analysis.engine import build_chart
from analysis.errors import ChartValidationError
from core.charting.render import render_payload
from core.charting.snapshot_codec import encode_chart_request
from core.forms import ChartRequestForm
from core.parsers.tabular import TabularParseError, parse_json_records

logger = logging.getLogger(__name__)


@csrf_exempt
@require_POST
def fields_api(request: HttpRequest) -> JsonResponse:
    """Return the column names available as chart axes."""

    try:
        dataset = _dataset_from_body(_json_body(request))
    except TabularParseError as exc:
        return JsonResponse({"errors": {"records": [str(exc)]}}, status=400)

    return JsonResponse({"fields": list(extract_fields(dataset)), "row_count": len(dataset)})


@csrf_exempt
@require_POST
def chart_api(request: HttpRequest) -> JsonResponse:
    """Build chart data for the posted records and selections.

    Responses:
        200 with `{"request": ..., "chart": ...}` on success.
        400 with `{"error": {...}}` for chart validation errors, or
        `{"errors": {...}}` for malformed bodies and form errors.
        413 when the sheet exceeds `SHEETCHARTS_MAX_ROWS`.
    """

    try:
        body = _json_body(request)
        dataset = _dataset_from_body(body)
    except TabularParseError as exc:
        return JsonResponse({"errors": {"records": [str(exc)]}}, status=400)

    max_rows = int(getattr(settings, "SHEETCHARTS_MAX_ROWS", 5000))
    if len(dataset) > max_rows:
        return JsonResponse(
            {"errors": {"records": [f"Too many rows to chart safely (>{max_rows}). Upload a smaller sheet."]}},
            status=413,
        )

    form = ChartRequestForm(
        data={
            "chart_type": body.get("chart_type"),
            "x_axis": body.get("x_axis"),
            "y_axis": body.get("y_axis"),
            "z_axis": body.get("z_axis"),
            "dark": body.get("dark", False),
        },
        fields=extract_fields(dataset),
    )
    if not form.is_valid():
        return JsonResponse({"errors": {name: list(messages) for name, messages in form.errors.items()}}, status=400)

    chart_request = form.chart_request(file_name=_optional_str(body.get("file_name")))
    result = build_chart(dataset, chart_request.selection, chart_request.chart_type, theme=chart_request.theme)
    if isinstance(result, ChartValidationError):
        logger.info("Chart request rejected: %s (column=%r)", result.kind, result.column)
        return JsonResponse({"error": result.as_json()}, status=400)

    return JsonResponse(
        {
            "request": encode_chart_request(chart_request),
            "chart": render_payload(result, row_count=len(dataset)),
        }
    )


def _json_body(request: HttpRequest) -> dict[str, Any]:
    """Decode the request body as a JSON object.

    Raises:
        TabularParseError: When the body is not a JSON object.
    """

    try:
        body = json.loads(request.body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise TabularParseError("Request body is not valid JSON.") from exc
    if not isinstance(body, dict):
        raise TabularParseError("Request body must be a JSON object.")
    return body


def _dataset_from_body(body: dict[str, Any]) -> Dataset:
    return Dataset.from_records(parse_json_records(body.get("records", [])))


def _optional_str(value: object) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None
