"""Snapshot encoding/decoding helpers for ChartRequest payloads."""

from __future__ import annotations

from typing import Any

from analysis.dataset import AxisSelection
from analysis.kinds import ChartKind

from .schema import CHART_REQUEST_VERSION, ChartRequest


def encode_chart_request(request: ChartRequest) -> dict[str, Any]:
    """Encode a ChartRequest into a JSON-serializable dictionary.

    The Z axis is only written for 3D chart kinds.

    Args:
        request: ChartRequest to encode.

    Returns:
        Dict payload safe for JSON storage.
    """

    payload: dict[str, Any] = {
        "version": request.version,
        "file_name": request.file_name,
        "dataset_id": request.dataset_id,
        "chart_type": str(request.chart_type),
        "x_axis": request.selection.x,
        "y_axis": request.selection.y,
        "dark": bool(request.dark),
    }
    if request.chart_type.is_3d:
        payload["z_axis"] = request.selection.z
    return payload


def decode_chart_request(payload: dict[str, Any]) -> ChartRequest:
    """Decode a ChartRequest from a stored payload dictionary.

    Args:
        payload: Payload previously produced by `encode_chart_request`, or a
            hand-written request file using the same keys.

    Returns:
        ChartRequest instance.

    Raises:
        ValueError: When `chart_type` is not a supported chart kind.
    """

    chart_type = ChartKind.parse(str(payload.get("chart_type") or "bar"))
    selection = AxisSelection(
        x=_parse_str(payload.get("x_axis")),
        y=_parse_str(payload.get("y_axis")),
        z=_parse_str(payload.get("z_axis")) if chart_type.is_3d else None,
    )
    return ChartRequest(
        chart_type=chart_type,
        selection=selection,
        dark=_parse_bool(payload.get("dark")),
        file_name=_parse_str(payload.get("file_name")),
        dataset_id=_parse_str(payload.get("dataset_id")),
        version=str(payload.get("version") or CHART_REQUEST_VERSION),
    )


def _parse_str(value: object) -> str | None:
    """Best-effort string parsing; blanks become None."""

    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_bool(value: object) -> bool:
    """Best-effort bool parsing for snapshot payloads."""

    if isinstance(value, bool):
        return value
    if value is None:
        return False
    normalized = str(value).strip().casefold()
    return normalized in {"1", "true", "yes", "on"}
