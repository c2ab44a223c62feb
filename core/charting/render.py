"""Chart.js payload rendering for 2D chart results."""

from __future__ import annotations

from typing import Any, TypedDict

from analysis.engine import ChartResult
from analysis.kinds import ChartKind
from analysis.series import Series2D
from analysis.theme import Theme

from .scene import ScenePayload, render_scene


class ChartDataset(TypedDict, total=False):
    """A Chart.js dataset payload."""

    label: str
    data: list[float] | list[dict[str, float]]
    backgroundColor: list[str]
    borderColor: list[str]
    borderWidth: int
    pointRadius: int
    pointHoverRadius: int


class ChartData(TypedDict, total=False):
    """Chart.js `data` (labels are omitted for scatter charts)."""

    labels: list[str]
    datasets: list[ChartDataset]


class ChartPayload(TypedDict):
    """Full Chart.js payload for a 2D chart panel."""

    kind: str
    data: ChartData
    options: dict[str, Any]


def render_chart_js(result: ChartResult) -> ChartPayload:
    """Render a 2D ChartResult into Chart.js `data` and `options`.

    Args:
        result: ChartResult produced for bar, line, pie, or scatter.

    Returns:
        ChartPayload ready for JSON serialization.

    Raises:
        ValueError: When `result` does not carry a 2D series.
    """

    series = result.series
    if series is None:
        raise ValueError(f"ChartResult for {result.kind!r} has no 2D series.")

    x_axis = result.selection.x or ""
    y_axis = result.selection.y or ""
    title = f"{y_axis} vs {x_axis}"

    if series.kind is ChartKind.scatter:
        return {
            "kind": str(series.kind),
            "data": {"datasets": [_scatter_dataset(series, label=title)]},
            "options": _scatter_options(result.theme, title=title, x_axis=x_axis, y_axis=y_axis),
        }

    dataset: ChartDataset = {
        "label": f"{y_axis} by {x_axis}",
        "data": list(series.values),
        "backgroundColor": [pair.fill for pair in series.colors],
        "borderColor": [pair.border for pair in series.colors],
        "borderWidth": 1,
    }
    if series.kind is ChartKind.pie:
        options = _pie_options(result.theme, title=title)
    else:
        options = _common_options(result.theme, title=title, x_axis=x_axis, y_axis=y_axis)
    return {
        "kind": str(series.kind),
        "data": {"labels": list(series.labels), "datasets": [dataset]},
        "options": options,
    }


def _scatter_dataset(series: Series2D, *, label: str) -> ChartDataset:
    return {
        "label": label,
        "data": [{"x": point.x, "y": point.y} for point in series.points],
        "backgroundColor": [pair.fill for pair in series.colors],
        "borderColor": [pair.border for pair in series.colors],
        "pointRadius": 5,
        "pointHoverRadius": 8,
    }


def _axis(theme: Theme, *, scale_type: str, title: str) -> dict[str, Any]:
    return {
        "type": scale_type,
        "title": {"display": True, "text": title, "color": theme.text_color},
        "ticks": {"color": theme.text_color},
        "grid": {"color": theme.grid_color},
    }


def _plugins(theme: Theme, *, title: str) -> dict[str, Any]:
    return {
        "legend": {"position": "top", "labels": {"color": theme.text_color}},
        "title": {"display": True, "text": title, "color": theme.text_color},
    }


def _common_options(theme: Theme, *, title: str, x_axis: str, y_axis: str) -> dict[str, Any]:
    """Options shared by bar and line charts (category X, linear Y from zero)."""

    y_scale = _axis(theme, scale_type="linear", title=y_axis)
    y_scale["beginAtZero"] = True
    return {
        "responsive": True,
        "maintainAspectRatio": False,
        "plugins": _plugins(theme, title=title),
        "scales": {"x": _axis(theme, scale_type="category", title=x_axis), "y": y_scale},
    }


def _pie_options(theme: Theme, *, title: str) -> dict[str, Any]:
    return {
        "responsive": True,
        "maintainAspectRatio": False,
        "plugins": _plugins(theme, title=title),
    }


def _scatter_options(theme: Theme, *, title: str, x_axis: str, y_axis: str) -> dict[str, Any]:
    x_scale = _axis(theme, scale_type="linear", title=x_axis)
    x_scale["position"] = "bottom"
    y_scale = _axis(theme, scale_type="linear", title=y_axis)
    y_scale["position"] = "left"
    return {
        "responsive": True,
        "maintainAspectRatio": False,
        "plugins": _plugins(theme, title=title),
        "scales": {"x": x_scale, "y": y_scale},
    }


def render_payload(result: ChartResult, *, row_count: int) -> ChartPayload | ScenePayload:
    """Render any ChartResult: Chart.js for 2D kinds, a scene payload for 3D kinds."""

    if result.kind.is_3d:
        return render_scene(result, row_count=row_count)
    return render_chart_js(result)
