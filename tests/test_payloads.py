"""Tests for Chart.js and 3D scene payload rendering."""

from __future__ import annotations

import json

import pytest

from analysis import build_chart
from analysis.dataset import AxisSelection, Dataset
from analysis.engine import ChartResult
from analysis.kinds import ChartKind
from analysis.surface import SURFACE_RESOLUTION
from analysis.theme import DARK_THEME, LIGHT_THEME, Theme
from core.charting.render import render_chart_js, render_payload
from core.charting.scene import render_scene

pytestmark = pytest.mark.unit


def _result(rows: list[dict[str, object]], selection: AxisSelection, kind: ChartKind, theme: Theme) -> ChartResult:
    result = build_chart(Dataset.from_records(rows), selection, kind, theme=theme)
    assert isinstance(result, ChartResult)
    return result


def test_bar_payload_matches_chart_js_shape() -> None:
    """Bar charts carry labels, one dataset, and category/linear scales."""

    result = _result(
        [{"cat": "A", "v": "10"}, {"cat": "B", "v": "30"}],
        AxisSelection(x="cat", y="v"),
        ChartKind.bar,
        LIGHT_THEME,
    )
    payload = render_chart_js(result)

    assert payload["kind"] == "bar"
    assert payload["data"]["labels"] == ["A", "B"]
    dataset = payload["data"]["datasets"][0]
    assert dataset["label"] == "v by cat"
    assert dataset["data"] == [10.0, 30.0]
    assert dataset["backgroundColor"][0] == "rgba(75, 192, 192, 0.6)"
    assert dataset["borderWidth"] == 1
    options = payload["options"]
    assert options["plugins"]["title"]["text"] == "v vs cat"
    assert options["scales"]["x"]["type"] == "category"
    assert options["scales"]["y"]["beginAtZero"] is True
    assert options["scales"]["y"]["ticks"]["color"] == "black"


def test_pie_payload_has_no_scales() -> None:
    """Pie charts omit cartesian scales."""

    result = _result([{"c": "A", "v": 1}], AxisSelection(x="c", y="v"), ChartKind.pie, DARK_THEME)
    payload = render_chart_js(result)

    assert "scales" not in payload["options"]
    assert payload["options"]["plugins"]["legend"]["labels"]["color"] == "white"


def test_scatter_payload_uses_point_objects() -> None:
    """Scatter data is a list of {x, y} objects without labels."""

    result = _result(
        [{"x": 1, "y": 2}, {"x": "?", "y": 3}],
        AxisSelection(x="x", y="y"),
        ChartKind.scatter,
        DARK_THEME,
    )
    payload = render_chart_js(result)

    assert "labels" not in payload["data"]
    dataset = payload["data"]["datasets"][0]
    assert dataset["data"] == [{"x": 1.0, "y": 2.0}, {"x": 0.0, "y": 3.0}]
    assert dataset["pointRadius"] == 5
    assert payload["options"]["scales"]["x"]["type"] == "linear"
    assert payload["options"]["scales"]["y"]["grid"]["color"] == "rgba(255,255,255,0.1)"


def test_bar_scene_payload() -> None:
    """3D bars carry geometry, labels, and theme-driven scene settings."""

    result = _result(
        [{"x": "A", "y": 4, "z": "P"}, {"x": "B", "y": 2, "z": "Q"}],
        AxisSelection(x="x", y="y", z="z"),
        ChartKind.bar_3d,
        DARK_THEME,
    )
    payload = render_scene(result, row_count=2)

    bars = payload["scene"]["bars"]
    assert [bar["label"] for bar in bars] == ["A", "B"]
    assert bars[0]["height"] == pytest.approx(5.0)
    assert bars[0]["hoverColor"] == DARK_THEME.hover_color
    assert bars[1]["zLabel"] == "Q"
    assert payload["camera"]["position"] == [3.0, 8, 4]
    assert payload["controls"]["maxDistance"] == 8
    assert payload["grid"]["cellColor"] == DARK_THEME.scene_grid_color
    assert payload["background"] == list(DARK_THEME.background)
    assert [label["text"] for label in payload["axis_labels"]] == ["x", "y", "z"]
    json.dumps(payload)


def test_empty_scene_uses_default_camera() -> None:
    """A scene with no rows falls back to fixed camera settings."""

    result = _result(
        [{"x": "A", "y": "n/a", "z": "P"}],
        AxisSelection(x="x", y="y", z="z"),
        ChartKind.bar_3d,
        LIGHT_THEME,
    )
    payload = render_scene(result, row_count=0)

    assert payload["scene"]["bars"] == []
    assert payload["camera"]["position"] == [10, 8, 10]
    assert payload["controls"]["maxDistance"] == 50


def test_point_and_surface_scene_payloads() -> None:
    """Point clouds list coordinates; surfaces list the height grid."""

    rows = [{"x": 1, "y": 2, "z": 3}, {"x": 4, "y": 5, "z": 6}]
    selection = AxisSelection(x="x", y="y", z="z")

    points = render_payload(_result(rows, selection, ChartKind.scatter_3d, LIGHT_THEME), row_count=2)
    assert points["scene"]["points"] == [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]
    assert points["scene"]["color"] == LIGHT_THEME.point_color

    surface = render_payload(_result(rows, selection, ChartKind.surface_3d, LIGHT_THEME), row_count=2)
    grid = surface["scene"]["surface"]
    assert grid["source"] == "data"
    assert grid["sampleCount"] == 2
    assert len(grid["heights"]) == SURFACE_RESOLUTION
    json.dumps(surface)


def test_render_payload_dispatches_2d_to_chart_js() -> None:
    """2D results render as Chart.js payloads."""

    result = _result([{"c": "A", "v": 1}], AxisSelection(x="c", y="v"), ChartKind.line, LIGHT_THEME)

    assert render_payload(result, row_count=1) == render_chart_js(result)


def test_renderers_reject_mismatched_results() -> None:
    """Rendering a result with the wrong content is a programming error."""

    two_d = _result([{"c": "A", "v": 1}], AxisSelection(x="c", y="v"), ChartKind.bar, LIGHT_THEME)
    three_d = _result(
        [{"x": 1, "y": 2, "z": 3}], AxisSelection(x="x", y="y", z="z"), ChartKind.scatter_3d, LIGHT_THEME
    )

    with pytest.raises(ValueError):
        render_scene(two_d, row_count=1)
    with pytest.raises(ValueError):
        render_chart_js(three_d)
