"""3D scene payloads for bar, scatter, and surface results.

The payload describes scene content plus the camera, floor grid, lights, and
axis labels a WebGL renderer needs; it contains no drawing logic.
"""

from __future__ import annotations

from typing import Any, TypedDict

from analysis.engine import ChartResult
from analysis.kinds import ChartKind
from analysis.theme import Theme

SURFACE_OPACITY = 0.6
POINT_RADIUS = 0.1


class ScenePayload(TypedDict):
    """Renderer-ready description of a 3D chart."""

    kind: str
    scene: dict[str, Any]
    camera: dict[str, Any]
    controls: dict[str, Any]
    grid: dict[str, Any]
    lights: list[dict[str, Any]]
    axis_labels: list[dict[str, Any]]
    background: list[str]


def render_scene(result: ChartResult, *, row_count: int) -> ScenePayload:
    """Render a 3D ChartResult into a scene payload.

    Args:
        result: ChartResult for a 3D kind.
        row_count: Number of dataset rows; drives camera distance.

    Returns:
        ScenePayload ready for JSON serialization.

    Raises:
        ValueError: When `result` is not a 3D result.
    """

    theme = result.theme
    if result.kind is ChartKind.bar_3d and result.bars is not None:
        scene: dict[str, Any] = {
            "bars": [
                {
                    "position": list(bar.position),
                    "height": bar.height,
                    "width": bar.footprint_width,
                    "depth": bar.footprint_depth,
                    "color": bar.color,
                    "hoverColor": theme.hover_color,
                    "label": bar.category_label,
                    "value": bar.raw_value,
                    "zLabel": bar.secondary_category_label,
                }
                for bar in result.bars
            ]
        }
    elif result.kind is ChartKind.scatter_3d and result.points is not None:
        scene = {
            "points": [[point.x, point.y, point.z] for point in result.points],
            "color": theme.point_color,
            "radius": POINT_RADIUS,
        }
    elif result.kind is ChartKind.surface_3d and result.surface is not None:
        surface = result.surface
        scene = {
            "surface": {
                "xs": list(surface.xs),
                "zs": list(surface.zs),
                "heights": [list(row) for row in surface.heights],
                "source": surface.source,
                "sampleCount": surface.sample_count,
                "color": theme.surface_color,
                "opacity": SURFACE_OPACITY,
            }
        }
    else:
        raise ValueError(f"ChartResult for {result.kind!r} has no 3D scene content.")

    return {
        "kind": str(result.kind),
        "scene": scene,
        "camera": _camera(row_count),
        "controls": _controls(row_count),
        "grid": _grid(theme),
        "lights": _lights(),
        "axis_labels": _axis_labels(result, theme=theme, row_count=row_count),
        "background": list(theme.background),
    }


def _camera(row_count: int) -> dict[str, Any]:
    """Pull the camera back as the dataset grows."""

    if row_count > 0:
        position = [row_count * 1.5, 8, row_count * 2]
    else:
        position = [10, 8, 10]
    return {"position": position, "fov": 60, "near": 0.1, "far": 1000}


def _controls(row_count: int) -> dict[str, Any]:
    return {
        "enablePan": True,
        "enableZoom": True,
        "enableRotate": True,
        "minDistance": 5,
        "maxDistance": row_count * 4 if row_count > 0 else 50,
        "target": [0, 3, 0],
    }


def _grid(theme: Theme) -> dict[str, Any]:
    return {
        "size": [30, 30],
        "cellSize": 1,
        "cellThickness": 0.4,
        "cellColor": theme.scene_grid_color,
        "sectionSize": 5,
        "sectionThickness": 1,
        "sectionColor": theme.scene_section_color,
        "fadeDistance": 30,
    }


def _lights() -> list[dict[str, Any]]:
    return [
        {"type": "ambient", "intensity": 0.6},
        {"type": "directional", "position": [10, 20, 10], "intensity": 1.1},
        {"type": "point", "position": [-10, -10, -10], "intensity": 0.4},
    ]


def _axis_labels(result: ChartResult, *, theme: Theme, row_count: int) -> list[dict[str, Any]]:
    selection = result.selection
    y_offset = row_count * 1.5 if row_count > 0 else 8
    return [
        {"axis": "x", "text": selection.x or "", "position": [0, 0, -10], "color": theme.text_color},
        {"axis": "y", "text": selection.y or "", "position": [y_offset, 0, 0], "color": theme.text_color},
        {"axis": "z", "text": selection.z or "Z-Axis", "position": [0, 8, 0], "color": theme.text_color},
    ]
