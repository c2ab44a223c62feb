"""Chart engine: dispatch a request to the builder for its chart kind.

The engine is the single entry point used by the Django layer and the
management command. It returns frozen DTOs and never performs I/O.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import assert_never

from .bars3d import Bar3D, layout_bars_3d
from .dataset import AxisSelection, Dataset
from .errors import ChartValidationError
from .kinds import ChartKind
from .points3d import Point3D, build_point_cloud_3d
from .series import Series2D, build_series_2d
from .surface import HeightField, build_surface
from .theme import Theme

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ChartResult:
    """Builder output for one chart request.

    Exactly one of `series`, `bars`, `points`, or `surface` is set, matching
    `kind`.
    """

    kind: ChartKind
    selection: AxisSelection
    theme: Theme
    series: Series2D | None = None
    bars: tuple[Bar3D, ...] | None = None
    points: tuple[Point3D, ...] | None = None
    surface: HeightField | None = None


def build_chart(
    dataset: Dataset,
    selection: AxisSelection,
    kind: ChartKind,
    *,
    theme: Theme,
) -> ChartResult | ChartValidationError:
    """Build chart-ready data for `kind`.

    Args:
        dataset: Uploaded rows.
        selection: Axis selection; Z is required for 3D kinds.
        kind: Chart kind to build.
        theme: Resolved theme applied by the builders.

    Returns:
        ChartResult, or the ChartValidationError reported by the builder.
    """

    match kind:
        case ChartKind.bar | ChartKind.line | ChartKind.pie | ChartKind.scatter:
            series = build_series_2d(dataset, selection, kind, theme=theme)
            if isinstance(series, ChartValidationError):
                return series
            return ChartResult(kind=kind, selection=selection, theme=theme, series=series)
        case ChartKind.bar_3d:
            bars = layout_bars_3d(dataset, selection, theme=theme)
            if isinstance(bars, ChartValidationError):
                return bars
            _log_dropped(kind, total=len(dataset), kept=len(bars))
            return ChartResult(kind=kind, selection=selection, theme=theme, bars=bars)
        case ChartKind.scatter_3d:
            points = build_point_cloud_3d(dataset, selection)
            if isinstance(points, ChartValidationError):
                return points
            _log_dropped(kind, total=len(dataset), kept=len(points))
            return ChartResult(kind=kind, selection=selection, theme=theme, points=points)
        case ChartKind.surface_3d:
            surface = build_surface(dataset, selection)
            if isinstance(surface, ChartValidationError):
                return surface
            if surface.source == "synthetic":
                logger.debug("No numeric rows for surface %s; using synthetic height field.", selection)
            return ChartResult(kind=kind, selection=selection, theme=theme, surface=surface)
        case _:
            assert_never(kind)


def _log_dropped(kind: ChartKind, *, total: int, kept: int) -> None:
    if kept < total:
        logger.debug("%s dropped %d of %d rows that failed numeric coercion.", kind, total - kept, total)
