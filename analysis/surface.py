"""Regular height fields for 3D surface plots.

Rows are binned onto a fixed grid by their X/Z values and each cell takes the
mean Y of its rows. Cells without samples are filled by inverse-distance
weighting from the populated cells. When no row has numeric X, Y, and Z the
field falls back to a synthetic waveform (`source="synthetic"`), which keeps
the scene renderable but carries no information about the data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Literal

import numpy as np
import numpy.typing as npt

from .coercion import coerce_column
from .dataset import AxisSelection, Dataset
from .errors import ChartValidationError, check_request
from .kinds import ChartKind

SURFACE_RESOLUTION: Final = 21
SURFACE_EXTENT: Final = 10.0
SURFACE_AMPLITUDE: Final = 2.0
IDW_POWER: Final = 2.0

HeightFieldSource = Literal["data", "synthetic"]


@dataclass(frozen=True, slots=True)
class HeightField:
    """A sampled surface on a regular X×Z grid.

    Args:
        xs: Sample positions along X (columns).
        zs: Sample positions along Z (rows).
        heights: Visual heights, `heights[row][col]` at `(xs[col], zs[row])`.
        values: Mean Y per cell, None where the cell had no samples.
        source: `"data"` when derived from rows, `"synthetic"` for the fallback.
        sample_count: Number of rows binned into the grid.
    """

    xs: tuple[float, ...]
    zs: tuple[float, ...]
    heights: tuple[tuple[float, ...], ...]
    values: tuple[tuple[float | None, ...], ...]
    source: HeightFieldSource
    sample_count: int


def grid_axis(resolution: int = SURFACE_RESOLUTION, extent: float = SURFACE_EXTENT) -> npt.NDArray[np.float64]:
    """Return evenly spaced sample positions centered on 0."""

    return np.linspace(-extent / 2, extent / 2, resolution)


def build_surface(
    dataset: Dataset,
    selection: AxisSelection,
) -> HeightField | ChartValidationError:
    """Build a height field from the X/Z (ground) and Y (height) columns.

    Returns:
        HeightField, or a ChartValidationError for malformed requests.
    """

    error = check_request(dataset, selection, ChartKind.surface_3d)
    if error is not None:
        return error
    assert selection.x is not None and selection.y is not None and selection.z is not None

    xs = np.asarray(coerce_column(dataset, selection.x).values, dtype=float)
    ys = np.asarray(coerce_column(dataset, selection.y).values, dtype=float)
    zs = np.asarray(coerce_column(dataset, selection.z).values, dtype=float)
    valid = ~(np.isnan(xs) | np.isnan(ys) | np.isnan(zs))
    if not valid.any():
        return synthetic_surface()

    return _grid_samples(xs[valid], ys[valid], zs[valid])


def synthetic_surface() -> HeightField:
    """Return the placeholder waveform used when no row can be gridded."""

    axis = grid_axis()
    grid_x, grid_z = np.meshgrid(axis, axis)
    heights = np.sin(grid_x * 0.5) * np.cos(grid_z * 0.5) * SURFACE_AMPLITUDE
    empty = tuple(tuple(None for _ in axis) for _ in axis)
    return HeightField(
        xs=_as_tuple(axis),
        zs=_as_tuple(axis),
        heights=tuple(_as_tuple(row) for row in heights),
        values=empty,
        source="synthetic",
        sample_count=0,
    )


def _grid_samples(
    xs: npt.NDArray[np.float64],
    ys: npt.NDArray[np.float64],
    zs: npt.NDArray[np.float64],
) -> HeightField:
    """Bin samples onto the grid, average per cell, and fill the gaps."""

    axis = grid_axis()
    cols = _nearest_index(xs)
    rows = _nearest_index(zs)

    sums = np.zeros((SURFACE_RESOLUTION, SURFACE_RESOLUTION))
    counts = np.zeros((SURFACE_RESOLUTION, SURFACE_RESOLUTION))
    np.add.at(sums, (rows, cols), ys)
    np.add.at(counts, (rows, cols), 1)

    filled = counts > 0
    means = np.full(sums.shape, np.nan)
    means[filled] = sums[filled] / counts[filled]

    field = means.copy()
    if not filled.all():
        grid_x, grid_z = np.meshgrid(axis, axis)
        field[~filled] = _inverse_distance(
            known_x=grid_x[filled],
            known_z=grid_z[filled],
            known_values=means[filled],
            target_x=grid_x[~filled],
            target_z=grid_z[~filled],
        )

    peak = float(np.max(np.abs(field)))
    heights = field / peak * SURFACE_AMPLITUDE if peak > 0 else np.zeros_like(field)

    values = tuple(
        tuple(float(means[r, c]) if filled[r, c] else None for c in range(SURFACE_RESOLUTION))
        for r in range(SURFACE_RESOLUTION)
    )
    return HeightField(
        xs=_as_tuple(axis),
        zs=_as_tuple(axis),
        heights=tuple(_as_tuple(row) for row in heights),
        values=values,
        source="data",
        sample_count=int(xs.size),
    )


def _nearest_index(values: npt.NDArray[np.float64]) -> npt.NDArray[np.intp]:
    """Map data coordinates linearly onto grid indices.

    The observed [min, max] range spans the whole grid; a degenerate range maps
    every sample to the center cell.
    """

    low = float(values.min())
    high = float(values.max())
    if high == low:
        return np.full(values.shape, SURFACE_RESOLUTION // 2, dtype=np.intp)
    fraction = (values - low) / (high - low)
    return np.clip(np.rint(fraction * (SURFACE_RESOLUTION - 1)), 0, SURFACE_RESOLUTION - 1).astype(np.intp)


def _inverse_distance(
    *,
    known_x: npt.NDArray[np.float64],
    known_z: npt.NDArray[np.float64],
    known_values: npt.NDArray[np.float64],
    target_x: npt.NDArray[np.float64],
    target_z: npt.NDArray[np.float64],
) -> npt.NDArray[np.float64]:
    """Interpolate target cells from known cells by inverse-distance weighting."""

    distances = np.hypot(target_x[:, None] - known_x[None, :], target_z[:, None] - known_z[None, :])
    weights = 1.0 / distances**IDW_POWER
    return (weights @ known_values) / weights.sum(axis=1)


def _as_tuple(values: npt.NDArray[np.float64]) -> tuple[float, ...]:
    return tuple(float(value) for value in values)
