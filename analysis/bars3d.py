"""Clustered 3D bar layout on a centered X×Z category grid.

Bars are positioned by their X and Z categories, scaled so the tallest bar in
the dataset reaches `MAX_BAR_HEIGHT`, and anchored at y=0 so a renderer can
grow them upward from the base.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .categories import index_categories
from .cells import MISSING, Cell, MissingCell, cell_label
from .coercion import coerce_column
from .dataset import AxisSelection, Dataset
from .errors import ChartValidationError, check_request
from .kinds import ChartKind
from .theme import Theme

CELL_SPACING: Final = 1.5
MAX_BAR_HEIGHT: Final = 5.0
BAR_FOOTPRINT: Final = 0.8


@dataclass(frozen=True, slots=True)
class Bar3D:
    """A single bar in a 3D bar scene.

    Args:
        position: Base-center position `(x, 0, z)`.
        height: Scaled visual height (>= 0).
        footprint_width: Extent along X.
        footprint_depth: Extent along Z.
        color: Palette color for the bar's X category.
        category_label: X category label.
        raw_value: Unscaled Y value.
        secondary_category_label: Z category label.
    """

    position: tuple[float, float, float]
    height: float
    footprint_width: float
    footprint_depth: float
    color: str
    category_label: str
    raw_value: float
    secondary_category_label: str


def grid_start(count: int, spacing: float = CELL_SPACING) -> float:
    """Return the first cell center so `count` cells are centered on 0."""

    return -(count * spacing) / 2 + spacing / 2


def layout_bars_3d(
    dataset: Dataset,
    selection: AxisSelection,
    *,
    theme: Theme,
) -> tuple[Bar3D, ...] | ChartValidationError:
    """Lay out one bar per row on a centered category grid.

    Z is a secondary category like X, so a non-numeric Z does not empty the
    layout; only a blank Z cell drops the row.

    Args:
        dataset: Uploaded rows.
        selection: X (category), Y (height), and Z (secondary category) columns.
        theme: Theme whose palette colors bars by X category index.

    Returns:
        Bars in row order (rows with an invalid Y or blank Z are skipped), an
        empty tuple when no row survives, or a ChartValidationError for
        malformed requests. Heights are scaled against the tallest kept row.
    """

    error = check_request(dataset, selection, ChartKind.bar_3d)
    if error is not None:
        return error
    assert selection.x is not None and selection.y is not None and selection.z is not None

    heights = coerce_column(dataset, selection.y)
    x_index = index_categories(dataset, selection.x)
    z_index = index_categories(dataset, selection.z)

    kept: list[tuple[int, int, float, Cell, Cell]] = []
    for row_number, row in enumerate(dataset.rows):
        if not heights.is_valid(row_number):
            continue
        z_cell = row.get(selection.z, MISSING)
        if isinstance(z_cell, MissingCell):
            continue
        x_cell = row.get(selection.x, MISSING)
        i = x_index.index_of(x_cell)
        j = z_index.index_of(z_cell)
        if i is None or j is None:
            continue
        kept.append((i, j, heights.values[row_number], x_cell, z_cell))

    if not kept:
        return ()

    max_y = max(value for _, _, value, _, _ in kept)
    start_x = grid_start(len(x_index))
    start_z = grid_start(len(z_index))
    return tuple(
        Bar3D(
            position=(start_x + i * CELL_SPACING, 0.0, start_z + j * CELL_SPACING),
            height=scaled_height(value, max_y),
            footprint_width=BAR_FOOTPRINT,
            footprint_depth=BAR_FOOTPRINT,
            color=theme.color(i),
            category_label=cell_label(x_cell),
            raw_value=value,
            secondary_category_label=cell_label(z_cell),
        )
        for i, j, value, x_cell, z_cell in kept
    )


def scaled_height(value: float, max_value: float) -> float:
    """Linearly rescale `value` so `max_value` maps to `MAX_BAR_HEIGHT`.

    Non-positive maxima yield 0 (no division by zero) and negative values are
    clamped to 0 so bars never grow below the floor.
    """

    if max_value <= 0:
        return 0.0
    return max(0.0, (value / max_value) * MAX_BAR_HEIGHT)
