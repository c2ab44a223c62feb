"""2D series building for bar, line, pie, and scatter charts."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .cells import MISSING, cell_label
from .coercion import coerce_column
from .dataset import AxisSelection, Dataset
from .errors import ChartValidationError, ValidationErrorKind, check_request
from .kinds import KINDS_2D, ChartKind
from .theme import ColorAssignment, ColorPair, Theme


@dataclass(frozen=True, slots=True)
class ScatterPoint:
    """A single (x, y) pair for scatter charts."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class Series2D:
    """Chart-ready 2D series.

    Exactly one of `labels` (bar/line/pie) or `points` (scatter) is populated.

    Args:
        kind: Chart kind the series was built for.
        labels: Raw X-column labels in row order (not deduplicated).
        values: Coerced Y values aligned to `labels`.
        points: Scatter points in row order.
        colors: One ColorPair per label or point, assigned by row index.
    """

    kind: ChartKind
    labels: tuple[str, ...] = ()
    values: tuple[float, ...] = ()
    points: tuple[ScatterPoint, ...] = ()
    colors: tuple[ColorPair, ...] = ()


def build_series_2d(
    dataset: Dataset,
    selection: AxisSelection,
    kind: ChartKind,
    *,
    theme: Theme,
) -> Series2D | ChartValidationError:
    """Build a 2D series from a dataset and axis selection.

    Args:
        dataset: Uploaded rows.
        selection: X/Y column selection (Z is ignored).
        kind: One of bar, line, pie, scatter.
        theme: Theme whose palette provides row colors.

    Returns:
        Series2D, or a ChartValidationError when an axis is unset, the dataset is
        empty, a column is missing, or the Y column contains non-numeric cells.

    Raises:
        ValueError: When `kind` is a 3D kind (a programming error, not a data error).
    """

    if kind not in KINDS_2D:
        raise ValueError(f"build_series_2d does not support chart kind {kind!r}.")

    error = check_request(dataset, selection, kind)
    if error is not None:
        return error
    assert selection.x is not None and selection.y is not None

    y_column = coerce_column(dataset, selection.y)
    if y_column.has_invalid:
        return ChartValidationError(kind=ValidationErrorKind.non_numeric_column, column=selection.y)

    colors = ColorAssignment.from_theme(theme).assign(len(dataset))

    if kind is ChartKind.scatter:
        x_column = coerce_column(dataset, selection.x)
        points = tuple(
            ScatterPoint(x=0.0 if math.isnan(x) else x, y=y)
            for x, y in zip(x_column.values, y_column.values)
        )
        return Series2D(kind=kind, points=points, colors=colors)

    labels = tuple(cell_label(row.get(selection.x, MISSING)) for row in dataset.rows)
    return Series2D(kind=kind, labels=labels, values=y_column.values, colors=colors)
