"""3D point cloud building from three numeric columns."""

from __future__ import annotations

from dataclasses import dataclass

from .coercion import coerce_column
from .dataset import AxisSelection, Dataset
from .errors import ChartValidationError, check_request
from .kinds import ChartKind


@dataclass(frozen=True, slots=True)
class Point3D:
    """A point in scene space."""

    x: float
    y: float
    z: float


def build_point_cloud_3d(
    dataset: Dataset,
    selection: AxisSelection,
) -> tuple[Point3D, ...] | ChartValidationError:
    """Map the X/Y/Z columns of each row directly to scene coordinates.

    A row is kept only when all three cells coerce to numbers; there is no
    zero fallback for spatial positions.

    Returns:
        Points in original row order, or a ChartValidationError for malformed
        requests.
    """

    error = check_request(dataset, selection, ChartKind.scatter_3d)
    if error is not None:
        return error
    assert selection.x is not None and selection.y is not None and selection.z is not None

    xs = coerce_column(dataset, selection.x)
    ys = coerce_column(dataset, selection.y)
    zs = coerce_column(dataset, selection.z)
    return tuple(
        Point3D(x=xs.values[i], y=ys.values[i], z=zs.values[i])
        for i in range(len(dataset))
        if xs.is_valid(i) and ys.is_valid(i) and zs.is_valid(i)
    )
