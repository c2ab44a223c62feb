"""Pure chart-building package for sheetcharts.

This package turns uploaded tabular records into renderer-ready 2D series and
3D scene data. It must not import Django or perform any I/O.
"""

from .bars3d import layout_bars_3d
from .categories import index_categories
from .coercion import coerce_column
from .dataset import AxisSelection, Dataset, extract_fields
from .engine import build_chart
from .errors import ChartValidationError, ValidationErrorKind
from .kinds import ChartKind
from .points3d import build_point_cloud_3d
from .series import build_series_2d
from .surface import build_surface
from .theme import resolve_theme

__all__ = [
    "AxisSelection",
    "ChartKind",
    "ChartValidationError",
    "Dataset",
    "ValidationErrorKind",
    "build_chart",
    "build_point_cloud_3d",
    "build_series_2d",
    "build_surface",
    "coerce_column",
    "extract_fields",
    "index_categories",
    "layout_bars_3d",
    "resolve_theme",
]
