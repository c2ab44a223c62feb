"""Tests for chart-kind dispatch and the shared request checks."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from analysis import build_chart
from analysis.dataset import AxisSelection, Dataset
from analysis.engine import ChartResult
from analysis.errors import ChartValidationError, ValidationErrorKind, check_request
from analysis.kinds import KINDS_2D, KINDS_3D, ChartKind
from analysis.theme import Theme

pytestmark = pytest.mark.unit

NUMERIC_ROWS = [
    {"a": 1, "b": "2", "c": 3},
    {"a": 2, "b": "4", "c": 1},
    {"a": 3, "b": "oops", "c": 2},
]


@pytest.mark.parametrize("kind", list(ChartKind))
def test_build_chart_is_idempotent(kind: ChartKind, light_theme: Theme) -> None:
    """The same inputs produce structurally equal outputs."""

    dataset = Dataset.from_records([{"a": 1, "b": "2", "c": 3}, {"a": 2, "b": "4", "c": 1}])
    selection = AxisSelection(x="a", y="b", z="c")

    first = build_chart(dataset, selection, kind, theme=light_theme)
    second = build_chart(dataset, selection, kind, theme=light_theme)

    assert isinstance(first, ChartResult)
    assert first == second


def test_build_chart_populates_the_field_for_each_kind(light_theme: Theme) -> None:
    """Exactly one content field is set, matching the kind."""

    dataset = Dataset.from_records(NUMERIC_ROWS[:2])
    selection = AxisSelection(x="a", y="b", z="c")
    attribute = {
        ChartKind.bar: "series",
        ChartKind.line: "series",
        ChartKind.pie: "series",
        ChartKind.scatter: "series",
        ChartKind.bar_3d: "bars",
        ChartKind.scatter_3d: "points",
        ChartKind.surface_3d: "surface",
    }
    for kind, name in attribute.items():
        result = build_chart(dataset, selection, kind, theme=light_theme)
        assert isinstance(result, ChartResult)
        populated = [
            field
            for field in ("series", "bars", "points", "surface")
            if getattr(result, field) is not None
        ]
        assert populated == [name]


def test_2d_path_is_strict_while_3d_path_drops_rows(light_theme: Theme) -> None:
    """The same bad cell rejects a bar chart but only thins a point cloud."""

    dataset = Dataset.from_records(NUMERIC_ROWS)
    selection = AxisSelection(x="a", y="b", z="c")

    bar = build_chart(dataset, selection, ChartKind.bar, theme=light_theme)
    cloud = build_chart(dataset, selection, ChartKind.scatter_3d, theme=light_theme)

    assert bar == ChartValidationError(kind=ValidationErrorKind.non_numeric_column, column="b")
    assert isinstance(cloud, ChartResult)
    assert cloud.points is not None and len(cloud.points) == 2


def test_dropped_rows_are_logged_at_debug(
    light_theme: Theme, caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch
) -> None:
    """3D builders report how many rows they dropped."""

    monkeypatch.setattr(logging.getLogger("analysis"), "propagate", True)
    dataset = Dataset.from_records(NUMERIC_ROWS)
    with caplog.at_level(logging.DEBUG, logger="analysis.engine"):
        build_chart(dataset, AxisSelection(x="a", y="b", z="c"), ChartKind.scatter_3d, theme=light_theme)

    assert "dropped 1 of 3 rows" in caplog.text


@pytest.mark.parametrize("kind", list(ChartKind))
def test_checks_run_in_a_fixed_order(kind: ChartKind) -> None:
    """Missing axis, then empty dataset, then missing column."""

    full = AxisSelection(x="a", y="b", z="c")

    assert check_request(Dataset(), AxisSelection(), kind) == ChartValidationError(
        kind=ValidationErrorKind.missing_axis_selection, column="x"
    )
    assert check_request(Dataset(), full, kind) == ChartValidationError(kind=ValidationErrorKind.empty_dataset)
    assert check_request(Dataset.from_records([{"a": 1}]), full, kind) == ChartValidationError(
        kind=ValidationErrorKind.missing_column, column="b"
    )
    assert check_request(Dataset.from_records([{"a": 1, "b": 2, "c": 3}]), full, kind) is None


def test_z_is_ignored_for_2d_kinds() -> None:
    """An unknown Z column does not fail a 2D request."""

    dataset = Dataset.from_records([{"a": 1, "b": 2}])
    for kind in KINDS_2D:
        assert check_request(dataset, AxisSelection(x="a", y="b", z="missing"), kind) is None
    for kind in KINDS_3D:
        assert check_request(dataset, AxisSelection(x="a", y="b", z="missing"), kind) == ChartValidationError(
            kind=ValidationErrorKind.missing_column, column="missing"
        )


def test_validation_error_serializes_for_ui() -> None:
    """Errors carry a stable kind name and a plain-language message."""

    error = ChartValidationError(kind=ValidationErrorKind.non_numeric_column, column="v")

    assert error.as_json() == {
        "kind": "NonNumericColumn",
        "column": "v",
        "message": "Column 'v' contains non-numeric data. Please select a numeric column.",
    }
    assert "Z axis" in ChartValidationError(kind=ValidationErrorKind.missing_axis_selection, column="z").message


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("bar", ChartKind.bar),
        (" Pie ", ChartKind.pie),
        ("3d-bar", ChartKind.bar_3d),
        ("3dbar", ChartKind.bar_3d),
        ("3dscatter", ChartKind.scatter_3d),
        ("3DSurface", ChartKind.surface_3d),
    ],
)
def test_chart_kind_parse_accepts_legacy_spellings(raw: str, expected: ChartKind) -> None:
    """Accept both current and legacy chart-kind identifiers."""

    assert ChartKind.parse(raw) is expected


def test_chart_kind_parse_rejects_unknown() -> None:
    """Unknown kinds raise ValueError."""

    with pytest.raises(ValueError):
        ChartKind.parse("donut")


def test_chart_kind_partition() -> None:
    """Every kind is either 2D or 3D."""

    assert set(KINDS_2D) | set(KINDS_3D) == set(ChartKind)
    assert not set(KINDS_2D) & set(KINDS_3D)
    assert all(kind.is_3d for kind in KINDS_3D)


def test_analysis_package_does_not_import_django() -> None:
    """The analysis layer stays framework-free."""

    package_dir = Path(__file__).resolve().parents[1] / "analysis"
    offenders = [
        path.name
        for path in sorted(package_dir.glob("*.py"))
        if "import django" in path.read_text(encoding="utf-8")
        or "from django" in path.read_text(encoding="utf-8")
    ]

    assert offenders == []
