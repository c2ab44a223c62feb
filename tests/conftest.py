"""Pytest fixtures shared across the chart test suite."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from analysis.dataset import Dataset
from analysis.theme import Theme, resolve_theme


@pytest.fixture
def light_theme() -> Theme:
    """Return the light theme."""

    return resolve_theme(False)


@pytest.fixture
def dark_theme() -> Theme:
    """Return the dark theme."""

    return resolve_theme(True)


@pytest.fixture
def sales_records() -> list[dict[str, object]]:
    """Return raw rows shaped like a small spreadsheet upload."""

    return [
        {"region": "North", "sales": "120", "quarter": "Q1", "margin": 0.25},
        {"region": "South", "sales": 80, "quarter": "Q1", "margin": "0.4"},
        {"region": "North", "sales": "200.5", "quarter": "Q2", "margin": 0.1},
        {"region": "East", "sales": "40", "quarter": "Q2", "margin": None},
    ]


@pytest.fixture
def sales_dataset(sales_records: list[dict[str, object]]) -> Dataset:
    """Return `sales_records` as a tagged Dataset."""

    return Dataset.from_records(sales_records)


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    - `unit`: pure, fast tests with no Django request handling or file IO.
    - `integration`: tests touching Django views, forms, commands, or files.

    Each test must have exactly one of these markers.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
