"""Schema types for chart requests handled by the Django layer.

A ChartRequest captures everything the UI chooses for one chart (kind, axes,
theme) independent of the dataset rows, so it can be saved and replayed.
"""

from __future__ import annotations

from dataclasses import dataclass

from analysis.dataset import AxisSelection
from analysis.kinds import ChartKind
from analysis.theme import Theme, resolve_theme

CHART_REQUEST_VERSION = "chart_request_v1"


@dataclass(frozen=True, slots=True)
class ChartRequest:
    """A user's chart configuration.

    Args:
        chart_type: Selected chart kind.
        selection: Selected axis columns.
        dark: Whether the dark theme is active.
        file_name: Optional name of the uploaded sheet the request refers to.
        dataset_id: Optional identifier assigned by the upload store.
    """

    chart_type: ChartKind
    selection: AxisSelection
    dark: bool = False
    file_name: str | None = None
    dataset_id: str | None = None
    version: str = CHART_REQUEST_VERSION

    @property
    def theme(self) -> Theme:
        """Theme resolved from the `dark` flag."""

        return resolve_theme(self.dark)
