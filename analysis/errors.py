"""Validation failures returned by the chart builders.

Builders return a ChartValidationError value instead of raising so that the
caller can keep the previous chart visible while displaying the message.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from .dataset import AxisSelection, Dataset
from .kinds import ChartKind


class ValidationErrorKind(StrEnum):
    """Taxonomy of chart validation failures."""

    non_numeric_column = "NonNumericColumn"
    missing_column = "MissingColumn"
    empty_dataset = "EmptyDataset"
    missing_axis_selection = "MissingAxisSelection"


@dataclass(frozen=True, slots=True)
class ChartValidationError:
    """A chart validation failure.

    Args:
        kind: Failure category.
        column: Column (or axis name for MissingAxisSelection) involved, when known.
    """

    kind: ValidationErrorKind
    column: str | None = None

    @property
    def message(self) -> str:
        """Plain-language message suitable for UI display."""

        if self.kind is ValidationErrorKind.non_numeric_column:
            return f"Column {self.column!r} contains non-numeric data. Please select a numeric column."
        if self.kind is ValidationErrorKind.missing_column:
            return f"Column {self.column!r} is not present in every row."
        if self.kind is ValidationErrorKind.empty_dataset:
            return "The dataset has no rows."
        if self.column:
            return f"Select a column for the {self.column.upper()} axis."
        return "Select the required axes."

    def as_json(self) -> dict[str, str | None]:
        """Return a JSON-serializable representation."""

        return {"kind": str(self.kind), "column": self.column, "message": self.message}


def check_request(dataset: Dataset, selection: AxisSelection, kind: ChartKind) -> ChartValidationError | None:
    """Run the checks shared by every builder.

    Order: missing axis selection, empty dataset, then missing columns.

    Returns:
        The first failure found, or None when the request is well-formed.
    """

    for axis, column in selection.required_axes(kind):
        if column is None:
            return ChartValidationError(kind=ValidationErrorKind.missing_axis_selection, column=axis)

    if not dataset.rows:
        return ChartValidationError(kind=ValidationErrorKind.empty_dataset)

    for column in selection.columns_for(kind):
        if any(column not in row for row in dataset.rows):
            return ChartValidationError(kind=ValidationErrorKind.missing_column, column=column)

    return None
