"""Dataset and axis-selection types plus field extraction.

A Dataset is the in-memory form of an uploaded sheet: an ordered sequence of
records mapping column names to tagged cells.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass

from .cells import Cell, to_cell
from .kinds import ChartKind

Record = Mapping[str, Cell]


@dataclass(frozen=True, slots=True)
class Dataset:
    """An immutable sequence of records.

    Args:
        rows: Records in upload order.
    """

    rows: tuple[Record, ...] = ()

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, object]]) -> Dataset:
        """Build a Dataset from raw parser output, tagging every cell."""

        return cls(rows=tuple({str(key): to_cell(value) for key, value in record.items()} for record in records))

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.rows)

    @property
    def columns(self) -> tuple[str, ...]:
        """Column names of the first record."""

        return extract_fields(self)


@dataclass(frozen=True, slots=True)
class AxisSelection:
    """User-chosen columns for the X/Y/(Z) chart axes.

    Args:
        x: Column mapped to the X axis (categories for bar/line/pie).
        y: Column mapped to the Y axis (values / bar height).
        z: Column mapped to the Z axis; only meaningful for 3D kinds.
    """

    x: str | None = None
    y: str | None = None
    z: str | None = None

    def __post_init__(self) -> None:
        for name in ("x", "y", "z"):
            value = getattr(self, name)
            if value is not None and not str(value).strip():
                object.__setattr__(self, name, None)

    def required_axes(self, kind: ChartKind) -> tuple[tuple[str, str | None], ...]:
        """Return `(axis_name, column)` pairs that must be set for `kind`."""

        axes: tuple[tuple[str, str | None], ...] = (("x", self.x), ("y", self.y))
        if kind.is_3d:
            axes = axes + (("z", self.z),)
        return axes

    def columns_for(self, kind: ChartKind) -> tuple[str, ...]:
        """Return the set columns referenced by `kind`, in x/y/z order."""

        return tuple(column for _, column in self.required_axes(kind) if column is not None)


def extract_fields(dataset: Dataset) -> tuple[str, ...]:
    """Return the ordered column names of the first record.

    An empty dataset yields an empty tuple ("no axes available"); this is not an
    error.
    """

    if not dataset.rows:
        return ()
    return tuple(dataset.rows[0].keys())


def default_axis_selection(fields: tuple[str, ...], kind: ChartKind = ChartKind.bar) -> AxisSelection:
    """Pre-fill an AxisSelection from the first columns of a sheet.

    Args:
        fields: Ordered column names from `extract_fields`.
        kind: Chart kind; Z is only pre-filled for 3D kinds.

    Returns:
        AxisSelection using columns 0, 1 (and 2 for 3D) when available.
    """

    x = fields[0] if len(fields) > 0 else None
    y = fields[1] if len(fields) > 1 else None
    z = fields[2] if kind.is_3d and len(fields) > 2 else None
    return AxisSelection(x=x, y=y, z=z)
