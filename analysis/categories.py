"""First-occurrence category indexing for discrete chart axes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from .cells import MISSING, Cell, cell_label
from .dataset import Dataset


@dataclass(frozen=True, slots=True)
class CategoryIndex:
    """Ordered distinct values of one column.

    Values keep their first-occurrence order (never sorted). The number of
    values defines the extent of the axis in a layout grid.

    Args:
        values: Distinct cells in first-occurrence order.
    """

    values: tuple[Cell, ...]
    _positions: dict[Cell, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        positions: dict[Cell, int] = {}
        for value in self.values:
            positions.setdefault(value, len(positions))
        object.__setattr__(self, "_positions", positions)

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.values)

    def __contains__(self, value: object) -> bool:
        return value in self._positions

    def index_of(self, value: Cell) -> int | None:
        """Return the position of `value`, or None when it is not indexed."""

        return self._positions.get(value)

    @property
    def labels(self) -> tuple[str, ...]:
        """Display labels aligned to `values`."""

        return tuple(cell_label(value) for value in self.values)


def index_categories(dataset: Dataset, column: str) -> CategoryIndex:
    """Index the distinct values of `column` in first-occurrence order.

    Rows without the column contribute a missing cell.
    """

    seen: dict[Cell, None] = {}
    for row in dataset.rows:
        seen.setdefault(row.get(column, MISSING), None)
    return CategoryIndex(values=tuple(seen))
