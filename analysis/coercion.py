"""Numeric coercion for dataset columns.

Coercion never raises. Unparsable or missing cells become a NaN sentinel and
the result carries a `has_invalid` flag; callers decide whether to reject the
whole axis (2D charts) or drop the offending rows (3D scenes).
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Final

from .cells import Cell, NumberCell, StringCell
from .dataset import Dataset

_DECIMAL_PATTERN: Final = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


@dataclass(frozen=True, slots=True)
class CoercedColumn:
    """Numbers parsed from one column, aligned to the dataset rows.

    Args:
        values: One float per row; `math.nan` where the cell did not parse.
        has_invalid: True when any value is the NaN sentinel.
    """

    values: tuple[float, ...]
    has_invalid: bool

    def is_valid(self, index: int) -> bool:
        """Whether the row at `index` coerced to a number."""

        return not math.isnan(self.values[index])

    @property
    def valid_values(self) -> tuple[float, ...]:
        """Parsed numbers with sentinels removed, in row order."""

        return tuple(value for value in self.values if not math.isnan(value))

    @property
    def valid_count(self) -> int:
        """Number of rows that coerced successfully."""

        return len(self.valid_values)


def coerce_cell(cell: Cell) -> float:
    """Coerce a single cell to a float, returning NaN on failure."""

    if isinstance(cell, NumberCell):
        return cell.value
    if isinstance(cell, StringCell):
        return parse_decimal(cell.text)
    return math.nan


def parse_decimal(text: str) -> float:
    """Parse standard decimal notation (`-12`, `3.5`, `.5`, `1e3`).

    Surrounding whitespace is ignored. Anything else, including thousands
    separators and `nan`/`inf` spellings, yields NaN.
    """

    cleaned = text.strip()
    if not _DECIMAL_PATTERN.fullmatch(cleaned):
        return math.nan
    value = float(cleaned)
    if not math.isfinite(value):
        return math.nan
    return value


def coerce_column(dataset: Dataset, column: str) -> CoercedColumn:
    """Coerce every row's `column` cell to a number.

    Args:
        dataset: Rows to read.
        column: Column name; rows without the column count as missing.

    Returns:
        CoercedColumn with the same length and order as `dataset`.
    """

    values = tuple(coerce_cell(row[column]) if column in row else math.nan for row in dataset.rows)
    return CoercedColumn(values=values, has_invalid=any(math.isnan(value) for value in values))
