"""Tagged cell values for uploaded spreadsheet rows.

Spreadsheet parsers hand us strings, numbers, and blanks mixed together in the
same column. Cells are converted once at the boundary so downstream builders
never rely on implicit coercion.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class NumberCell:
    """A cell that already holds a finite number."""

    value: float


@dataclass(frozen=True, slots=True)
class StringCell:
    """A cell holding raw text (possibly numeric text such as `"10"`)."""

    text: str


@dataclass(frozen=True, slots=True)
class MissingCell:
    """A blank or absent cell."""


Cell = NumberCell | StringCell | MissingCell

MISSING = MissingCell()


def to_cell(raw: object) -> Cell:
    """Convert a raw spreadsheet value into a tagged Cell.

    Args:
        raw: Value produced by a CSV/JSON/spreadsheet parser.

    Returns:
        MissingCell for None, blank strings, and non-finite floats;
        NumberCell for ints/floats; StringCell for everything else.
    """

    if raw is None:
        return MISSING
    if isinstance(raw, (NumberCell, StringCell, MissingCell)):
        return raw
    # bool is an int subclass; spreadsheets export TRUE/FALSE as text labels.
    if isinstance(raw, bool):
        return StringCell(text=str(raw))
    if isinstance(raw, (int, float)):
        value = float(raw)
        if not math.isfinite(value):
            return MISSING
        return NumberCell(value=value)
    if isinstance(raw, str):
        if not raw.strip():
            return MISSING
        return StringCell(text=raw)
    return StringCell(text=str(raw))


def cell_label(cell: Cell) -> str:
    """Return the display label for a cell.

    Integral numbers render without a trailing `.0` so that a spreadsheet value
    of `2024` labels as `"2024"`.
    """

    if isinstance(cell, StringCell):
        return cell.text
    if isinstance(cell, NumberCell):
        if cell.value.is_integer():
            return str(int(cell.value))
        return repr(cell.value)
    return ""
