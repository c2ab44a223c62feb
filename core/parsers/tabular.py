"""Tabular record parsing for CSV and JSON sheet exports.

Parsers return raw records (`dict[str, object]`); cell tagging and numeric
coercion happen later in `analysis`. Cell text is preserved unchanged.
"""

from __future__ import annotations

import csv
import io
import json
from pathlib import Path

RawRecord = dict[str, object]


class TabularParseError(ValueError):
    """Raised when an uploaded sheet cannot be read as records."""


def parse_csv_text(text: str) -> list[RawRecord]:
    """Parse CSV text with a header row into records.

    Args:
        text: CSV content; a leading UTF-8 BOM is ignored.

    Returns:
        One record per data row, keyed by header names. Short rows get None for
        the trailing columns.

    Raises:
        TabularParseError: When the header row is missing or has blank names.
    """

    reader = csv.DictReader(io.StringIO(text.lstrip("\ufeff")))
    header = reader.fieldnames
    if not header:
        raise TabularParseError("CSV input has no header row.")
    if any(not (name or "").strip() for name in header):
        raise TabularParseError("CSV header contains a blank column name.")

    records: list[RawRecord] = []
    for row in reader:
        extra = row.pop(None, None)  # type: ignore[call-overload]
        if extra:
            raise TabularParseError(f"CSV line {reader.line_num} has more cells than the header.")
        records.append({name.strip(): row.get(name) for name in header})
    return records


def parse_json_records(payload: object) -> list[RawRecord]:
    """Parse decoded JSON into records.

    Accepts either a list of objects or an upload envelope `{"data": [...]}`.

    Raises:
        TabularParseError: When the payload is not a list of JSON objects.
    """

    if isinstance(payload, dict) and "data" in payload:
        payload = payload["data"]
    if not isinstance(payload, list):
        raise TabularParseError("Expected a JSON list of records.")

    records: list[RawRecord] = []
    for idx, item in enumerate(payload):
        if not isinstance(item, dict):
            raise TabularParseError(f"Record {idx} is not a JSON object.")
        records.append({str(key): value for key, value in item.items()})
    return records


def load_records(path: Path) -> list[RawRecord]:
    """Load records from a `.csv` or `.json` file.

    Raises:
        TabularParseError: For unsupported extensions or malformed content.
    """

    suffix = path.suffix.casefold()
    text = path.read_text(encoding="utf-8")
    if suffix == ".csv":
        return parse_csv_text(text)
    if suffix == ".json":
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise TabularParseError(f"Invalid JSON in {path.name}: {exc.msg}.") from exc
        return parse_json_records(payload)
    raise TabularParseError(f"Unsupported file type {path.suffix!r}; expected .csv or .json.")
