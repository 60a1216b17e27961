"""CSV import/export helpers for point clouds and hull outputs.

Input files carry one point per row in ``x`` and ``y`` columns (``X``/``Y``
and ``posX``/``posY`` are accepted too). Hull files are written with an
``order`` column so the counter-clockwise sequence survives a round trip
through spreadsheet tools that re-sort rows.
"""
from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable, List

from models import Point

HULL_FIELDS = ["order", "x", "y"]


class CsvFormatError(ValueError):
    """Raised when the CSV contents are invalid."""


def _read_csv_rows(path: str) -> List[dict]:
    try:
        with open(path, newline="", encoding="utf-8") as handle:
            return list(csv.DictReader(handle))
    except FileNotFoundError:
        raise
    except OSError as exc:  # pragma: no cover - surfaced to caller
        raise OSError(f"Failed to read CSV '{path}': {exc}") from exc


def _get(row: dict, primary: str, *aliases: str) -> str:
    for key in (primary, *aliases):
        if key in row:
            value = (row.get(key) or "").strip()
            if value:
                return value
    return ""


def _parse_float(row: dict, field: str, *, row_number: int, aliases: Iterable[str] = ()) -> float:
    raw = _get(row, field, *aliases)
    if raw == "":
        raise CsvFormatError(f"Missing value for '{field}' in row {row_number}.")
    try:
        return float(raw)
    except ValueError as exc:
        raise CsvFormatError(
            f"Invalid float for '{field}' in row {row_number}: {raw!r}"
        ) from exc


def load_points_csv(path: str) -> List[Point]:
    """Read the points of ``path`` in file order. Fully blank rows are skipped."""

    rows = _read_csv_rows(path)
    points: List[Point] = []
    for index, row in enumerate(rows, start=2):  # header is row 1
        if not any((value or "").strip() for value in row.values() if isinstance(value, str)):
            continue
        x = _parse_float(row, "x", row_number=index, aliases=("X", "posX"))
        y = _parse_float(row, "y", row_number=index, aliases=("Y", "posY"))
        points.append(Point(x, y))
    return points


def write_points_csv(path: str, points: Iterable[Point]) -> None:
    """Write ``points`` in sequence with a 1-based ``order`` column."""

    path_obj = Path(path)
    path_obj.parent.mkdir(parents=True, exist_ok=True)

    with open(path_obj, "w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=HULL_FIELDS)
        writer.writeheader()
        for order, point in enumerate(points, start=1):
            writer.writerow({"order": order, "x": repr(point.x), "y": repr(point.y)})


__all__ = [
    "CsvFormatError",
    "HULL_FIELDS",
    "load_points_csv",
    "write_points_csv",
]
