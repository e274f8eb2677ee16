"""CSV loading utilities for flight schedule exports."""

from __future__ import annotations

import csv
import io
import logging
from typing import Iterable, List, Sequence

import config
from datatypes import Grid, Row
from errors import InputTooLargeError, MalformedInputError

logger = logging.getLogger(__name__)

ENCODINGS = ("utf-8-sig", "cp1252", "latin-1")


def cell(row: Sequence[str], col: int) -> str:
    """Trimmed text at ``col``, or "" when the row is shorter."""
    if col < 0 or col >= len(row):
        return ""
    return row[col]


def _coerce(value: object) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _rows_to_grid(records: Iterable[List[str]], max_rows: int, max_columns: int) -> Grid:
    grid: Grid = []
    for rec in records:
        if len(grid) >= max_rows:
            raise InputTooLargeError("rows", max_rows)
        if len(rec) > max_columns:
            raise InputTooLargeError("columns", max_columns)
        row: Row = [_coerce(v) for v in rec]
        grid.append(row)
    return grid


def read_grid_from_text(
    text: str,
    max_rows: int = config.MAX_GRID_ROWS,
    max_columns: int = config.MAX_GRID_COLUMNS,
) -> Grid:
    """Parse comma-separated text into a grid of trimmed cells.

    Every row is data; rows may differ in length. Quoting errors raise
    MalformedInputError.
    """
    reader = csv.reader(io.StringIO(text, newline=""), strict=True)
    try:
        return _rows_to_grid(reader, max_rows, max_columns)
    except csv.Error as e:
        raise MalformedInputError(f"could not read CSV (line {reader.line_num}): {e}") from e


def read_grid_from_csv_bytes(
    data: bytes,
    max_rows: int = config.MAX_GRID_ROWS,
    max_columns: int = config.MAX_GRID_COLUMNS,
) -> Grid:
    """Parse an uploaded schedule export from bytes.

    Supports multiple encodings: utf-8-sig, cp1252, latin-1.
    """
    last_err: Exception | None = None
    for enc in ENCODINGS:
        try:
            text = data.decode(enc)
        except UnicodeDecodeError as e:
            last_err = e
            continue
        grid = read_grid_from_text(text, max_rows=max_rows, max_columns=max_columns)
        logger.debug("Loaded grid: %d rows, encoding %s", len(grid), enc)
        return grid
    raise MalformedInputError(f"could not decode CSV: {last_err}")
