"""Heuristic extraction of flight records from a schedule grid.

The export has no fixed schema. A row whose first cell mentions "day" anchors
the dates: each "day N" cell binds day N of the configured month to its
column and every column to its right until the next anchor. Below it, flight
data comes in blocks of three rows:

    flight-number row   "AB123, ..." | service code | service code | ...
    route row           (ignored)    | JFK-LAX      | JFK-SFO      | ...
    time row            (ignored)    | 10:00        | +14:00       | ...

Each populated column of a block yields one FlightRecord dated by the nearest
anchor at or left of it. A "+" in the time moves the flight to the next day.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime, timedelta
from typing import List, Optional, Sequence

from csv_parser import cell, read_grid_from_csv_bytes, read_grid_from_text
from datatypes import ColumnDateMap, FlightRecord, Grid, ParseOptions
from errors import FlightBlockNotFoundError, HeaderNotFoundError
from report_builder import build_report

logger = logging.getLogger(__name__)

HEADER_MARKER = "day"
NEXT_DAY_MARKER = "+"
BLOCK_SIZE = 3

_DIGITS_RE = re.compile(r"[0-9]+")
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")
_WHITESPACE_RE = re.compile(r"\s+")


def _is_decimal(text: str) -> bool:
    return _DECIMAL_RE.fullmatch(text) is not None


def find_date_header_row(grid: Grid) -> int:
    """Index of the first row whose first cell contains "day" (any case)."""
    for i, row in enumerate(grid):
        if HEADER_MARKER in cell(row, 0).lower():
            return i
    raise HeaderNotFoundError()


def _day_token(text: str) -> Optional[str]:
    return next((p for p in text.split() if _DIGITS_RE.fullmatch(p)), None)


def _anchor_date(day_str: str, month: str, year: int) -> Optional[date]:
    try:
        return datetime.strptime(f"{day_str.zfill(2)}{month}{year}", "%d%b%Y").date()
    except ValueError:
        return None


def build_column_date_map(header_row: Sequence[str], month: str, year: int) -> ColumnDateMap:
    """Forward-fill header anchors into a column -> date step function.

    Columns left of the first valid anchor stay unmapped. A "day" cell whose
    date cannot be built (e.g. "day 31" in a 30-day month) is left unbound,
    so lookups there still see the previous anchor.
    """
    bindings = []
    current: Optional[date] = None
    for col, raw in enumerate(header_row):
        text = raw.lower()
        if HEADER_MARKER in text:
            day_str = _day_token(text)
            if day_str is not None:
                anchor = _anchor_date(day_str, month, year)
                if anchor is None:
                    logger.debug("Could not build a date from header cell %r", raw)
                    continue
                current = anchor
        if current is not None:
            bindings.append((col, current))
    date_map = ColumnDateMap(bindings)
    logger.debug("Mapped %d header columns to dates", len(date_map))
    return date_map


def find_flight_block_start(grid: Grid, header_index: int) -> int:
    """First row from header+2 whose first cell is text but not a number."""
    for i in range(header_index + 2, len(grid)):
        first = cell(grid[i], 0)
        if first and not _is_decimal(first):
            return i
    raise FlightBlockNotFoundError()


def _normalize_time(raw: str) -> str:
    return _WHITESPACE_RE.sub("", raw.replace(NEXT_DAY_MARKER, ""))


def extract_flights(
    grid: Grid,
    start_index: int,
    date_map: ColumnDateMap,
    service_prefix: str,
) -> List[FlightRecord]:
    """Walk 3-row blocks from ``start_index`` and collect flight records.

    Rows with an empty first cell are skipped before each block. A trailing
    group of fewer than three rows ends the walk.
    """
    records: List[FlightRecord] = []
    idx = start_index
    n = len(grid)

    while idx < n:
        while idx < n and not cell(grid[idx], 0):
            idx += 1
        if idx + BLOCK_SIZE > n:
            break

        flight_row, route_row, time_row = grid[idx:idx + BLOCK_SIZE]
        idx += BLOCK_SIZE

        flight_number = cell(flight_row, 0).split(",", 1)[0].strip()
        if not flight_number:
            continue

        for col in range(1, len(flight_row)):
            service_raw = cell(flight_row, col).strip()
            route = cell(route_row, col).strip()
            time_raw = cell(time_row, col).strip()
            time = _normalize_time(time_raw)
            if not route or not time:
                continue

            flight_date = date_map.effective_date(col)
            if flight_date is None:
                continue
            if NEXT_DAY_MARKER in time_raw:
                flight_date += timedelta(days=1)

            records.append(FlightRecord(
                flight_number=flight_number,
                service_code=f"{service_prefix}{service_raw}" if service_raw else "",
                route=route,
                time=time,
                date=flight_date,
            ))
    return records


def parse_schedule_grid(grid: Grid, options: ParseOptions | None = None) -> List[FlightRecord]:
    """Run the locate/map/extract stages over an already loaded grid."""
    options = options or ParseOptions()
    header_index = find_date_header_row(grid)
    start_index = find_flight_block_start(grid, header_index)
    logger.debug("Date header at row %d, flight data from row %d", header_index, start_index)

    date_map = build_column_date_map(grid[header_index], options.month, options.effective_year)
    return extract_flights(grid, start_index, date_map, options.service_prefix)


def parse_schedule(data: bytes | str, options: ParseOptions | None = None) -> str:
    """Parse a raw schedule export into the sorted, deduplicated report."""
    options = options or ParseOptions()
    if isinstance(data, bytes):
        grid = read_grid_from_csv_bytes(data, max_rows=options.max_rows, max_columns=options.max_columns)
    else:
        grid = read_grid_from_text(data, max_rows=options.max_rows, max_columns=options.max_columns)

    records = parse_schedule_grid(grid, options)
    report = build_report(records, year=options.today.year)
    logger.info("Parsed schedule: %d records, %d unique", len(records), len(report.splitlines()) // 2)
    return report
