"""Data classes and types for the flight schedule parser."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, List, Optional, Tuple

import config

Row = List[str]
Grid = List[Row]


@dataclass(frozen=True)
class FlightRecord:
    """One scheduled flight extracted from a block column."""
    flight_number: str
    service_code: str  # "" when the cell was blank
    route: str
    time: str  # no "+" and no whitespace
    date: date  # already next-day adjusted


class ColumnDateMap:
    """Step function from column index to calendar date.

    The value at column ``c`` is the date bound to the greatest key <= ``c``.
    Keys must be given in strictly increasing order; the map cannot be
    changed after construction.
    """

    __slots__ = ("_columns", "_dates")

    def __init__(self, bindings: Iterable[Tuple[int, date]] = ()) -> None:
        columns: List[int] = []
        dates: List[date] = []
        for col, d in bindings:
            if col < 0:
                raise ValueError(f"negative column index: {col}")
            if columns and col <= columns[-1]:
                raise ValueError(f"column {col} is not after column {columns[-1]}")
            columns.append(col)
            dates.append(d)
        self._columns: Tuple[int, ...] = tuple(columns)
        self._dates: Tuple[date, ...] = tuple(dates)

    def effective_date(self, col: int) -> Optional[date]:
        """Date of the nearest bound column at or left of ``col``."""
        pos = bisect_right(self._columns, col)
        if pos == 0:
            return None
        return self._dates[pos - 1]

    @property
    def first_column(self) -> Optional[int]:
        return self._columns[0] if self._columns else None

    def items(self) -> List[Tuple[int, date]]:
        return list(zip(self._columns, self._dates))

    def __len__(self) -> int:
        return len(self._columns)

    def __repr__(self) -> str:
        return f"ColumnDateMap({self.items()!r})"


@dataclass(frozen=True)
class ParseOptions:
    """Per-call parse settings. ``year`` defaults to the current year."""
    month: str = config.SCHEDULE_MONTH
    year: Optional[int] = None
    service_prefix: str = config.SERVICE_CODE_PREFIX
    max_rows: int = config.MAX_GRID_ROWS
    max_columns: int = config.MAX_GRID_COLUMNS
    today: date = field(default_factory=date.today, compare=False)

    @property
    def effective_year(self) -> int:
        return self.year if self.year is not None else self.today.year
