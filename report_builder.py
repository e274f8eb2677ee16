"""Report rendering, deduplication and ordering."""

from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, List, Optional, Tuple

from datatypes import FlightRecord


def render_date(d: date) -> str:
    """Day and month without year, e.g. 01DEC."""
    return d.strftime("%d%b").upper()


def _one_line(text: str) -> str:
    """Collapse whitespace runs, including line breaks, to single spaces."""
    return " ".join(text.split())


def render_record(record: FlightRecord) -> str:
    """Two-line rendering: date line, then the flight detail line.

    An empty service code leaves a double space in the detail line.
    """
    fields = (record.flight_number, record.service_code, record.route, record.time)
    detail = " ".join(_one_line(f) for f in fields).strip()
    return f"{render_date(record.date)}\n{detail}"


def sort_key(rendered: str, year: int) -> Tuple[date, str]:
    """Order by the date line read back in ``year``, then the detail line.

    The year printed during extraction is not in the text, so dates that
    rolled into another year sort as if they were in ``year``.
    """
    date_line, _, detail = rendered.partition("\n")
    try:
        d = datetime.strptime(f"{date_line}{year}", "%d%b%Y").date()
    except ValueError:
        d = date.min
    return d, detail


def build_report(records: Iterable[FlightRecord], year: Optional[int] = None) -> str:
    """Render, drop exact duplicates and sort into the final report text."""
    if year is None:
        year = date.today().year
    unique = {render_record(r) for r in records}
    return "\n".join(sorted(unique, key=lambda s: sort_key(s, year)))


def split_report(report: str) -> List[Tuple[str, str]]:
    """(date line, detail line) pairs of a report."""
    lines = report.splitlines()
    return [(lines[i], lines[i + 1]) for i in range(0, len(lines) - 1, 2)]
