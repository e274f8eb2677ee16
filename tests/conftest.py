"""Shared fixtures for schedule parser tests."""

from __future__ import annotations

import csv
import io
from datetime import date

import pytest

from datatypes import ParseOptions

TODAY = date(2026, 10, 17)


@pytest.fixture
def options() -> ParseOptions:
    return ParseOptions(month="DEC", year=2026, service_prefix="MFX", today=TODAY)


@pytest.fixture
def sample_grid():
    """Two date anchors, two flight blocks separated by a blank row."""
    return [
        ["Schedule export"],
        ["DAY 01", "", "DAY 02", ""],
        ["1", "2", "3", "4"],
        ["AB123, A320", "X1", "X2", ""],
        ["", "JFK-LAX", "JFK-SFO", "JFK-BOS"],
        ["", "10:00", "+14:00", "09:00"],
        [""],
        ["CD456", "", "Y3", "Y4"],
        ["", "LAX-JFK", "", "SFO-JFK"],
        ["", "22: 30", "08:00", "+ 01:15"],
    ]


@pytest.fixture
def sample_csv(sample_grid) -> str:
    buf = io.StringIO()
    csv.writer(buf, lineterminator="\n").writerows(sample_grid)
    return buf.getvalue()


@pytest.fixture
def sample_report() -> str:
    return "\n".join([
        "01DEC", "AB123 MFXX1 JFK-LAX 10:00",
        "01DEC", "CD456  LAX-JFK 22:30",
        "02DEC", "AB123  JFK-BOS 09:00",
        "03DEC", "AB123 MFXX2 JFK-SFO 14:00",
        "03DEC", "CD456 MFXY4 SFO-JFK 01:15",
    ])
