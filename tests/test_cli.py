"""Tests for the command-line entry point."""

from __future__ import annotations

import pytest

import cli


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch):
    monkeypatch.setattr(cli, "configure_logging", lambda **kwargs: None)


def test_prints_report(tmp_path, sample_csv, sample_report, capsys):
    src = tmp_path / "schedule.csv"
    src.write_text(sample_csv, encoding="utf-8")
    assert cli.main([str(src), "--year", "2026"]) == 0
    assert capsys.readouterr().out == sample_report + "\n"


def test_writes_output_file(tmp_path, sample_csv, sample_report):
    src = tmp_path / "schedule.csv"
    src.write_text(sample_csv, encoding="utf-8")
    out = tmp_path / "report.txt"
    assert cli.main([str(src), "-o", str(out), "--year", "2026"]) == 0
    assert out.read_text(encoding="utf-8") == sample_report + "\n"


def test_month_and_prefix_flags(tmp_path, capsys):
    src = tmp_path / "schedule.csv"
    src.write_text("DAY 09\n\nAB1,7\n,JFK-LAX\n,10:00\n", encoding="utf-8")
    assert cli.main([str(src), "--month", "mar", "--service-prefix", "Q", "--year", "2026"]) == 0
    assert capsys.readouterr().out == "09MAR\nAB1 Q7 JFK-LAX 10:00\n"


def test_missing_header_exits_with_error(tmp_path, capsys):
    src = tmp_path / "schedule.csv"
    src.write_text("AB1,S\n,JFK-LAX\n,10:00\n", encoding="utf-8")
    assert cli.main([str(src)]) == 1
    assert "Error: date header not found" in capsys.readouterr().err


def test_missing_file_exits_with_error(tmp_path, capsys):
    assert cli.main([str(tmp_path / "nope.csv")]) == 1
    assert capsys.readouterr().err.startswith("Error:")
