"""Tests for grid loading from delimited text."""

from __future__ import annotations

import pytest

from csv_parser import cell, read_grid_from_csv_bytes, read_grid_from_text
from errors import InputTooLargeError, MalformedInputError


def test_cell_out_of_bounds_is_empty():
    row = ["a", "b"]
    assert cell(row, 1) == "b"
    assert cell(row, 2) == ""
    assert cell(row, 50) == ""
    assert cell(row, -1) == ""
    assert cell([], 0) == ""


def test_cells_are_trimmed_and_rows_keep_their_length():
    grid = read_grid_from_text("  DAY 01 , x \nshort\n\n,,\n")
    assert grid == [["DAY 01", "x"], ["short"], [], ["", "", ""]]


def test_quoted_commas_stay_in_one_cell():
    grid = read_grid_from_text('"AB123, A320",X1\n')
    assert grid == [["AB123, A320", "X1"]]


def test_empty_text_gives_empty_grid():
    assert read_grid_from_text("") == []


def test_unterminated_quote_is_malformed():
    with pytest.raises(MalformedInputError):
        read_grid_from_text('DAY 01,"unterminated\n')


def test_text_after_closing_quote_is_malformed():
    with pytest.raises(MalformedInputError):
        read_grid_from_text('"a"b,c\n')


def test_bytes_with_bom_are_decoded():
    grid = read_grid_from_csv_bytes("\ufeffDAY 01,x\r\nAB1,y\r\n".encode("utf-8"))
    assert grid == [["DAY 01", "x"], ["AB1", "y"]]


def test_bytes_fall_back_to_cp1252():
    grid = read_grid_from_csv_bytes(b"caf\xe9,x\n")
    assert grid == [["café", "x"]]


def test_row_limit():
    with pytest.raises(InputTooLargeError) as exc:
        read_grid_from_text("a\nb\nc\n", max_rows=2)
    assert exc.value.what == "rows"


def test_column_limit():
    with pytest.raises(InputTooLargeError):
        read_grid_from_text("a,b,c\n", max_columns=2)


def test_too_large_is_malformed_input():
    assert issubclass(InputTooLargeError, MalformedInputError)
