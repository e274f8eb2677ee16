"""Exception hierarchy for schedule parsing."""

from __future__ import annotations


class ScheduleParseError(Exception):
    """Base exception for all schedule parsing errors."""


class MalformedInputError(ScheduleParseError):
    """The delimited text could not be decoded into a grid."""


class InputTooLargeError(MalformedInputError):
    """The grid exceeds the configured row or column bound."""

    def __init__(self, what: str, limit: int) -> None:
        self.what = what
        self.limit = limit
        super().__init__(f"input has too many {what} (limit {limit})")


class HeaderNotFoundError(ScheduleParseError):
    """No row has a first cell containing 'day'."""

    def __init__(self) -> None:
        super().__init__("date header not found")


class FlightBlockNotFoundError(ScheduleParseError):
    """No flight data row below the date header."""

    def __init__(self) -> None:
        super().__init__("flight data block not found")
