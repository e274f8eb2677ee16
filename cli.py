"""Command-line entry point: parse a schedule CSV and print the report."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import config
from datatypes import ParseOptions
from errors import ScheduleParseError
from logging_setup import configure_logging
from schedule_parser import parse_schedule

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="flight-schedule-parser",
        description="Extract flights from a schedule CSV export.",
    )
    parser.add_argument("input", metavar="CSV_FILE", type=Path, help="Schedule export to parse.")
    parser.add_argument("-o", "--output", metavar="TXT_FILE", type=Path,
                        help="Write the report here instead of stdout.")
    parser.add_argument("--month", default=config.SCHEDULE_MONTH,
                        help=f"Month abbreviation for header days (default: {config.SCHEDULE_MONTH}).")
    parser.add_argument("--year", type=int, default=None,
                        help="Year for header days (default: current year).")
    parser.add_argument("--service-prefix", default=config.SERVICE_CODE_PREFIX,
                        help=f"Prefix for service codes (default: {config.SERVICE_CODE_PREFIX}).")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(stream=sys.stderr)

    try:
        data = args.input.read_bytes()
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    options = ParseOptions(month=args.month.upper(), year=args.year, service_prefix=args.service_prefix)
    try:
        report = parse_schedule(data, options)
    except ScheduleParseError as e:
        logger.warning("Parse failed for %s: %s", args.input, e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output:
        args.output.write_text(report + "\n" if report else "", encoding="utf-8")
    else:
        print(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
