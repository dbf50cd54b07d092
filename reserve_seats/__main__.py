from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .chart import SeatingChartError
from .config import TheaterConfig
from .driver import run_reservations


def _read_input(path: Optional[str]) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    p = Path(path)
    if not p.exists():
        raise SeatingChartError(f"input file not found: {p}")
    return p.read_text(encoding="utf-8")


def cmd_run(args: argparse.Namespace) -> int:
    config = TheaterConfig.from_env(rows=args.rows, columns=args.columns, best_seat=args.best_seat)
    report = run_reservations(_read_input(args.input), config, charts=args.charts)
    print(report.text())
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="reserve_seats",
        description="Assign exact and best-available theater seats from a reservation request.",
    )
    p.add_argument("--input", help="Path to the request text (default: stdin)")
    p.add_argument("--rows", type=int, help="Rows in the theater (env RESERVE_SEATS_ROWS, default 3)")
    p.add_argument("--columns", type=int, help="Seats per row (env RESERVE_SEATS_COLUMNS, default 11)")
    p.add_argument("--best-seat", help="Best seat as R<row>C<col> (env RESERVE_SEATS_BEST_SEAT, default R1C6)")
    p.add_argument("--charts", action="store_true", help="Append the seating and distance charts")
    p.add_argument(
        "--log-level",
        type=str.upper,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    p.set_defaults(func=cmd_run)
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    try:
        return int(args.func(args))
    except SeatingChartError as e:
        print(f"Error: {e}")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
