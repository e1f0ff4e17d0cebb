"""CLI entrypoint for printing bills from a command file."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Callable

from .service import BillingService, format_bill

PrintFn = Callable[[str], None]
LOG_LEVEL_ENV = "GEEKDEMY_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _error(message: str) -> None:
    print(message, file=sys.stderr)


def _default_log_level() -> str:
    """Log level from the environment, falling back to WARNING."""
    level = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    return level if level in LOG_LEVELS else DEFAULT_LOG_LEVEL


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)


def run(argv: list[str] | None = None, print_fn: PrintFn = print, error_fn: PrintFn = _error) -> int:
    """Run the CLI application."""
    parser = argparse.ArgumentParser(prog="geekdemy", description="Print itemized programme bills")
    parser.add_argument("input_file", help="path to a file of billing commands")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default=_default_log_level())
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)

    service = BillingService()
    try:
        bills = service.run_file(args.input_file)
    except OSError as exc:
        error_fn(f"Error reading the input file: {exc.strerror or exc}")
        return 1

    for bill in bills:
        for line in format_bill(bill):
            print_fn(line)
    return 0


def main_entry() -> None:
    """Console script entrypoint."""
    raise SystemExit(run())


if __name__ == "__main__":  # pragma: no cover
    main_entry()
