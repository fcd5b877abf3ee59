#!/usr/bin/env python3

# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from monthday.config import (
    ConfigurationError,
    configure_logging,
    get_clock_config,
    get_logging_config,
)
from monthday.domain import PARSER, DateTimeFormatter, MonthDay, system_clock

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from monthday.domain import Clock

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Work with year-less month-day values")
    subparsers = parser.add_subparsers(dest="command", required=True)

    today = subparsers.add_parser("today", help="Print the current month-day")
    today.add_argument(
        "--zone",
        type=str,
        help="IANA time-zone to read the clock in (defaults to MONTHDAY_ZONE or local)",
    )

    parse = subparsers.add_parser("parse", help="Parse and normalise a month-day")
    parse.add_argument("text", type=str, help="Text to parse, e.g. --12-03")
    parse.add_argument(
        "--pattern",
        type=str,
        help="Pattern of the input text such as dd/MM (default: %(default)s)",
        default=str(PARSER),
    )

    check = subparsers.add_parser("check", help="Validate a month and day")
    check.add_argument("month", type=int, help="Month of year, 1-12")
    check.add_argument("day", type=int, help="Day of month, 1-31")

    return parser.parse_args(list(argv))


def _resolve_clock(args: argparse.Namespace) -> Clock:
    if args.zone:
        return system_clock(args.zone)
    return get_clock_config().clock()


def _run(args: argparse.Namespace) -> MonthDay:
    if args.command == "today":
        return MonthDay.now_from(_resolve_clock(args))
    if args.command == "parse":
        formatter = DateTimeFormatter.of_pattern(args.pattern)
        return MonthDay.parse_with(args.text, formatter)
    if args.command == "check":
        return MonthDay.of(args.month, args.day)
    raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        configure_logging(level=get_logging_config().level)
    except ConfigurationError as exc:
        configure_logging()
        log.error("Invalid logging configuration: %s", exc)  # noqa: TRY400
        sys.exit(2)

    parsed_args = _parse_args(args_list)
    try:
        value = _run(parsed_args)
    except (ValueError, ConfigurationError) as exc:
        log.error("Error: %s", exc)  # noqa: TRY400
        sys.exit(2)
    except Exception:
        log.exception("Fatal error")
        sys.exit(1)

    log.debug("Resolved %r", value)
    print(value)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    print("\nClosed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
