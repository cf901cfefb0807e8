"""Command line entry point for parsing dates, intervals and period windows.

Successful commands print ISO-8601 UTC values, one per line, and exit with status 0. Any date
parsing failure is printed as `error: <message>` on stderr and exits with status 2.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from src.config.logging import configure_logging
from src.config.settings import Settings, load_settings
from src.dates.errors import DateParsingError
from src.dates.parsing import interval, parse
from src.dates.periods import Period, period_window

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_DATE = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Parse dates and validate date intervals (UTC).",
        epilog="Put `--` before values that start with a dash, e.g. negative timestamps: "
        "`parse --format timestamp -- -86400`.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser("parse", help="Parse a single date value.")
    parse_cmd.add_argument("value", help="Date value; use `--` before a leading dash.")
    parse_cmd.add_argument(
        "--format",
        dest="fmt",
        help='Explicit pattern such as "dmY", or "timestamp" / "relative".',
    )

    interval_cmd = subparsers.add_parser("interval", help="Parse and validate a date interval.")
    interval_cmd.add_argument("start", help="Start value; use `--` before a leading dash.")
    interval_cmd.add_argument("end", help="End value; use `--` before a leading dash.")
    interval_cmd.add_argument("--start-format", dest="start_fmt")
    interval_cmd.add_argument("--end-format", dest="end_fmt")
    interval_cmd.add_argument(
        "--allow-equal",
        action="store_true",
        default=None,
        help="Accept an interval whose two dates are equal (default: ALLOW_EQUAL_INTERVALS).",
    )

    window_cmd = subparsers.add_parser("window", help="Print the period window starting at a date.")
    window_cmd.add_argument("value")
    window_cmd.add_argument("period", choices=[p.value for p in Period])
    window_cmd.add_argument("--format", dest="fmt")

    return parser


def _run(args: argparse.Namespace, settings: Settings) -> list[str]:
    if args.command == "parse":
        value = parse(args.value, args.fmt, languages=settings.relative_languages)
        return [value.isoformat()]

    if args.command == "interval":
        allow_equal = args.allow_equal
        if allow_equal is None:
            allow_equal = settings.allow_equal_intervals
        start, end = interval(
            args.start,
            args.end,
            args.start_fmt,
            args.end_fmt,
            allow_equal,
            languages=settings.relative_languages,
        )
        return [start.isoformat(), end.isoformat()]

    start, end = period_window(
        args.value,
        args.period,
        args.fmt,
        languages=settings.relative_languages,
    )
    return [start.isoformat(), end.isoformat()]


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point; returns the process exit status."""

    args = _build_parser().parse_args(argv)
    settings = load_settings()
    configure_logging(settings.log_level)

    try:
        lines = _run(args, settings)
    except DateParsingError as exc:
        logger.info("rejected command=%s reason=%s", args.command, exc)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_INVALID_DATE

    for line in lines:
        print(line)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
