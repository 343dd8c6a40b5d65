#!/usr/bin/env python3
"""
calvin Command Line Interface

Main entry point for the `calvin` command.

Usage:
    calvin show alice                  # Today, for alice@<default_domain>
    calvin show alice tomorrow         # Tomorrow
    calvin show alice next friday      # First Friday from today (today included)
    calvin show alice next week --json # Next Monday..Sunday as JSON
    calvin week --next                 # Next week, no calendar
    calvin --version                   # Show version
"""

import argparse
import json
import logging
import sys
from datetime import date

from dotenv import load_dotenv

from calvin import __version__
from calvin.config_models import ConfigError, build_calendar_id, load_config
from calvin.dateparse import DateExpressionError, DateResolver, parse_iso_date
from calvin.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _iso_date(value: str) -> date:
    parsed = parse_iso_date(value)
    if parsed is None:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {value!r}")
    return parsed


def _resolver(args) -> DateResolver:
    if args.today is None:
        return DateResolver()
    pinned = args.today
    return DateResolver(lambda: pinned)


def _print_result(result, header_format: str, title: str) -> None:
    if not result.is_week:
        print(f"{title}: {result.date.isoformat()}")
        return

    print(f"{title}: week of {result.week_days[0].isoformat()}")
    for day in result.week_days:
        print(f"  {day.strftime(header_format)}")


def cmd_show(args):
    """Handle show subcommand: resolve a date expression for a user."""
    config = load_config()
    calendar_id = build_calendar_id(args.username, config.default_domain)

    result = _resolver(args).resolve([args.username, *args.expression])
    logger.debug(f"resolved {args.expression!r} to {result.kind.value}")

    if args.json:
        print(json.dumps({"calendar_id": calendar_id, **result.to_dict()}, indent=2))
        return 0

    _print_result(result, config.week_header_format, f"Date for {calendar_id}")
    return 0


def cmd_week(args):
    """Handle week subcommand: print this week or next week."""
    config = load_config()
    expression = ["next", "week"] if args.next else ["week"]
    result = _resolver(args).resolve(["", *expression])

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return 0

    _print_result(result, config.week_header_format, "Week")
    return 0


def cmd_version(args):
    """Show version information."""
    print(f"calvin version {__version__}")


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--today", type=_iso_date, default=None,
        help="Pretend today is this date (YYYY-MM-DD)",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print the result as JSON"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="calvin",
        description="calvin - resolve which day(s) to show, and for whose calendar",
    )
    parser.add_argument(
        "--version", "-V", action="store_true", help="Show version and exit"
    )
    parser.add_argument(
        "--log-level", default=None, help="Log level (default: $CALVIN_LOG_LEVEL or WARNING)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Show subcommand
    show_parser = subparsers.add_parser(
        "show", help="Resolve a date expression for a user's calendar"
    )
    show_parser.add_argument(
        "username", help="Calendar owner (bare name or full e-mail address)"
    )
    show_parser.add_argument(
        "expression", nargs="*",
        help="today | tomorrow | yesterday | week | next <weekday|week> | YYYY-MM-DD",
    )
    _add_common_arguments(show_parser)
    show_parser.set_defaults(func=cmd_show)

    # Week subcommand
    week_parser = subparsers.add_parser(
        "week", help="Show the days of this week (or next week)"
    )
    week_parser.add_argument(
        "--next", action="store_true", help="Show next week instead of this week"
    )
    _add_common_arguments(week_parser)
    week_parser.set_defaults(func=cmd_week)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level)

    # Handle --version at top level
    if args.version:
        cmd_version(args)
        return 0

    # If no command given, show help
    if not args.command:
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except DateExpressionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ConfigError as e:
        print(f"Error: unable to load config file: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
