"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

from pydantic import ValidationError

from weather_seer import __version__
from weather_seer.config import get_settings
from weather_seer.flows.forecast import forecast_year
from weather_seer.flows.solve import solve_observations
from weather_seer.oracle import OracleError, get_oracle
from weather_seer.reference.calendar import MONTH_NAMES
from weather_seer.reference.patterns import iter_patterns, pattern_name
from weather_seer.reference.weather import Hemisphere


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="weather-seer",
        description="Infer hidden daily weather patterns from island observations",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")
    subparsers.add_parser("patterns", help="List every weather pattern")

    solve_parser = subparsers.add_parser("solve", help="Find possible patterns for recorded days")
    solve_parser.add_argument("file", type=Path, help="Observation log (JSON)")

    forecast_parser = subparsers.add_parser("forecast", help="Forecast a year, show one month")
    forecast_parser.add_argument("--year", type=int, default=None, help="Year (default: current)")
    forecast_parser.add_argument(
        "--month", type=int, default=None, choices=range(1, 13), help="Month to summarize"
    )
    forecast_parser.add_argument(
        "--hemisphere",
        type=Hemisphere,
        default=None,
        choices=list(Hemisphere),
        help="Hemisphere (default: from settings)",
    )
    forecast_parser.add_argument("--seed", type=int, default=None, help="Island seed")
    forecast_parser.add_argument(
        "--force", action="store_true", help="Rebuild even if a stored forecast exists"
    )

    return parser


def configure_logging(debug: bool) -> None:
    """Set up the root logger once for the process."""
    settings = get_settings()
    level = logging.DEBUG if debug or settings.debug else settings.log_level.upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Hemisphere: {settings.hemisphere}")
    print(f"Seed: {settings.seed}")
    print(f"Oracle: {settings.oracle or '(not configured)'}")
    return 0


def cmd_patterns(_args: argparse.Namespace) -> int:
    """Handle the 'patterns' command."""
    for ordinal in iter_patterns():
        print(f"{ordinal:2d}  {pattern_name(ordinal)}")
    return 0


def cmd_solve(args: argparse.Namespace) -> int:
    """Handle the 'solve' command."""
    if not args.file.exists():
        print(f"No such file: {args.file}", file=sys.stderr)
        return 1

    try:
        get_oracle()
        summary = solve_observations(path=args.file)
    except (OracleError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 1 if summary["errors"] else 0


def cmd_forecast(args: argparse.Namespace) -> int:
    """Handle the 'forecast' command: build the year, print a month summary."""
    try:
        get_oracle()
        result = forecast_year(
            hemisphere=args.hemisphere, seed=args.seed, year=args.year, force=args.force
        )
    except (OracleError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    month_index = (args.month or date.today().month) - 1
    month = result["months"][month_index]
    print(f"{MONTH_NAMES[month['month']]} {month['year']}:")
    print(f"  Auroras: {month['aurora_count']}")
    print(
        f"  Rainbows: {month['rainbow_count']} "
        f"({month['single_rainbow_count']} single, {month['double_rainbow_count']} double)"
    )
    print(
        f"  Meteor showers: {month['light_shower_count']} light, "
        f"{month['heavy_shower_count']} heavy"
    )
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(args.debug)

    commands = {
        "info": cmd_info,
        "patterns": cmd_patterns,
        "solve": cmd_solve,
        "forecast": cmd_forecast,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
