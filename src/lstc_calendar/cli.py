"""
lstc-calendar CLI

Command-line interface for classifying dates against calendar packs.

Usage:
    python -m lstc_calendar.cli classify england_and_wales 2024-05-27 2024-05-28
    python -m lstc_calendar.cli classify path/to/calendar.yaml 2024-12-25
    python -m lstc_calendar.cli validate path/to/calendar.yaml
    python -m lstc_calendar.cli list
"""

from __future__ import annotations

import argparse
import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Sequence

from .dates import make_date
from .engine import Calendar
from .exceptions import CalendarError, InvalidDateError
from .packs import CalendarPackLoader, list_builtin_packs


def load_pack(source: str, strict_version: bool = True) -> Calendar:
    """
    Load a calendar pack from a file path or a built-in pack name.

    Raises:
        CalendarError: If the pack cannot be loaded
    """
    loader = CalendarPackLoader(strict_version=strict_version)
    path = Path(source)
    if path.suffix or path.exists():
        return loader.load(path)
    return loader.load_builtin(source)


def parse_date_parts(text: str) -> tuple[int, int, int]:
    """
    Split an ISO ``YYYY-MM-DD`` string into integer parts.

    Raises:
        InvalidDateError: If the text is not three dash-separated integers
    """
    parts = text.strip().split("-")
    try:
        year, month, day = (int(p) for p in parts)
    except ValueError as e:
        raise InvalidDateError(
            message=f"Expected YYYY-MM-DD, got '{text}'",
            details={"value": text},
        ) from e
    return year, month, day


def _label(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def cmd_classify(args: argparse.Namespace) -> int:
    """Classify one or more dates."""
    try:
        calendar = load_pack(args.pack, strict_version=args.strict_version)
    except CalendarError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    exit_code = 0
    for text in args.dates:
        try:
            d = make_date(*parse_date_parts(text))
        except InvalidDateError as e:
            print(f"error: {e}", file=sys.stderr)
            exit_code = 2
            continue

        match = calendar.find_match(d)
        if match is None:
            print(f"{d.isoformat()}  unclassified")
            continue

        position, entry = match
        note = f": {entry.description}" if entry.description else ""
        print(f"{d.isoformat()}  {_label(entry.classification):<14} (entry #{position}{note})")

    return exit_code


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate a calendar pack."""
    try:
        calendar = load_pack(args.pack, strict_version=args.strict_version)
    except CalendarError as e:
        print("VALIDATION FAILED")
        print("-" * 40)
        print(f"  {e}")
        for error in e.details.get("errors", []):
            if isinstance(error, dict):
                location = ".".join(str(part) for part in error.get("loc", ()))
                print(f"  - {location}: {error.get('msg', '')}")
        return 1

    print("VALIDATION PASSED")
    print("-" * 40)
    print(f"  Entries: {len(calendar)}")
    labels = sorted({_label(e.classification) for e in calendar.entries})
    print(f"  Classifications: {', '.join(labels)}")
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    """List built-in calendar packs."""
    for name in list_builtin_packs():
        print(name)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="lstc-calendar date classification CLI",
        prog="python -m lstc_calendar.cli",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    parser.add_argument(
        "--no-strict-version",
        dest="strict_version",
        action="store_false",
        help="Load packs with an incompatible schema version (with a warning)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Classify command
    classify_parser = subparsers.add_parser("classify", help="Classify dates")
    classify_parser.add_argument("pack", help="Pack file or built-in pack name")
    classify_parser.add_argument("dates", nargs="+", help="Dates as YYYY-MM-DD")
    classify_parser.set_defaults(func=cmd_classify)

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Validate a calendar pack")
    validate_parser.add_argument("pack", help="Pack file or built-in pack name")
    validate_parser.set_defaults(func=cmd_validate)

    # List command
    list_parser = subparsers.add_parser("list", help="List built-in calendar packs")
    list_parser.set_defaults(func=cmd_list)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
