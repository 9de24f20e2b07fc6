#!/usr/bin/env python3
"""
Hold'em Hand Analyzer - Command Line Interface

Enrich parsed hold'em hands with positions, pot-odds ratios, chip stacks
per street and showdown settlement.

Usage:
    python main.py hand.json
    python main.py hands/*.json --output reports.json
    python main.py hand.json --indent 0 --verbose
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from analysis import analyze
from models import HandValidationError
from parser import HandParser

logger = logging.getLogger(__name__)


def analyze_file(hand_file: Path, verbose: bool = False) -> list[dict]:
    """Load every hand in a file and return the analyzed reports as dicts."""
    parser = HandParser()
    hands = parser.load_file(hand_file)
    for error in parser.errors:
        print(f"Warning: {hand_file.name}: {error}", file=sys.stderr)

    reports = []
    for i, hand in enumerate(hands):
        try:
            reports.append(analyze(hand).to_dict())
        except HandValidationError as e:
            print(f"Warning: {hand_file.name}: hand {i} skipped: {e}", file=sys.stderr)

    if verbose:
        print(f"  Analyzed {len(reports)} hands from {hand_file.name}", file=sys.stderr)
    return reports


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Enrich parsed hold'em hand histories into analytical reports.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py hand.json
  python main.py hands/*.json --output reports.json
        """
    )

    parser.add_argument(
        "hand_files",
        nargs="+",
        type=str,
        help="JSON files holding one hand, a list of hands, or {\"hands\": [...]}"
    )

    parser.add_argument(
        "--output", "-o",
        type=str,
        help="Output file path (default: print to stdout)"
    )

    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation, 0 for compact output (default: 2)"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for CLI."""

    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    all_reports = []
    for name in args.hand_files:
        hand_file = Path(name)
        try:
            all_reports.extend(analyze_file(hand_file, verbose=args.verbose))
        except FileNotFoundError:
            print(f"Warning: File not found: {hand_file}", file=sys.stderr)
            continue
        except json.JSONDecodeError as e:
            print(f"Warning: Invalid JSON in {hand_file}: {e}", file=sys.stderr)
            continue

    if not all_reports:
        print("Error: No hands analyzed", file=sys.stderr)
        return 1

    payload = all_reports[0] if len(all_reports) == 1 else all_reports
    output = json.dumps(payload, indent=args.indent or None)

    if args.output:
        with open(args.output, 'w') as f:
            f.write(output)
        if args.verbose:
            print(f"Report written to {args.output}", file=sys.stderr)
    else:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
