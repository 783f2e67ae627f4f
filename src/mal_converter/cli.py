#!/usr/bin/env python3
"""Convert a manga reading-list CSV into a MyAnimeList import file.

Usage:
    mal-converter reading-list.csv

    # Keep rows with unknown statuses as 'Plan to Read' instead of skipping them
    mal-converter reading-list.csv --mode lenient

    # Files whose header names don't match: read columns by position
    mal-converter reading-list.csv --layout positional

The XML is written next to the input as <name>_mal.xml unless --output is given.
"""

import argparse
import logging
import sys
from pathlib import Path

from aws_lambda_powertools import Logger
from pydantic import ValidationError

from .converter import convert_file
from .shared.config import get_settings
from .shared.exceptions import ConverterError

logger = Logger(service="mal-converter", logger_handler=logging.StreamHandler(sys.stderr))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mal-converter",
        description="Convert a manga reading-list CSV into MyAnimeList import XML",
    )
    parser.add_argument("csv_path", help="Reading-list CSV file to convert")
    parser.add_argument(
        "--mode",
        choices=["lenient", "strict"],
        help="Validation policy (default: MAL_VALIDATION_MODE or 'strict')",
    )
    parser.add_argument(
        "--layout",
        choices=["header", "positional"],
        help="Column lookup (default: MAL_CSV_LAYOUT or 'header')",
    )
    parser.add_argument(
        "-o", "--output",
        help="Output XML path (default: input path with '.csv' replaced by '_mal.xml')",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the converter and return the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    overrides = {}
    if args.mode:
        overrides["validation_mode"] = args.mode
    if args.layout:
        overrides["csv_layout"] = args.layout
    settings = settings.model_copy(update=overrides)
    logger.setLevel(settings.log_level)

    if not Path(args.csv_path).exists():
        print(f"Error: File not found: {args.csv_path}", file=sys.stderr)
        return 1

    try:
        result = convert_file(args.csv_path, settings=settings, output_path=args.output)
    except ConverterError as e:
        logger.error("Conversion failed", extra={"error": e.to_dict()})
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    if not result.is_written:
        print("No comics to process - no file written", file=sys.stderr)
        return 0

    print(f"MAL XML file created successfully: {result.output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
