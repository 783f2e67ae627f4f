"""Conversion of one reading-list CSV into a MAL import file.

Flow:
1. Stream RawRows from the CSV
2. Map rows to MangaRecords under the configured validation policy
3. Aggregate per-status totals
4. Serialize and write the XML next to the input
"""

import logging
import sys
from pathlib import Path

from aws_lambda_powertools import Logger

from .csv_reader import read_raw_rows
from .record_mapper import map_rows
from .shared.config import Settings, get_settings
from .shared.exceptions import InputFileError, OutputWriteError
from .shared.models import ConversionResult
from .xml_builder import build_xml, calculate_status_counts

logger = Logger(service="mal-converter", logger_handler=logging.StreamHandler(sys.stderr))

CSV_SUFFIX = ".csv"


def build_output_path(input_path: str | Path, suffix: str = "_mal.xml") -> Path:
    """Derive the XML path from the CSV path.

    'list.csv' becomes 'list_mal.xml'. A path without a '.csv' suffix gets
    the suffix appended, so the input is never overwritten.
    """
    path = Path(input_path)
    if path.name.lower().endswith(CSV_SUFFIX) and len(path.name) > len(CSV_SUFFIX):
        return path.with_name(path.name[: -len(CSV_SUFFIX)] + suffix)
    return path.with_name(path.name + suffix)


def convert_file(
    input_path: str | Path,
    settings: Settings | None = None,
    output_path: str | Path | None = None,
) -> ConversionResult:
    """Convert a reading-list CSV into a MAL XML file.

    In strict mode a CSV without a single valid row produces no file. In
    lenient mode an empty but well-formed document is written instead.

    Args:
        input_path: CSV file to convert
        settings: Converter settings (cached environment settings if None)
        output_path: Destination override (derived from input_path if None)

    Returns:
        ConversionResult describing what was written

    Raises:
        InputFileError: If the CSV is missing, unreadable or not decodable
        OutputWriteError: If the XML file cannot be written
    """
    settings = settings or get_settings()
    input_path = Path(input_path)

    if not input_path.is_file():
        raise InputFileError(
            f"File not found: {input_path}",
            {"input_path": str(input_path)},
        )

    logger.info(
        "Converting reading list",
        extra={
            "input_path": str(input_path),
            "validation_mode": settings.validation_mode,
            "csv_layout": settings.csv_layout,
        },
    )

    rows = read_raw_rows(input_path, settings.csv_layout, settings.input_encoding)
    outcome = map_rows(rows, settings.validation_mode)
    records = outcome.records

    logger.info(
        "Mapped rows",
        extra={"records": len(records), "rows_skipped": outcome.skipped_count},
    )

    if not records and settings.is_strict:
        logger.warning("No comics to process", extra={"input_path": str(input_path)})
        return ConversionResult(
            input_path=str(input_path),
            rows_skipped=outcome.skipped_count,
        )

    counts = calculate_status_counts(records)
    logger.info("Status counts", extra={"status_counts": counts.model_dump()})

    logger.debug("Building XML", extra={"records": len(records)})
    xml_content = build_xml(records, counts, settings)

    destination = Path(output_path) if output_path else build_output_path(
        input_path, settings.output_suffix
    )
    try:
        destination.write_text(xml_content, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(str(destination), e) from e

    logger.info("Wrote MAL XML", extra={"output_path": str(destination)})

    return ConversionResult(
        input_path=str(input_path),
        output_path=str(destination),
        records_written=len(records),
        rows_skipped=outcome.skipped_count,
        status_counts=counts,
    )
