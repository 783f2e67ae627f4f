"""Streaming CSV readers producing RawRow objects.

Two layouts are supported:
- header: RFC-4180 parsing with the standard csv module, columns looked
  up by header name. Quoted values may span lines.
- positional: the first line is skipped, every other non-blank line is
  split with ``split_csv_line`` and assigned to columns by position.
"""

import csv
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from ..shared.config import CsvLayout
from ..shared.exceptions import InputFileError
from ..shared.models import RAW_ROW_COLUMNS, RawRow
from .tokenizer import split_csv_line, strip_wrapping_quotes, to_raw_row


def read_raw_rows(
    path: str | Path,
    layout: CsvLayout = "header",
    encoding: str = "utf-8-sig",
) -> Iterator[RawRow]:
    """Stream RawRows from a CSV file.

    Args:
        path: CSV file to read
        layout: 'header' or 'positional'
        encoding: Text encoding of the file

    Yields:
        One RawRow per data row, blank rows excluded

    Raises:
        InputFileError: If the file cannot be opened, read or decoded
    """
    try:
        with open(path, "r", encoding=encoding, newline="") as f:
            if layout == "positional":
                yield from iter_positional_rows(f)
            else:
                yield from iter_header_rows(f)
    except FileNotFoundError as e:
        raise InputFileError(
            f"File not found: {path}",
            {"input_path": str(path)},
        ) from e
    except UnicodeDecodeError as e:
        raise InputFileError(
            f"Could not decode {path} as {encoding}: {e.reason}",
            {"input_path": str(path), "encoding": encoding, "position": e.start},
        ) from e
    except csv.Error as e:
        raise InputFileError(
            f"Malformed CSV in {path}: {e}",
            {"input_path": str(path)},
        ) from e
    except OSError as e:
        raise InputFileError(
            f"Error reading {path}: {e}",
            {"input_path": str(path), "original_error_type": type(e).__name__},
        ) from e


def iter_positional_rows(lines: TextIO) -> Iterator[RawRow]:
    """Yield rows from a text stream by column position.

    The first line is a header and is skipped without being inspected.
    """
    for line_number, line in enumerate(lines, start=1):
        if line_number == 1 or not line.strip():
            continue
        yield to_raw_row(split_csv_line(line), line_number)


def iter_header_rows(lines: TextIO) -> Iterator[RawRow]:
    """Yield rows from a text stream, looking columns up by header name.

    Header names are trimmed and lower-cased; unknown columns are ignored.
    """
    reader = csv.DictReader(lines)
    for row in reader:
        values = {
            key.strip().lower(): strip_wrapping_quotes(value or "")
            for key, value in row.items()
            # Surplus cells are collected under a None key
            if key is not None and isinstance(value, str | None)
        }
        if not any(values.values()):
            continue
        yield RawRow(
            **{column: values.get(column, "") for column in RAW_ROW_COLUMNS},
            line_number=reader.line_num,
        )
