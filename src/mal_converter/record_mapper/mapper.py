"""Mapping of tokenized CSV rows onto MAL manga records.

Fields that do not depend on the input come from DEFAULT_RECORD_FIELDS;
the per-row values derived here are merged over that template.

The reading list only has a single "last read" date, so it is used for
both my_start_date and my_finish_date.
"""

import logging
import sys
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from aws_lambda_powertools import Logger

from ..shared.config import ValidationMode
from ..shared.exceptions import RowValidationError
from ..shared.models import MangaRecord, RawRow
from .normalizers import extract_mal_id, parse_date, validate_status, wrap_cdata
from .validators import validate_raw_row

logger = Logger(service="mal-converter", logger_handler=logging.StreamHandler(sys.stderr))

DEFAULT_RECORD_FIELDS: Mapping[str, str] = MappingProxyType({
    "manga_volumes": "0",
    "manga_chapters": "0",
    "my_id": "0",
    "my_read_volumes": "0",
    "my_scanalation_group": "",
    "my_storage": "",
    "my_comments": "",
    "my_times_read": "0",
    "my_tags": "",
    "my_reread_value": "Low",
    "update_on_import": "1",
})


@dataclass
class MappingOutcome:
    """Records produced from a CSV and the rows that were rejected."""

    records: list[MangaRecord] = field(default_factory=list)
    skipped: list[RowValidationError] = field(default_factory=list)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)


def map_row(row: RawRow) -> MangaRecord:
    """Build a MangaRecord from one CSV row.

    Never raises: empty or unrecognized values fall back to their defaults.

    Example:
        >>> row = RawRow(mal="https://myanimelist.net/manga/42", title="Foo, Bar",
        ...              type="Reading", read="5", rating="8", last_read="2023-01-15")
        >>> map_row(row).my_start_date
        '2023-01-15'
    """
    last_read = parse_date(row.last_read)
    return MangaRecord(
        **DEFAULT_RECORD_FIELDS,
        manga_mangadb_id=extract_mal_id(row.mal),
        manga_title=wrap_cdata(row.title),
        my_read_chapters=row.read or "0",
        my_start_date=last_read,
        my_finish_date=last_read,
        my_score=row.rating or "0",
        my_status=validate_status(row.type).value,
    )


def map_rows(rows: Iterable[RawRow], mode: ValidationMode = "strict") -> MappingOutcome:
    """Map every row, applying the given validation policy.

    Args:
        rows: Tokenized CSV rows, consumed once
        mode: 'lenient' maps every row with defaults; 'strict' validates
            each row first and skips the ones that fail

    Returns:
        MappingOutcome with records in input order
    """
    outcome = MappingOutcome()

    for row in rows:
        if mode == "strict":
            try:
                validate_raw_row(row)
            except RowValidationError as e:
                logger.warning(
                    "Skipping invalid row",
                    extra={
                        "line_number": row.line_number,
                        "row": row.model_dump(exclude={"line_number"}),
                        "error": e.to_dict(),
                    },
                )
                outcome.skipped.append(e)
                continue

        outcome.records.append(map_row(row))

    return outcome
