"""Record mapper module for MAL manga records.

This module handles:
- Field normalization (ids, dates, statuses, titles)
- Strict row validation
- Lenient and strict row-to-record mapping
"""

from .mapper import DEFAULT_RECORD_FIELDS, MappingOutcome, map_row, map_rows
from .normalizers import extract_mal_id, parse_date, validate_status, wrap_cdata
from .validators import validate_raw_row

__all__ = [
    "DEFAULT_RECORD_FIELDS",
    "MappingOutcome",
    "map_row",
    "map_rows",
    "extract_mal_id",
    "parse_date",
    "validate_status",
    "wrap_cdata",
    "validate_raw_row",
]
