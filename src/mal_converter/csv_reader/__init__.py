"""CSV reader module for reading-list exports.

This module handles:
- Quote-aware line tokenization
- Header-keyed and positional row layouts
- Streaming RawRow production
"""

from .reader import read_raw_rows
from .tokenizer import split_csv_line, strip_wrapping_quotes, to_raw_row

__all__ = [
    "read_raw_rows",
    "split_csv_line",
    "strip_wrapping_quotes",
    "to_raw_row",
]
