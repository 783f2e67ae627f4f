"""Shared utilities for the CSV to MAL XML converter."""

from .config import Settings, get_settings
from .exceptions import (
    ConverterError,
    InputFileError,
    RowValidationError,
    OutputWriteError,
)
from .models import (
    MangaStatus,
    RawRow,
    MangaRecord,
    StatusCounts,
    ConversionResult,
    MANGA_RECORD_FIELDS,
    RAW_ROW_COLUMNS,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Exceptions
    "ConverterError",
    "InputFileError",
    "RowValidationError",
    "OutputWriteError",
    # Models
    "MangaStatus",
    "RawRow",
    "MangaRecord",
    "StatusCounts",
    "ConversionResult",
    "MANGA_RECORD_FIELDS",
    "RAW_ROW_COLUMNS",
]
