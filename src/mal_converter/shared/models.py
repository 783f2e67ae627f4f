"""Pydantic models for data validation and serialization.

This module defines the core data structures used throughout the converter:
- Raw CSV rows as produced by the tokenizer
- The 18-field MAL manga record
- Per-status aggregation and run results

All models use Pydantic v2 for validation and serialization.
"""

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class MangaStatus(str, Enum):
    """Reading states recognized by the MAL import format."""

    READING = "Reading"
    COMPLETED = "Completed"
    ON_HOLD = "On-Hold"
    DROPPED = "Dropped"
    PLAN_TO_READ = "Plan to Read"


def normalize_status_key(status: str) -> str:
    """Lower-case a status and drop whitespace and hyphens."""
    return "".join(ch for ch in status.lower() if not ch.isspace() and ch != "-")


# Order of the columns in the source CSV
RAW_ROW_COLUMNS = ("mal", "title", "type", "read", "rating", "last_read")


class RawRow(BaseModel):
    """One data row of the reading-list CSV.

    Missing columns are empty strings. The row is transient: it is consumed
    once by the record mapper and then dropped.
    """

    model_config = ConfigDict(frozen=True)

    mal: str = Field(
        default="",
        description="Source URL or id (e.g., 'https://myanimelist.net/manga/2/Berserk')",
    )
    title: str = Field(default="", description="Title as exported")
    type: str = Field(default="", description="Reading status label")
    read: str = Field(default="", description="Number of chapters read")
    rating: str = Field(default="", description="User score")
    last_read: str = Field(default="", description="Last read date")
    line_number: Annotated[int, Field(ge=1)] | None = Field(
        default=None,
        description="1-based line of the row in the source file",
    )


class MangaRecord(BaseModel):
    """A single <manga> entry of the MAL export.

    Every field is a string, including the numeric and enumerated ones;
    field order is the element order in the XML document.
    """

    model_config = ConfigDict(frozen=True)

    manga_mangadb_id: str
    manga_title: str
    manga_volumes: str
    manga_chapters: str
    my_id: str
    my_read_volumes: str
    my_read_chapters: str
    my_start_date: str
    my_finish_date: str
    my_scanalation_group: str
    my_score: str
    my_storage: str
    my_status: str
    my_comments: str
    my_times_read: str
    my_tags: str
    my_reread_value: str
    update_on_import: str


MANGA_RECORD_FIELDS: tuple[str, ...] = tuple(MangaRecord.model_fields)


class StatusCounts(BaseModel):
    """Number of records per normalized status key."""

    reading: Annotated[int, Field(ge=0)] = 0
    completed: Annotated[int, Field(ge=0)] = 0
    onhold: Annotated[int, Field(ge=0)] = 0
    dropped: Annotated[int, Field(ge=0)] = 0
    plantoread: Annotated[int, Field(ge=0)] = 0

    @property
    def total(self) -> int:
        """Sum of all five counters."""
        return self.reading + self.completed + self.onhold + self.dropped + self.plantoread


class ConversionResult(BaseModel):
    """Outcome of converting one CSV file."""

    model_config = ConfigDict(frozen=True)

    input_path: str = Field(description="CSV file that was read")
    output_path: str | None = Field(
        default=None,
        description="XML file that was written (None when nothing was written)",
    )
    records_written: Annotated[int, Field(ge=0)] = 0
    rows_skipped: Annotated[int, Field(ge=0)] = 0
    status_counts: StatusCounts = Field(default_factory=StatusCounts)

    @property
    def is_written(self) -> bool:
        """Check if an output document was produced."""
        return self.output_path is not None
