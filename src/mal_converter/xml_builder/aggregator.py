"""Per-status aggregation for the export header."""

from collections import Counter
from collections.abc import Iterable

from ..shared.models import MangaRecord, StatusCounts, normalize_status_key


def calculate_status_counts(records: Iterable[MangaRecord]) -> StatusCounts:
    """Count records per normalized status key.

    'On-Hold' and 'Plan to Read' are counted as 'onhold' and 'plantoread'.
    Every record carries one of the five MAL statuses, so the counters
    always sum to the number of records.

    Args:
        records: Mapped manga records

    Returns:
        StatusCounts with every counter starting at zero
    """
    counter = Counter(normalize_status_key(record.my_status) for record in records)
    known = StatusCounts.model_fields
    return StatusCounts(**{key: count for key, count in counter.items() if key in known})
