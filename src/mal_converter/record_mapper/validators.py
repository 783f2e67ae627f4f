"""Row validation for the strict pipeline.

The lenient pipeline never calls into this module; it relies on the
normalizers' defaults instead.
"""

from ..shared.exceptions import RowValidationError
from ..shared.models import RawRow
from .normalizers import VALID_STATUSES, is_valid_status


def validate_raw_row(row: RawRow) -> None:
    """Reject rows the MAL import cannot use as-is.

    Args:
        row: Tokenized CSV row

    Raises:
        RowValidationError: If 'mal' or 'title' is empty, or 'type' is not
            one of the five MAL statuses
    """
    if not row.mal:
        raise RowValidationError(
            "Missing 'mal' field in CSV row",
            line_number=row.line_number,
            field="mal",
        )

    if not row.title:
        raise RowValidationError(
            "Missing 'title' field in CSV row",
            line_number=row.line_number,
            field="title",
        )

    if not is_valid_status(row.type):
        raise RowValidationError(
            f"Invalid status: {row.type!r} (expected one of {', '.join(VALID_STATUSES)})",
            line_number=row.line_number,
            field="type",
        )
