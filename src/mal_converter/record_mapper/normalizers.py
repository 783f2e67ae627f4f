"""Field normalization for MAL manga records.

Each function takes a raw CSV value (possibly empty or None) and returns
the string the MAL import expects. None of them raise.
"""

import re

from ..shared.models import MangaStatus

# Accepted date shapes, tried in order against the whole value; groups
# map to (year, month, day). ASCII digits only.
DATE_PATTERNS = (
    (re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})"), (1, 2, 3)),
    (re.compile(r"([0-9]{2})-([0-9]{2})-([0-9]{4})"), (3, 2, 1)),
)
EMPTY_DATE = "0000-00-00"

MAL_ID_PATTERN = re.compile(r"/manga/([0-9]+)")
DEFAULT_MAL_ID = "0"

VALID_STATUSES = {status.value: status for status in MangaStatus}
DEFAULT_STATUS = MangaStatus.PLAN_TO_READ

CDATA_START = "<![CDATA["
CDATA_END = "]]>"


def extract_mal_id(url: str | None) -> str:
    """Extract the numeric MAL id from a manga URL.

    Example:
        >>> extract_mal_id("https://myanimelist.net/manga/2/Berserk")
        '2'
    """
    if not url:
        return DEFAULT_MAL_ID
    match = MAL_ID_PATTERN.search(url)
    return match.group(1) if match else DEFAULT_MAL_ID


def parse_date(value: str | None) -> str:
    """Reformat a YYYY-MM-DD or DD-MM-YYYY date as YYYY-MM-DD.

    Only the shape of the string is checked; '2023-13-45' passes through.
    Anything else, including an empty value, becomes '0000-00-00'.
    """
    if not value:
        return EMPTY_DATE

    for pattern, (year, month, day) in DATE_PATTERNS:
        match = pattern.fullmatch(value)
        if match:
            return f"{match.group(year)}-{match.group(month)}-{match.group(day)}"
    return EMPTY_DATE


def validate_status(value: str | None) -> MangaStatus:
    """Map a status label onto MangaStatus, defaulting to Plan to Read.

    Matching is exact and case-sensitive: 'reading' and 'On Hold' default.
    """
    return VALID_STATUSES.get(value or "", DEFAULT_STATUS)


def is_valid_status(value: str | None) -> bool:
    """Check if a label exactly matches one of the five MAL statuses."""
    return (value or "") in VALID_STATUSES


def wrap_cdata(text: str | None) -> str:
    """Wrap a title in CDATA markers after removing surrounding quotes."""
    title = (text or "").strip().strip('"')
    return f"{CDATA_START}{title}{CDATA_END}"


def unwrap_cdata(value: str) -> str | None:
    """Return the text inside CDATA markers, or None if not wrapped."""
    if value.startswith(CDATA_START) and value.endswith(CDATA_END):
        return value[len(CDATA_START):-len(CDATA_END)]
    return None
