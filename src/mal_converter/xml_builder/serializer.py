"""MAL export document builder.

Produces the document accepted by MyAnimeList's list import:

    <myanimelist>
        <myinfo> user fields and per-status totals </myinfo>
        <manga> one child per MangaRecord field </manga>
        ...
    </myanimelist>

The tree is built with lxml, which escapes text content and guarantees
that every element is closed.
"""

import re
from collections.abc import Sequence

from lxml import etree

from ..record_mapper.normalizers import CDATA_END, unwrap_cdata
from ..shared.config import Settings, get_settings
from ..shared.models import MANGA_RECORD_FIELDS, MangaRecord, StatusCounts
from .aggregator import calculate_status_counts

ROOT_TAG = "myanimelist"
MYINFO_TAG = "myinfo"
MANGA_TAG = "manga"
TITLE_FIELD = "manga_title"

# Characters that XML 1.0 does not allow in text content
_XML_INVALID_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")


def build_xml(
    records: Sequence[MangaRecord],
    counts: StatusCounts | None = None,
    settings: Settings | None = None,
) -> str:
    """Render records as a MAL export document.

    Args:
        records: Manga records in output order
        counts: Pre-computed status totals (computed from records if None)
        settings: Supplies the user fields of the header

    Returns:
        Pretty-printed XML text with an XML declaration

    Example:
        >>> xml = build_xml([])
        >>> "<user_total_manga>0</user_total_manga>" in xml
        True
    """
    settings = settings or get_settings()
    if counts is None:
        counts = calculate_status_counts(records)

    root = etree.Element(ROOT_TAG)
    _build_myinfo(root, len(records), counts, settings)
    for record in records:
        _build_manga(root, record)

    return etree.tostring(
        root,
        pretty_print=True,
        xml_declaration=True,
        encoding="UTF-8",
        standalone=True,
    ).decode("utf-8")


def _build_myinfo(
    root: etree._Element,
    total: int,
    counts: StatusCounts,
    settings: Settings,
) -> etree._Element:
    """Append the <myinfo> header block."""
    myinfo = etree.SubElement(root, MYINFO_TAG)
    header = {
        "user_id": settings.user_id,
        "user_name": settings.user_name,
        "user_export_type": settings.user_export_type,
        "user_total_manga": total,
        "user_total_reading": counts.reading,
        "user_total_completed": counts.completed,
        "user_total_onhold": counts.onhold,
        "user_total_dropped": counts.dropped,
        "user_total_plantoread": counts.plantoread,
    }
    for tag, value in header.items():
        _append_text_element(myinfo, tag, str(value))
    return myinfo


def _build_manga(root: etree._Element, record: MangaRecord) -> etree._Element:
    """Append one <manga> element with a child per record field."""
    manga = etree.SubElement(root, MANGA_TAG)
    for name in MANGA_RECORD_FIELDS:
        value = getattr(record, name)
        if name == TITLE_FIELD:
            elem = etree.SubElement(manga, name)
            elem.text = _title_text(value)
        else:
            _append_text_element(manga, name, value)
    return manga


def _append_text_element(parent: etree._Element, tag: str, text: str) -> etree._Element:
    elem = etree.SubElement(parent, tag)
    elem.text = _XML_INVALID_CHARS.sub("", text)
    return elem


def _title_text(value: str) -> str | etree.CDATA:
    """Turn a CDATA-wrapped title into a real CDATA section.

    A title containing ']]>' cannot live in one CDATA section and is
    written as escaped text instead.
    """
    inner = unwrap_cdata(value)
    if inner is None:
        return _XML_INVALID_CHARS.sub("", value)

    inner = _XML_INVALID_CHARS.sub("", inner)
    if CDATA_END in inner:
        return inner
    return etree.CDATA(inner)
