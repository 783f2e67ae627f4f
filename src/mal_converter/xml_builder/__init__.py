"""XML builder module for the MAL export document.

This module handles:
- Per-status aggregation for the header
- Serialization of records into MAL import XML
"""

from .aggregator import calculate_status_counts
from .serializer import build_xml

__all__ = [
    "calculate_status_counts",
    "build_xml",
]
