"""Shared utilities: datetime, generators, sanitization."""

from community_search.shared.utils.datetime import (
    days_between,
    ensure_utc,
    from_timestamp_ms_utc,
    parse_timestamp,
    utc_now,
)
from community_search.shared.utils.generators import generate_cuid
from community_search.shared.utils.sanitization import InputSanitizer, strip_html

__all__ = [
    "InputSanitizer",
    "days_between",
    "ensure_utc",
    "from_timestamp_ms_utc",
    "generate_cuid",
    "parse_timestamp",
    "strip_html",
    "utc_now",
]
