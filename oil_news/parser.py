from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional, Tuple

from .models import RawItem

logger = logging.getLogger(__name__)

# Tried in order; the first format that parses wins. A trailing " %Z" marks a zone
# abbreviation, resolved through _ZONE_OFFSETS rather than strptime. Known
# abbreviations (MST, EST, ...) carry their real offsets, not the zero offset Go's
# time.Parse gives them, which changes where such items sort.
DATE_FORMATS: Tuple[str, ...] = (
    "%a, %d %b %Y %H:%M:%S %z",   # RFC 1123, numeric zone
    "%a, %d %b %Y %H:%M:%S %Z",   # RFC 1123, zone abbreviation
    "%a, %d %b %y %H:%M:%S %z",
    "%a, %d %b %y %H:%M:%S %Z",
    "%Y-%m-%dT%H:%M:%SZ",
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S.%f%z",
)

# RFC 822 zone names, hours from UTC
_ZONE_OFFSETS: Dict[str, int] = {
    "UT": 0, "UTC": 0, "GMT": 0, "Z": 0,
    "EST": -5, "EDT": -4,
    "CST": -6, "CDT": -5,
    "MST": -7, "MDT": -6,
    "PST": -8, "PDT": -7,
    "BST": 1,
}


def _zone(name: str) -> Optional[timezone]:
    hours = _ZONE_OFFSETS.get(name.upper())
    if hours is not None:
        return timezone(timedelta(hours=hours))
    if name.isalpha():
        # Unknown abbreviation: keep the wall-clock time at zero offset.
        return timezone.utc
    return None


def _parse_with_format(value: str, fmt: str) -> datetime:
    if fmt.endswith(" %Z"):
        head, _, zone_name = value.rpartition(" ")
        tz = _zone(zone_name)
        if not head or tz is None:
            raise ValueError(f"unrecognized zone in {value!r}")
        return datetime.strptime(head, fmt[:-3]).replace(tzinfo=tz)

    parsed = datetime.strptime(value, fmt)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_rss_date(value: Optional[str]) -> datetime:
    """
    Parse an RSS pubDate against DATE_FORMATS.

    Falls back to the current UTC time when nothing matches; this is a recorded
    fallback, not an error.
    """
    text = (value or "").strip()
    if text:
        for fmt in DATE_FORMATS:
            try:
                return _parse_with_format(text, fmt)
            except ValueError:
                continue
    logger.debug("Unparseable pubDate %r, using current time", value)
    return datetime.now(timezone.utc)


def _text(entry: Dict[str, Any], *keys: str) -> Optional[str]:
    for key in keys:
        val = entry.get(key)
        if isinstance(val, str):
            return val
    return None


def parse_entry(entry: Dict[str, Any]) -> RawItem:
    """
    Map a raw feed entry (from feedparser) to a RawItem.

    Values are passed through untouched; cleanup belongs to the normalizer.
    """
    source_name = None
    source_url = None
    src = entry.get("source") or {}
    if isinstance(src, dict):
        source_name = _text(src, "title", "value")
        source_url = _text(src, "href", "url")

    return RawItem(
        title=_text(entry, "title"),
        link=_text(entry, "link"),
        description=_text(entry, "summary", "description"),
        pub_date=_text(entry, "published", "pubdate", "updated"),
        source_name=source_name,
        source_url=source_url,
    )
