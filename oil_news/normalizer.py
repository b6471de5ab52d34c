from __future__ import annotations

import hashlib
import html
import logging
import re
import string
from typing import Iterable, List, Optional

from .classifier import categorize
from .models import Article, RawItem
from .parser import parse_rss_date

logger = logging.getLogger(__name__)

MAX_ITEMS_PER_FEED = 10
SUMMARY_LIMIT = 500
ELLIPSIS = "..."
DEFAULT_SOURCE_NAME = "News"
# Items republished from our competitor are never shown.
EXCLUDED_SOURCE_TOKENS = ("oilprice",)
WORDS_PER_MINUTE = 200

_TAG_RE = re.compile(r"<[^>]*>")
_HYPHEN_RUN_RE = re.compile(r"-{2,}")
_SLUG_CHARS = frozenset(string.ascii_lowercase + string.digits)


def strip_html(text: str) -> str:
    text = _TAG_RE.sub(" ", text)
    text = html.unescape(text)
    return " ".join(text.split())


def truncate(text: str, limit: int = SUMMARY_LIMIT) -> str:
    """Cut `text` so that it plus the ellipsis marker stays within `limit` characters."""
    if len(text) <= limit:
        return text
    return text[: limit - len(ELLIPSIS)] + ELLIPSIS


def slugify(title: str) -> str:
    out = []
    for ch in title.lower():
        if ch in _SLUG_CHARS:
            out.append(ch)
        elif ch == "-" or ch.isspace():
            out.append("-")
    return _HYPHEN_RUN_RE.sub("-", "".join(out)).strip("-")


def hash_id(link: str) -> str:
    """Short, stable lookup key for a link. Not meant to be collision-proof."""
    return hashlib.md5(link.encode("utf-8")).hexdigest()[:16]


def estimate_read_time(text: str) -> str:
    minutes = max(1, len(text.split()) // WORDS_PER_MINUTE)
    return f"{minutes} min read"


def _is_excluded_source(source: str) -> bool:
    s = source.lower()
    return any(token in s for token in EXCLUDED_SOURCE_TOKENS)


def normalize_item(item: RawItem, default_category: str) -> Optional[Article]:
    """
    Convert a RawItem into an Article, or None when the item must be dropped.

    Dropped: empty title after cleanup, or a source on the exclusion list.
    """
    title = html.unescape((item.title or "").strip()).strip()
    if not title:
        return None

    summary = truncate(strip_html(item.description or ""))

    source = html.unescape(item.source_name or "").strip() or DEFAULT_SOURCE_NAME
    if _is_excluded_source(source):
        return None

    link = item.link or ""

    return Article(
        id=hash_id(link),
        slug=slugify(title),
        title=title,
        summary=summary,
        content=summary,
        source=source,
        source_url=link.strip(),
        category=categorize(title, summary, default_category),
        published_at=parse_rss_date(item.pub_date),
        read_time=estimate_read_time(summary),
    )


def normalize_feed(items: Iterable[RawItem], default_category: str) -> List[Article]:
    """Normalize the first MAX_ITEMS_PER_FEED items of one feed, in document order."""
    articles: List[Article] = []
    for position, item in enumerate(items):
        if position >= MAX_ITEMS_PER_FEED:
            break
        try:
            article = normalize_item(item, default_category)
        except (TypeError, ValueError) as e:
            logger.warning("Skipping malformed item [%s]: %s", default_category, e)
            continue
        if article is not None:
            articles.append(article)
    return articles
