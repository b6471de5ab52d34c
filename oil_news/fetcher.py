from __future__ import annotations

import concurrent.futures as _fut
import io
import logging
import time
from typing import Callable, List, Optional, Sequence

import feedparser
import requests

from .exceptions import DecodeError, FeedError, FetchError
from .models import FeedSource, RawItem
from .parser import parse_entry

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15.0
MAX_FEED_BYTES = 5 * 1024 * 1024
DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; LiveOilPrices/1.0)"
_CHUNK_SIZE = 64 * 1024


def _read_limited(
    response: requests.Response, max_bytes: int, deadline: Optional[float] = None,
) -> bytes:
    """Read at most `max_bytes` of the body, giving up once `deadline` (monotonic) passes."""
    buf = bytearray()
    for chunk in response.iter_content(chunk_size=_CHUNK_SIZE):
        if deadline is not None and time.monotonic() > deadline:
            raise FetchError("Timed out reading feed body")
        if not chunk:
            continue
        buf.extend(chunk)
        if len(buf) >= max_bytes:
            del buf[max_bytes:]
            break
    return bytes(buf)


def fetch_feed_items(
    source: FeedSource,
    *,
    session: Optional[requests.Session] = None,
    timeout: float = DEFAULT_TIMEOUT,
    max_bytes: int = MAX_FEED_BYTES,
    user_agent: str = DEFAULT_USER_AGENT,
) -> List[RawItem]:
    """
    Fetch a single feed and return its items in document order.

    Raises FetchError on network issues or a non-200 status, DecodeError when the
    body is not a decodable RSS/Atom document. The body is read up to `max_bytes`,
    and `timeout` bounds the whole request, body included.
    """
    http = session or requests
    deadline = time.monotonic() + timeout
    try:
        response = http.get(
            source.url,
            headers={"User-Agent": user_agent},
            timeout=timeout,
            stream=True,
        )
    except requests.RequestException as e:
        raise FetchError(f"Failed to fetch feed: {source.url} ({e})") from e

    try:
        if response.status_code != 200:
            raise FetchError(f"HTTP {response.status_code}: {source.url}")
        try:
            body = _read_limited(response, max_bytes, deadline)
        except requests.RequestException as e:
            raise FetchError(f"Failed to read feed body: {source.url} ({e})") from e
        except FetchError as e:
            raise FetchError(f"{e}: {source.url}") from e
    finally:
        response.close()

    # A bytes argument may be taken for a local path; a stream never is.
    feed = feedparser.parse(io.BytesIO(body))
    entries = getattr(feed, "entries", None)
    if getattr(feed, "bozo", 0) and not entries:
        exc = getattr(feed, "bozo_exception", None)
        msg = f"Invalid RSS feed: {source.url}"
        if exc:
            msg += f" ({exc})"
        raise DecodeError(msg)
    if not getattr(feed, "version", "") or not isinstance(entries, list):
        raise DecodeError(f"Not an RSS/Atom document: {source.url}")

    return [parse_entry(e) for e in entries]


FetchFunc = Callable[[FeedSource], List[RawItem]]


def fetch_many(
    sources: Sequence[FeedSource],
    fetch: FetchFunc = fetch_feed_items,
    *,
    max_workers: int = 4,
) -> List[Optional[List[RawItem]]]:
    """
    Fetch several feeds and return one result per source, in `sources` order.

    Failures on individual feeds are isolated: they are logged and the feed's
    slot is None, so callers can tell a failed feed from an empty one.
    """

    def _one(source: FeedSource) -> Optional[List[RawItem]]:
        try:
            return fetch(source)
        except FeedError as e:
            logger.warning("RSS fetch error [%s]: %s", source.default_category, e)
            return None
        except Exception:
            logger.exception("Unexpected RSS fetch error [%s]", source.default_category)
            return None

    max_workers = max(1, int(max_workers or 1))
    if max_workers == 1 or len(sources) <= 1:
        return [_one(s) for s in sources]

    with _fut.ThreadPoolExecutor(max_workers=max_workers) as ex:
        # map() yields in submission order, not completion order.
        return list(ex.map(_one, sources))
