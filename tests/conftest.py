"""Shared fixtures for oil_news tests."""

from __future__ import annotations

import time
from datetime import datetime, timedelta, timezone
from typing import Iterable, List

import pytest

from oil_news.models import Article
from oil_news.normalizer import hash_id, slugify

BASE_TIME = datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc)


def make_article(
    title: str = "Crude steadies",
    *,
    link: str = "https://example.com/a",
    category: str = "Oil Markets",
    minutes_ago: int = 0,
    summary: str = "Prices held.",
) -> Article:
    return Article(
        id=hash_id(link),
        slug=slugify(title),
        title=title,
        summary=summary,
        content=summary,
        source="Reuters",
        source_url=link,
        category=category,
        published_at=BASE_TIME - timedelta(minutes=minutes_ago),
        read_time="1 min read",
    )


def rss_document(items: Iterable[str]) -> bytes:
    body = "".join(items)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<rss version="2.0"><channel><title>Energy</title>'
        "<link>https://news.example.com</link><description>Energy news</description>"
        f"{body}</channel></rss>"
    ).encode("utf-8")


def rss_item(
    title: str,
    link: str,
    description: str = "",
    pub_date: str = "Mon, 02 Jan 2006 15:04:05 GMT",
    source: str = "",
) -> str:
    src = f'<source url="https://source.example.com">{source}</source>' if source else ""
    return (
        f"<item><title>{title}</title><link>{link}</link>"
        f"<description>{description}</description><pubDate>{pub_date}</pubDate>{src}</item>"
    )


class FakeResponse:
    """Minimal stand-in for a streamed requests.Response."""

    def __init__(
        self, body: bytes = b"", status_code: int = 200, chunk_size: int = 0, delay: float = 0.0,
    ) -> None:
        self.status_code = status_code
        self._delay = delay
        self._body = body
        self._chunk_size = chunk_size
        self.closed = False
        self.chunks_read = 0

    def iter_content(self, chunk_size: int = 1) -> Iterable[bytes]:
        size = self._chunk_size or chunk_size
        for start in range(0, len(self._body), size):
            if self._delay:
                time.sleep(self._delay)
            self.chunks_read += 1
            yield self._body[start:start + size]

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def sample_feed_bytes() -> bytes:
    items: List[str] = [
        rss_item(
            "OPEC Raises Output",
            "https://a/1",
            "&lt;p&gt;Members agreed&lt;/p&gt;",
            "Mon, 02 Jan 2006 15:04:05 MST",
            "Reuters",
        ),
        rss_item("Refinery margins jump", "https://a/2", "Diesel cracks widen"),
    ]
    return rss_document(items)


@pytest.fixture
def article_factory():
    return make_article


@pytest.fixture
def rss():
    """RSS builders: rss.document([...]) and rss.item(title, link, ...)."""

    class _Rss:
        document = staticmethod(rss_document)
        item = staticmethod(rss_item)

    return _Rss


@pytest.fixture
def fake_response():
    return FakeResponse
