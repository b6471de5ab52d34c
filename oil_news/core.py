from __future__ import annotations

import logging
import threading
import time
from functools import partial
from typing import List, Optional, Sequence

from .config import NewsConfig
from .fetcher import FetchFunc, fetch_feed_items, fetch_many
from .merger import merge
from .models import Article, FeedSource
from .normalizer import normalize_feed
from .sources import DEFAULT_FEEDS
from .store import SnapshotStore

logger = logging.getLogger(__name__)


class NewsFeedService:
    """
    High-level API: keep a published snapshot of energy news fresh in the background.

    Cycle: fetch (per feed) → normalize → categorize → merge (dedup, sort, cap) → publish

    One refresh runs right after construction (unless autostart=False) and then every
    `config.refresh_interval` seconds on a daemon thread. Readers only touch the
    SnapshotStore and never wait on network I/O.
    """

    def __init__(
        self,
        feeds: Sequence[FeedSource] = DEFAULT_FEEDS,
        *,
        config: Optional[NewsConfig] = None,
        fetch: Optional[FetchFunc] = None,
        store: Optional[SnapshotStore] = None,
        autostart: bool = True,
    ) -> None:
        self.feeds = tuple(feeds)
        self.config = config or NewsConfig()
        if fetch is None:
            fetch = partial(
                fetch_feed_items,
                timeout=self.config.fetch_timeout,
                max_bytes=self.config.max_feed_bytes,
                user_agent=self.config.user_agent,
            )
        self._fetch = fetch
        self.store = store or SnapshotStore()
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None
        if autostart:
            self.start()

    def refresh(self) -> List[Article]:
        """Run one full cycle and return the list that is now published."""
        fetched = fetch_many(self.feeds, self._fetch, max_workers=self.config.fetch_workers)

        per_feed = []
        success_count = 0
        for feed, items in zip(self.feeds, fetched):
            if items is None:
                per_feed.append([])
                continue
            success_count += 1
            per_feed.append(normalize_feed(items, feed.default_category))

        articles = merge(per_feed, limit=self.config.max_articles)

        if self.feeds and success_count == 0 and self.config.keep_last_on_total_failure:
            logger.warning("All %d feeds failed; keeping previous snapshot", len(self.feeds))
            return self.store.get_all()

        self.store.publish(articles)
        logger.info(
            "News feed refreshed: %d articles from %d/%d feeds",
            len(articles), success_count, len(self.feeds),
        )
        return articles

    def _run(self) -> None:
        # Cycles start on a fixed tick counted from the first run, whatever each one takes.
        next_tick = time.monotonic()
        while not self._stop.is_set():
            try:
                self.refresh()
            except Exception:
                logger.exception("News refresh cycle failed")
            next_tick += self.config.refresh_interval
            if self._stop.wait(max(0.0, next_tick - time.monotonic())):
                break

    def start(self) -> None:
        if self._thread is not None and self._thread.is_alive():
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="news-refresh", daemon=True)
        self._thread.start()

    def stop(self, timeout: Optional[float] = None) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def get_news(self) -> List[Article]:
        return self.store.get_all()

    def get_news_by_id(self, key: str) -> Optional[Article]:
        return self.store.get_by_id(key)
