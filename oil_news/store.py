from __future__ import annotations

import threading
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Tuple

from .models import Article


class SnapshotStore:
    """
    Holds the currently published article list.

    The snapshot is an immutable tuple that is replaced wholesale on publish. The lock
    guards only the reference swap and the reference read, so a reader never waits on
    a refresh cycle's network I/O and never sees a half-built list.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._articles: Tuple[Article, ...] = ()
        self._version = 0
        self._updated_at: Optional[datetime] = None

    def publish(self, articles: Iterable[Article]) -> int:
        snapshot = tuple(articles)
        now = datetime.now(timezone.utc)
        with self._lock:
            self._articles = snapshot
            self._version += 1
            self._updated_at = now
            return self._version

    def _snapshot(self) -> Tuple[Article, ...]:
        with self._lock:
            return self._articles

    def get_all(self) -> List[Article]:
        return list(self._snapshot())

    def get_by_id(self, key: str) -> Optional[Article]:
        for a in self._snapshot():
            if a.id == key or a.slug == key:
                return a
        return None

    @property
    def version(self) -> int:
        with self._lock:
            return self._version

    @property
    def updated_at(self) -> Optional[datetime]:
        with self._lock:
            return self._updated_at

    def __len__(self) -> int:
        return len(self._snapshot())
