from __future__ import annotations

from typing import Iterable, List, Sequence, Set

from .models import Article

MAX_ARTICLES = 80


def dedup_key(article: Article) -> str:
    return article.source_url or article.title


def deduplicate(per_feed: Iterable[Sequence[Article]]) -> List[Article]:
    """
    Flatten per-feed lists, dropping repeated dedup keys.

    Feeds are walked in the order given, so the first configured feed wins a duplicate,
    regardless of which fetch finished first.
    """
    seen: Set[str] = set()
    out: List[Article] = []
    for articles in per_feed:
        for it in articles:
            key = dedup_key(it)
            if key in seen:
                continue
            seen.add(key)
            out.append(it)
    return out


def merge(per_feed: Iterable[Sequence[Article]], limit: int = MAX_ARTICLES) -> List[Article]:
    items = deduplicate(per_feed)
    # list.sort is stable: equal timestamps keep feed order.
    items.sort(key=lambda x: x.published_at, reverse=True)
    return items[:limit]
