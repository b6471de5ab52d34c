"""
oil_news

Background aggregator that keeps an in-memory snapshot of oil & energy news fresh.

Core ideas:
- Input: a fixed list of RSS feed sources, each with a default category
- Process: fetch → normalize → categorize → merge (deduplicate, sort newest first, cap) → publish
- Output: an immutable snapshot of Article, read without waiting on the network

Example
-------
from oil_news import NewsFeedService

service = NewsFeedService()          # first refresh starts in the background

for article in service.get_news():
    print(article.published_at, article.category, article.title)

article = service.get_news_by_id("opec-raises-output")   # id or slug
"""
from .models import Article, FeedSource, RawItem
from .core import NewsFeedService
from .config import NewsConfig
from .exceptions import DecodeError, FeedError, FetchError
from .store import SnapshotStore

__all__ = [
    "Article",
    "FeedSource",
    "RawItem",
    "NewsFeedService",
    "NewsConfig",
    "SnapshotStore",
    "FeedError",
    "FetchError",
    "DecodeError",
]
