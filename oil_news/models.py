from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class FeedSource:
    """A configured RSS endpoint plus the category its items default to."""
    url: str
    default_category: str


@dataclass(frozen=True)
class RawItem:
    """Untrusted item fields exactly as decoded from the feed XML."""
    title: Optional[str] = None
    link: Optional[str] = None
    description: Optional[str] = None
    pub_date: Optional[str] = None
    source_name: Optional[str] = None
    source_url: Optional[str] = None


@dataclass(frozen=True)
class Article:
    """
    Published unit of the news snapshot.

    WARNING: `to_dict` keys are consumed by the web frontend. Do not rename them.
    """
    id: str
    slug: str
    title: str
    summary: str
    content: str
    source: str
    source_url: str
    category: str
    published_at: datetime
    read_time: str
    image_url: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "slug": self.slug,
            "title": self.title,
            "summary": self.summary,
            "content": self.content,
            "source": self.source,
            "sourceUrl": self.source_url,
            "category": self.category,
            "publishedAt": self.published_at.isoformat(),
            "imageUrl": self.image_url,
            "readTime": self.read_time,
        }
