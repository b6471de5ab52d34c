"""Configured feed sources."""

from __future__ import annotations

from typing import Tuple

from .models import FeedSource

GNEWS_BASE = "https://news.google.com/rss/search?hl=en-US&gl=US&ceid=US:en&q="

# Order matters: earlier feeds win when the same link shows up in several of them.
DEFAULT_FEEDS: Tuple[FeedSource, ...] = (
    FeedSource(GNEWS_BASE + "crude+oil+price+WTI+Brent", "Oil Markets"),
    FeedSource(GNEWS_BASE + "OPEC+oil+production+output", "OPEC"),
    FeedSource(GNEWS_BASE + "natural+gas+LNG+Henry+Hub", "Natural Gas"),
    FeedSource(GNEWS_BASE + "oil+refining+gasoline+diesel+fuel", "Refining"),
    FeedSource(GNEWS_BASE + "oil+drilling+extraction+upstream+shale", "Extraction"),
    FeedSource(GNEWS_BASE + "oil+gas+engineering+technology+energy+innovation", "Technology"),
    FeedSource(GNEWS_BASE + "international+energy+policy+geopolitics+oil+sanctions", "International"),
    FeedSource(GNEWS_BASE + "oil+gas+inventory+EIA+stockpile+storage", "Inventory"),
)
