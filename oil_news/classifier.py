from __future__ import annotations

from typing import Iterable, Tuple


# Evaluated top to bottom; text often matches several rules, so order is significant.
CATEGORY_RULES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("OPEC", ("opec",)),
    ("Natural Gas", ("natural gas", " lng ", "henry hub", "methane")),
    ("Refining", ("refin", "gasoline", "crack spread", "diesel", "jet fuel")),
    ("International", ("geopolitic", "sanction", "tariff", "conflict", "war ")),
    ("Inventory", ("inventor", "stockpile", "storage", " eia ", "crude stock")),
    ("Extraction", ("drill", "extract", "upstream", "shale", "rig count", "permian", "offshore")),
    ("Technology", ("technolog", "engineer", "innovat", "carbon capture", "hydrogen")),
    ("Demand", ("demand", "consumption", "import")),
    ("Supply", ("supply", "production", "output")),
)


def _contains_any(text: str, keywords: Iterable[str]) -> bool:
    return any(k in text for k in keywords)


def match_category(text: str, default_category: str) -> str:
    """Return the first rule category whose keywords occur in `text`, else the default."""
    t = text.lower()
    for category, keywords in CATEGORY_RULES:
        if _contains_any(t, keywords):
            return category
    return default_category


def categorize(title: str, summary: str, default_category: str) -> str:
    return match_category(f"{title} {summary}", default_category)
