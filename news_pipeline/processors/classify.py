"""Keyword classification of articles: category, tags and location.

All matching is lowercase substring containment over ``title + " " + content``.
Scan order is fixed so results are reproducible run to run.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

# Checked in this order; first category with any matching keyword wins
_CATEGORY_KEYWORDS: List[Tuple[str, Tuple[str, ...]]] = [
    ("Technology", ("technology", "tech", "ai", "software")),
    ("Business", ("business", "economy", "finance", "market")),
    ("Politics", ("politics", "government", "election", "policy")),
    ("Health", ("health", "medical", "covid", "disease")),
    ("Sports", ("sports", "game", "team", "player")),
    ("Entertainment", ("entertainment", "movie", "music", "celebrity")),
]
DEFAULT_CATEGORY = "General"

TAG_VOCABULARY: Tuple[str, ...] = (
    "breaking",
    "urgent",
    "exclusive",
    "analysis",
    "opinion",
    "investigation",
    "local",
    "national",
    "international",
    "breaking-news",
    "trending",
)

CITIES: Tuple[str, ...] = (
    "new york",
    "london",
    "paris",
    "tokyo",
    "berlin",
    "moscow",
    "beijing",
    "delhi",
    "mumbai",
    "sydney",
)
COUNTRIES: Tuple[str, ...] = (
    "usa",
    "united states",
    "uk",
    "united kingdom",
    "france",
    "germany",
    "japan",
    "china",
    "india",
    "australia",
)


def _haystack(title: str, content: str) -> str:
    return f"{title or ''} {content or ''}".lower()


def _capitalize_first(value: str) -> str:
    # Only the first letter: "new york" -> "New york"
    return value[:1].upper() + value[1:]


def extract_category(title: str, content: str) -> str:
    text = _haystack(title, content)
    for category, keywords in _CATEGORY_KEYWORDS:
        if any(kw in text for kw in keywords):
            return category
    return DEFAULT_CATEGORY


def extract_tags(title: str, content: str) -> List[str]:
    """Return every vocabulary tag found in the text, in vocabulary order."""
    text = _haystack(title, content)
    return [tag for tag in TAG_VOCABULARY if tag in text]


def extract_location(title: str, content: str) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(city, country)``; at most one of them is set.

    Cities are scanned first. A city match ends the scan, so a text naming
    both "Paris" and "France" yields ``("Paris", None)``.
    """
    text = _haystack(title, content)
    for city in CITIES:
        if city in text:
            return _capitalize_first(city), None
    for country in COUNTRIES:
        if country in text:
            return None, _capitalize_first(country)
    return None, None
