from __future__ import annotations

from typing import Any, Dict, List

import requests

from ..models import Article, Source
from ..processors.classify import extract_category, extract_tags
from ..utils.logging import get_logger

logger = get_logger("np.fetchers.newsapi")

NEWSAPI_URL = "https://newsapi.org/v2/everything"


def article_from_newsapi(item: Dict[str, Any]) -> Article | None:
    """Build an Article from one NewsAPI entry, or None if title/content is missing."""
    title = item.get("title")
    content = item.get("content")
    if not title or not content:
        return None
    source_info = item.get("source") or {}
    return Article(
        title=title,
        content=content,
        summary=item.get("description") or "",
        source=source_info.get("name") or "",
        url=item.get("url") or "",
        image_url=item.get("urlToImage"),
        published_at=item.get("publishedAt"),
        category=extract_category(title, content),
        tags=extract_tags(title, content),
    )


def fetch_newsapi_articles(
    source: Source,
    *,
    api_key: str,
    page_size: int = 10,
    timeout: float = 30.0,
) -> List[Article]:
    """Fetch one page of recent articles for a NewsAPI source id.

    A non-success status is logged and yields an empty list. Transport errors
    propagate to the caller, which isolates them per source.
    """
    if source.type != "newsapi":
        raise ValueError("fetch_newsapi_articles requires a source of type 'newsapi'")

    params = {"sources": source.name, "pageSize": page_size}
    headers = {"X-Api-Key": api_key}
    logger.debug("Fetching NewsAPI page for %s", source.name)
    resp = requests.get(NEWSAPI_URL, params=params, headers=headers, timeout=timeout)
    if not resp.ok:
        logger.warning("Failed to fetch from %s: HTTP %s", source.display_name, resp.status_code)
        return []

    data = resp.json()
    articles: List[Article] = []
    for item in data.get("articles") or []:
        art = article_from_newsapi(item)
        if art is not None:
            articles.append(art)

    logger.info("Fetched %d articles from %s", len(articles), source.display_name)
    return articles
