from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional

import feedparser
import requests

from ..models import Article, Source
from ..processors.classify import extract_category, extract_tags
from ..processors.normalize import clean_html_to_text
from ..utils.logging import get_logger

logger = get_logger("np.fetchers.rss")

_DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/127.0.0.0 Safari/537.36"
    )
}


def _parse_datetime(entry: dict) -> Optional[str]:
    # feedparser may provide 'published_parsed' or 'updated_parsed'
    for key in ("published_parsed", "updated_parsed"):
        tm = entry.get(key)
        if tm:
            try:
                return datetime(*tm[:6], tzinfo=timezone.utc).isoformat()
            except (TypeError, ValueError):
                return None
    return None


def _entry_image(entry: dict) -> Optional[str]:
    for media in entry.get("media_content") or entry.get("media_thumbnail") or []:
        if media.get("url"):
            return media["url"]
    return None


def fetch_rss_articles(source: Source, *, page_size: int = 10, timeout: float = 30.0) -> List[Article]:
    """Fetch and parse an RSS/Atom feed into Articles.

    The request is made with ``requests`` for consistent timeouts and headers,
    then parsed by ``feedparser``. Entry HTML is reduced to plain text. Like
    NewsAPI sources, at most ``page_size`` entries are kept and entries
    without a title or body are dropped.
    """
    if source.type != "rss" or not source.url:
        raise ValueError("fetch_rss_articles requires a source of type 'rss' with a url")

    logger.debug("Fetching RSS from %s", source.url)
    resp = requests.get(source.url, headers=_DEFAULT_HEADERS, timeout=timeout)
    if not resp.ok:
        logger.warning("Failed to fetch from %s: HTTP %s", source.display_name, resp.status_code)
        return []
    parsed = feedparser.parse(resp.content)

    if getattr(parsed, "bozo", False):
        # feedparser sets bozo on feed errors but may still parse entries
        logger.debug("Feed 'bozo' flagged for %s: %s", source.url, getattr(parsed, "bozo_exception", None))

    publisher = source.label or parsed.feed.get("title") or source.name
    articles: List[Article] = []
    for entry in (parsed.entries or [])[:page_size]:
        title = clean_html_to_text(entry.get("title"))
        contents = entry.get("content") or []
        body_html = contents[0].get("value") if contents else entry.get("summary")
        content = clean_html_to_text(body_html)
        if not title or not content:
            continue
        articles.append(
            Article(
                title=title,
                content=content,
                summary=clean_html_to_text(entry.get("summary")),
                source=publisher,
                url=entry.get("link") or "",
                image_url=_entry_image(entry),
                published_at=_parse_datetime(entry),
                category=extract_category(title, content),
                tags=extract_tags(title, content),
            )
        )

    logger.info("Fetched %d RSS entries from %s", len(articles), source.display_name)
    return articles
