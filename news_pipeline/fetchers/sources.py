from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List

from ..models import Article, Source
from ..utils.logging import get_logger
from .newsapi import fetch_newsapi_articles
from .rss import fetch_rss_articles

logger = get_logger("np.fetchers.sources")


def fetch_source(
    source: Source,
    *,
    api_key: str,
    page_size: int = 10,
    timeout: float = 30.0,
) -> List[Article]:
    """Fetch one source, returning an empty list on any failure."""
    try:
        if source.type == "newsapi":
            return fetch_newsapi_articles(source, api_key=api_key, page_size=page_size, timeout=timeout)
        if source.type == "rss":
            return fetch_rss_articles(source, page_size=page_size, timeout=timeout)
        logger.warning("Unknown source type: %s", source.type)
    except Exception as exc:  # noqa: BLE001
        logger.warning("Error fetching from %s: %s", source.display_name, exc)
    return []


def fetch_all_sources(
    sources: Iterable[Source],
    *,
    api_key: str,
    page_size: int = 10,
    timeout: float = 30.0,
    max_workers: int = 4,
) -> List[Article]:
    """Fetch articles from all sources.

    Sources are fetched on a bounded thread pool, but the combined list keeps
    source order and then per-source response order. Cross-source duplicates
    are left in place.
    """
    src_list = list(sources)
    if not src_list:
        return []

    def _fetch(src: Source) -> List[Article]:
        return fetch_source(src, api_key=api_key, page_size=page_size, timeout=timeout)

    workers = max(1, min(max_workers, len(src_list)))
    logger.debug("Fetching %d sources (workers=%d)", len(src_list), workers)
    if workers == 1:
        per_source = [_fetch(s) for s in src_list]
    else:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            per_source = list(executor.map(_fetch, src_list))

    results: List[Article] = [art for batch in per_source for art in batch]
    logger.info("Fetch complete: total=%d from sources=%d", len(results), len(src_list))
    return results
