from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional

from ..models import Article
from ..processors.dedup import article_fingerprint
from ..utils.logging import get_logger
from .store import ArticleStore

logger = get_logger("np.output.persist")

WORDS_PER_MINUTE = 200


def _reading_metrics(content: str) -> tuple[int, int]:
    word_count = len(content.split())
    return word_count, math.ceil(word_count / WORDS_PER_MINUTE)


def build_record(article: Article, *, processed_at: Optional[datetime] = None) -> Dict[str, Any]:
    """Map an enriched article to the stored row."""
    processed_at = processed_at or datetime.now(timezone.utc)
    word_count, reading_minutes = _reading_metrics(article.content)
    return {
        "article_id": article_fingerprint(article),
        "title": article.title,
        "content": article.content,
        "summary": article.summary,
        "source": article.source,
        "url": article.url,
        "image_url": article.image_url,
        "published_at": article.published_at,
        "city": article.city,
        "country": article.country,
        "category": article.category,
        "tags": list(article.tags),
        "metadata": {
            "processed_at": processed_at.isoformat(),
            "ai_generated": article.ai_generated,
            "word_count": word_count,
            "reading_time_minutes": reading_minutes,
        },
    }


def persist_articles(articles: Iterable[Article], *, store: ArticleStore) -> int:
    """Insert articles whose url is not yet stored; return the number inserted.

    Existing urls are skipped without updating. A failed lookup or insert is
    logged and the batch continues.
    """
    stored = 0
    skipped = 0
    for art in articles:
        try:
            if store.exists("url", art.url):
                skipped += 1
                continue
            store.insert(build_record(art))
        except Exception as exc:  # noqa: BLE001
            logger.warning("Error storing article '%s': %s", art.title, exc)
            continue
        stored += 1

    logger.info("Persisted %d new article(s); %d already stored", stored, skipped)
    return stored
