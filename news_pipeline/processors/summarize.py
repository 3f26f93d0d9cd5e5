from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from typing import Iterable, List, Optional

from ..models import Article
from ..utils.logging import get_logger
from .ai import Summarizer
from .ai.retry import summarize_with_retry
from .classify import extract_location

logger = get_logger("np.processors.summarize")

PROMPT_CONTENT_CHARS = 1000
FALLBACK_SUMMARY_CHARS = 200


def build_summary_prompt(article: Article) -> str:
    return (
        "Summarize this news article in 2-3 sentences, focusing on the key facts and implications:\n\n"
        f"Title: {article.title}\n"
        f"Content: {article.content[:PROMPT_CONTENT_CHARS]}...\n\n"
        "Provide a concise, factual summary:"
    )


def fallback_summary(content: str) -> str:
    return content[:FALLBACK_SUMMARY_CHARS] + "..."


def summarize_article(
    article: Article,
    *,
    ai: Optional[Summarizer],
    retries: int = 0,
    backoff: float = 1.5,
) -> tuple[str, bool]:
    """Return ``(summary, ai_generated)`` for one article.

    Provider failures of any kind, and a missing provider, fall back to the
    first 200 characters of the content.
    """
    if ai is None:
        return fallback_summary(article.content), False
    try:
        summary = summarize_with_retry(ai, build_summary_prompt(article), retries=retries, backoff=backoff).strip()
    except Exception as exc:  # noqa: BLE001
        logger.warning("AI summarization failed for '%s': %s", article.title, exc)
        return fallback_summary(article.content), False
    if not summary:
        logger.warning("AI returned an empty summary for '%s'", article.title)
        return fallback_summary(article.content), False
    return summary, True


def enrich_article(article: Article, *, ai: Optional[Summarizer], retries: int = 0, backoff: float = 1.5) -> Article:
    """Return a copy of ``article`` with summary and location applied.

    Any unexpected error leaves the article unchanged rather than dropping it.
    """
    try:
        summary, ai_generated = summarize_article(article, ai=ai, retries=retries, backoff=backoff)
        city, country = extract_location(article.title, article.content)
        return replace(article, summary=summary, city=city, country=country, ai_generated=ai_generated)
    except Exception as exc:  # noqa: BLE001
        logger.warning("Enrichment failed for '%s': %s; keeping original", article.title, exc)
        return article


def enrich_articles(
    articles: Iterable[Article],
    *,
    ai: Optional[Summarizer],
    max_workers: int = 4,
    retries: int = 0,
    backoff: float = 1.5,
) -> List[Article]:
    """Enrich every article, preserving input order and length.

    With ``max_workers`` above 1 the provider calls run on a thread pool;
    results are still returned in input order.
    """
    items = list(articles)
    if not items:
        return []

    def _enrich(art: Article) -> Article:
        return enrich_article(art, ai=ai, retries=retries, backoff=backoff)

    if max_workers <= 1 or len(items) == 1:
        return [_enrich(a) for a in items]

    workers = min(max_workers, len(items))
    logger.debug("Enriching %d articles (workers=%d)", len(items), workers)
    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(_enrich, items))
