"""Processing pipeline: deduplication, keyword classification, enrichment."""

from .dedup import article_fingerprint, deduplicate
from .classify import extract_category, extract_location, extract_tags
from .normalize import clean_html_to_text
from .summarize import enrich_articles, enrich_article, fallback_summary, build_summary_prompt

__all__ = [
    "article_fingerprint",
    "deduplicate",
    "extract_category",
    "extract_location",
    "extract_tags",
    "clean_html_to_text",
    "enrich_articles",
    "enrich_article",
    "fallback_summary",
    "build_summary_prompt",
]
