"""Content fetching layer for NewsAPI and RSS sources."""

from .newsapi import fetch_newsapi_articles
from .rss import fetch_rss_articles
from .sources import fetch_all_sources, fetch_source

__all__ = ["fetch_newsapi_articles", "fetch_rss_articles", "fetch_all_sources", "fetch_source"]
