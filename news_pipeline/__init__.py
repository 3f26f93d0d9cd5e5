"""Top-level package for the news ingestion pipeline.

This package fetches articles from configured news sources, removes
duplicates, enriches them with AI summaries and keyword-derived metadata,
and stores unique results in the hosted database.
"""

__all__ = []
