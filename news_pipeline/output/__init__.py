"""Output layer: article store clients, persistence and run reporting."""

from .persist import build_record, persist_articles
from .pipeline_reporter import PipelineReport, failure_response
from .store import ArticleStore, InMemoryStore, StoreError, SupabaseStore

__all__ = [
    "build_record",
    "persist_articles",
    "PipelineReport",
    "failure_response",
    "ArticleStore",
    "InMemoryStore",
    "StoreError",
    "SupabaseStore",
]
