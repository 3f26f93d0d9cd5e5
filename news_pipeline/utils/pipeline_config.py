from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

from .config_loader import ConfigError


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from exc


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return float(value)
    except ValueError as exc:
        raise ConfigError(f"{name} must be a number, got {value!r}") from exc


@dataclass(slots=True)
class PipelineConfig:
    """Runtime settings for one pipeline invocation, read from the environment."""

    sources_path: str = field(default_factory=lambda: os.getenv("PIPELINE_SOURCES_PATH", "config/sources.yaml"))
    page_size: int = field(default_factory=lambda: _env_int("PIPELINE_PAGE_SIZE", 10))
    fetch_workers: int = field(default_factory=lambda: _env_int("PIPELINE_FETCH_WORKERS", 4))
    enrich_workers: int = field(default_factory=lambda: _env_int("PIPELINE_ENRICH_WORKERS", 4))
    http_timeout: float = field(default_factory=lambda: _env_float("PIPELINE_HTTP_TIMEOUT", 30.0))
    store_table: str = field(default_factory=lambda: os.getenv("PIPELINE_STORE_TABLE", "news_cache"))

    news_api_key: Optional[str] = field(default_factory=lambda: os.getenv("NEWS_API_KEY") or None)
    supabase_url: Optional[str] = field(default_factory=lambda: os.getenv("SUPABASE_URL") or None)
    supabase_key: Optional[str] = field(default_factory=lambda: os.getenv("SUPABASE_SERVICE_ROLE_KEY") or None)

    # Extra attempts against the selected AI provider; 0 means one call per article
    ai_retries: int = field(default_factory=lambda: _env_int("AI_RETRIES", 0))
    ai_backoff: float = field(default_factory=lambda: _env_float("AI_BACKOFF", 1.5))
