from __future__ import annotations

import time
from typing import Any, Dict, List, Optional, Tuple

from .fetchers import fetch_all_sources
from .models import Article, Source
from .output import (
    ArticleStore,
    InMemoryStore,
    PipelineReport,
    SupabaseStore,
    failure_response,
    persist_articles,
)
from .processors import deduplicate, enrich_articles
from .processors.ai import Summarizer, create_summarizer
from .utils.config_loader import ConfigError, load_sources_config
from .utils.logging import get_logger
from .utils.pipeline_config import PipelineConfig

logger = get_logger("np.orchestrator")

# Marker for "pick the summarizer from configured credentials"
_AUTO: Any = object()


class NewsPipeline:
    """Fetch -> deduplicate -> enrich -> persist, once per invocation.

    Collaborators can be injected; anything left out is built from the
    environment when ``run`` starts.
    """

    def __init__(
        self,
        *,
        config: Optional[PipelineConfig] = None,
        sources: Optional[List[Source]] = None,
        summarizer: Optional[Summarizer] = _AUTO,
        store: Optional[ArticleStore] = None,
        dry_run: bool = False,
    ) -> None:
        self._config = config
        self.sources = sources
        self.summarizer = summarizer
        self.store = store
        self.dry_run = dry_run

    @property
    def config(self) -> PipelineConfig:
        # Read from the environment on first use so bad values surface inside run()
        if self._config is None:
            self._config = PipelineConfig()
        return self._config

    def _resolve_store(self) -> ArticleStore:
        if self.store is None:
            if self.dry_run:
                self.store = InMemoryStore()
            else:
                self.store = SupabaseStore(
                    url=self.config.supabase_url,
                    key=self.config.supabase_key,
                    table=self.config.store_table,
                    timeout=self.config.http_timeout,
                )
        return self.store

    def _resolve_summarizer(self) -> Optional[Summarizer]:
        if self.summarizer is _AUTO:
            self.summarizer = create_summarizer(timeout=self.config.http_timeout)
        return self.summarizer

    def fetch(self) -> List[Article]:
        api_key = self.config.news_api_key
        if not api_key:
            raise ConfigError("NEWS_API_KEY not found")
        sources = self.sources if self.sources is not None else load_sources_config(self.config.sources_path)
        return fetch_all_sources(
            sources,
            api_key=api_key,
            page_size=self.config.page_size,
            timeout=self.config.http_timeout,
            max_workers=self.config.fetch_workers,
        )

    def run(self) -> PipelineReport:
        store = self._resolve_store()
        summarizer = self._resolve_summarizer()

        t0 = time.perf_counter()
        fetched = self.fetch()
        fetch_ms = (time.perf_counter() - t0) * 1000

        unique, stats = deduplicate(fetched, return_stats=True)
        logger.info("Deduplicated %d -> %d article(s)", stats.total, stats.kept)

        t0 = time.perf_counter()
        enriched = enrich_articles(
            unique,
            ai=summarizer,
            max_workers=self.config.enrich_workers,
            retries=self.config.ai_retries,
            backoff=self.config.ai_backoff,
        )
        enrich_ms = (time.perf_counter() - t0) * 1000

        t0 = time.perf_counter()
        stored = persist_articles(enriched, store=store)
        persist_ms = (time.perf_counter() - t0) * 1000

        report = PipelineReport(
            articles_processed=len(fetched),
            articles_unique=len(unique),
            articles_summarized=sum(1 for a in enriched if a.ai_generated),
            articles_stored=stored,
            fetch_ms=fetch_ms,
            enrich_ms=enrich_ms,
            persist_ms=persist_ms,
        )
        logger.info(
            "Pipeline finished: fetched=%s, unique=%s, ai_summaries=%s, stored=%s, fetch_ms=%.1f, enrich_ms=%.1f, persist_ms=%.1f",
            report.articles_processed,
            report.articles_unique,
            report.articles_summarized,
            report.articles_stored,
            fetch_ms,
            enrich_ms,
            persist_ms,
        )
        return report

    def run_safely(self) -> Tuple[int, Dict[str, Any]]:
        """Run the pipeline and return ``(http_status, response_body)``."""
        try:
            report = self.run()
        except Exception as exc:  # noqa: BLE001 - top-level run guard
            logger.exception("News pipeline error: %s", exc)
            return 500, failure_response(exc)
        return 200, report.to_response()
