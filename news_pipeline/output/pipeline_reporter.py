from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@dataclass(slots=True)
class PipelineReport:
    articles_processed: int
    articles_unique: int
    articles_summarized: int
    articles_stored: int
    fetch_ms: float = 0.0
    enrich_ms: float = 0.0
    persist_ms: float = 0.0
    timestamp: str = field(default_factory=utc_timestamp)

    @property
    def message(self) -> str:
        return f"Processed {self.articles_processed} articles, stored {self.articles_stored} unique articles"

    def to_response(self) -> Dict[str, Any]:
        return {
            "success": True,
            "message": self.message,
            "articles_processed": self.articles_processed,
            "articles_stored": self.articles_stored,
            "timestamp": self.timestamp,
        }


def failure_response(error: BaseException | str) -> Dict[str, Any]:
    return {
        "success": False,
        "error": str(error),
        "timestamp": utc_timestamp(),
    }
