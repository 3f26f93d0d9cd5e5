from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(slots=True)
class Article:
    title: str
    content: str
    source: str
    url: str
    summary: str = ""
    image_url: Optional[str] = None
    published_at: Optional[str] = None

    # Keyword-derived fields
    category: Optional[str] = None
    tags: List[str] = field(default_factory=list)

    # Enrichment fields
    city: Optional[str] = None
    country: Optional[str] = None
    ai_generated: bool = False
