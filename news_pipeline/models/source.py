from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

SourceType = Literal["newsapi", "rss"]


@dataclass(slots=True)
class Source:
    """Configuration for a news source.

    ``newsapi`` sources are identified by their NewsAPI source id (``name``);
    ``rss`` sources additionally carry the feed ``url``.
    """

    name: str
    type: SourceType = "newsapi"
    url: Optional[str] = None
    label: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.label or self.name
