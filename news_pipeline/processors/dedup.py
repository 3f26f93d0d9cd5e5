from __future__ import annotations

import base64
import re
from dataclasses import dataclass
from typing import Iterable, List

from ..models import Article

FINGERPRINT_CONTENT_CHARS = 100

_non_alnum_re = re.compile(r"[^a-zA-Z0-9]")


def article_fingerprint(article: Article) -> str:
    """Return the deterministic dedup key for an article.

    The key is the base64 encoding of ``title + content[:100]`` with every
    non-alphanumeric character removed. It is a textual fingerprint rather
    than a digest, so articles whose opening text differs even slightly are
    treated as distinct.

    Text is encoded as UTF-8 before base64. For characters outside ASCII
    (e.g. "Zürich") the key therefore differs from a Latin-1 based encoding
    such as browser ``btoa``, and rows keyed that way will not match.
    """
    raw = (article.title or "") + (article.content or "")[:FINGERPRINT_CONTENT_CHARS]
    encoded = base64.b64encode(raw.encode("utf-8")).decode("ascii")
    return _non_alnum_re.sub("", encoded)


@dataclass(slots=True)
class DedupStats:
    total: int
    kept: int
    duplicates: int


def deduplicate(articles: Iterable[Article], *, return_stats: bool = False):
    """Remove articles whose fingerprint was already seen, keeping the first.

    Input order is preserved. Returns a list of unique articles by default; if
    ``return_stats`` is True, returns a tuple of (unique_articles, DedupStats).
    """
    seen: set[str] = set()
    unique: List[Article] = []
    total = 0
    for art in articles:
        total += 1
        key = article_fingerprint(art)
        if key in seen:
            continue
        seen.add(key)
        unique.append(art)
    stats = DedupStats(total=total, kept=len(unique), duplicates=total - len(unique))
    return (unique, stats) if return_stats else unique
