from __future__ import annotations

from pathlib import Path
from typing import Iterable, List
from urllib.parse import urlparse

import yaml

from ..models import Source


class ConfigError(Exception):
    """Raised when configuration is invalid or a required credential is missing."""


REQUIRED_FIELDS = {"name"}
ALLOWED_TYPES = {"newsapi", "rss"}

# NewsAPI source ids queried when no sources file is present
DEFAULT_SOURCES = [
    "bbc-news",
    "cnn",
    "reuters",
    "associated-press",
    "bloomberg",
    "business-insider",
    "techcrunch",
    "the-verge",
    "wired",
]


def default_sources() -> List[Source]:
    return [Source(name=name, type="newsapi") for name in DEFAULT_SOURCES]


def _validate_source_dict(entry: dict) -> None:
    """Validate a single source mapping from YAML.

    Required fields: name (str).
    Optional fields:
      - type: 'newsapi' (default) | 'rss'
      - url: absolute http(s) URL, required for rss sources
      - label: human readable name used in logs
    """
    missing = REQUIRED_FIELDS - set(entry)
    if missing:
        raise ConfigError(f"Missing required fields: {sorted(missing)} in {entry}")

    src_type = entry.get("type") or "newsapi"
    if src_type not in ALLOWED_TYPES:
        raise ConfigError(f"Invalid type '{src_type}'. Must be one of {sorted(ALLOWED_TYPES)}.")

    if src_type == "rss" or entry.get("url"):
        url_str = str(entry.get("url") or "").strip()
        parsed = urlparse(url_str)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ConfigError(f"Invalid URL '{url_str}' for source '{entry['name']}'. Must be absolute http(s) URL.")


def _coerce_source(entry: dict) -> Source:
    url = entry.get("url")
    label = entry.get("label")
    return Source(
        name=str(entry["name"]).strip(),
        type=str(entry.get("type") or "newsapi").strip(),
        url=str(url).strip() if url else None,
        label=str(label).strip() if label else None,
    )


def load_sources_config(path: Path | str) -> List[Source]:
    """Load ``sources.yaml`` into typed ``Source`` instances.

    YAML structure:
      - Top-level mapping
      - Key ``sources``: list of source mappings with fields
          - name: string (required; the NewsAPI source id for newsapi sources)
          - type: 'newsapi' | 'rss' (optional, default 'newsapi')
          - url: http/https URL (required for rss)
          - label: string (optional)

    A missing file yields the built-in default NewsAPI source list.
    Unknown top-level keys are ignored for forward compatibility.
    """
    config_path = Path(path)
    if not config_path.exists():
        return default_sources()

    with config_path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ConfigError("Sources configuration must be a mapping with a 'sources' key")

    sources_raw: Iterable[dict] = (data.get("sources") or [])
    if not isinstance(sources_raw, list):
        raise ConfigError("'sources' must be a list in the YAML configuration")

    sources: List[Source] = []
    for item in sources_raw:
        if not isinstance(item, dict):
            raise ConfigError(f"Each source must be a mapping, got: {type(item)}")
        _validate_source_dict(item)
        sources.append(_coerce_source(item))
    return sources
