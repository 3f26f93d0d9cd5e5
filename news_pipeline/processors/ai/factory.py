from __future__ import annotations

import os
from typing import Mapping, Optional

from .base import Summarizer
from ...utils.logging import get_logger

logger = get_logger("np.ai.factory")

# Preference order when several credentials are configured
PROVIDER_ENV_KEYS = (
    ("openai", "OPENAI_API_KEY"),
    ("anthropic", "ANTHROPIC_API_KEY"),
    ("gemini", "GOOGLE_API_KEY"),
)


def create_summarizer(
    *,
    env: Optional[Mapping[str, str]] = None,
    timeout: float = 30.0,
) -> Optional[Summarizer]:
    """Create the summarizer for the first provider whose credential is set.

    Order: OpenAI, then Anthropic, then Gemini. Returns None when no
    credential is configured; callers then use the excerpt fallback.
    """
    source = os.environ if env is None else env

    for provider, env_key in PROVIDER_ENV_KEYS:
        api_key = source.get(env_key)
        if not api_key:
            continue
        logger.info("Using %s for article summaries", provider)
        if provider == "openai":
            from .openai import OpenAISummarizer  # lazy import

            return OpenAISummarizer(api_key, model=source.get("OPENAI_MODEL"), timeout=timeout)
        if provider == "anthropic":
            from .anthropic import AnthropicSummarizer  # lazy import

            return AnthropicSummarizer(api_key, model=source.get("ANTHROPIC_MODEL"), timeout=timeout)
        from .gemini import GeminiSummarizer  # lazy import

        return GeminiSummarizer(api_key, model=source.get("GEMINI_MODEL"), timeout=timeout)

    logger.warning("No AI provider credential configured; summaries will use content excerpts")
    return None
