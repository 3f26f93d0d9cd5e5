from __future__ import annotations

import os
from typing import Optional

from .base import DEFAULT_MAX_TOKENS, Summarizer, post_json
from .parsing import parse_message

ANTHROPIC_URL = "https://api.anthropic.com/v1/messages"
ANTHROPIC_VERSION = "2023-06-01"


class AnthropicSummarizer(Summarizer):
    """Messages API client for Anthropic.

    Environment:
      - ANTHROPIC_API_KEY (required)
      - ANTHROPIC_MODEL (default: claude-3-sonnet-20240229)
    """

    name = "anthropic"

    def __init__(self, api_key: Optional[str] = None, *, model: Optional[str] = None, timeout: float = 30.0) -> None:
        self.api_key = api_key or os.environ.get("ANTHROPIC_API_KEY")
        if not self.api_key:
            raise RuntimeError("ANTHROPIC_API_KEY is required for the Anthropic summarizer")
        self.model = model or os.environ.get("ANTHROPIC_MODEL", "claude-3-sonnet-20240229")
        self.timeout = timeout

    def summarize(self, prompt: str) -> str:
        payload = {
            "model": self.model,
            "max_tokens": DEFAULT_MAX_TOKENS,
            "system": "You write short, factual news summaries.",
            "messages": [{"role": "user", "content": prompt}],
        }
        headers = {
            "x-api-key": self.api_key,
            "anthropic-version": ANTHROPIC_VERSION,
        }
        data = post_json(ANTHROPIC_URL, payload=payload, headers=headers, timeout=self.timeout)
        return parse_message(data)
