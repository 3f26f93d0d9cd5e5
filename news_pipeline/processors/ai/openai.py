from __future__ import annotations

import os
from typing import Optional

from .base import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE, Summarizer, post_json
from .parsing import parse_chat_completion

OPENAI_URL = "https://api.openai.com/v1/chat/completions"


class OpenAISummarizer(Summarizer):
    """Chat-completions client for OpenAI.

    Environment:
      - OPENAI_API_KEY (required)
      - OPENAI_MODEL (default: gpt-3.5-turbo)
    """

    name = "openai"

    def __init__(self, api_key: Optional[str] = None, *, model: Optional[str] = None, timeout: float = 30.0) -> None:
        self.api_key = api_key or os.environ.get("OPENAI_API_KEY")
        if not self.api_key:
            raise RuntimeError("OPENAI_API_KEY is required for the OpenAI summarizer")
        self.model = model or os.environ.get("OPENAI_MODEL", "gpt-3.5-turbo")
        self.timeout = timeout

    def summarize(self, prompt: str) -> str:
        payload = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": DEFAULT_MAX_TOKENS,
            "temperature": DEFAULT_TEMPERATURE,
        }
        headers = {"Authorization": f"Bearer {self.api_key}"}
        data = post_json(OPENAI_URL, payload=payload, headers=headers, timeout=self.timeout)
        return parse_chat_completion(data)
