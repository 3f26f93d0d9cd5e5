from __future__ import annotations

import os
from typing import Optional

from .base import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE, Summarizer, post_json
from .parsing import parse_generate_content


class GeminiSummarizer(Summarizer):
    """HTTP client for Gemini via Google AI Studio API.

    Environment:
      - GOOGLE_API_KEY (required)
      - GEMINI_MODEL (default: gemini-pro)
    """

    name = "gemini"

    def __init__(self, api_key: Optional[str] = None, *, model: Optional[str] = None, timeout: float = 30.0) -> None:
        self.api_key = api_key or os.environ.get("GOOGLE_API_KEY")
        if not self.api_key:
            raise RuntimeError("GOOGLE_API_KEY is required for the Gemini summarizer")
        self.model = model or os.environ.get("GEMINI_MODEL", "gemini-pro")
        self.timeout = timeout

    def summarize(self, prompt: str) -> str:
        url = (
            "https://generativelanguage.googleapis.com/v1beta/models/"
            f"{self.model}:generateContent?key={self.api_key}"
        )
        payload = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "maxOutputTokens": DEFAULT_MAX_TOKENS,
                "temperature": DEFAULT_TEMPERATURE,
            },
        }
        data = post_json(url, payload=payload, timeout=self.timeout)
        return parse_generate_content(data)
