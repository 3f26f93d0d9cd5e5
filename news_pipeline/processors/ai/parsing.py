from __future__ import annotations

from typing import Any, Dict

from .base import ProviderError


def _require_text(value: Any, provider: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ProviderError(f"Empty completion from {provider}")
    return value.strip()


def parse_chat_completion(data: Dict[str, Any]) -> str:
    """Extract ``choices[0].message.content`` from an OpenAI-style response."""
    try:
        value = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as exc:
        raise ProviderError(f"Unexpected chat-completion response shape: {exc!r}") from exc
    return _require_text(value, "openai")


def parse_message(data: Dict[str, Any]) -> str:
    """Extract ``content[0].text`` from an Anthropic messages response."""
    try:
        value = data["content"][0]["text"]
    except (KeyError, IndexError, TypeError) as exc:
        raise ProviderError(f"Unexpected messages response shape: {exc!r}") from exc
    return _require_text(value, "anthropic")


def parse_generate_content(data: Dict[str, Any]) -> str:
    """Extract ``candidates[0].content.parts[0].text`` from a Gemini response."""
    try:
        value = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as exc:
        raise ProviderError(f"Unexpected generateContent response shape: {exc!r}") from exc
    return _require_text(value, "gemini")
