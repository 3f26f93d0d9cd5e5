from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import requests

DEFAULT_MAX_TOKENS = 150
DEFAULT_TEMPERATURE = 0.7


class ProviderError(Exception):
    """Raised when an AI provider call fails or returns an unusable response."""


class Summarizer(ABC):
    """Abstract text-completion client used to summarize articles."""

    name: str = "summarizer"

    @abstractmethod
    def summarize(self, prompt: str) -> str:
        """Return the provider's completion text for ``prompt``.

        Raises ``ProviderError`` on transport, HTTP or response-shape errors.
        """


def post_json(
    url: str,
    *,
    payload: Dict[str, Any],
    headers: Optional[Dict[str, str]] = None,
    timeout: float = 30.0,
) -> Dict[str, Any]:
    """POST ``payload`` and return the decoded JSON body, raising ProviderError.

    Error messages carry the endpoint without its query string, which may
    hold an API key.
    """
    endpoint = url.split("?", 1)[0]
    try:
        resp = requests.post(url, json=payload, headers=headers, timeout=timeout)
    except requests.RequestException as exc:
        raise ProviderError(f"Request to {endpoint} failed: {exc.__class__.__name__}") from exc
    if not resp.ok:
        raise ProviderError(f"{endpoint} returned HTTP {resp.status_code}")
    try:
        return resp.json()
    except ValueError as exc:
        raise ProviderError(f"Invalid JSON from {endpoint}") from exc
