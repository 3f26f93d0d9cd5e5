from __future__ import annotations

import time
from typing import Callable, TypeVar

from .base import Summarizer
from ...utils.logging import get_logger

T = TypeVar("T")
logger = get_logger("np.ai.retry")


def with_retries(fn: Callable[[], T], *, retries: int = 0, backoff: float = 1.5) -> T:
    """Call ``fn`` up to ``retries + 1`` times, sleeping ``backoff ** attempt`` between tries."""
    last_exc: BaseException | None = None
    for attempt in range(retries + 1):
        try:
            return fn()
        except Exception as exc:  # noqa: BLE001
            last_exc = exc
            if attempt >= retries:
                break
            sleep_s = backoff ** attempt
            logger.warning("AI call failed (attempt %s/%s): %s; retrying in %.1fs", attempt + 1, retries + 1, exc, sleep_s)
            time.sleep(sleep_s)
    assert last_exc is not None
    raise last_exc


def summarize_with_retry(client: Summarizer, prompt: str, *, retries: int = 0, backoff: float = 1.5) -> str:
    return with_retries(lambda: client.summarize(prompt), retries=retries, backoff=backoff)
