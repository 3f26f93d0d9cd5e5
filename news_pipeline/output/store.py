from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import requests

from ..utils.logging import get_logger

logger = get_logger("np.output.store")


class StoreError(Exception):
    """Raised when a store lookup or insert fails."""


class ArticleStore(ABC):
    """Minimal row store used by the persister."""

    @abstractmethod
    def exists(self, column: str, value: Any) -> bool:
        """Return True if a row with ``column == value`` exists."""

    @abstractmethod
    def insert(self, row: Dict[str, Any]) -> None:
        """Insert one row; raise StoreError on failure."""


class SupabaseStore(ArticleStore):
    """Supabase table accessed through its PostgREST endpoint with ``requests``."""

    def __init__(
        self,
        *,
        url: Optional[str],
        key: Optional[str],
        table: str = "news_cache",
        timeout: float = 30.0,
    ) -> None:
        if not url or not key:
            raise StoreError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY are required")
        self.base_url = url.rstrip("/")
        self.key = key
        self.table = table
        self.timeout = timeout
        self._session = requests.Session()
        self._session.headers.update(
            {
                "apikey": key,
                "Authorization": f"Bearer {key}",
                "Content-Type": "application/json",
            }
        )

    @property
    def table_url(self) -> str:
        return f"{self.base_url}/rest/v1/{self.table}"

    def exists(self, column: str, value: Any) -> bool:
        params = {"select": "id", column: f"eq.{value}", "limit": 1}
        try:
            resp = self._session.get(self.table_url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            raise StoreError(f"Lookup in {self.table} failed: {exc}") from exc
        if not resp.ok:
            raise StoreError(f"Lookup in {self.table} failed ({resp.status_code}): {resp.text[:200]}")
        return bool(resp.json())

    def insert(self, row: Dict[str, Any]) -> None:
        headers = {"Prefer": "return=minimal"}
        try:
            resp = self._session.post(self.table_url, json=row, headers=headers, timeout=self.timeout)
        except requests.RequestException as exc:
            raise StoreError(f"Insert into {self.table} failed: {exc}") from exc
        if not resp.ok:
            raise StoreError(f"Insert into {self.table} failed ({resp.status_code}): {resp.text[:200]}")


class InMemoryStore(ArticleStore):
    """Process-local store used for dry runs and tests.

    Enforces a unique ``url`` like the hosted table does.
    """

    def __init__(self) -> None:
        self.rows: List[Dict[str, Any]] = []
        self._lock = threading.Lock()

    def exists(self, column: str, value: Any) -> bool:
        with self._lock:
            return any(row.get(column) == value for row in self.rows)

    def insert(self, row: Dict[str, Any]) -> None:
        with self._lock:
            if any(existing.get("url") == row.get("url") for existing in self.rows):
                raise StoreError(f"duplicate key value violates unique constraint: url={row.get('url')}")
            self.rows.append(dict(row))
        logger.debug("[DRY-RUN] Stored article: %s", row.get("title"))
