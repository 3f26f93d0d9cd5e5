import pytest
import requests

from news_pipeline.output.store import StoreError, SupabaseStore

from conftest import FakeResponse


def _store():
    return SupabaseStore(url="https://proj.supabase.co/", key="service-key", table="news_cache", timeout=9)


def test_requires_credentials():
    with pytest.raises(StoreError):
        SupabaseStore(url=None, key="k")
    with pytest.raises(StoreError):
        SupabaseStore(url="https://proj.supabase.co", key="")


def test_session_headers():
    store = _store()
    assert store.table_url == "https://proj.supabase.co/rest/v1/news_cache"
    assert store._session.headers["apikey"] == "service-key"
    assert store._session.headers["Authorization"] == "Bearer service-key"


def test_exists_queries_by_column(monkeypatch):
    store = _store()
    calls = []

    def fake_get(url, params=None, timeout=None):
        calls.append((url, params, timeout))
        return FakeResponse(200, [{"id": 7}])

    monkeypatch.setattr(store._session, "get", fake_get)

    assert store.exists("url", "https://example.com/a") is True
    assert calls == [
        (
            "https://proj.supabase.co/rest/v1/news_cache",
            {"select": "id", "url": "eq.https://example.com/a", "limit": 1},
            9,
        )
    ]


def test_exists_false_on_empty_result(monkeypatch):
    store = _store()
    monkeypatch.setattr(store._session, "get", lambda *a, **k: FakeResponse(200, []))
    assert store.exists("url", "https://example.com/missing") is False


def test_lookup_errors_raise_store_error(monkeypatch):
    store = _store()
    monkeypatch.setattr(store._session, "get", lambda *a, **k: FakeResponse(500, text="oops"))
    with pytest.raises(StoreError):
        store.exists("url", "https://example.com/a")

    def boom(*a, **k):
        raise requests.ConnectionError("down")

    monkeypatch.setattr(store._session, "get", boom)
    with pytest.raises(StoreError):
        store.exists("url", "https://example.com/a")


def test_insert_posts_row(monkeypatch):
    store = _store()
    calls = []

    def fake_post(url, json=None, headers=None, timeout=None):
        calls.append((url, json, headers))
        return FakeResponse(201)

    monkeypatch.setattr(store._session, "post", fake_post)
    store.insert({"url": "https://example.com/a", "title": "A"})

    assert calls == [
        ("https://proj.supabase.co/rest/v1/news_cache", {"url": "https://example.com/a", "title": "A"}, {"Prefer": "return=minimal"})
    ]


def test_insert_conflict_raises_store_error(monkeypatch):
    store = _store()
    monkeypatch.setattr(store._session, "post", lambda *a, **k: FakeResponse(409, text="duplicate key value"))
    with pytest.raises(StoreError, match="409"):
        store.insert({"url": "https://example.com/a"})
