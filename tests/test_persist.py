import pytest

from datetime import datetime, timezone

from news_pipeline.output import InMemoryStore, StoreError, build_record, persist_articles
from news_pipeline.output.store import ArticleStore
from news_pipeline.processors.dedup import article_fingerprint

from conftest import make_article


def _articles(n):
    return [make_article(title=f"Story {i}", url=f"https://example.com/{i}", summary="Sum.") for i in range(n)]


def test_second_run_stores_nothing():
    store = InMemoryStore()
    arts = _articles(3)

    assert persist_articles(arts, store=store) == 3
    assert persist_articles(arts, store=store) == 0
    assert len(store.rows) == 3


def test_existing_url_is_not_updated():
    store = InMemoryStore()
    persist_articles([make_article(url="https://example.com/x", summary="first")], store=store)
    persist_articles([make_article(title="Changed", url="https://example.com/x", summary="second")], store=store)

    assert [row["summary"] for row in store.rows] == ["first"]


def test_record_fields():
    art = make_article(
        title="Fashion week",
        content="word " * 401,
        summary="An AI summary.",
        image_url="https://example.com/i.jpg",
        published_at="2024-05-01T10:00:00Z",
        category="General",
        tags=["local"],
        city="Paris",
        ai_generated=True,
    )
    when = datetime(2024, 5, 2, 8, 30, tzinfo=timezone.utc)

    row = build_record(art, processed_at=when)

    assert row["article_id"] == article_fingerprint(art)
    assert row["url"] == art.url
    assert row["city"] == "Paris"
    assert row["country"] is None
    assert row["tags"] == ["local"]
    assert row["metadata"] == {
        "processed_at": "2024-05-02T08:30:00+00:00",
        "ai_generated": True,
        "word_count": 401,
        "reading_time_minutes": 3,
    }


class FlakyStore(ArticleStore):
    def __init__(self, fail_urls):
        self.fail_urls = set(fail_urls)
        self.rows = []

    def exists(self, column, value):
        if value == "https://example.com/lookup-fails":
            raise StoreError("lookup failed")
        return False

    def insert(self, row):
        if row["url"] in self.fail_urls:
            raise StoreError("insert failed")
        self.rows.append(row)


def test_failures_are_skipped_and_not_counted():
    arts = _articles(3) + [make_article(url="https://example.com/lookup-fails")]
    store = FlakyStore(fail_urls={"https://example.com/1"})

    assert persist_articles(arts, store=store) == 2
    assert [row["url"] for row in store.rows] == ["https://example.com/0", "https://example.com/2"]


def test_in_memory_store_rejects_duplicate_url():
    store = InMemoryStore()
    store.insert({"url": "https://example.com/a"})
    with pytest.raises(StoreError):
        store.insert({"url": "https://example.com/a"})
