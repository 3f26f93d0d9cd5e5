import requests

from news_pipeline.fetchers import newsapi, rss
from news_pipeline.fetchers.sources import fetch_all_sources
from news_pipeline.models import Source

from conftest import FakeResponse


def _newsapi_item(title, content="Body text.", url=None, source="BBC News", **extra):
    item = {
        "title": title,
        "description": f"{title} description",
        "content": content,
        "url": url or f"https://example.com/{title.lower().replace(' ', '-')}",
        "urlToImage": "https://example.com/img.jpg",
        "publishedAt": "2024-05-01T10:00:00Z",
        "source": {"id": None, "name": source},
    }
    item.update(extra)
    return item


def _fake_get(responses, calls):
    def fake_get(url, params=None, headers=None, timeout=None, **kwargs):
        calls.append((url, dict(params or {}), dict(headers or {}), timeout))
        result = responses[params["sources"]]
        if isinstance(result, Exception):
            raise result
        return result

    return fake_get


def test_newsapi_request_and_mapping(monkeypatch):
    calls = []
    payload = {"articles": [_newsapi_item("New AI chip", content="Breaking news from London.")]}
    monkeypatch.setattr(newsapi.requests, "get", _fake_get({"bbc-news": FakeResponse(200, payload)}, calls))

    arts = newsapi.fetch_newsapi_articles(Source(name="bbc-news"), api_key="k", timeout=5)

    assert calls == [(newsapi.NEWSAPI_URL, {"sources": "bbc-news", "pageSize": 10}, {"X-Api-Key": "k"}, 5)]
    assert len(arts) == 1
    art = arts[0]
    assert art.title == "New AI chip"
    assert art.summary == "New AI chip description"
    assert art.source == "BBC News"
    assert art.image_url == "https://example.com/img.jpg"
    assert art.published_at == "2024-05-01T10:00:00Z"
    assert art.category == "Technology"
    assert art.tags == ["breaking"]
    assert art.city is None


def test_newsapi_filters_entries_without_title_or_content(monkeypatch):
    payload = {
        "articles": [
            _newsapi_item("Kept"),
            _newsapi_item("No body", content=None),
            _newsapi_item("", content="Orphan body"),
        ]
    }
    monkeypatch.setattr(newsapi.requests, "get", _fake_get({"cnn": FakeResponse(200, payload)}, []))

    arts = newsapi.fetch_newsapi_articles(Source(name="cnn"), api_key="k")

    assert [a.title for a in arts] == ["Kept"]


def test_failed_and_erroring_sources_are_skipped(monkeypatch):
    responses = {
        "bbc-news": FakeResponse(200, {"articles": [_newsapi_item("First")]}),
        "cnn": FakeResponse(401, {"status": "error"}),
        "reuters": requests.ConnectionError("boom"),
        "wired": FakeResponse(200, {"articles": [_newsapi_item("Second"), _newsapi_item("Third")]}),
    }
    calls = []
    monkeypatch.setattr(newsapi.requests, "get", _fake_get(responses, calls))
    sources = [Source(name=n) for n in ("bbc-news", "cnn", "reuters", "wired")]

    arts = fetch_all_sources(sources, api_key="k", max_workers=1)

    assert [a.title for a in arts] == ["First", "Second", "Third"]
    assert [c[1]["sources"] for c in calls] == ["bbc-news", "cnn", "reuters", "wired"]


def test_concurrent_fetch_keeps_source_order(monkeypatch):
    responses = {
        f"s{i}": FakeResponse(200, {"articles": [_newsapi_item(f"Story {i}a"), _newsapi_item(f"Story {i}b")]})
        for i in range(6)
    }
    monkeypatch.setattr(newsapi.requests, "get", _fake_get(responses, []))
    sources = [Source(name=f"s{i}") for i in range(6)]

    arts = fetch_all_sources(sources, api_key="k", max_workers=4)

    expected = [f"Story {i}{s}" for i in range(6) for s in "ab"]
    assert [a.title for a in arts] == expected


def test_cross_source_duplicates_are_kept(monkeypatch):
    same = _newsapi_item("Shared story")
    responses = {
        "a": FakeResponse(200, {"articles": [same]}),
        "b": FakeResponse(200, {"articles": [same]}),
    }
    monkeypatch.setattr(newsapi.requests, "get", _fake_get(responses, []))

    arts = fetch_all_sources([Source(name="a"), Source(name="b")], api_key="k", max_workers=1)

    assert len(arts) == 2


def test_no_sources():
    assert fetch_all_sources([], api_key="k") == []


RSS_FEED = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>City Desk</title>
    <link>https://citydesk.example.com</link>
    <description>Local reporting</description>
    <item>
      <title>Council approves budget</title>
      <link>https://citydesk.example.com/budget</link>
      <description>&lt;p&gt;The &lt;b&gt;government&lt;/b&gt; in Berlin approved the plan.&lt;/p&gt;</description>
      <pubDate>Wed, 01 May 2024 10:00:00 GMT</pubDate>
    </item>
    <item>
      <title></title>
      <link>https://citydesk.example.com/untitled</link>
      <description>No headline here.</description>
    </item>
  </channel>
</rss>
"""


def test_rss_source_is_parsed_and_cleaned(monkeypatch):
    def fake_get(url, headers=None, timeout=None, **kwargs):
        assert url == "https://citydesk.example.com/feed"
        return FakeResponse(200, content=RSS_FEED)

    monkeypatch.setattr(rss.requests, "get", fake_get)
    source = Source(name="city-desk", type="rss", url="https://citydesk.example.com/feed")

    arts = fetch_all_sources([source], api_key="unused")

    assert len(arts) == 1
    art = arts[0]
    assert art.title == "Council approves budget"
    assert art.content == "The government in Berlin approved the plan."
    assert art.source == "City Desk"
    assert art.url == "https://citydesk.example.com/budget"
    assert art.published_at == "2024-05-01T10:00:00+00:00"
    assert art.category == "Politics"


def test_rss_http_error_yields_no_articles(monkeypatch):
    monkeypatch.setattr(rss.requests, "get", lambda *a, **k: FakeResponse(503))
    source = Source(name="down", type="rss", url="https://down.example.com/feed")

    assert fetch_all_sources([source], api_key="unused") == []
