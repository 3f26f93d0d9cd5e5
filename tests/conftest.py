import pytest

from news_pipeline.models import Article

_ENV_KEYS = (
    "NEWS_API_KEY",
    "OPENAI_API_KEY",
    "ANTHROPIC_API_KEY",
    "GOOGLE_API_KEY",
    "OPENAI_MODEL",
    "ANTHROPIC_MODEL",
    "GEMINI_MODEL",
    "AI_RETRIES",
    "AI_BACKOFF",
    "SUPABASE_URL",
    "SUPABASE_SERVICE_ROLE_KEY",
    "PIPELINE_SOURCES_PATH",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


class FakeResponse:
    def __init__(self, status_code=200, payload=None, content=b"", text=""):
        self.status_code = status_code
        self._payload = payload
        self.content = content
        self.text = text

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON body")
        return self._payload

    def raise_for_status(self):
        import requests

        if not self.ok:
            raise requests.HTTPError(f"{self.status_code} Error")


def make_article(title="Sample headline", content="Body text for the sample.", url="https://example.com/a", **kwargs):
    kwargs.setdefault("source", "Example News")
    return Article(title=title, content=content, url=url, **kwargs)
