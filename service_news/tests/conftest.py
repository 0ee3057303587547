"""
Shared fixtures for News Proxy tests.
"""

from typing import Any, Dict, List, Optional

import httpx
import pytest

from shared.config import ServiceConfig


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class DummyMetrics:
    """Minimal metrics collector stub."""

    def __init__(self):
        self.counters = []
        self.histograms = []
        self.gauges = []

    def increment_counter(self, metric_name: str, **labels):
        self.counters.append((metric_name, labels))

    def observe_histogram(self, metric_name: str, value: float, **labels):
        self.histograms.append((metric_name, value, labels))

    def set_gauge(self, metric_name: str, value: float, **labels):
        self.gauges.append((metric_name, value, labels))


class UpstreamStub:
    """Stands in for the provider behind an ``httpx.MockTransport``."""

    def __init__(self, articles: Optional[List[Dict[str, Any]]] = None, status_code: int = 200):
        self.articles = articles if articles is not None else []
        self.status_code = status_code
        self.fail_with: Optional[Exception] = None
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with is not None:
            raise self.fail_with
        if self.status_code != 200:
            return httpx.Response(self.status_code, json={"errors": ["quota exceeded"]})
        return httpx.Response(
            200,
            json={"totalArticles": len(self.articles), "articles": self.articles},
        )

    @property
    def calls(self) -> int:
        return len(self.requests)

    def last_params(self) -> Dict[str, str]:
        return dict(self.requests[-1].url.params)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


def make_upstream_article(index: int) -> Dict[str, Any]:
    """Provider record including fields the proxy is expected to drop."""
    return {
        "id": f"article-{index}",
        "title": f"Headline {index}",
        "description": f"Description {index}",
        "content": f"Full content {index}... [1234 chars]",
        "url": f"https://news.example.com/{index}",
        "image": f"https://news.example.com/{index}.jpg",
        "publishedAt": "2024-05-01T12:00:00Z",
        "lang": "en",
        "source": {
            "id": "example",
            "name": "Example News",
            "url": "https://news.example.com",
            "country": "us",
        },
    }


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def dummy_metrics():
    return DummyMetrics()


@pytest.fixture
def config():
    return ServiceConfig(api_key="test-key")


@pytest.fixture
def upstream():
    return UpstreamStub([make_upstream_article(i) for i in range(5)])
