"""
GNews provider client for the News Proxy service.
"""

import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, TYPE_CHECKING

import httpx

from shared.logging import get_logger
from shared.errors import ExternalServiceError

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from shared.metrics import MetricsCollector


PROVIDER_NAME = "gnews"
DEFAULT_LANGUAGE = "en"


@dataclass(frozen=True)
class ProviderResult:
    """Outcome of a provider call: either articles or the error that occurred."""

    articles: Optional[List[Dict[str, Any]]] = None
    error: Optional[ExternalServiceError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, articles: List[Dict[str, Any]]) -> "ProviderResult":
        return cls(articles=articles)

    @classmethod
    def failure(cls, error: ExternalServiceError) -> "ProviderResult":
        return cls(error=error)


class GNewsClient:
    """Client for the GNews v4 REST API."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        timeout: float = 10.0,
        metrics: Optional["MetricsCollector"] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip('/')
        self._api_key = api_key
        self.timeout = timeout
        self.metrics = metrics
        self._transport = transport
        self.logger = get_logger("news.provider")

    async def top_headlines(self, max_articles: int) -> ProviderResult:
        """Fetch English top headlines, at most ``max_articles`` of them."""
        params = {"lang": DEFAULT_LANGUAGE, "max": max_articles}
        return await self._fetch_articles("top_headlines", "/top-headlines", params)

    async def find_articles(self, title: Optional[str], author: Optional[str]) -> ProviderResult:
        """Look up the single best English match for a title, optionally by author."""
        params: Dict[str, Any] = {"lang": DEFAULT_LANGUAGE, "max": 1, "in": "title"}
        if title:
            params["q"] = title
        if author:
            params["author"] = author
        return await self._fetch_articles("find", "/search", params)

    async def search(self, keyword: str) -> ProviderResult:
        """Search articles by keyword with the provider's default language and size."""
        return await self._fetch_articles("search", "/search", {"q": keyword})

    async def _fetch_articles(self, endpoint: str, path: str, params: Dict[str, Any]) -> ProviderResult:
        """Execute a provider call and fold every failure into the result."""
        url = f"{self.base_url}{path}"
        start = time.perf_counter()

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(url, params={**params, "token": self._api_key})
        except httpx.HTTPError as exc:
            self.logger.error("News provider unreachable", url=url, params=params, error=str(exc))
            return self._failed(endpoint, start, str(exc), {"params": params})

        if response.status_code != 200:
            self.logger.error(
                "News provider request failed",
                url=url,
                params=params,
                status_code=response.status_code,
                response=response.text
            )
            return self._failed(
                endpoint,
                start,
                f"Unexpected status {response.status_code}",
                {"status_code": response.status_code, "body": response.text},
            )

        try:
            articles = response.json()["articles"]
        except (ValueError, KeyError, TypeError) as exc:
            self.logger.error("News provider returned malformed payload", url=url, params=params, error=str(exc))
            return self._failed(endpoint, start, "Malformed response body", {"params": params})

        if not isinstance(articles, list):
            self.logger.error("News provider articles is not a list", url=url, params=params)
            return self._failed(endpoint, start, "Malformed response body", {"params": params})

        self.logger.debug("News provider articles retrieved", url=url, params=params, count=len(articles))
        self._record(endpoint, "success", start)
        return ProviderResult.success(articles)

    def _failed(self, endpoint: str, start: float, message: str, details: Dict[str, Any]) -> ProviderResult:
        self._record(endpoint, "error", start)
        return ProviderResult.failure(
            ExternalServiceError(service=PROVIDER_NAME, message=message, details=details)
        )

    def _record(self, endpoint: str, outcome: str, start: float) -> None:
        if not self.metrics:
            return
        self.metrics.increment_counter("upstream_requests_total", endpoint=endpoint, outcome=outcome)
        self.metrics.observe_histogram(
            "upstream_request_duration_seconds",
            time.perf_counter() - start,
            endpoint=endpoint,
        )
