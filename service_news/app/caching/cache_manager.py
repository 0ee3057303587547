"""
News proxy cache manager and per-endpoint cache keys.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, TYPE_CHECKING, Union

from shared.logging import get_logger
from .response_cache import ResponseCache

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from shared.metrics import MetricsCollector


@dataclass(frozen=True)
class TopHeadlinesKey:
    """Key for ``GET /news``."""

    count: int

    cache_type = "top_headlines"

    def render(self) -> str:
        return f"news-{self.count}"


@dataclass(frozen=True)
class FindKey:
    """Key for ``GET /news/find``.

    An absent title or author renders as an empty segment, so a missing
    parameter never collides with the literal text "undefined".
    """

    title: Optional[str] = None
    author: Optional[str] = None

    cache_type = "find"

    def render(self) -> str:
        return f"news-find-{self.title or ''}-{self.author or ''}"


@dataclass(frozen=True)
class SearchKey:
    """Key for ``GET /news/search``."""

    keyword: str

    cache_type = "search"

    def render(self) -> str:
        return f"news-search-{self.keyword}"


CacheKey = Union[TopHeadlinesKey, FindKey, SearchKey]


class CacheManager:
    """Typed access to the response cache for each proxy endpoint."""

    def __init__(self, cache: ResponseCache, *, metrics: Optional["MetricsCollector"] = None):
        self.cache = cache
        self.metrics = metrics
        self.logger = get_logger("news.cache_manager")

    async def get_top_headlines(self, count: int) -> Optional[List[Dict[str, Any]]]:
        """Get cached reshaped headlines."""
        return await self._get(TopHeadlinesKey(count))

    async def set_top_headlines(self, count: int, articles: List[Dict[str, Any]]) -> None:
        """Cache reshaped headlines."""
        await self._set(TopHeadlinesKey(count), articles)

    async def get_found_articles(self, title: Optional[str], author: Optional[str]) -> Optional[List[Dict[str, Any]]]:
        """Get cached raw articles for a title/author lookup."""
        return await self._get(FindKey(title, author))

    async def set_found_articles(
        self,
        title: Optional[str],
        author: Optional[str],
        articles: List[Dict[str, Any]]
    ) -> None:
        """Cache raw articles for a title/author lookup."""
        await self._set(FindKey(title, author), articles)

    async def get_search_results(self, keyword: str) -> Optional[List[Dict[str, Any]]]:
        """Get cached raw articles for a keyword search."""
        return await self._get(SearchKey(keyword))

    async def set_search_results(self, keyword: str, articles: List[Dict[str, Any]]) -> None:
        """Cache raw articles for a keyword search."""
        await self._set(SearchKey(keyword), articles)

    async def get_cache_stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        stats = self.cache.stats()
        stats["cache_types"] = [
            TopHeadlinesKey.cache_type,
            FindKey.cache_type,
            SearchKey.cache_type,
        ]
        return stats

    async def _get(self, key: CacheKey) -> Optional[Any]:
        rendered = key.render()
        value = self.cache.get(rendered)

        if value is None:
            self.logger.debug("Cache miss", key=rendered)
            self._record("cache_misses_total", key.cache_type)
            return None

        self.logger.debug("Cache hit", key=rendered)
        self._record("cache_hits_total", key.cache_type)
        return value

    async def _set(self, key: CacheKey, value: Any) -> None:
        self.cache.set(key.render(), value)
        if self.metrics:
            self.metrics.set_gauge("cache_entries", len(self.cache))

    def _record(self, metric_name: str, cache_type: str) -> None:
        if self.metrics:
            self.metrics.increment_counter(metric_name, cache_type=cache_type)
