"""
Unit tests for the News Proxy cache manager and cache keys.
"""

import pytest

from service_news.app.caching.cache_manager import CacheManager, FindKey, SearchKey, TopHeadlinesKey
from service_news.app.caching.response_cache import ResponseCache


class TestCacheKeys:
    """Cache key rendering."""

    def test_top_headlines_key(self):
        assert TopHeadlinesKey(10).render() == "news-10"

    def test_find_key_with_both_parameters(self):
        assert FindKey("Mars landing", "Jane Doe").render() == "news-find-Mars landing-Jane Doe"

    def test_find_key_absent_parameters_render_empty(self):
        assert FindKey().render() == "news-find--"
        assert FindKey(title="Mars").render() == "news-find-Mars-"
        assert FindKey(author="Jane").render() == "news-find--Jane"

    def test_find_key_absent_differs_from_literal_undefined(self):
        assert FindKey().render() != FindKey("undefined", "undefined").render()

    def test_find_key_concatenation_collides(self):
        """Keys are not escaped, so separators inside values can collide."""
        assert FindKey("a-b", "c").render() == FindKey("a", "b-c").render()

    def test_search_key(self):
        assert SearchKey("climate").render() == "news-search-climate"


class TestCacheManager:
    """Test cases for CacheManager."""

    @pytest.fixture
    def cache(self, clock):
        return ResponseCache(timer=clock)

    @pytest.fixture
    def cache_manager(self, cache, dummy_metrics):
        """Create CacheManager instance."""
        return CacheManager(cache, metrics=dummy_metrics)

    @pytest.fixture
    def mock_articles(self):
        return [{"title": "Headline", "url": "https://news.example.com/1"}]

    @pytest.mark.asyncio
    async def test_get_top_headlines_cache_miss(self, cache_manager, dummy_metrics):
        result = await cache_manager.get_top_headlines(10)

        assert result is None
        assert dummy_metrics.counters == [("cache_misses_total", {"cache_type": "top_headlines"})]

    @pytest.mark.asyncio
    async def test_set_and_get_top_headlines(self, cache_manager, cache, dummy_metrics, mock_articles):
        await cache_manager.set_top_headlines(10, mock_articles)
        result = await cache_manager.get_top_headlines(10)

        assert result == mock_articles
        assert cache.get("news-10") == mock_articles
        assert ("cache_hits_total", {"cache_type": "top_headlines"}) in dummy_metrics.counters
        assert dummy_metrics.gauges == [("cache_entries", 1, {})]

    @pytest.mark.asyncio
    async def test_top_headlines_keyed_by_count(self, cache_manager, mock_articles):
        await cache_manager.set_top_headlines(5, mock_articles)

        assert await cache_manager.get_top_headlines(10) is None
        assert await cache_manager.get_top_headlines(5) == mock_articles

    @pytest.mark.asyncio
    async def test_found_articles_round_trip(self, cache_manager, cache, mock_articles):
        await cache_manager.set_found_articles("Mars", None, mock_articles)

        assert cache.get("news-find-Mars-") == mock_articles
        assert await cache_manager.get_found_articles("Mars", None) == mock_articles
        assert await cache_manager.get_found_articles("Mars", "Jane") is None

    @pytest.mark.asyncio
    async def test_search_results_round_trip(self, cache_manager, cache, mock_articles, dummy_metrics):
        await cache_manager.set_search_results("climate", mock_articles)

        assert cache.get("news-search-climate") == mock_articles
        assert await cache_manager.get_search_results("climate") == mock_articles
        assert ("cache_hits_total", {"cache_type": "search"}) in dummy_metrics.counters

    @pytest.mark.asyncio
    async def test_entries_expire(self, cache_manager, clock, mock_articles):
        await cache_manager.set_search_results("climate", mock_articles)
        clock.advance(601)

        assert await cache_manager.get_search_results("climate") is None

    @pytest.mark.asyncio
    async def test_get_cache_stats(self, cache_manager, mock_articles):
        await cache_manager.set_top_headlines(3, mock_articles)

        stats = await cache_manager.get_cache_stats()

        assert stats["entries"] == 1
        assert stats["cache_types"] == ["top_headlines", "find", "search"]

    @pytest.mark.asyncio
    async def test_works_without_metrics(self, cache, mock_articles):
        cache_manager = CacheManager(cache)
        await cache_manager.set_top_headlines(1, mock_articles)

        assert await cache_manager.get_top_headlines(1) == mock_articles
