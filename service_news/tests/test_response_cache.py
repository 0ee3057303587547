"""
Unit tests for the in-process response cache.
"""

import asyncio
from unittest.mock import MagicMock

import pytest

from service_news.app.caching.response_cache import ResponseCache


class TestResponseCache:
    """Test cases for ResponseCache."""

    @pytest.fixture
    def cache(self, clock):
        """Create ResponseCache driven by a fake clock."""
        return ResponseCache(ttl_seconds=600, check_period_seconds=120, timer=clock)

    def test_get_missing_key_returns_none(self, cache):
        assert cache.get("news-10") is None

    def test_set_then_get(self, cache):
        cache.set("news-10", [{"title": "a"}])

        assert cache.get("news-10") == [{"title": "a"}]

    def test_set_overwrites_existing_entry(self, cache):
        cache.set("news-10", [{"title": "a"}])
        cache.set("news-10", [{"title": "b"}])

        assert cache.get("news-10") == [{"title": "b"}]
        assert len(cache) == 1

    def test_empty_list_is_a_hit(self, cache):
        """A cached empty result must not be mistaken for absence."""
        cache.set("news-search-nothing", [])

        assert cache.get("news-search-nothing") == []
        assert cache.stats()["hits"] == 1

    def test_entry_valid_until_ttl(self, cache, clock):
        cache.set("news-5", ["x"])
        clock.advance(599)

        assert cache.get("news-5") == ["x"]

    def test_entry_expires_after_ttl(self, cache, clock):
        cache.set("news-5", ["x"])
        clock.advance(601)

        assert cache.get("news-5") is None

    def test_returned_values_are_copies(self, cache):
        original = [{"title": "a"}]
        cache.set("news-1", original)
        original[0]["title"] = "mutated before read"

        first = cache.get("news-1")
        first[0]["title"] = "mutated after read"

        assert cache.get("news-1") == [{"title": "a"}]

    def test_sweep_removes_only_expired_entries(self, cache, clock):
        cache.set("news-1", ["old"])
        clock.advance(300)
        cache.set("news-2", ["new"])
        clock.advance(301)

        removed = cache.sweep()

        assert removed == 1
        assert len(cache) == 1
        assert cache.get("news-2") == ["new"]

    def test_sweep_with_nothing_expired(self, cache):
        cache.set("news-1", ["x"])

        assert cache.sweep() == 0

    def test_stats(self, cache):
        cache.set("news-1", ["x"])
        cache.get("news-1")
        cache.get("news-2")

        stats = cache.stats()

        assert stats["entries"] == 1
        assert stats["hits"] == 1
        assert stats["misses"] == 1
        assert stats["ttl_seconds"] == 600
        assert stats["check_period_seconds"] == 120

    def test_max_entries_evicts(self, clock):
        cache = ResponseCache(max_entries=2, timer=clock)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.set("c", 3)

        assert len(cache) == 2
        assert cache.get("c") == 3

    @pytest.mark.asyncio
    async def test_start_and_stop_sweeper(self, cache):
        await cache.start()
        assert cache.running is True
        assert cache.sweep_task is not None

        await cache.stop()
        assert cache.running is False
        assert cache.sweep_task is None

    @pytest.mark.asyncio
    async def test_sweeper_runs_periodically(self, clock):
        cache = ResponseCache(ttl_seconds=10, check_period_seconds=0, timer=clock)
        cache.set("news-1", ["x"])
        clock.advance(11)
        cache.sweep = MagicMock(wraps=cache.sweep)

        await cache.start()
        await asyncio.sleep(0.01)
        await cache.stop()

        assert cache.sweep.call_count >= 1
        assert cache.stats()["entries"] == 0
