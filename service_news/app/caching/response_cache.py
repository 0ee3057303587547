"""
In-process TTL cache for upstream responses.
"""

import asyncio
import copy
import time
from typing import Any, Callable, Dict, Optional

from cachetools import TTLCache

from shared.logging import get_logger


DEFAULT_TTL_SECONDS = 600
DEFAULT_CHECK_PERIOD_SECONDS = 120
DEFAULT_MAX_ENTRIES = 10000


class ResponseCache:
    """TTL cache with a periodic background sweep.

    Expired entries are invisible to ``get`` as soon as their TTL elapses;
    the sweep only reclaims their memory. Values are deep-copied in and out
    so callers never share mutable state with the cache.
    """

    def __init__(
        self,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
        check_period_seconds: int = DEFAULT_CHECK_PERIOD_SECONDS,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        timer: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self.check_period_seconds = check_period_seconds
        self.max_entries = max_entries
        self.logger = get_logger("news.cache")

        self._cache: TTLCache = TTLCache(maxsize=max_entries, ttl=ttl_seconds, timer=timer)
        self._hits = 0
        self._misses = 0

        self.sweep_task: Optional[asyncio.Task] = None
        self.running = False

    def __len__(self) -> int:
        return len(self._cache)

    def get(self, key: str) -> Optional[Any]:
        """Return the stored value, or None when absent or expired."""
        value = self._cache.get(key)
        if value is None:
            self._misses += 1
            return None

        self._hits += 1
        return copy.deepcopy(value)

    def set(self, key: str, value: Any) -> None:
        """Store value under key with the default TTL, replacing any entry."""
        self._cache[key] = copy.deepcopy(value)
        self.logger.debug("Cached value", key=key, ttl=self.ttl_seconds)

    def sweep(self) -> int:
        """Remove expired entries and return how many were dropped."""
        removed = len(self._cache.expire())
        if removed:
            self.logger.debug("Swept expired cache entries", removed=removed, remaining=len(self._cache))
        return removed

    def stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        return {
            "entries": len(self._cache),
            "max_entries": self.max_entries,
            "hits": self._hits,
            "misses": self._misses,
            "ttl_seconds": self.ttl_seconds,
            "check_period_seconds": self.check_period_seconds,
        }

    async def start(self):
        """Start the background sweep."""
        if self.running:
            return
        self.running = True
        self.sweep_task = asyncio.create_task(self._sweep_loop())
        self.logger.info(
            "Response cache sweeper started",
            ttl_seconds=self.ttl_seconds,
            check_period_seconds=self.check_period_seconds,
        )

    async def stop(self):
        """Stop the background sweep."""
        self.running = False
        if self.sweep_task:
            self.sweep_task.cancel()
            try:
                await self.sweep_task
            except asyncio.CancelledError:
                pass
            self.sweep_task = None

        self.logger.info("Response cache sweeper stopped")

    async def _sweep_loop(self):
        """Main sweep loop."""
        while self.running:
            try:
                await asyncio.sleep(self.check_period_seconds)
                self.sweep()
            except asyncio.CancelledError:
                break
            except Exception as e:
                self.logger.error("Error in cache sweep loop", error=str(e))
