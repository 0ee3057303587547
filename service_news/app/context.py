"""
Process-wide state for the News Proxy service.
"""

from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

import httpx

from shared.config import ServiceConfig
from .adapters import GNewsClient
from .caching import CacheManager, ResponseCache

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from shared.metrics import MetricsCollector


@dataclass
class NewsProxyContext:
    """Everything the route handlers share.

    Built once at startup and held for the process lifetime. Nothing here
    is persisted, so there is no teardown beyond stopping the cache sweep.
    """

    config: ServiceConfig
    cache: ResponseCache
    cache_manager: CacheManager
    provider: GNewsClient

    async def start(self) -> None:
        await self.cache.start()

    async def stop(self) -> None:
        await self.cache.stop()


def build_context(
    config: ServiceConfig,
    *,
    metrics: Optional["MetricsCollector"] = None,
    cache: Optional[ResponseCache] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> NewsProxyContext:
    """Construct the context from configuration."""
    if cache is None:
        cache = ResponseCache(
            ttl_seconds=config.cache_ttl_seconds,
            check_period_seconds=config.cache_check_period_seconds,
            max_entries=config.cache_max_entries,
        )

    provider = GNewsClient(
        config.provider_base_url,
        config.api_key,
        timeout=config.upstream_timeout,
        metrics=metrics,
        transport=transport,
    )

    return NewsProxyContext(
        config=config,
        cache=cache,
        cache_manager=CacheManager(cache, metrics=metrics),
        provider=provider,
    )
