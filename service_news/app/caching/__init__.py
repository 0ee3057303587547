"""
News proxy caching package.

Provides the in-process response cache that sits in front of the upstream
provider, plus the typed keys each endpoint derives from its query.
Entries are short-lived and never explicitly invalidated.
"""

from .response_cache import ResponseCache
from .cache_manager import CacheManager, FindKey, SearchKey, TopHeadlinesKey

__all__ = [
    "ResponseCache",
    "CacheManager",
    "FindKey",
    "SearchKey",
    "TopHeadlinesKey",
]
