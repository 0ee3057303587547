"""
Adapters package for the News Proxy service.

Contains the HTTP client for the upstream news provider. The adapter
encapsulates:

- Base URL, credential and request shapes
- Mapping of transport/HTTP failures onto shared errors
- Returning explicit success/failure results instead of raising

Keep adapters thin and side-effect free outside of explicit calls.
"""

from .gnews_client import GNewsClient, ProviderResult

__all__ = [
    "GNewsClient",
    "ProviderResult",
]
