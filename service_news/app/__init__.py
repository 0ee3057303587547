"""
News Proxy Service package.

The service fronts a third-party news provider, reshaping its responses
into a stable schema and caching them briefly in memory.

Structure:
- app.main: FastAPI app, routes, and service wiring.
- app.context: The context object built once at startup.
- app.adapters: HTTP client for the upstream news provider.
- app.caching: Response cache and per-endpoint cache keys.
- app.domain: Article schema and reshaping helpers.
"""
