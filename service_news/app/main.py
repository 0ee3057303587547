"""
News Proxy service.

Forwards requests to the upstream news provider, reshapes the results and
caches them briefly in memory.
"""

from typing import Any, Dict, List, Optional

import httpx
from fastapi import Query
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from shared.base_service import BaseService
from shared.config import ServiceConfig
from shared.errors import ExternalServiceError, MessageResponse

from .caching import ResponseCache
from .context import NewsProxyContext, build_context
from .domain import Article, ArticleListResponse, reshape_articles


TOP_HEADLINES_FAILURE = "Something went wrong"
FIND_FAILURE = "Failed to find news article"
SEARCH_FAILURE = "Failed to fetch news articles"
MISSING_KEYWORD = "Missing search query"

ERROR_RESPONSES: Dict[int, Dict[str, Any]] = {
    400: {"model": MessageResponse, "description": "Invalid request"},
    500: {"model": MessageResponse, "description": "Internal server error"},
}


class NewsService(BaseService):
    """News proxy service implementation."""

    def __init__(
        self,
        config: Optional[ServiceConfig] = None,
        *,
        cache: Optional[ResponseCache] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__("news", config)
        self.context: NewsProxyContext = build_context(
            self.config,
            metrics=self.metrics,
            cache=cache,
            transport=transport,
        )

        @self.app.on_event("startup")
        async def _startup():
            await self.context.start()

        @self.app.on_event("shutdown")
        async def _shutdown():
            await self.context.stop()

        self._setup_news_routes()

        # Expose service instance via app state for introspection/testing
        self.app.state.news_service = self
        self.app.state.context = self.context

    def _setup_news_routes(self):
        """Set up the proxy routes."""
        cache_manager = self.context.cache_manager
        provider = self.context.provider

        @self.app.get(
            "/news",
            response_model=List[Article],
            responses=ERROR_RESPONSES,
            summary="Get top headlines",
            response_description="A list of news articles",
        )
        async def get_top_headlines(
            n: int = Query(
                10,
                description="Number of articles to fetch (default is 10)",
                json_schema_extra={"minimum": 1, "maximum": 100},
            ),
        ):
            cached = await cache_manager.get_top_headlines(n)
            if cached is not None:
                return cached

            result = await provider.top_headlines(n)
            if not result.ok:
                return self._upstream_failure(TOP_HEADLINES_FAILURE, result.error, endpoint="top_headlines", n=n)

            try:
                articles = reshape_articles(result.articles)
            except PydanticValidationError as exc:
                error = ExternalServiceError(
                    service="gnews",
                    message="Article did not match the expected schema",
                    details={"errors": exc.errors(include_url=False, include_input=False)},
                )
                return self._upstream_failure(TOP_HEADLINES_FAILURE, error, endpoint="top_headlines", n=n)

            await cache_manager.set_top_headlines(n, articles)
            return articles

        @self.app.get(
            "/news/find",
            response_model=ArticleListResponse,
            responses=ERROR_RESPONSES,
            summary="Find news articles by title and/or author",
            response_description="A list of news articles that match the search criteria",
        )
        async def find_news(
            title: Optional[str] = Query(None, description="Title of the article to search for"),
            author: Optional[str] = Query(None, description="Author of the article to search for"),
        ):
            articles = await cache_manager.get_found_articles(title, author)
            if articles is not None:
                return {"articles": articles}

            result = await provider.find_articles(title, author)
            if not result.ok:
                return self._upstream_failure(FIND_FAILURE, result.error, endpoint="find", title=title, author=author)

            await cache_manager.set_found_articles(title, author, result.articles)
            return {"articles": result.articles}

        @self.app.get(
            "/news/search",
            response_model=ArticleListResponse,
            responses=ERROR_RESPONSES,
            summary="Search news articles by keyword",
            response_description="A list of news articles that match the search keyword",
        )
        async def search_news(
            keyword: Optional[str] = Query(None, description="Keyword to search for (required)"),
        ):
            if not keyword:
                return JSONResponse(status_code=400, content={"message": MISSING_KEYWORD})

            articles = await cache_manager.get_search_results(keyword)
            if articles is not None:
                return {"articles": articles}

            result = await provider.search(keyword)
            if not result.ok:
                return self._upstream_failure(SEARCH_FAILURE, result.error, endpoint="search", keyword=keyword)

            await cache_manager.set_search_results(keyword, result.articles)
            return {"articles": result.articles}

    def _upstream_failure(self, message: str, error: ExternalServiceError, **context) -> JSONResponse:
        """Log the provider error and answer with the endpoint's fixed message."""
        self.logger.error(
            "News provider call failed",
            code=error.code,
            error=error.message,
            details=error.details,
            **context
        )
        self.metrics.record_error("upstream")
        return JSONResponse(status_code=500, content={"message": message})

    async def _check_dependencies(self) -> Dict[str, Any]:
        """Report cache state; the provider is not probed."""
        return {"cache": await self.context.cache_manager.get_cache_stats()}


def create_app(config: Optional[ServiceConfig] = None):
    """Create FastAPI application."""
    service = NewsService(config)
    return service.app


if __name__ == "__main__":
    service = NewsService()
    service.run()
