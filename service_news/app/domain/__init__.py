"""
Domain helpers for the News Proxy service.

- articles: Article output schema and reshaping of provider records.
"""

from .articles import Article, ArticleListResponse, ArticleSource, reshape_article, reshape_articles

__all__ = [
    "Article",
    "ArticleListResponse",
    "ArticleSource",
    "reshape_article",
    "reshape_articles",
]
