"""
Article schema and reshaping of provider records.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ArticleSource(BaseModel):
    """Publisher of an article."""

    name: Optional[str] = None
    url: Optional[str] = None


class Article(BaseModel):
    """Stable output shape for a news article.

    Only these six fields survive reshaping; anything else the provider
    sends (content, id, lang, ...) is dropped.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    title: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    image: Optional[str] = None
    published_at: Optional[str] = Field(default=None, alias="publishedAt")
    source: ArticleSource = Field(default_factory=ArticleSource)

    @field_validator("source", mode="before")
    @classmethod
    def _missing_source(cls, value: Any) -> Any:
        return {} if value is None else value


class ArticleListResponse(BaseModel):
    """Provider articles passed through unmodified."""

    articles: List[Any]


def reshape_article(record: Dict[str, Any]) -> Dict[str, Any]:
    """Map one provider record to the Article shape."""
    return Article.model_validate(record).model_dump(by_alias=True)


def reshape_articles(records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Map a list of provider records to Article dictionaries."""
    return [reshape_article(record) for record in records]
