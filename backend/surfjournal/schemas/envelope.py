"""Response envelope shared by every API endpoint."""

import math
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from surfjournal.schemas.article import ArticleRead

T = TypeVar("T")


class PageMeta(BaseModel):
    """Pagination metadata for list responses."""

    model_config = ConfigDict(populate_by_name=True)

    total: int
    page: int
    page_size: int = Field(alias="pageSize")
    total_pages: int = Field(alias="totalPages")

    @classmethod
    def for_page(cls, total: int, limit: int, offset: int) -> "PageMeta":
        return cls(
            total=total,
            page=offset // limit + 1,
            page_size=limit,
            total_pages=math.ceil(total / limit),
        )

    @classmethod
    def empty(cls, limit: int = 10) -> "PageMeta":
        return cls(total=0, page=1, page_size=limit, total_pages=0)


class Envelope(BaseModel, Generic[T]):
    """
    Uniform wrapper: ``{success, data?, message?, meta?}``.
    ``error`` carries the raw failure text and is only set in development.
    """

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    data: T | None = None
    message: str | None = None
    meta: PageMeta | None = None
    error: str | None = None


class ArticleDetailEnvelope(Envelope[ArticleRead]):
    """Single article plus related articles from the same category."""

    related_news: list[ArticleRead] | None = Field(default=None, alias="relatedNews")
