"""Article schemas for API request/response validation."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


class ArticleRead(BaseModel):
    """Article row as exposed on the wire (store column names)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    slug: str
    content: str = ""
    excerpt: str = ""
    image_url: str = ""
    category_id: int
    category_name: str = ""
    author_id: int | None = None
    author_name: str | None = None
    status: str = "published"
    is_featured: bool = False
    view_count: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def placeholder(cls) -> "ArticleRead":
        """Empty record returned by the API client when a lookup fails."""
        return cls(id=0, title="", slug="", category_id=0, status="")


class ArticleWrite(BaseModel):
    """Request body for creating or fully replacing an article.

    Accepts camelCase keys (``imageUrl``, ``categoryId``, ``isFeatured``)
    as well as the snake_case field names.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = Field(..., min_length=1, max_length=255)
    slug: str = Field(..., min_length=1, max_length=255, pattern=SLUG_PATTERN)
    content: str = Field(..., min_length=1)
    excerpt: str = Field(default="")
    image_url: str = Field(default="", max_length=2048)
    category_id: int = Field(..., gt=0)
    status: Literal["draft", "published"] = "draft"
    is_featured: bool = False


class ArticlePage(BaseModel):
    """One page of a filtered article listing."""

    items: list[ArticleRead] = Field(default_factory=list)
    total: int = 0


class ArticleCreated(BaseModel):
    """Payload of a successful create."""

    id: int
