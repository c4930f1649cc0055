"""Article model for published surf news."""

from datetime import UTC, datetime

from sqlmodel import Field, SQLModel


class Article(SQLModel, table=True):
    """
    News article row.
    Every article belongs to one category and one author; only
    published articles are visible through the public read paths.
    """

    __tablename__ = "news"

    id: int | None = Field(default=None, primary_key=True)

    # Article content
    title: str = Field(max_length=255)
    slug: str = Field(max_length=255, unique=True, index=True)
    content: str = Field(default="")
    excerpt: str = Field(default="")
    image_url: str = Field(default="", max_length=2048)

    # Relations
    category_id: int = Field(foreign_key="categories.id", index=True)
    author_id: int = Field(foreign_key="users.id", index=True)

    # Publication
    status: str = Field(default="draft", max_length=20)  # draft, published
    is_featured: bool = Field(default=False)
    view_count: int = Field(default=0)

    # Timestamps
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC), index=True)
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
