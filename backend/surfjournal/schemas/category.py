"""Category schemas."""

from pydantic import BaseModel, ConfigDict


class CategoryRead(BaseModel):
    """Category with the number of published articles referencing it."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    slug: str
    description: str | None = ""
    news_count: int = 0
