"""Category model for PostgreSQL."""

from sqlmodel import Field, SQLModel


class Category(SQLModel, table=True):
    """News category (waves, championships, equipment, ...)."""

    __tablename__ = "categories"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=100)
    slug: str = Field(max_length=100, unique=True, index=True)
    description: str | None = Field(default=None)
