"""User model for PostgreSQL."""

from sqlmodel import Field, SQLModel


class User(SQLModel, table=True):
    """Editorial account. Articles reference their author here."""

    __tablename__ = "users"

    id: int | None = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    name: str = Field(max_length=100)
    role: str = Field(default="editor", max_length=20)  # editor, admin
