"""Models package - SQLModel database models."""

from surfjournal.models.article import Article
from surfjournal.models.category import Category
from surfjournal.models.user import User

__all__ = ["User", "Category", "Article"]
