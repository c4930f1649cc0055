"""Schemas package - pydantic request/response models."""

from surfjournal.schemas.article import ArticleCreated, ArticlePage, ArticleRead, ArticleWrite
from surfjournal.schemas.category import CategoryRead
from surfjournal.schemas.envelope import ArticleDetailEnvelope, Envelope, PageMeta

__all__ = [
    "ArticleCreated",
    "ArticleDetailEnvelope",
    "ArticlePage",
    "ArticleRead",
    "ArticleWrite",
    "CategoryRead",
    "Envelope",
    "PageMeta",
]
