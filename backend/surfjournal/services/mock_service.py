"""Read surface over the bundled sample data, used in mock mode and as fallback."""

import random
from typing import Any

from surfjournal.data.adapters import mock_article_to_row, mock_category_to_row
from surfjournal.data.mock_data import MOCK_ARTICLES, MOCK_CATEGORIES
from surfjournal.schemas import ArticlePage, ArticleRead, CategoryRead

RELATED_LIMIT = 3


class MockNewsService:
    """Answers the same questions as ``NewsService`` from static records."""

    def __init__(
        self,
        articles: list[dict[str, Any]] | None = None,
        categories: list[dict[str, Any]] | None = None,
    ):
        self._articles = MOCK_ARTICLES if articles is None else articles
        self._categories = MOCK_CATEGORIES if categories is None else categories
        self._category_ids = {c["name"]: c["id"] for c in self._categories}

    def _to_row(self, item: dict[str, Any]) -> ArticleRead:
        return mock_article_to_row(item, self._category_ids.get(item.get("category"), 0))

    def list_articles(
        self,
        limit: int = 10,
        offset: int = 0,
        category_id: int | None = None,
        featured: bool = False,
        search_query: str | None = None,
        exclude_id: int | None = None,
    ) -> ArticlePage:
        items = list(self._articles)

        if featured:
            items = [item for item in items if item.get("featured")]

        if category_id is not None:
            names = {c["name"] for c in self._categories if c["id"] == category_id}
            items = [item for item in items if item.get("category") in names]

        if search_query:
            needle = search_query.lower()
            items = [
                item
                for item in items
                if needle in item["title"].lower()
                or needle in item.get("excerpt", "").lower()
                or needle in (item.get("content") or "").lower()
            ]

        if exclude_id is not None:
            items = [item for item in items if item["id"] != exclude_id]

        return ArticlePage(
            items=[self._to_row(item) for item in items[offset : offset + limit]],
            total=len(items),
        )

    def get_article_by_slug(self, slug: str) -> ArticleRead | None:
        for item in self._articles:
            if item["slug"] == slug:
                return self._to_row(item)
        return None

    def get_related(self, article: ArticleRead, limit: int = RELATED_LIMIT) -> list[ArticleRead]:
        page = self.list_articles(limit=limit, category_id=article.category_id, exclude_id=article.id)
        return page.items

    def get_categories(self) -> list[CategoryRead]:
        return sorted(
            (mock_category_to_row(c) for c in self._categories),
            key=lambda c: c.name,
        )

    def create_article(self) -> int:
        """Nothing is stored; hand back a plausible identifier."""
        return random.randint(100, 1099)


mock_news = MockNewsService()


def get_mock_service() -> MockNewsService:
    return mock_news
