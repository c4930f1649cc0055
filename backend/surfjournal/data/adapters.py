"""Field mapping from sample-data records to API rows."""

from typing import Any

from surfjournal.schemas import ArticleRead, CategoryRead


def mock_article_to_row(item: dict[str, Any], category_id: int) -> ArticleRead:
    """Map a sample article onto the store's column names.

    ``imageUrl`` -> ``image_url``, ``category`` -> ``category_name``,
    ``date`` -> ``created_at``, ``author`` -> ``author_name``,
    ``viewCount`` -> ``view_count``, ``featured`` -> ``is_featured``.
    """
    return ArticleRead(
        id=item["id"],
        title=item["title"],
        slug=item["slug"],
        excerpt=item.get("excerpt", ""),
        content=item.get("content") or "",
        image_url=item.get("imageUrl", ""),
        category_id=category_id,
        category_name=item.get("category", ""),
        author_name=item.get("author"),
        status="published",
        is_featured=item.get("featured", False),
        view_count=item.get("viewCount") or 0,
        created_at=item.get("date"),
        updated_at=item.get("date"),
    )


def mock_category_to_row(item: dict[str, Any]) -> CategoryRead:
    """Map a sample category; ``count`` becomes ``news_count``."""
    return CategoryRead(
        id=item["id"],
        name=item["name"],
        slug=item["slug"],
        description=item.get("description") or "",
        news_count=item.get("count") or 0,
    )
