"""News data access: cached reads and cache-invalidating writes."""

from datetime import UTC, datetime
from functools import lru_cache

from loguru import logger
from sqlalchemy import and_, delete, func, or_, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from surfjournal.config import get_settings
from surfjournal.models import Article, Category, User
from surfjournal.schemas import ArticlePage, ArticleRead, ArticleWrite, CategoryRead
from surfjournal.services.cache import TTLCache
from surfjournal.services.result import ReadResult

PUBLISHED = "published"

# Failures raised when the store is unreachable or rejects a statement
STORE_ERRORS = (SQLAlchemyError, OSError)


def _article_query():
    """Article rows joined with their category and author names."""
    return (
        select(Article, Category.name.label("category_name"), User.name.label("author_name"))
        .join(Category, Article.category_id == Category.id)
        .join(User, Article.author_id == User.id)
    )


def _to_article_read(row) -> ArticleRead:
    article, category_name, author_name = row
    return ArticleRead(
        **article.model_dump(),
        category_name=category_name,
        author_name=author_name,
    )


class NewsService:
    """
    Single point of access to articles and categories.

    Reads are served from a TTL cache when possible and report store
    failures through ``ReadResult`` instead of raising. Writes always go
    to the store, raise on failure, and clear the whole cache on success.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        cache: TTLCache | None = None,
    ):
        self._session_factory = session_factory
        self.cache = cache if cache is not None else TTLCache()

    def clear_cache(self) -> None:
        """Drop every cached read; called after each successful write."""
        self.cache.clear()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def get_article_by_slug(self, slug: str) -> ReadResult[ArticleRead | None]:
        """
        Fetch a published article by slug.

        A cache miss that finds the article bumps its view count once. Hits
        within the TTL do not, so repeat views inside that window are not
        counted.
        """
        key = TTLCache.make_key("article_by_slug", slug=slug)
        hit, cached = self.cache.lookup(key)
        if hit:
            return ReadResult(value=cached, source="cache")

        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    _article_query().where(Article.slug == slug, Article.status == PUBLISHED)
                )
                row = result.first()
        except STORE_ERRORS as e:
            logger.error("Failed to fetch article with slug {}: {}", slug, e)
            return ReadResult.failure(None, e)

        article = _to_article_read(row) if row else None
        self.cache.set(key, article)

        if article:
            await self._increment_view_count(article.id)

        return ReadResult(value=article)

    async def _increment_view_count(self, article_id: int) -> None:
        try:
            async with self._session_factory() as session:
                await session.execute(
                    update(Article)
                    .where(Article.id == article_id)
                    .values(view_count=Article.view_count + 1)
                )
                await session.commit()
        except STORE_ERRORS as e:
            logger.warning("Failed to increment view count for article {}: {}", article_id, e)

    async def list_articles(
        self,
        limit: int = 10,
        offset: int = 0,
        category_id: int | None = None,
        featured: bool = False,
        search_query: str | None = None,
        exclude_id: int | None = None,
    ) -> ReadResult[ArticlePage]:
        """
        List published articles, newest first.

        ``total`` counts every match ignoring ``limit``/``offset`` so callers
        can compute the number of pages.
        """
        search_query = search_query or None
        key = TTLCache.make_key(
            "list_articles",
            limit=limit,
            offset=offset,
            category_id=category_id,
            featured=featured,
            search_query=search_query,
            exclude_id=exclude_id,
        )
        hit, cached = self.cache.lookup(key)
        if hit:
            return ReadResult(value=cached, source="cache")

        conditions = [Article.status == PUBLISHED]
        if category_id is not None:
            conditions.append(Article.category_id == category_id)
        if featured:
            conditions.append(Article.is_featured.is_(True))
        if search_query:
            conditions.append(
                or_(
                    Article.title.icontains(search_query, autoescape=True),
                    Article.content.icontains(search_query, autoescape=True),
                    Article.excerpt.icontains(search_query, autoescape=True),
                )
            )
        if exclude_id is not None:
            conditions.append(Article.id != exclude_id)

        try:
            async with self._session_factory() as session:
                rows = await session.execute(
                    _article_query()
                    .where(*conditions)
                    .order_by(Article.created_at.desc(), Article.id.desc())
                    .limit(limit)
                    .offset(offset)
                )
                items = [_to_article_read(row) for row in rows.all()]

                total = await session.scalar(
                    select(func.count()).select_from(Article).where(*conditions)
                )
        except STORE_ERRORS as e:
            logger.error("Failed to list articles: {}", e)
            return ReadResult.failure(ArticlePage(), e)

        page = ArticlePage(items=items, total=total or 0)
        self.cache.set(key, page)
        return ReadResult(value=page)

    async def get_categories(self) -> ReadResult[list[CategoryRead]]:
        """Categories ordered by name with their published article counts."""
        key = TTLCache.make_key("categories")
        hit, cached = self.cache.lookup(key)
        if hit:
            return ReadResult(value=cached, source="cache")

        news_count = func.count(Article.id).label("news_count")
        try:
            async with self._session_factory() as session:
                rows = await session.execute(
                    select(Category, news_count)
                    .outerjoin(
                        Article,
                        and_(Article.category_id == Category.id, Article.status == PUBLISHED),
                    )
                    .group_by(Category.id)
                    .order_by(Category.name)
                )
                categories = [
                    CategoryRead(**category.model_dump(), news_count=count)
                    for category, count in rows.all()
                ]
        except STORE_ERRORS as e:
            logger.error("Failed to fetch categories: {}", e)
            return ReadResult.failure([], e)

        self.cache.set(key, categories)
        return ReadResult(value=categories)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def create_article(self, data: ArticleWrite, author_id: int) -> int:
        """Insert an article and return its id. Store errors propagate."""
        now = datetime.now(UTC)
        article = Article(**data.model_dump(), author_id=author_id, created_at=now, updated_at=now)

        try:
            async with self._session_factory() as session:
                session.add(article)
                await session.commit()
                await session.refresh(article)
        except SQLAlchemyError as e:
            logger.error("Failed to create article {}: {}", data.slug, e)
            raise

        self.clear_cache()
        logger.info("Created article {} ({})", article.id, article.slug)
        return article.id

    async def update_article(self, article_id: int, data: ArticleWrite) -> bool:
        """Replace every mutable field. False when no article has ``article_id``."""
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    update(Article)
                    .where(Article.id == article_id)
                    .values(**data.model_dump(), updated_at=datetime.now(UTC))
                )
                await session.commit()
        except SQLAlchemyError as e:
            logger.error("Failed to update article {}: {}", article_id, e)
            raise

        self.clear_cache()
        return result.rowcount > 0

    async def delete_article(self, article_id: int) -> bool:
        """Hard delete. False when no article has ``article_id``."""
        try:
            async with self._session_factory() as session:
                result = await session.execute(delete(Article).where(Article.id == article_id))
                await session.commit()
        except SQLAlchemyError as e:
            logger.error("Failed to delete article {}: {}", article_id, e)
            raise

        self.clear_cache()
        return result.rowcount > 0


@lru_cache
def get_news_service() -> NewsService:
    """Process-wide service bound to the application database."""
    from surfjournal.db.database import async_session

    settings = get_settings()
    return NewsService(async_session, cache=TTLCache(ttl=settings.cache_ttl_seconds))
