"""News API endpoints with sample-data fallback."""

from fastapi import APIRouter, Depends, Query, status
from loguru import logger
from sqlalchemy.exc import IntegrityError

from surfjournal.api.auth import require_admin, require_session
from surfjournal.api.errors import BadInputError, NotFoundError, server_error
from surfjournal.api.fallback import read_with_fallback
from surfjournal.config import SessionUser, Settings, get_settings
from surfjournal.schemas import (
    ArticleCreated,
    ArticleDetailEnvelope,
    ArticleRead,
    ArticleWrite,
    Envelope,
    PageMeta,
)
from surfjournal.services import MockNewsService, NewsService, get_mock_service, get_news_service
from surfjournal.services.mock_service import RELATED_LIMIT
from surfjournal.services.news_service import STORE_ERRORS

router = APIRouter()


def _is_numeric_id(raw: str) -> bool:
    return raw.isascii() and raw.isdigit()


def _parse_article_id(raw: str) -> int:
    if not _is_numeric_id(raw):
        raise BadInputError("A numeric article id is required")
    return int(raw)


@router.get("", response_model=Envelope[list[ArticleRead]], response_model_exclude_none=True)
async def list_news(
    limit: int = Query(default=10, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    category_id: int | None = Query(default=None, alias="categoryId"),
    featured: bool = False,
    search: str | None = None,
    exclude: int | None = None,
    settings: Settings = Depends(get_settings),
    service: NewsService = Depends(get_news_service),
    mock: MockNewsService = Depends(get_mock_service),
) -> Envelope[list[ArticleRead]]:
    """
    List published articles.

    - categoryId: only articles in this category
    - featured: only featured articles when true
    - search: case-insensitive match on title, excerpt and content
    - exclude: leave out the article with this id
    """
    filters = {
        "limit": limit,
        "offset": offset,
        "category_id": category_id,
        "featured": featured,
        "search_query": search,
        "exclude_id": exclude,
    }
    page = await read_with_fallback(
        settings,
        fetch=lambda: service.list_articles(**filters),
        fallback=lambda: mock.list_articles(**filters),
        label="articles",
    )
    return Envelope(
        success=True,
        data=page.items,
        meta=PageMeta.for_page(page.total, limit, offset),
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=Envelope[ArticleCreated],
    response_model_exclude_none=True,
)
async def create_news(
    article_in: ArticleWrite,
    user: SessionUser = Depends(require_session),
    settings: Settings = Depends(get_settings),
    service: NewsService = Depends(get_news_service),
    mock: MockNewsService = Depends(get_mock_service),
) -> Envelope[ArticleCreated]:
    """Create an article. Status defaults to draft."""
    if settings.mock_mode:
        if settings.debug_mock:
            logger.debug("Mock mode: pretending to create article {}", article_in.slug)
        return Envelope(
            success=True,
            data=ArticleCreated(id=mock.create_article()),
            message="Article created (mock mode)",
        )

    try:
        article_id = await service.create_article(article_in, author_id=user.id)
    except IntegrityError:
        raise BadInputError(
            f"Slug '{article_in.slug}' is taken, or the category or author does not exist"
        )
    except STORE_ERRORS as e:
        # Store outage: answer with a placeholder id
        logger.error("Create failed, answering with a fallback id: {}", e)
        return Envelope(
            success=True,
            data=ArticleCreated(id=mock.create_article()),
            message="Article created (fallback mode)",
        )

    return Envelope(success=True, data=ArticleCreated(id=article_id), message="Article created")


@router.get("/slug/{slug}", response_model=ArticleDetailEnvelope, response_model_exclude_none=True)
async def get_news_with_related(
    slug: str,
    settings: Settings = Depends(get_settings),
    service: NewsService = Depends(get_news_service),
    mock: MockNewsService = Depends(get_mock_service),
) -> ArticleDetailEnvelope:
    """Get an article by slug plus up to three articles from the same category."""
    article = await read_with_fallback(
        settings,
        fetch=lambda: service.get_article_by_slug(slug),
        fallback=lambda: mock.get_article_by_slug(slug),
        label=f"article {slug}",
    )
    if article is None:
        raise NotFoundError("Article not found")

    related = await read_with_fallback(
        settings,
        fetch=lambda: service.list_articles(
            limit=RELATED_LIMIT, category_id=article.category_id, exclude_id=article.id
        ),
        fallback=lambda: mock.get_related(article),
        label="related articles",
    )
    return ArticleDetailEnvelope(success=True, data=article, related_news=related.items)


@router.get("/{id_or_slug}", response_model=Envelope[ArticleRead], response_model_exclude_none=True)
async def get_news(
    id_or_slug: str,
    settings: Settings = Depends(get_settings),
    service: NewsService = Depends(get_news_service),
    mock: MockNewsService = Depends(get_mock_service),
) -> Envelope[ArticleRead]:
    """Get a published article by slug. Numeric ids are not supported."""
    if _is_numeric_id(id_or_slug):
        raise NotFoundError("Lookup by numeric id is not supported, use the article slug")

    article = await read_with_fallback(
        settings,
        fetch=lambda: service.get_article_by_slug(id_or_slug),
        fallback=lambda: mock.get_article_by_slug(id_or_slug),
        label=f"article {id_or_slug}",
    )
    if article is None:
        raise NotFoundError("Article not found")
    return Envelope(success=True, data=article)


@router.put("/{article_id}", response_model=Envelope, response_model_exclude_none=True)
async def update_news(
    article_id: str,
    article_in: ArticleWrite,
    user: SessionUser = Depends(require_session),
    settings: Settings = Depends(get_settings),
    service: NewsService = Depends(get_news_service),
) -> Envelope:
    """Replace every editable field of an article."""
    news_id = _parse_article_id(article_id)

    try:
        updated = await service.update_article(news_id, article_in)
    except IntegrityError:
        raise BadInputError(
            f"Slug '{article_in.slug}' is taken, or the category or author does not exist"
        )
    except STORE_ERRORS as e:
        raise server_error("Failed to update article", e, settings)

    if not updated:
        raise NotFoundError("Article not found or could not be updated")

    logger.info("Article {} updated by user {}", news_id, user.id)
    return Envelope(success=True, message="Article updated")


@router.delete("/{article_id}", response_model=Envelope, response_model_exclude_none=True)
async def delete_news(
    article_id: str,
    user: SessionUser = Depends(require_admin),
    settings: Settings = Depends(get_settings),
    service: NewsService = Depends(get_news_service),
) -> Envelope:
    """Delete an article permanently. Administrators only."""
    news_id = _parse_article_id(article_id)

    try:
        deleted = await service.delete_article(news_id)
    except STORE_ERRORS as e:
        raise server_error("Failed to delete article", e, settings)

    if not deleted:
        raise NotFoundError("Article not found or could not be deleted")

    logger.info("Article {} deleted by user {}", news_id, user.id)
    return Envelope(success=True, message="Article deleted")
