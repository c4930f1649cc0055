"""Client used by the frontend layer to call the news API."""

from typing import Any

import httpx
from loguru import logger

from surfjournal.schemas import (
    ArticleCreated,
    ArticleDetailEnvelope,
    ArticleRead,
    ArticleWrite,
    CategoryRead,
    Envelope,
    PageMeta,
)

DEFAULT_PAGE_SIZE = 10


class NewsApiClient:
    """
    Thin async wrapper over the news API.

    No method raises: transport failures and error statuses come back as an
    envelope with ``success=False``, an empty payload and, when the server
    sent one, its message.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000/api",
        token: str | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        headers = {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self.http_client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers=headers,
            transport=transport,
        )

    async def __aenter__(self) -> "NewsApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        resp = await self.http_client.request(method, path, **kwargs)
        resp.raise_for_status()
        return resp.json()

    @staticmethod
    def _error_message(error: Exception, default: str) -> str:
        if isinstance(error, httpx.HTTPStatusError):
            try:
                body = error.response.json()
            except ValueError:
                body = None
            message = body.get("message") if isinstance(body, dict) else None
            if isinstance(message, str) and message:
                return message
        return default

    async def get_news_list(
        self,
        limit: int | None = None,
        offset: int | None = None,
        category_id: int | None = None,
        featured: bool | None = None,
        search: str | None = None,
        exclude: int | None = None,
    ) -> Envelope[list[ArticleRead]]:
        """Fetch a page of articles with optional filters."""
        params: dict[str, Any] = {
            "limit": limit,
            "offset": offset,
            "categoryId": category_id,
            "featured": None if featured is None else str(featured).lower(),
            "search": search,
            "exclude": exclude,
        }
        params = {k: v for k, v in params.items() if v is not None}
        try:
            data = await self._request("GET", "/news", params=params)
            return Envelope[list[ArticleRead]].model_validate(data)
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Failed to fetch news list: {}", e)
            return Envelope[list[ArticleRead]](
                success=False,
                data=[],
                meta=PageMeta.empty(limit or DEFAULT_PAGE_SIZE),
            )

    async def get_news_by_slug(self, slug: str) -> Envelope[ArticleRead]:
        """Fetch one article; a placeholder record is returned on failure."""
        try:
            data = await self._request("GET", f"/news/{slug}")
            return Envelope[ArticleRead].model_validate(data)
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Failed to fetch article with slug {}: {}", slug, e)
            return Envelope[ArticleRead](success=False, data=ArticleRead.placeholder())

    async def get_news_detail(self, slug: str) -> ArticleDetailEnvelope:
        """Fetch one article together with its related articles."""
        try:
            data = await self._request("GET", f"/news/slug/{slug}")
            return ArticleDetailEnvelope.model_validate(data)
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Failed to fetch article detail for {}: {}", slug, e)
            return ArticleDetailEnvelope(success=False, data=ArticleRead.placeholder(), related_news=[])

    async def get_categories(self) -> Envelope[list[CategoryRead]]:
        try:
            data = await self._request("GET", "/categories")
            return Envelope[list[CategoryRead]].model_validate(data)
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Failed to fetch categories: {}", e)
            return Envelope[list[CategoryRead]](success=False, data=[])

    async def create_news(self, article: ArticleWrite) -> Envelope[ArticleCreated]:
        """Create an article (requires a session token)."""
        try:
            data = await self._request("POST", "/news", json=article.model_dump(by_alias=True))
            return Envelope[ArticleCreated].model_validate(data)
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Failed to create article: {}", e)
            return Envelope[ArticleCreated](
                success=False,
                message=self._error_message(e, "Failed to create article"),
            )

    async def update_news(self, article_id: int, article: ArticleWrite) -> Envelope:
        """Replace an article (requires a session token)."""
        try:
            data = await self._request("PUT", f"/news/{article_id}", json=article.model_dump(by_alias=True))
            return Envelope.model_validate(data)
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Failed to update article {}: {}", article_id, e)
            return Envelope(success=False, message=self._error_message(e, "Failed to update article"))

    async def delete_news(self, article_id: int) -> Envelope:
        """Delete an article (requires an administrator token)."""
        try:
            data = await self._request("DELETE", f"/news/{article_id}")
            return Envelope.model_validate(data)
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Failed to delete article {}: {}", article_id, e)
            return Envelope(success=False, message=self._error_message(e, "Failed to delete article"))

    async def close(self) -> None:
        await self.http_client.aclose()
