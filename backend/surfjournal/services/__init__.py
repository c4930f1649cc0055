"""Services package - data access, caching and sample-data fallback."""

from surfjournal.services.cache import TTLCache
from surfjournal.services.mock_service import MockNewsService, get_mock_service
from surfjournal.services.news_service import NewsService, get_news_service
from surfjournal.services.result import ReadResult

__all__ = [
    "MockNewsService",
    "NewsService",
    "ReadResult",
    "TTLCache",
    "get_mock_service",
    "get_news_service",
]
