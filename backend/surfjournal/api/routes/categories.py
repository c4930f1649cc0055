"""Categories API endpoints."""

from fastapi import APIRouter, Depends

from surfjournal.api.fallback import read_with_fallback
from surfjournal.config import Settings, get_settings
from surfjournal.schemas import CategoryRead, Envelope
from surfjournal.services import MockNewsService, NewsService, get_mock_service, get_news_service

router = APIRouter()


@router.get("", response_model=Envelope[list[CategoryRead]], response_model_exclude_none=True)
async def list_categories(
    settings: Settings = Depends(get_settings),
    service: NewsService = Depends(get_news_service),
    mock: MockNewsService = Depends(get_mock_service),
) -> Envelope[list[CategoryRead]]:
    """List categories with their published article counts."""
    categories = await read_with_fallback(
        settings,
        fetch=service.get_categories,
        fallback=mock.get_categories,
        label="categories",
    )
    return Envelope(success=True, data=categories)
