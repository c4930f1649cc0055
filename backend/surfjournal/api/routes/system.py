"""Runtime switches exposed to the frontend."""

from fastapi import APIRouter, Depends

from surfjournal.config import Settings, get_settings
from surfjournal.schemas import Envelope

router = APIRouter()


@router.get("/mock-mode", response_model=Envelope[dict[str, bool]], response_model_exclude_none=True)
async def get_mock_mode(settings: Settings = Depends(get_settings)) -> Envelope[dict[str, bool]]:
    """Report whether reads are being served from sample data."""
    return Envelope(success=True, data={"mockMode": settings.mock_mode})
