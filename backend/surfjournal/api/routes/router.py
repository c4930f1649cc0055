"""API main router - aggregates all endpoint routers."""

from fastapi import APIRouter

from surfjournal.api.routes import categories, news, system

api_router = APIRouter()

api_router.include_router(news.router, prefix="/news", tags=["news"])
api_router.include_router(categories.router, prefix="/categories", tags=["categories"])
api_router.include_router(system.router, tags=["system"])
