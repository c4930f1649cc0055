"""FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from surfjournal.api.errors import register_exception_handlers
from surfjournal.api.routes.router import api_router
from surfjournal.config import get_settings
from surfjournal.logging_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup/shutdown events."""
    settings = get_settings()
    logger.info("Starting {} in {} mode (mock mode: {})", settings.app_name, settings.environment, settings.mock_mode)

    from surfjournal.db.database import engine, init_db

    try:
        await init_db()
        logger.info("Database tables initialized")
    except (SQLAlchemyError, OSError) as e:
        logger.warning("Database unavailable, reads will fall back to sample data: {}", e)

    yield

    logger.info("Shutting down...")
    await engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    setup_logging(debug=settings.debug or settings.debug_mock)

    app = FastAPI(
        title=settings.app_name,
        description="Surf news: articles, categories and search",
        version="0.1.0",
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router, prefix=settings.api_prefix)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "app": settings.app_name}

    return app


app = create_app()
