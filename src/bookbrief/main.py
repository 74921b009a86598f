"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from bookbrief.api.dev import router as dev_router
from bookbrief.api.v1.router import router as api_router
from bookbrief.api.web.views import router as web_router
from bookbrief.config import get_settings

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    logger.info("Starting BookBrief application...")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Summary delay: {settings.summary_delay_seconds}s")

    yield

    logger.info("Shutting down BookBrief application...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    docs_kwargs = {}
    if settings.is_production:
        docs_kwargs = {"docs_url": None, "redoc_url": None, "openapi_url": None}

    app = FastAPI(
        title="BookBrief",
        description="Book detail pages with locally generated reading summaries",
        version="0.1.0",
        lifespan=lifespan,
        **docs_kwargs,
    )

    # Include routers
    app.include_router(api_router)
    app.include_router(web_router)

    # Dev-only router (guarded internally)
    if not settings.is_production:
        app.include_router(dev_router)

    @app.get("/health")
    async def health_check() -> JSONResponse:
        """Lightweight health check."""
        return JSONResponse({"status": "healthy"})

    return app


# Create app instance
app = create_app()
