"""
Main Application Entry Point

FastAPI application factory and router registration.
Run with: uvicorn sitemapper.main:app
"""

from fastapi import FastAPI

from sitemapper.api.routes import health, sitemap
from sitemapper.core.config import settings


def create_app() -> FastAPI:
    """
    FastAPI application factory

    Creates and configures the FastAPI application with all routers.
    """
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Same-domain crawler and sitemap generator",
    )

    # Root-level health endpoint
    app.include_router(health.root_router, tags=["health"])

    # Register routers with /api/v1 prefix
    app.include_router(health.router, prefix="/api/v1", tags=["health"])
    app.include_router(sitemap.router, prefix="/api/v1", tags=["sitemap"])

    return app


# Application instance
app = create_app()
