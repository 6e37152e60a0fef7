"""Routes package initialization.

This module exports the route collection for the application.
"""

from fastapi import APIRouter

from shorturl.api.routes import shortener, health
from shorturl.core.config import settings

# Create root router
api_router = APIRouter()

# Short URL routes live under /api/shorturl
api_router.include_router(
    shortener.router,
    prefix=settings.API_PREFIX
)

# Include health check routes with API prefix
api_router.include_router(
    health.router,
    prefix=settings.API_PREFIX
)

__all__ = ["api_router"]
