"""API dependencies for FastAPI.

This module provides dependency injection functions for FastAPI endpoints
to access repositories and service instances.
"""

from fastapi import Depends

from shorturl.repositories.entry_repository import EntryRepository
from shorturl.services.shortener import ShortenerService
from shorturl.core.config import settings


async def get_entry_repository() -> EntryRepository:
    """Get an instance of the entry repository."""
    return EntryRepository()


async def get_shortener_service(
    entry_repo: EntryRepository = Depends(get_entry_repository),
) -> ShortenerService:
    """Get an instance of the URL shortening service."""
    return ShortenerService(entry_repository=entry_repo)


def get_base_url() -> str:
    """Get the base URL for shortened links."""
    return settings.BASE_URL.rstrip("/")
