"""API request and response schemas.

This module contains Pydantic models for API request validation
and response serialization.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ShortenRequest(BaseModel):
    """Form body for shortening a URL.

    The URL is kept as a plain string; the service decides validity so that
    a bad URL yields the ``invalid URL`` payload rather than a 422.
    """
    url: str = Field("", description="The URL to shorten")


class ShortenResponse(BaseModel):
    """Response schema for a shortened URL."""
    original_url: str
    short_code: int
    short_url: str  # Full URL including base domain


class ErrorResponse(BaseModel):
    """Logical error payload."""
    error: str
    error_id: Optional[str] = None
