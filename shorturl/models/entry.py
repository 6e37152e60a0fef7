"""URL entry data models.

This module defines the UrlEntry model mapping an original URL to its
sequential numeric short code.
"""
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class UrlEntryBase(SQLModel):
    """Base model for URL entry data."""

    original_url: str = Field(
        index=True,  # Duplicate check looks entries up by URL
        description="The original URL, stored exactly as submitted"
    )
    short_code: int = Field(
        unique=True,  # Creates the index used by lookups and MAX()
        ge=0,
        description="Sequential numeric code for the shortened URL",
    )


class UrlEntry(UrlEntryBase, table=True):
    """
    URL entry stored in the database.

    Entries are written once by the shortening path and never updated or
    deleted. Codes are allocated as the current maximum plus one.
    """

    __tablename__ = "url_entries"

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(
        default_factory=utc_now,
        sa_type=DateTime(timezone=True),
        description="Timestamp when this entry was created"
    )


class UrlEntryCreate(UrlEntryBase):
    """Schema for creating a new URL entry."""
    pass
