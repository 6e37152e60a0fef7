"""Entry Repository for the URL shortener application.

This module provides the EntryRepository class for database operations on
UrlEntry models: duplicate lookups by URL, lookups by short code, the
max-code aggregate used for allocation, and inserts.
"""

import logging
from typing import Optional

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from shorturl.models.entry import UrlEntry, UrlEntryCreate
from shorturl.repositories.base import BaseRepository, RepositoryError, DuplicateEntityError

logger = logging.getLogger(__name__)

# Bounds of the short_code INTEGER column (32-bit signed on PostgreSQL)
SHORT_CODE_MIN = -(2 ** 31)
SHORT_CODE_MAX = 2 ** 31 - 1


class EntryRepository(BaseRepository[UrlEntry, UrlEntryCreate]):
    """
    Repository for UrlEntry model database operations.

    Lookups return None when nothing matches; every driver or connectivity
    failure is raised as RepositoryError.
    """

    def __init__(self):
        super().__init__(UrlEntry)

    async def find_by_url(self, db: AsyncSession, url: str) -> Optional[UrlEntry]:
        """
        Find the entry for an original URL (exact match, no normalization).

        Args:
            db: Database session
            url: Original URL as submitted

        Returns:
            The first matching UrlEntry, or None
        """
        try:
            query = (
                select(self.model_type)
                .where(self.model_type.original_url == url)
                .order_by(self.model_type.short_code)
                .limit(1)
            )
            result = await db.execute(query)
            return result.scalars().first()
        except SQLAlchemyError as e:
            logger.error(f"Error retrieving entry by URL: {e}")
            raise RepositoryError(f"Error retrieving entry by URL: {e}") from e

    async def find_by_code(self, db: AsyncSession, code: int) -> Optional[UrlEntry]:
        """
        Find an entry by its short code.

        Args:
            db: Database session
            code: Short code to look up; any integer is accepted

        Returns:
            The UrlEntry if found, None otherwise
        """
        # No stored entry can hold a code the column cannot represent
        if not SHORT_CODE_MIN <= code <= SHORT_CODE_MAX:
            return None

        try:
            query = select(self.model_type).where(self.model_type.short_code == code)
            result = await db.execute(query)
            return result.scalars().first()
        except SQLAlchemyError as e:
            logger.error(f"Error retrieving entry by short code {code}: {e}")
            raise RepositoryError(f"Error retrieving entry by short code: {e}") from e

    async def find_max_code(self, db: AsyncSession) -> int:
        """
        Get the highest short code currently stored.

        Returns:
            The maximum short code, or 0 when the store is empty
        """
        try:
            query = select(func.max(self.model_type.short_code))
            result = await db.execute(query)
            max_code = result.scalar_one_or_none()
            return max_code if max_code is not None else 0
        except SQLAlchemyError as e:
            logger.error(f"Error computing max short code: {e}")
            raise RepositoryError(f"Error computing max short code: {e}") from e

    async def insert(self, db: AsyncSession, url: str, code: int) -> UrlEntry:
        """
        Persist a new entry.

        Args:
            db: Database session
            url: Original URL
            code: Short code to assign

        Returns:
            The created UrlEntry

        Raises:
            DuplicateEntityError: If the short code is already taken
            RepositoryError: On other database errors
        """
        try:
            return await self.create(db, UrlEntryCreate(original_url=url, short_code=code))
        except IntegrityError as e:
            logger.warning(f"Short code {code} already taken: {e.orig}")
            raise DuplicateEntityError(self.model_type, "short_code", code) from e
