"""URL shortening service for the URL shortener application.

This module contains the ShortenerService class which implements business logic
for shortening URLs into sequential numeric codes and resolving them back.
"""

import logging
import re
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from shorturl.models.entry import UrlEntry
from shorturl.repositories.entry_repository import EntryRepository
from shorturl.repositories.base import DuplicateEntityError
from shorturl.services.exceptions import (
    URLValidationError,
    ShortCodeFormatError,
    URLNotFoundError,
    ShortCodeAllocationError,
)
from shorturl.core.config import settings
from shorturl.db.session import db_transaction

logger = logging.getLogger(__name__)

# RFC 3986 appendix B: scheme, authority, path, query, fragment
_URI_PARTS = re.compile(r"^(?:([^:/?#]+):)?(?://([^/?#]*))?([^?#]*)(?:\?([^#]*))?(?:#(.*))?")
_SCHEME = re.compile(r"^[a-zA-Z][a-zA-Z0-9+\-.]*$")
_ILLEGAL_CHARS = re.compile(r"[^a-zA-Z0-9:/?#\[\]@!$&'()*+,;=.\-_~%]")
_BAD_ESCAPE = re.compile(r"%(?![0-9a-fA-F]{2})")

# Leading integer, trailing characters ignored
_CODE_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")


class ShortenerService:
    """
    Service for URL shortening business logic.

    Holds no mutable state between requests; the next short code is derived
    from the store on every call.
    """

    def __init__(self, entry_repository: EntryRepository, allocation_attempts: Optional[int] = None):
        """
        Initialize the URL shortening service.

        Args:
            entry_repository: Repository for entry data access
            allocation_attempts: Insert attempts before giving up on a
                contended short code (defaults to settings)
        """
        self.entry_repository = entry_repository
        self.allocation_attempts = allocation_attempts or settings.SHORT_CODE_ALLOCATION_ATTEMPTS

    @db_transaction(db_param_name="db")
    async def shorten(self, db: AsyncSession, url: str) -> UrlEntry:
        """
        Return the entry for a URL, creating it with the next code if needed.

        Submitting the same URL again returns the existing entry unchanged.

        Args:
            db: Database session
            url: The URL to shorten, stored exactly as given

        Returns:
            UrlEntry: The existing or newly created entry

        Raises:
            URLValidationError: If the URL is not a well-formed absolute URI
            ShortCodeAllocationError: If every insert attempt hit a taken code
            RepositoryError: On database failures
        """
        if not self.is_valid_url(url):
            raise URLValidationError("invalid URL")

        for attempt in range(1, self.allocation_attempts + 1):
            existing = await self.entry_repository.find_by_url(db, url)
            if existing is not None:
                logger.debug(f"URL already shortened as {existing.short_code}")
                return existing

            next_code = await self.entry_repository.find_max_code(db) + 1
            try:
                entry = await self.entry_repository.insert(db, url, next_code)
            except DuplicateEntityError:
                logger.warning(
                    f"Short code {next_code} was claimed concurrently "
                    f"(attempt {attempt}/{self.allocation_attempts})"
                )
                continue

            logger.info(f"Created short code {entry.short_code}")
            return entry

        raise ShortCodeAllocationError(
            f"Failed to allocate a short code after {self.allocation_attempts} attempts"
        )

    async def resolve(self, db: AsyncSession, code_param: str) -> UrlEntry:
        """
        Look up the entry whose original URL a short code redirects to.

        Args:
            db: Database session
            code_param: Raw short code from the request path

        Returns:
            UrlEntry: The matching entry

        Raises:
            ShortCodeFormatError: If the parameter does not start with an integer
            URLNotFoundError: If no entry has this code
            RepositoryError: On database failures
        """
        code = self.parse_code(code_param)

        entry = await self.entry_repository.find_by_code(db, code)
        if entry is None:
            raise URLNotFoundError("page not found")
        return entry

    @staticmethod
    def parse_code(code_param: str) -> int:
        """
        Parse the leading base-10 integer of a short code parameter.

        ``"42"`` and ``" 42abc"`` both give 42; ``"-3"`` gives -3.

        Raises:
            ShortCodeFormatError: If there is no leading integer
        """
        match = _CODE_PREFIX.match(code_param or "")
        if match is None:
            raise ShortCodeFormatError("shortId must be a number")
        return int(match.group(1))

    @staticmethod
    def is_valid_url(url) -> bool:
        """
        Check that a URL is an absolute URI with a scheme and an authority.

        Args:
            url: Candidate URL

        Returns:
            bool: True if the URL is valid, False otherwise
        """
        if not isinstance(url, str) or not url:
            return False

        if _ILLEGAL_CHARS.search(url) or _BAD_ESCAPE.search(url):
            return False

        scheme, authority, path, _query, _fragment = _URI_PARTS.match(url).groups()

        if not scheme or not _SCHEME.match(scheme):
            return False

        # An authority is required; the path after it is empty or absolute
        if not authority:
            return False
        return path == "" or path.startswith("/")
