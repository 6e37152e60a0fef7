"""Tests for repository error handling."""

import pytest
from unittest.mock import patch
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from shorturl.repositories.entry_repository import RepositoryError
from tests.utils import random_url


@pytest.mark.repository
class TestRepositoryErrorHandling:
    """Tests for error handling in repositories."""

    @pytest.mark.asyncio
    async def test_lookup_by_code_error(self, test_db, entry_repository):
        """Driver errors surface as RepositoryError."""
        with patch.object(test_db, 'execute', side_effect=SQLAlchemyError("Test database error")):
            with pytest.raises(RepositoryError) as excinfo:
                await entry_repository.find_by_code(test_db, 1)

        assert "Test database error" in str(excinfo.value)

    @pytest.mark.asyncio
    async def test_lookup_by_url_error(self, test_db, entry_repository):
        with patch.object(test_db, 'execute', side_effect=SQLAlchemyError("connection reset")):
            with pytest.raises(RepositoryError):
                await entry_repository.find_by_url(test_db, random_url())

    @pytest.mark.asyncio
    async def test_max_code_error(self, test_db, entry_repository):
        error = OperationalError("SELECT max(short_code)", {}, Exception("database is locked"))
        with patch.object(test_db, 'execute', side_effect=error):
            with pytest.raises(RepositoryError) as excinfo:
                await entry_repository.find_max_code(test_db)

        assert excinfo.value.__cause__ is error

    @pytest.mark.asyncio
    async def test_insert_error(self, test_db, entry_repository):
        """Non-constraint failures during insert are RepositoryError, not duplicates."""
        with patch.object(test_db, 'flush', side_effect=SQLAlchemyError("disk I/O error")):
            with pytest.raises(RepositoryError) as excinfo:
                await entry_repository.insert(test_db, random_url(), 1)

        assert "disk I/O error" in str(excinfo.value)
        assert await entry_repository.count(test_db) == 0

    @pytest.mark.asyncio
    async def test_count_error(self, test_db, entry_repository):
        with patch.object(test_db, 'execute', side_effect=SQLAlchemyError("gone away")):
            with pytest.raises(RepositoryError):
                await entry_repository.count(test_db)
