"""Tests for settings and startup helpers."""

import pytest
from pydantic import ValidationError
from unittest.mock import patch

from shorturl.core.config import Settings, settings
from shorturl.db import resilience


def test_db_uri_overrides_postgres_components():
    config = Settings(_env_file=None, DB_URI="sqlite+aiosqlite:///./shorturl.db")

    assert config.SQLALCHEMY_DATABASE_URI == "sqlite+aiosqlite:///./shorturl.db"


def test_empty_db_uri_composes_postgres_url():
    config = Settings(
        _env_file=None,
        DB_URI="",
        POSTGRES_USER="app",
        POSTGRES_PASSWORD="secret",
        POSTGRES_SERVER="db",
        POSTGRES_PORT=5433,
        POSTGRES_DB="links",
    )

    assert config.SQLALCHEMY_DATABASE_URI == "postgresql+asyncpg://app:secret@db:5433/links"


def test_cors_origins_from_comma_separated_string():
    config = Settings(_env_file=None, CORS_ORIGINS="https://a.example, https://b.example")

    assert config.CORS_ORIGINS == ["https://a.example", "https://b.example"]


def test_port_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")

    assert Settings(_env_file=None).PORT == 8080


def test_allocation_attempts_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, SHORT_CODE_ALLOCATION_ATTEMPTS=0)


def test_backoff_delay_is_capped(monkeypatch):
    monkeypatch.setattr(settings, "DB_CONNECT_RETRY_INITIAL_DELAY", 1.0)
    monkeypatch.setattr(settings, "DB_CONNECT_RETRY_MAX_DELAY", 5.0)
    monkeypatch.setattr(settings, "DB_CONNECT_RETRY_JITTER", 0.0)

    assert [resilience.backoff_delay(n) for n in range(1, 6)] == [1.0, 2.0, 4.0, 5.0, 5.0]


@pytest.mark.asyncio
async def test_initialize_database_connection_gives_up(monkeypatch):
    monkeypatch.setattr(settings, "DB_CONNECT_RETRY_ATTEMPTS", 2)

    with patch.object(resilience, "get_session", side_effect=ConnectionRefusedError("refused")), \
            patch.object(resilience.asyncio, "sleep") as sleep:
        assert await resilience.initialize_database_connection() is False

    sleep.assert_awaited_once()


@pytest.mark.asyncio
async def test_initialize_database_connection_succeeds():
    assert await resilience.initialize_database_connection() is True
