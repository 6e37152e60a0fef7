"""Application configuration module.

This module contains settings for the URL shortener application,
loaded from environment variables with appropriate defaults.
"""

from __future__ import annotations

from typing import Optional, Any, List, Union
from enum import Enum
from pathlib import Path
import logging

from pydantic import field_validator, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Set up basic logger for config module
logger = logging.getLogger(__name__)

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent.parent.parent


class EnvironmentType(str, Enum):
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """Application settings loaded from environment variables with defaults.

    Settings are loaded from environment variables, with fallback to
    values in .env file if present, and finally to the default values
    specified here.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment setting
    ENVIRONMENT: EnvironmentType = EnvironmentType.DEVELOPMENT

    # App Information
    APP_NAME: str = "URL Shortener"
    APP_VERSION: str = "0.1.0"
    APP_DESCRIPTION: str = "Shortens long URLs into sequential numeric codes"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # API Configuration
    BASE_URL: str = "http://localhost:3000"  # Used for generating short URLs
    API_PREFIX: str = "/api"
    DEBUG: bool = False

    # CORS settings
    CORS_ORIGINS: Union[List[str], str] = ["*"]  # Allow all origins by default

    # Short code allocation
    SHORT_CODE_ALLOCATION_ATTEMPTS: int = 3  # 1 disables retry after a lost insert race

    # Return 400/404 for logical errors instead of 200
    STRICT_STATUS_CODES: bool = False

    # Full database URL, overrides the POSTGRES_* components when set
    DB_URI: Optional[str] = None

    # PostgreSQL settings
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_DB: str = "url_shortener"

    # PostgreSQL pool settings
    POSTGRES_POOL_SIZE: int = 20
    POSTGRES_POOL_MAX_OVERFLOW: int = 10
    POSTGRES_POOL_TIMEOUT: int = 30
    POSTGRES_POOL_RECYCLE: int = 300
    DB_ECHO: bool = False

    # Database connection resilience settings
    DB_CONNECT_RETRY_ATTEMPTS: int = 5  # Max number of connection attempts during startup
    DB_CONNECT_RETRY_INITIAL_DELAY: float = 1.0  # Initial delay in seconds
    DB_CONNECT_RETRY_MAX_DELAY: float = 30.0  # Maximum delay in seconds
    DB_CONNECT_RETRY_JITTER: float = 0.1  # Jitter factor (0.0-1.0) to add randomness to backoff
    DB_CREATE_TABLES: bool = True  # Create missing tables on startup

    # Logging configuration
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_FILENAME: str = "app.log"
    LOG_ROTATION: str = "10 MB"
    LOG_RETENTION: str = "7 days"
    LOG_FORMAT: str = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {message}"
    LOG_JSON: bool = True
    LOG_TO_FILE: bool = True
    REQUEST_LOGGING_ENABLED: bool = True  # Enable request logging middleware

    # Validators
    @field_validator("DB_URI", mode="before")
    def validate_db_uri(cls, v: Any) -> Optional[str]:
        """Treat an empty DB_URI as unset."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        return v

    @field_validator("SHORT_CODE_ALLOCATION_ATTEMPTS")
    def validate_allocation_attempts(cls, v: int) -> int:
        if v < 1:
            raise ValueError("SHORT_CODE_ALLOCATION_ATTEMPTS must be at least 1")
        return v

    @field_validator("CORS_ORIGINS")
    def validate_list_or_string(cls, v: Union[List[str], str]) -> List[str]:
        """Convert comma-separated string to list if needed."""
        if isinstance(v, str):
            # If it's an empty string, return an empty list
            if not v.strip():
                return []
            # If it's a single "*", keep it as a list with one element
            if v == "*":
                return ["*"]
            # Otherwise split by comma and strip whitespace
            return [item.strip() for item in v.split(",")]
        return v

    # Computed fields
    @computed_field
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        """Construct the SQLAlchemy database URI from settings or use DB_URI."""
        if self.DB_URI:
            return self.DB_URI

        # Construct the URI from individual components
        return f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"


# Create a singleton instance of the settings
settings = Settings()
