"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables and .env files.
"""

from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Folio"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: Literal["local", "development", "staging", "production"] = "local"
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False

    # Quote Provider
    QUOTE_PROVIDER: Literal["yahoo", "yfinance"] = "yahoo"
    QUOTE_BASE_URL: str = "https://query1.finance.yahoo.com/v8/finance/chart"
    QUOTE_USER_AGENT: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
    )
    QUOTE_REQUEST_TIMEOUT_SEC: float = 10.0
    QUOTE_FETCH_TIMEOUT_SEC: float = 15.0  # per name, resolve + fetch
    QUOTE_MAX_CONCURRENCY: int = 8

    # Price API
    PRICES_CACHE_MAX_AGE_SEC: int = 60
    PRICES_STALE_WHILE_REVALIDATE_SEC: int = 30
    PRICE_API_BASE_URL: str = "http://localhost:8000"
    PRICE_API_TIMEOUT_SEC: float = 30.0

    # CORS
    CORS_ORIGINS: list[str] = ["http://localhost:3000", "http://localhost:8000"]

    @property
    def prices_cache_control(self) -> str:
        """Cache-Control header value for price responses."""
        return (
            f"public, s-maxage={self.PRICES_CACHE_MAX_AGE_SEC}, "
            f"stale-while-revalidate={self.PRICES_STALE_WHILE_REVALIDATE_SEC}"
        )


# Global settings instance
settings = Settings()
