"""
Configuration management for the test card scraper.
"""
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

from utils.exceptions import UnknownSourceError

load_dotenv()

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0 Safari/537.36"
)


class ScraperSettings(BaseSettings):
    """Scraper settings loaded from SCRAPER_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SCRAPER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Source selection
    source: str = "adyen"
    adyen_url: str = "https://docs.adyen.com/development-resources/testing/test-card-numbers/"

    # Page loading
    proxy: Optional[str] = None
    timeout_ms: int = 60000
    headless: bool = True
    user_agent: str = DEFAULT_USER_AGENT
    ignore_https_errors: bool = True

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def url_for(self, source: str) -> str:
        """Return the documentation URL configured for a source."""
        url = getattr(self, f"{source.lower()}_url", None)
        if not url:
            raise UnknownSourceError(source)
        return url


@lru_cache
def get_settings() -> ScraperSettings:
    """Get cached settings instance."""
    return ScraperSettings()
