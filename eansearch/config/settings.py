"""
Client settings using Pydantic Settings.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

API_URL = "https://api.ean-search.org/api"


class Settings(BaseSettings):
    """Client configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        # Prefer local overrides while keeping .env as the default source
        env_file=(".env.local", ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # EAN-Search API
    ean_search_api_token: SecretStr | None = None
    ean_search_api_url: str = API_URL
    ean_search_timeout: float = Field(10.0, description="HTTP timeout in seconds")
    ean_search_language: int = Field(1, description="Default result language (1 = English)")

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "text"

    @property
    def api_token_str(self) -> str | None:
        """Get API token as string."""
        if self.ean_search_api_token:
            return self.ean_search_api_token.get_secret_value()
        return None


@lru_cache
def get_settings() -> Settings:
    """Get cached client settings."""
    return Settings()
