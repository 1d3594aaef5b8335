"""Configuration management for omdb-searcher."""

from functools import lru_cache
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # OMDb
    omdb_api_key: str | None = None  # Used when --api-key is not given
    omdb_base_url: str = "http://www.omdbapi.com/"
    omdb_request_timeout: PositiveInt | None = None  # Seconds, no timeout by default

    # Menu behaviour
    # When set, a non-numeric menu entry aborts instead of re-prompting
    omdb_strict_input: bool = False

    # Network settings
    # Proxy configuration in the format http://host:port or socks5://host:port
    proxy: str | None = None

    @field_validator("proxy")
    @classmethod
    def validate_proxy(cls, v: str | None) -> str | None:
        if v is None:
            return v

        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https", "socks4", "socks5", "socks5h"):
            raise ValueError(
                "Proxy must be a valid URL with scheme http/https/socks4/socks5/socks5h"
            )
        if not parsed.netloc:
            raise ValueError("Proxy must have a host and port")
        return v

    @field_validator("omdb_base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError("OMDb base URL must be an absolute http/https URL")
        return v

    # App settings
    debug: bool = False

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


class SearchConfig(BaseModel):
    """Options for a single search, resolved once from the command line."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(min_length=1)
    search_term: str = Field(min_length=1)
    result_count: PositiveInt = 5


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
