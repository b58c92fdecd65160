"""
Application configuration using Pydantic Settings.

Supports environment variables and .env files for configuration.
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings loaded from ADAPTOR_METADATA_* environment variables."""

    # Host event vocabulary
    request_event: str = "request_metadata"
    ready_event: str = "metadata_ready"

    @field_validator("request_event", "ready_event", mode="before")
    @classmethod
    def parse_event_name(cls, v):
        if isinstance(v, str):
            value = v.strip()
            if not value:
                raise ValueError("event name must not be blank")
            return value
        return v

    model_config = {
        "env_prefix": "ADAPTOR_METADATA_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
