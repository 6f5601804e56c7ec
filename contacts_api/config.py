"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - MONGODB_URL has no default: a missing store URL fails at boot
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - DB_NAME defaults to "test", matching the driver's own default database
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Document store
    mongodb_url: str
    db_name: str = "test"
    store_timeout_ms: int = 5000

    @field_validator("mongodb_url")
    @classmethod
    def require_mongodb_url(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("MONGODB_URL cannot be empty")
        return v

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 3000

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
