"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded in code paths)
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://schedule:schedule@db:5432/sports_schedule"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Access control
    jwt_secret: str = "change-me"
    jwt_algorithm: str = "HS256"
    token_ttl_minutes: int = 60
    guest_token_ttl_minutes: int = 24 * 60
    allow_admin_registration: bool = False

    # Integrity engine
    integrity_timeout_seconds: float = 10.0

    # Maps
    google_maps_api_key: str | None = None

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
