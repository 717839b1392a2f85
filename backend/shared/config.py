"""
Centralized configuration for the Journeyboard backend.

All settings are loaded from environment variables with sensible defaults.
Variable names match the deployment environment (PORT, DATABASE_URL, ...).
"""

from functools import lru_cache
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
    app_name: str = "Journeyboard API"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = False
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # PostgreSQL
    database_url: str = ""
    database_pool_min: int = 0
    database_pool_max: int = 20
    # Seconds a request waits for a free pooled connection
    database_pool_timeout: float = 30.0

    # Firebase service account: inline JSON or a path to the JSON file
    firebase_service_account: str = ""

    # Timezone that defines the calendar day for daily journeys
    journey_timezone: str = "UTC"

    @property
    def is_production(self) -> bool:
        """Whether the service runs in the production environment."""
        return self.environment.strip().lower() == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
