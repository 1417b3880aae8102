"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pokedex_api.client import DEFAULT_TRANSPORT_ERROR_MESSAGE


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Pokedex API Configuration
    pokedex_api_url: str = Field(
        default="http://localhost:8000", description="Base URL of the Pokedex lookup API"
    )
    request_timeout: float | None = Field(
        default=None, description="Seconds to wait for the Pokedex API (None waits indefinitely)"
    )
    transport_error_message: str = Field(
        default=DEFAULT_TRANSPORT_ERROR_MESSAGE,
        description="Message shown when the Pokedex API cannot be reached or parsed",
    )

    # Lookup Behaviour
    discard_stale_results: bool = Field(
        default=True,
        description="Ignore lookup results that resolve after a newer lookup was submitted",
    )

    # Application Configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=3000, description="Port to run the server on")
    log_level: str = Field(default="INFO", description="Logging level")

    # Feature Flags
    enable_telemetry: bool = Field(default=True, description="Enable PostHog telemetry")

    # PostHog Configuration
    posthog_api_key: str | None = Field(None, description="PostHog API key for telemetry")
    posthog_host: str = Field(default="https://us.i.posthog.com", description="PostHog host URL")

    # Sentry Configuration
    sentry_dsn: str | None = Field(None, description="Sentry DSN for error tracking")

    # Application Metadata
    app_name: str = Field(default="Pokedex da Ingridolas", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")

    @property
    def resolved_pokedex_api_url(self) -> str:
        """Get the API base URL without a trailing slash, handling empty env var case."""
        url = self.pokedex_api_url.strip()
        if not url:
            return "http://localhost:8000"
        return url.rstrip("/")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
