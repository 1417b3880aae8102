"""FastAPI dependency injection providers."""

import logging

from fastapi import Depends
from posthog import Posthog

from config.settings import Settings, get_settings
from core.exceptions import ServiceInitializationError
from pokedex_api.client import PokedexClient

logger = logging.getLogger(__name__)

# Module-level instances for lifecycle management
_pokedex_client: PokedexClient | None = None
_posthog_client: Posthog | None = None


def get_pokedex_client(settings: Settings = Depends(get_settings)) -> PokedexClient:
    """Get the shared Pokedex API client.

    Args:
        settings: Application settings

    Returns:
        PokedexClient: Client bound to the configured API URL

    Raises:
        ServiceInitializationError: If the client cannot be created
    """
    global _pokedex_client

    if _pokedex_client is None:
        try:
            _pokedex_client = PokedexClient(
                base_url=settings.resolved_pokedex_api_url,
                timeout=settings.request_timeout,
                transport_error_message=settings.transport_error_message,
            )
        except Exception as e:
            logger.error(f"Failed to initialize Pokedex client: {e}")
            raise ServiceInitializationError(f"Pokedex client initialization failed: {e}") from e
        logger.info(f"Pokedex client initialized (api: {settings.resolved_pokedex_api_url})")

    return _pokedex_client


async def close_pokedex_client() -> None:
    """Close the Pokedex client's HTTP connection pool."""
    global _pokedex_client
    if _pokedex_client:
        await _pokedex_client.close()
        _pokedex_client = None


def get_posthog_client(settings: Settings = Depends(get_settings)) -> Posthog | None:
    """Get PostHog client instance.

    Args:
        settings: Application settings

    Returns:
        Optional[Posthog]: PostHog client if configured and enabled, None otherwise
    """
    global _posthog_client

    if not settings.enable_telemetry:
        logger.debug("Telemetry disabled")
        return None

    if not settings.posthog_api_key:
        logger.debug("POSTHOG_API_KEY not set - telemetry disabled")
        return None

    if _posthog_client is None:
        _posthog_client = Posthog(
            project_api_key=settings.posthog_api_key,
            host=settings.posthog_host,
        )
        logger.info(f"PostHog client initialized (host: {settings.posthog_host})")

    return _posthog_client


def flush_posthog() -> None:
    """Flush any buffered PostHog events."""
    if _posthog_client:
        _posthog_client.flush()


def shutdown_posthog() -> None:
    """Shutdown PostHog client gracefully."""
    global _posthog_client
    if _posthog_client:
        _posthog_client.shutdown()
        _posthog_client = None
        logger.info("PostHog client shutdown")
