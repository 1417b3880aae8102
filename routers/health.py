"""Health check router with a real Pokedex API connectivity check."""

import asyncio
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from config.settings import Settings, get_settings
from core.dependencies import get_pokedex_client
from pokedex_api.client import PokedexClient

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])

CHECK_TIMEOUT = 3.0


async def _check_pokedex_api(client: PokedexClient) -> str:
    """Ping the Pokedex API via the shared client."""
    return "ok" if await client.check_api() else "error"


async def _run_check(coro) -> str:
    """Run a single health check with a timeout."""
    try:
        return await asyncio.wait_for(coro, timeout=CHECK_TIMEOUT)
    except TimeoutError:
        return "timeout"


@router.get(
    "/health",
    summary="Health check",
    responses={
        200: {"description": "Service is healthy"},
        503: {"description": "Pokedex API unreachable"},
    },
)
async def health_check(
    settings: Settings = Depends(get_settings),
    client: PokedexClient = Depends(get_pokedex_client),
):
    """Health check probing the Pokedex API."""
    services = {"pokedex_api": await _run_check(_check_pokedex_api(client))}

    status = "healthy" if services["pokedex_api"] == "ok" else "unhealthy"
    if status != "healthy":
        logger.warning(f"Health check failed: {services}")

    body = {
        "status": status,
        "version": settings.app_version,
        "services": services,
    }

    return JSONResponse(content=body, status_code=200 if status == "healthy" else 503)
