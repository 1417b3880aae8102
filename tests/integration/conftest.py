"""Integration test fixtures.

Provides the FastAPI app wired to a real PokedexClient whose HTTP traffic
goes to an in-process fake of the Pokedex API.
"""

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from config.settings import Settings
from pokedex_api.client import PokedexClient
from tests.factories import PIKACHU_PAYLOAD, make_api_transport, make_payload

# ---------------------------------------------------------------------------
# Seed data -- records served by the fake API
# ---------------------------------------------------------------------------

SEED_RECORDS = {
    "pikachu": PIKACHU_PAYLOAD,
    "charmander": make_payload(
        "charmander",
        types=["fire"],
        abilities=["blaze", "solar-power"],
        stats={"hp": 39, "attack": 52, "defense": 43, "speed": 65},
        cries="https://raw.githubusercontent.com/PokeAPI/cries/main/cries/pokemon/latest/4.ogg",
    ),
    "missingno": {"name": "missingno"},
}


@pytest.fixture
def api_calls():
    """Names requested from the fake API, in order."""
    return []


@pytest.fixture
def integration_settings():
    return Settings(
        _env_file=None,
        pokedex_api_url="http://pokedex.test",
        sentry_dsn=None,
        posthog_api_key=None,
        enable_telemetry=False,
    )


@pytest_asyncio.fixture
async def pokedex_client(api_calls):
    client = PokedexClient(
        "http://pokedex.test", transport=make_api_transport(SEED_RECORDS, calls=api_calls)
    )
    yield client
    await client.close()


@pytest_asyncio.fixture
async def offline_client():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Name or service not known", request=request)

    client = PokedexClient("http://pokedex.test", transport=httpx.MockTransport(handler))
    yield client
    await client.close()


def _app_with(client, settings):
    from config.settings import get_settings
    from core.dependencies import get_pokedex_client, get_posthog_client
    from main import app

    app.dependency_overrides[get_pokedex_client] = lambda: client
    app.dependency_overrides[get_posthog_client] = lambda: None
    app.dependency_overrides[get_settings] = lambda: settings
    return app


@pytest_asyncio.fixture
async def app_client(pokedex_client, integration_settings):
    """HTTP client for the app backed by the fake Pokedex API."""
    app = _app_with(pokedex_client, integration_settings)
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://localhost:3000"
        ) as client:
            yield client
    finally:
        app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def offline_app_client(offline_client, integration_settings):
    """HTTP client for the app whose Pokedex API is unreachable."""
    app = _app_with(offline_client, integration_settings)
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://localhost:3000"
        ) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
