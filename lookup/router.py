"""Lookup API router."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from posthog import Posthog

from config.settings import Settings, get_settings
from core.dependencies import get_pokedex_client, get_posthog_client
from lookup.models import LookupRequest, LookupResponse
from lookup.session import PokedexSession
from pokedex_api.client import PokedexClient

logger = logging.getLogger(__name__)

router = APIRouter(tags=["lookup"])


@router.post(
    "/lookup",
    response_model=LookupResponse,
    summary="Submit a Pokemon lookup",
    description="""
    Runs one user submission inside a fresh page session.

    The session's address bar starts at `location`. A non-blank
    `pokemon_name` is published to the address bar as `/?pokemon_name=<name>`
    and looked up in the Pokedex API; a blank name leaves the session idle
    and the location unchanged.

    The response carries the resulting lookup state (`idle`, `success` or
    `failure`), the audio source bound for playback and the new location.
    """,
    responses={
        200: {"description": "Lookup submitted; see state.status for the outcome"},
        500: {"description": "Internal server error"},
    },
)
async def submit_lookup(
    request: LookupRequest,
    settings: Settings = Depends(get_settings),
    client: PokedexClient = Depends(get_pokedex_client),
    posthog_client: Posthog | None = Depends(get_posthog_client),
):
    """Process a lookup submission."""
    try:
        session = PokedexSession.from_settings(
            client, settings, location=request.location, posthog_client=posthog_client
        )
        state = await session.submit(request.pokemon_name)

        return LookupResponse(
            state=state,
            audio_src=session.audio.source,
            location=str(session.address_bar.location),
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Lookup failed: {e}")
        raise HTTPException(status_code=500, detail="Internal server error") from e
