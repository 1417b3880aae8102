"""Server-rendered Pokedex page.

Each page load is a new session: the request URL is the address bar, so a
``?pokemon_name=`` deep link is looked up before the page is rendered. The
search form submits back to ``/`` with the same parameter.
"""

import logging
from html import escape

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from posthog import Posthog

from config.settings import Settings, get_settings
from core.dependencies import get_pokedex_client, get_posthog_client
from lookup.models import Failure, Loading, Success
from lookup.session import PokedexSession
from pokedex_api.client import PokedexClient
from pokedex_api.models import CreatureRecord

logger = logging.getLogger(__name__)

router = APIRouter(tags=["page"])

UNKNOWN_M = "Desconhecido"
UNKNOWN_F = "Desconhecida"

STAT_LABELS = (
    ("attack", "Ataque"),
    ("defense", "Defesa"),
    ("hp", "HP"),
    ("special-attack", "Ataque Especial"),
    ("special-defense", "Defesa Especial"),
    ("speed", "Velocidade"),
)


def _value(value, unknown: str = UNKNOWN_M) -> str:
    if value is None:
        return unknown
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return escape(str(value))


def _labels(values: list[str] | None) -> str:
    if values is None:
        return UNKNOWN_M
    return escape(", ".join(values))


def render_record(record: CreatureRecord, audio_src: str | None) -> str:
    """Render the record panel. ``audio_src`` is the controller's bound source."""
    name = escape(record.display_name)
    parts = ['<div class="pokemon-info">', f"<h2>{name}</h2>"]

    if record.sprites:
        parts.append('<div class="image-gallery">')
        for index, sprite in enumerate(record.sprites, start=1):
            parts.append(
                f'<img src="{escape(sprite)}" alt="{escape(record.name or "")} sprite {index}" '
                'class="sprite-image">'
            )
        parts.append("</div>")

    parts += [
        '<div class="info-table">',
        f"<p><strong>Altura:</strong> {_value(record.height, UNKNOWN_F)} decímetros</p>",
        f"<p><strong>Peso:</strong> {_value(record.weight)} hectogramas</p>",
        f"<p><strong>Tipo(s):</strong> {_labels(record.types)}</p>",
        f"<p><strong>Habilidade(s):</strong> {_labels(record.abilities)}</p>",
        "</div>",
        '<div class="stats-table">',
        "<h3>Estatísticas:</h3>",
        "<ul>",
    ]
    for stat_name, label in STAT_LABELS:
        parts.append(f"<li><strong>{label}:</strong> {_value(record.stats.get(stat_name))}</li>")
    parts += ["</ul>", "</div>"]

    # No autoplay attribute: playback starts only from the user.
    parts += [
        '<div class="audio-container">',
        '<label class="audio-label">Áudio do Pokémon (Noise)</label>',
        '<audio controls class="audio-player">',
    ]
    if audio_src:
        parts.append(f'<source src="{escape(audio_src)}" type="audio/ogg">')
    parts += ["Seu navegador não suporta o áudio.", "</audio>", "</div>", "</div>"]

    return "\n".join(parts)


def render_page(session: PokedexSession, title: str = "Pokedex da Ingridolas") -> str:
    """Render the full page for the session's current state."""
    state = session.state
    query = state.query if isinstance(state, (Loading, Success, Failure)) else ""

    body = [
        f"<h1>{escape(title)}</h1>",
        '<form method="get" action="/">',
        f'<input type="text" name="pokemon_name" value="{escape(query)}" '
        'placeholder="Digite o nome do Pokémon">',
        '<button type="submit">Buscar</button>',
        "</form>",
    ]

    if isinstance(state, Loading):
        body.append("<p>Carregando...</p>")
    elif isinstance(state, Failure):
        body.append(f'<p class="error-message">{escape(state.message)}</p>')
    elif isinstance(state, Success):
        body.append(render_record(state.record, session.audio.source))

    return "\n".join(
        [
            "<!DOCTYPE html>",
            '<html lang="pt-BR">',
            '<head><meta charset="utf-8">',
            f"<title>{escape(title)}</title></head>",
            '<body><div class="App">',
            *body,
            "</div></body>",
            "</html>",
        ]
    )


@router.get("/", response_class=HTMLResponse, summary="Pokedex page")
async def pokedex_page(
    request: Request,
    settings: Settings = Depends(get_settings),
    client: PokedexClient = Depends(get_pokedex_client),
    posthog_client: Posthog | None = Depends(get_posthog_client),
):
    """Render the page, running the deep-linked lookup first if present."""
    session = PokedexSession.from_settings(
        client, settings, location=str(request.url), posthog_client=posthog_client
    )
    await session.start()
    logger.debug(f"Rendering page in state '{session.state.status}'")
    return HTMLResponse(render_page(session, title=settings.app_name))
