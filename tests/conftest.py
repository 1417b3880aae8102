"""Shared test fixtures for pytest."""

from unittest.mock import AsyncMock

import pytest

from audio.controller import AudioController
from pokedex_api.client import PokedexClient
from tests.factories import make_record


@pytest.fixture
def mock_pokedex_client():
    """Create a mock Pokedex client that returns pikachu."""
    client = AsyncMock(spec=PokedexClient)
    client.fetch_record = AsyncMock(return_value=make_record())
    client.check_api = AsyncMock(return_value=True)
    client.close = AsyncMock()
    return client


@pytest.fixture
def audio_controller():
    """A fresh audio controller with its own handle."""
    return AudioController()


@pytest.fixture
def sample_record():
    """Create a sample creature record for testing."""
    return make_record()
