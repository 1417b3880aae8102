"""Custom exception classes for the Pokedex lookup tool."""


class PokedexError(Exception):
    """Base exception for all Pokedex errors."""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidQueryError(PokedexError):
    """Raised when a lookup query is empty or whitespace-only."""

    pass


class LookupFailedError(PokedexError):
    """Base for errors that end a lookup in the failure state.

    The ``message`` is what the end user sees.
    """

    pass


class ReportedError(LookupFailedError):
    """Raised when the Pokedex API answers with a structured error message."""

    pass


class TransportError(LookupFailedError):
    """Raised when the Pokedex API cannot be reached or its response cannot be parsed."""

    pass


class AudioUnavailableError(PokedexError):
    """Raised when playback is requested on a handle with no bound source."""

    pass


class ServiceInitializationError(PokedexError):
    """Raised when a service fails to initialize."""

    pass
