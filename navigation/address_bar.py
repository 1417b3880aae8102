"""Address bar state for a lookup session."""

import logging

import httpx

logger = logging.getLogger(__name__)


class AddressBar:
    """The session's current location plus its pushed history entries.

    Pushing a state changes the visible location without a reload; nothing
    is fetched and no lookup is triggered by it.
    """

    def __init__(self, location: str | httpx.URL = "/"):
        self._location = httpx.URL(location)
        self._history: list[httpx.URL] = [self._location]

    @property
    def location(self) -> httpx.URL:
        return self._location

    @property
    def history(self) -> list[httpx.URL]:
        return list(self._history)

    def push_state(self, url: str | httpx.URL) -> None:
        """Append one history entry and make it the current location."""
        self._location = httpx.URL(url)
        self._history.append(self._location)
        logger.debug(f"Address bar pushed {self._location}")
