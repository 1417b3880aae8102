"""One page session: address bar, audio handle and lookup state machine."""

import logging

from posthog import Posthog

from audio.controller import AudioController
from config.settings import Settings
from core.exceptions import InvalidQueryError
from lookup.models import LookupQuery, LookupState
from lookup.state_machine import LookupStateMachine, RecordFetcher
from navigation.address_bar import AddressBar
from navigation.deep_link import DeepLinkSynchronizer
from pokedex_api.client import DEFAULT_TRANSPORT_ERROR_MESSAGE

logger = logging.getLogger(__name__)


class PokedexSession:
    """Wires the components of a single page session together.

    ``start()`` runs once and replays a deep link; ``submit()`` handles
    user-entered names and rewrites the address bar before dispatching.
    """

    def __init__(
        self,
        client: RecordFetcher,
        address_bar: AddressBar | None = None,
        audio: AudioController | None = None,
        discard_stale_results: bool = True,
        transport_error_message: str = DEFAULT_TRANSPORT_ERROR_MESSAGE,
        posthog_client: Posthog | None = None,
    ):
        self.address_bar = address_bar if address_bar is not None else AddressBar()
        self.audio = audio if audio is not None else AudioController()
        self.deep_link = DeepLinkSynchronizer(self.address_bar)
        self.machine = LookupStateMachine(
            client,
            self.audio,
            discard_stale_results=discard_stale_results,
            transport_error_message=transport_error_message,
            posthog_client=posthog_client,
        )
        self._started = False

    @classmethod
    def from_settings(
        cls,
        client: RecordFetcher,
        settings: Settings,
        location: str = "/",
        posthog_client: Posthog | None = None,
    ) -> "PokedexSession":
        """Build a fresh session whose address bar starts at ``location``."""
        return cls(
            client,
            address_bar=AddressBar(location),
            discard_stale_results=settings.discard_stale_results,
            transport_error_message=settings.transport_error_message,
            posthog_client=posthog_client,
        )

    @property
    def state(self) -> LookupState:
        return self.machine.state

    async def start(self) -> LookupState:
        """Dispatch the deep-linked lookup, if the address carries one.

        The address bar is left as it is; only user submissions rewrite it.
        """
        if self._started:
            logger.debug("Session already started")
            return self.state
        self._started = True

        query = self.deep_link.read_initial_query()
        if query is None:
            return self.state
        return await self.machine.submit(query)

    async def submit(self, raw_name: str) -> LookupState:
        """Handle a name typed by the user. Blank input changes nothing."""
        try:
            query = LookupQuery.parse(raw_name)
        except InvalidQueryError:
            logger.debug("Ignoring blank submission")
            return self.state

        self.deep_link.publish_query(query)
        return await self.machine.submit(query)
