"""Lookup lifecycle: Idle -> Loading -> (Success | Failure), indefinitely.

Every submission moves the machine to ``Loading`` and awaits exactly one
fetch. Resolutions are applied in the order they arrive. Each dispatched
request carries a sequence number; with ``discard_stale_results`` enabled a
resolution whose number is not the highest issued is dropped, so the visible
state always reflects the most recent submission. With it disabled, the last
resolution to arrive wins regardless of submission order.
"""

import logging
from collections.abc import Callable
from typing import Protocol

from posthog import Posthog

from audio.controller import AudioController
from core.exceptions import InvalidQueryError, LookupFailedError
from core.sentry import add_lookup_breadcrumb
from core.telemetry import LookupTelemetry
from lookup.models import Failure, Idle, Loading, LookupQuery, LookupState, Success
from pokedex_api.client import DEFAULT_TRANSPORT_ERROR_MESSAGE
from pokedex_api.models import CreatureRecord

logger = logging.getLogger(__name__)

StateListener = Callable[[LookupState], None]


class RecordFetcher(Protocol):
    async def fetch_record(self, query: str) -> CreatureRecord: ...


class LookupStateMachine:
    """Drives lookups against a record fetcher and owns the visible state."""

    def __init__(
        self,
        client: RecordFetcher,
        audio: AudioController,
        discard_stale_results: bool = True,
        transport_error_message: str = DEFAULT_TRANSPORT_ERROR_MESSAGE,
        posthog_client: Posthog | None = None,
    ):
        self.client = client
        self.audio = audio
        self.discard_stale_results = discard_stale_results
        self.transport_error_message = transport_error_message
        self.posthog_client = posthog_client
        self._state: LookupState = Idle()
        self._issued = 0
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> LookupState:
        return self._state

    @property
    def issued(self) -> int:
        """Number of lookups dispatched so far."""
        return self._issued

    def add_listener(self, listener: StateListener) -> None:
        """Register a callable invoked with every newly applied state."""
        self._listeners.append(listener)

    def _transition(self, new_state: LookupState) -> None:
        logger.debug(f"Lookup state {self._state.status} -> {new_state.status}")
        self._state = new_state
        for listener in self._listeners:
            listener(new_state)

    def _is_stale(self, sequence: int) -> bool:
        return self.discard_stale_results and sequence != self._issued

    async def submit(self, raw_query: "str | LookupQuery") -> LookupState:
        """Dispatch one lookup and wait for it to resolve.

        Blank input is ignored: no transition, no fetch.

        Returns:
            The state after this lookup's resolution was applied or discarded
        """
        try:
            query = LookupQuery.parse(raw_query)
        except InvalidQueryError:
            logger.debug("Ignoring blank lookup query")
            return self._state

        self._issued += 1
        sequence = self._issued
        self._transition(Loading(query=query.name))

        telemetry = LookupTelemetry(query=query.name, sequence=sequence)
        record: CreatureRecord | None = None
        error_message: str | None = None

        try:
            with telemetry.track_step("fetch_record"):
                record = await self.client.fetch_record(query.name)
        except LookupFailedError as e:
            error_message = e.message
        except Exception as e:
            logger.exception(f"Unexpected error looking up '{query}': {e}")
            error_message = self.transport_error_message

        stale = self._is_stale(sequence)
        if stale:
            logger.debug(
                f"Discarding stale result for '{query}' (request {sequence}, latest {self._issued})"
            )
        elif record is not None:
            # Listeners must never see Success while the previous cry is still bound.
            self.audio.rebind(record.cries)
            self._transition(Success(query=query.name, record=record))
        else:
            if error_message is None:
                error_message = self.transport_error_message
            self._transition(Failure(query=query.name, message=error_message))

        outcome = "discarded" if stale else self._state.status
        add_lookup_breadcrumb(
            "lookup_resolved",
            {"query": query.name, "sequence": sequence, "latest": self._issued, "outcome": outcome},
            level="warning" if outcome == "failure" else "info",
        )
        self._send_telemetry(telemetry, outcome, stale)
        return self._state

    def _send_telemetry(self, telemetry: LookupTelemetry, outcome: str, stale: bool) -> None:
        if self.posthog_client is None:
            return
        try:
            telemetry.send_to_posthog(self.posthog_client, {"outcome": outcome, "stale": stale})
        except Exception as e:
            logger.warning(f"Failed to send lookup telemetry: {e}")
