"""HTTP client for the Pokedex lookup API."""

import logging

import httpx
from pydantic import ValidationError

from core.exceptions import ReportedError, TransportError
from core.sentry import add_lookup_breadcrumb, capture_exception
from pokedex_api.models import CreatureRecord, ErrorBody

logger = logging.getLogger(__name__)

DEFAULT_TRANSPORT_ERROR_MESSAGE = "Erro ao acessar a API"
QUERY_PARAM = "pokemon_name"


class PokedexClient:
    """Client for ``GET {base_url}/?pokemon_name=<name>``.

    The client holds no lookup state: each call issues exactly one request
    and either returns a record or raises a ``LookupFailedError`` subclass.
    The underlying ``httpx.AsyncClient`` is created on first use and reused.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        transport_error_message: str = DEFAULT_TRANSPORT_ERROR_MESSAGE,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            base_url: Base URL of the Pokedex API (e.g. "http://localhost:8000")
            timeout: Request timeout in seconds, None to wait indefinitely
            transport_error_message: Message used for every TransportError
            transport: Optional httpx transport (tests pass an httpx.MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport_error_message = transport_error_message
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def check_api(self) -> bool:
        """Check Pokedex API connectivity. Any HTTP answer counts as reachable."""
        try:
            client = await self._get_client()
            await client.get("/")
            return True
        except httpx.HTTPError:
            return False

    def _transport_error(self, query: str, reason: str) -> TransportError:
        return TransportError(
            self.transport_error_message,
            details={"query": query, "reason": reason},
        )

    async def fetch_record(self, query: str) -> CreatureRecord:
        """Fetch one creature record.

        Args:
            query: Trimmed, non-empty creature name

        Returns:
            CreatureRecord parsed from the response body

        Raises:
            ReportedError: The API answered with an error status and a ``msg``
            TransportError: The request failed or a body could not be parsed
        """
        add_lookup_breadcrumb("fetch_record", {"query": query})
        client = await self._get_client()

        try:
            response = await client.get("/", params={QUERY_PARAM: query})
        except httpx.RequestError as e:
            logger.error(f"Pokedex request failed for '{query}': {e}")
            error = self._transport_error(query, f"{type(e).__name__}: {e}")
            capture_exception(e, context=error.details)
            raise error from e

        if response.is_error:
            try:
                body = ErrorBody.model_validate(response.json())
            except (ValueError, ValidationError) as e:
                logger.warning(
                    f"Pokedex error response for '{query}' without a message "
                    f"(status {response.status_code})"
                )
                raise self._transport_error(
                    query, f"unparseable error body (status {response.status_code})"
                ) from e

            logger.info(f"Pokedex reported error for '{query}': {body.msg}")
            raise ReportedError(
                body.msg, details={"query": query, "status_code": response.status_code}
            )

        try:
            record = CreatureRecord.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.warning(f"Pokedex returned an unparseable record for '{query}': {e}")
            raise self._transport_error(query, "unparseable record body") from e

        logger.info(f"Pokedex record fetched for '{query}'")
        return record
