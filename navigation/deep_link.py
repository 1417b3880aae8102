"""Keeps the address bar's ``pokemon_name`` parameter in step with lookups."""

import logging

from core.exceptions import InvalidQueryError
from lookup.models import LookupQuery
from navigation.address_bar import AddressBar

logger = logging.getLogger(__name__)

QUERY_PARAM = "pokemon_name"


class DeepLinkSynchronizer:
    """Reads the deep link once at startup and rewrites it on each submission.

    This is the only writer of the address bar.
    """

    def __init__(self, address_bar: AddressBar):
        self.address_bar = address_bar

    def read_initial_query(self) -> LookupQuery | None:
        """Extract the lookup query from the current location, if any."""
        raw = self.address_bar.location.params.get(QUERY_PARAM)
        if raw is None:
            return None
        try:
            query = LookupQuery.parse(raw)
        except InvalidQueryError:
            logger.debug(f"Ignoring blank {QUERY_PARAM} in {self.address_bar.location}")
            return None
        logger.info(f"Deep link requests lookup for '{query}'")
        return query

    def publish_query(self, query: LookupQuery) -> None:
        """Push ``/?pokemon_name=<query>`` as a single new history entry."""
        url = self.address_bar.location.copy_with(path="/", params={QUERY_PARAM: query.name})
        self.address_bar.push_state(url)
