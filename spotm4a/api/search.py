"""
Client for an Invidious instance's video search API.
"""

import logging

from spotm4a.models.youtube import SearchResult

from .http import HttpTransport, parse_payload

log = logging.getLogger(__name__)


class InvidiousSearchClient:
    """Maps a free-text query to an ordered list of video candidates."""

    def __init__(self, transport: HttpTransport, search_url: str):
        self._transport = transport
        self.search_url = search_url

    async def search(
        self, query: str, sort_by: str, result_type: str
    ) -> list[SearchResult]:
        payload = await self._transport.get_json(
            self.search_url,
            params={"q": query, "sort_by": sort_by, "type": result_type},
        )
        results = parse_payload(list[SearchResult], payload, "search endpoint")
        log.debug(f"Search for '{query}' returned {len(results)} candidates")
        return results
