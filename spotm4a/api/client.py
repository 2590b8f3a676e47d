"""
Client for the Spotify Web API playlist-items endpoint.
"""

import logging

from spotm4a.models.spotify import PlaylistPage

from .http import HttpTransport, parse_payload

log = logging.getLogger(__name__)


class SpotifyAPIClient:
    """Fetches playlist pages from the Spotify Web API (v1)."""

    def __init__(self, transport: HttpTransport, base_url: str):
        self._transport = transport
        self.base_url = base_url

    async def get_page(
        self, access_token: str, offset: int, field_filter: str, playlist_id: str
    ) -> PlaylistPage:
        """
        Fetches one page of playlist entries starting at `offset`.

        No page size is sent, so the remote default decides how many entries
        come back. `total` is returned as-is; callers treat it as constant.
        """
        url = f"{self.base_url}playlists/{playlist_id}/tracks"
        payload = await self._transport.get_json(
            url,
            params={"offset": str(offset), "filter": field_filter},
            headers={"Authorization": f"Bearer {access_token}"},
        )
        page = parse_payload(PlaylistPage, payload, "playlist endpoint")
        log.debug(
            f"Fetched playlist page at offset {offset}: "
            f"{len(page.items)} items, total {page.total}"
        )
        return page
