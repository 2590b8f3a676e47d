"""
The main orchestrator: authenticates, walks the playlist page by page and
hands each track to the TrackProcessor.
"""

import logging
import time

from spotm4a.api.auth import SpotifyAuthenticator
from spotm4a.api.client import SpotifyAPIClient
from spotm4a.api.http import HttpTransport
from spotm4a.api.search import InvidiousSearchClient
from spotm4a.exceptions import PaginationStalledError, ResponseDecodeError
from spotm4a.media import AudioConverter, Downloader
from spotm4a.models.config import RunConfig
from spotm4a.models.spotify import PlaylistPage
from spotm4a.models.stats import RunStats

from .track_processor import TrackProcessor

log = logging.getLogger(__name__)


class DownloadManager:
    """Orchestrates the entire download session for one playlist."""

    def __init__(self, config: RunConfig, transport: HttpTransport):
        self.config = config
        self.stats = RunStats()
        self.start_time = time.monotonic()
        self.authenticator = SpotifyAuthenticator(transport, config.token_url)
        self.api_client = SpotifyAPIClient(transport, config.catalog_base_url)
        self.track_processor = TrackProcessor(
            config,
            InvidiousSearchClient(transport, config.search_url),
            AudioConverter(transport, config.conversion_url),
            Downloader(transport, config.chunk_size),
            self.stats,
        )

    @property
    def elapsed(self) -> float:
        return time.monotonic() - self.start_time

    async def _fetch_page(self, access_token: str, offset: int) -> PlaylistPage:
        return await self.api_client.get_page(
            access_token, offset, self.config.field_filter, self.config.playlist_id
        )

    async def run(self) -> int:
        """
        Downloads every track of the playlist.

        The offset only advances per processed track, and each following page is
        fetched at that offset.

        Returns:
            The final offset, equal to the playlist's total.
        """
        self.start_time = time.monotonic()
        credentials = await self.authenticator.request_token(
            self.config.client_id, self.config.client_secret
        )
        access_token = credentials.access_token

        offset = 0
        page = await self._fetch_page(access_token, offset)
        if page.total is None:
            raise ResponseDecodeError("Playlist response did not include 'total'.")
        total = page.total
        log.info(f"Playlist [cyan]{self.config.playlist_id}[/cyan] has {total} items")

        while offset < total:
            page_start = offset
            for item in page.items:
                if item.track is None:
                    log.debug("Skipping playlist entry without a track")
                    continue
                await self.track_processor.process_track(item.track)
                offset += 1

            if offset == total:
                break
            if offset == page_start:
                raise PaginationStalledError(
                    f"Page at offset {offset} contained no tracks to process "
                    f"({offset}/{total} done)."
                )
            page = await self._fetch_page(access_token, offset)

        return offset
