"""
Handles the processing of a single playlist track, from search to file.
"""

import logging
from enum import Enum

from rich.markup import escape

from spotm4a.api.search import InvidiousSearchClient
from spotm4a.exceptions import NoSearchResultsError
from spotm4a.media import AudioConverter, Downloader
from spotm4a.models.config import RunConfig
from spotm4a.models.spotify import Track
from spotm4a.models.stats import RunStats
from spotm4a.utils.formatting import build_search_query, get_track_title
from spotm4a.utils.path import output_filename

log = logging.getLogger(__name__)


class TrackOutcome(Enum):
    DOWNLOADED = "downloaded"
    SKIPPED_EXISTS = "skipped_exists"


class TrackProcessor:
    """
    Orchestrates search, conversion and download of a single track.

    Every failure propagates to the caller; the half-written file, if any,
    is left in place.
    """

    def __init__(
        self,
        config: RunConfig,
        search_client: InvidiousSearchClient,
        converter: AudioConverter,
        downloader: Downloader,
        stats: RunStats,
    ):
        self.config = config
        self.search_client = search_client
        self.converter = converter
        self.downloader = downloader
        self.stats = stats

    async def resolve_video_url(self, query: str) -> str:
        """
        Searches for `query` and builds the watch URL of the first candidate.

        The first result is taken as-is, without any ranking.
        """
        results = await self.search_client.search(
            query, self.config.search_sort_by, self.config.search_result_type
        )
        if not results:
            raise NoSearchResultsError(f"No videos found for '{query}'.")
        return f"{self.config.watch_url_prefix}{results[0].video_id}"

    async def process_track(self, track: Track) -> TrackOutcome:
        """
        Manages the complete lifecycle of downloading and saving a track.
        """
        query = build_search_query(track)
        title = get_track_title(track)

        file_name = output_filename(
            title, self.config.file_extension, self.config.title_length
        )
        final_path = self.config.output_dir / file_name

        if final_path.exists():
            self.stats.tracks_skipped_exists += 1
            log.info(
                f"[yellow]{escape(title[: self.config.title_length])}."
                f"{self.config.file_extension} already exists, skipping[/yellow]"
            )
            return TrackOutcome.SKIPPED_EXISTS

        video_url = await self.resolve_video_url(query)
        audio_url = await self.converter.request_audio_url(video_url)

        result = await self.downloader.download_file(
            audio_url, final_path, label=escape(query)
        )

        self.stats.tracks_downloaded += 1
        self.stats.total_size_downloaded += result.bytes_written
        log.info(
            f"[green]downloaded[/green] {escape(str(result.path))} "
            f"in {result.elapsed_s:.3f}s"
        )
        return TrackOutcome.DOWNLOADED
