"""
Dataclass for tracking download session statistics.
"""

from dataclasses import dataclass


@dataclass
class RunStats:
    """Counts what a session did, for the final summary."""

    tracks_downloaded: int = 0
    tracks_skipped_exists: int = 0
    total_size_downloaded: int = 0

    @property
    def tracks_processed(self) -> int:
        return self.tracks_downloaded + self.tracks_skipped_exists
