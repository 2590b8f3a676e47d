"""
Core application engine for orchestrating the download process.

This package contains the primary logic. The `DownloadManager` walks the
playlist and delegates each individual track to the `TrackProcessor`.
"""

from .download_manager import DownloadManager
from .track_processor import TrackOutcome, TrackProcessor

__all__ = ["DownloadManager", "TrackOutcome", "TrackProcessor"]
