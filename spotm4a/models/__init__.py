"""
Data Models Layer.

This package contains the Pydantic models for remote payloads and the run
configuration, plus the session statistics dataclass.
"""

from .config import RunConfig
from .spotify import Artist, Credentials, PlaylistItem, PlaylistPage, Track
from .stats import RunStats
from .youtube import ConversionRequest, ConversionResponse, SearchResult

__all__ = [
    "Artist",
    "ConversionRequest",
    "ConversionResponse",
    "Credentials",
    "PlaylistItem",
    "PlaylistPage",
    "RunConfig",
    "RunStats",
    "SearchResult",
    "Track",
]
