"""
Remote API Layer.

This package handles all communication with the Spotify Accounts service, the
Spotify Web API and the Invidious search mirror.
"""

from .auth import SpotifyAuthenticator
from .client import SpotifyAPIClient
from .http import AiohttpTransport, HttpTransport
from .search import InvidiousSearchClient

__all__ = [
    "AiohttpTransport",
    "HttpTransport",
    "InvidiousSearchClient",
    "SpotifyAPIClient",
    "SpotifyAuthenticator",
]
